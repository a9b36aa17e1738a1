# PLL parameter calculator. prints the dividers for the requested frequency, or
# the rp2040_hal PLLConfig expression with --rust. usage:
#   python3 -m pico_pll.vcocalc 125
#   python3 -m pico_pll.vcocalc --khz --rust 480_000

import argparse
import logging
import sys

from .limits import RP2040_LIMITS, PLLLimits
from .literal import parse_int_literal, khz_to_mhz
from .pll_calc import find_pll_config_for
from .generate import to_hal_config, render_rust

def make_parser():
    d = RP2040_LIMITS
    parser = argparse.ArgumentParser(description="PLL parameter calculator")
    parser.add_argument("--input", "-i", default=d.input_mhz, type=float,
        help="Input (reference) frequency. Default {:g} MHz".format(
            d.input_mhz))
    parser.add_argument("--ref-min", default=d.ref_min, type=float,
        help="Override minimum reference frequency. Default {:g} MHz".format(
            d.ref_min))
    parser.add_argument("--vco-max", default=d.vco_max, type=float,
        help="Override maximum VCO frequency. Default {:g} MHz".format(
            d.vco_max))
    parser.add_argument("--vco-min", default=d.vco_min, type=float,
        help="Override minimum VCO frequency. Default {:g} MHz".format(
            d.vco_min))
    parser.add_argument("--low-vco", "-l", action="store_true",
        help="Use a lower VCO frequency when possible. This reduces power "
        "consumption, at the cost of increased jitter")
    parser.add_argument("--locked-refdiv", type=int, default=None,
        help="Only consider this REFDIV value")
    parser.add_argument("--khz", action="store_true",
        help="The output frequency is an integer literal in kHz")
    parser.add_argument("--rust", action="store_true",
        help="Print the rp2040_hal PLLConfig expression instead")
    parser.add_argument("--verbose", "-v", action="store_true",
        help="Log the search")
    parser.add_argument("output",
        help="Output frequency in MHz (kHz with --khz)")
    return parser

def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s")

    try:
        if args.khz:
            requested = khz_to_mhz(parse_int_literal(args.output))
        else:
            requested = float(args.output)
    except ValueError as e:
        parser.error(str(e))

    limits = PLLLimits(
        input_mhz=args.input,
        vco_min=args.vco_min,
        vco_max=args.vco_max,
        ref_min=args.ref_min,
        locked_refdiv=args.locked_refdiv,
        low_vco=args.low_vco,
    )
    try:
        config = find_pll_config_for(requested, limits)
    except ValueError as e:
        parser.error(str(e))

    if args.rust:
        print(render_rust(None if config is None else to_hal_config(config)))
        return 0

    if config is None:
        print("No PLL configuration for {} MHz".format(requested),
            file=sys.stderr)
        return 1

    print("Requested: {} MHz".format(requested))
    print("Achieved: {} MHz".format(config.sys_clk_mhz))
    print("REFDIV: {}".format(config.refdiv))
    print("FBDIV: {} (VCO = {} MHz)".format(config.fbdiv,
        args.input / config.refdiv * config.fbdiv))
    print("PD1: {}".format(config.post_div1))
    print("PD2: {}".format(config.post_div2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
