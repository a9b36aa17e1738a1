# calculate PLL parameters for a desired output frequency. the PLL produces
#   vco = (input / REFDIV) * FBDIV
#   out = vco / (POSTDIV1 * POSTDIV2)
# and we search every divider combination for the one closest to the request.
# the search follows the RP2040 SDK's vcocalc.py, except that only outputs
# which are an exact number of kHz are considered.

import logging
from collections import namedtuple

from .limits import (FBDIV_MIN, FBDIV_MAX, POSTDIV_MIN, POSTDIV_MAX,
    REFDIV_MIN, REFDIV_MAX, RP2040_LIMITS)

__all__ = ["PLLConfig", "MARGIN_EPSILON", "check_limits", "refdiv_range",
    "iter_candidates", "find_pll_config", "find_pll_config_for"]

logger = logging.getLogger(__name__)

# two margins closer than this are the same margin and the VCO breaks the tie
MARGIN_EPSILON = 1e-9

class PLLConfig(namedtuple("PLLConfig", [
        "vco_freq", # VCO frequency in Hz
        "refdiv",
        "fbdiv",
        "post_div1",
        "post_div2",
        "sys_clk_mhz", # achieved output frequency in MHz
        ])):
    __slots__ = ()

    @property
    def vco_mhz(self):
        return self.vco_freq / 1e6

    @property
    def sys_clk_khz(self):
        return self.sys_clk_mhz * 1000.0

    def __str__(self):
        return ("PLLConfig(REFDIV={}, FBDIV={}, PD1={}, PD2={}, "
            "VCO={} Hz, out={} MHz)".format(self.refdiv, self.fbdiv,
                self.post_div1, self.post_div2, self.vco_freq,
                self.sys_clk_mhz))

def check_limits(input_mhz, vco_min, vco_max, ref_min, locked_refdiv):
    if not input_mhz > 0:
        raise ValueError("input frequency must be positive, not {!r}".format(
            input_mhz))
    if not ref_min > 0:
        raise ValueError(
            "minimum reference frequency must be positive, not {!r}".format(
                ref_min))
    if not vco_min < vco_max:
        raise ValueError("VCO range is empty: min {!r} >= max {!r}".format(
            vco_min, vco_max))
    if locked_refdiv is not None and locked_refdiv < REFDIV_MIN:
        raise ValueError("locked REFDIV must be at least {}, not {!r}".format(
            REFDIV_MIN, locked_refdiv))

# REFDIV values to try. the divided reference can't go below ref_min, but we
# always try at least REFDIV_MIN even if the input is already too slow.
def refdiv_range(input_mhz, ref_min, locked_refdiv=None):
    if locked_refdiv is not None:
        return range(locked_refdiv, locked_refdiv+1)
    max_refdiv = max(REFDIV_MIN, min(REFDIV_MAX, int(input_mhz / ref_min)))
    return range(REFDIV_MIN, max_refdiv+1)

# yield (refdiv, fbdiv, pd1, pd2, vco, out) for every combination whose VCO is
# in range and whose output is an exact number of kHz. the order is the order
# the search visits them in, which decides ties.
def iter_candidates(input_mhz, vco_min, vco_max, ref_min, locked_refdiv=None):
    check_limits(input_mhz, vco_min, vco_max, ref_min, locked_refdiv)
    return _iter_candidates(
        input_mhz, vco_min, vco_max, ref_min, locked_refdiv)

def _iter_candidates(input_mhz, vco_min, vco_max, ref_min, locked_refdiv):
    postdiv_range = range(POSTDIV_MIN, POSTDIV_MAX+1)
    for refdiv in refdiv_range(input_mhz, ref_min, locked_refdiv):
        for fbdiv in range(FBDIV_MIN, FBDIV_MAX+1):
            vco = (input_mhz / refdiv) * fbdiv
            if vco < vco_min or vco > vco_max:
                continue
            for pd2 in postdiv_range:
                for pd1 in postdiv_range:
                    divider = pd1 * pd2
                    # the VCO in kHz has to divide evenly, otherwise the
                    # output isn't a whole number of kHz
                    if (vco * 1000.0) % divider != 0.0:
                        continue
                    yield refdiv, fbdiv, pd1, pd2, vco, vco / divider

def find_pll_config(input_mhz, requested_mhz, vco_min, vco_max, ref_min,
        locked_refdiv=None, low_vco=False):
    """Find the PLL configuration whose output is closest to requested_mhz.

    All frequencies are in MHz. If several configurations are equally close,
    the one with the highest VCO frequency wins (or the lowest, if low_vco is
    set); a remaining tie goes to the first one searched. Returns a PLLConfig,
    or None if no configuration satisfies the limits.
    """
    if not requested_mhz > 0:
        raise ValueError(
            "requested frequency must be positive, not {!r}".format(
                requested_mhz))

    best = None
    best_margin = requested_mhz
    for candidate in iter_candidates(
            input_mhz, vco_min, vco_max, ref_min, locked_refdiv):
        vco, out = candidate[4:]
        margin = abs(out - requested_mhz)

        if best is None or margin < best_margin:
            update = True
        elif abs(margin - best_margin) < MARGIN_EPSILON:
            best_vco = best[4]
            update = vco < best_vco if low_vco else vco > best_vco
        else:
            update = False

        if update:
            best_margin = margin
            best = candidate

    if best is None:
        logger.debug("no PLL configuration for %r MHz", requested_mhz)
        return None

    refdiv, fbdiv, pd1, pd2, vco, out = best
    config = PLLConfig(
        vco_freq=int(vco*1e6 + 0.5), # round to 1Hz
        refdiv=refdiv,
        fbdiv=fbdiv,
        post_div1=pd1,
        post_div2=pd2,
        sys_clk_mhz=out,
    )
    logger.debug("requested %r MHz: %s", requested_mhz, config)
    return config

def find_pll_config_for(requested_mhz, limits=RP2040_LIMITS):
    return find_pll_config(limits.input_mhz, requested_mhz,
        limits.vco_min, limits.vco_max, limits.ref_min,
        limits.locked_refdiv, limits.low_vco)
