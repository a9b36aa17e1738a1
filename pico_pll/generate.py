# turn a requested frequency into the rp2040_hal PLLConfig it needs. the HAL
# record only carries the VCO frequency in whole MHz along with REFDIV and the
# post dividers; FBDIV is recomputed from those by the HAL.

import logging
import warnings
from collections import namedtuple

from .limits import RP2040_LIMITS
from .literal import parse_int_literal, khz_to_mhz
from .pll_calc import find_pll_config_for

__all__ = ["HALConfig", "UnsupportedFrequencyWarning", "to_hal_config",
    "pll_config", "render_rust", "expand"]

logger = logging.getLogger(__name__)

HALConfig = namedtuple("HALConfig", "vco_mhz refdiv post_div1 post_div2")

class UnsupportedFrequencyWarning(UserWarning): pass

def to_hal_config(config):
    return HALConfig(
        vco_mhz=config.vco_freq // 1_000_000,
        refdiv=config.refdiv,
        post_div1=config.post_div1,
        post_div2=config.post_div2,
    )

# returns None (and warns) if the frequency can't be made. it's up to the
# caller to decide if that's fatal.
def pll_config(freq_khz, limits=RP2040_LIMITS):
    config = find_pll_config_for(khz_to_mhz(freq_khz), limits)
    if config is None:
        warnings.warn(
            "PLL: unsupported frequency {} kHz".format(freq_khz),
            UnsupportedFrequencyWarning, stacklevel=2)
        return None

    if round(config.sys_clk_khz) != freq_khz:
        logger.info("PLL: requested %s kHz, got %s kHz",
            freq_khz, config.sys_clk_khz)
    return to_hal_config(config)

def render_rust(hal_config):
    if hal_config is None:
        return "None"
    return ("Some(rp2040_hal::pll::PLLConfig {{ "
        "vco_freq: fugit::HertzU32::MHz({}), "
        "refdiv: {}, "
        "post_div1: {}, "
        "post_div2: {}, "
        "}})".format(*hal_config))

# the whole pipeline: literal kHz text in, Rust expression out
def expand(literal_text, limits=RP2040_LIMITS):
    freq_khz = parse_int_literal(literal_text)
    return render_rust(pll_config(freq_khz, limits))
