# tabulate PLL configurations with numpy. enumerate_candidates computes the
# whole search space at once (with the same float64 operations in the same
# order as pll_calc, so the numbers are identical), and sweep runs the search
# over a range of requested frequencies.

import numpy as np

from .limits import (FBDIV_MIN, FBDIV_MAX, POSTDIV_MIN, POSTDIV_MAX,
    RP2040_LIMITS)
from .pll_calc import check_limits, refdiv_range, find_pll_config_for

__all__ = ["CANDIDATE_DTYPE", "SWEEP_DTYPE", "enumerate_candidates", "sweep"]

CANDIDATE_DTYPE = np.dtype([
    ("refdiv", np.uint32),
    ("fbdiv", np.uint16),
    ("post_div1", np.uint8),
    ("post_div2", np.uint8),
    ("vco_mhz", np.float64),
    ("out_mhz", np.float64),
])

SWEEP_DTYPE = np.dtype([
    ("requested_mhz", np.float64),
    ("found", np.bool_),
    ("achieved_mhz", np.float64),
    ("error_mhz", np.float64),
    ("refdiv", np.uint32),
    ("fbdiv", np.uint16),
    ("post_div1", np.uint8),
    ("post_div2", np.uint8),
    ("vco_hz", np.uint64),
])

def enumerate_candidates(input_mhz, vco_min, vco_max, ref_min,
        locked_refdiv=None):
    check_limits(input_mhz, vco_min, vco_max, ref_min, locked_refdiv)

    # a locked REFDIV may be far above REFDIV_MAX, keep it as an integer
    refdiv_ints = np.array(refdiv_range(input_mhz, ref_min, locked_refdiv),
        dtype=np.uint32)
    refdivs = refdiv_ints.astype(np.float64)
    fbdivs = np.arange(FBDIV_MIN, FBDIV_MAX+1, dtype=np.float64)
    postdivs = np.arange(POSTDIV_MIN, POSTDIV_MAX+1, dtype=np.float64)

    # axes are (refdiv, fbdiv, pd2, pd1): the search's loop nesting
    vco = (input_mhz / refdivs)[:, None] * fbdivs[None, :]
    divider = postdivs[:, None] * postdivs[None, :]
    in_range = (vco >= vco_min) & (vco <= vco_max)
    exact = np.fmod(vco[:, :, None, None] * 1000.0, divider) == 0.0
    valid = in_range[:, :, None, None] & exact

    # nonzero returns indices in C order, which is the search order
    ri, fi, p2i, p1i = np.nonzero(valid)
    result = np.empty(len(ri), dtype=CANDIDATE_DTYPE)
    result["refdiv"] = refdiv_ints[ri]
    result["fbdiv"] = fbdivs[fi]
    result["post_div1"] = postdivs[p1i]
    result["post_div2"] = postdivs[p2i]
    result["vco_mhz"] = vco[ri, fi]
    result["out_mhz"] = vco[ri, fi] / divider[p2i, p1i]
    return result

def sweep(requested_mhz_values, limits=RP2040_LIMITS):
    requested = np.asarray(requested_mhz_values, dtype=np.float64).ravel()
    result = np.zeros(len(requested), dtype=SWEEP_DTYPE)
    result["requested_mhz"] = requested

    for i, freq in enumerate(requested):
        config = find_pll_config_for(float(freq), limits)
        if config is None:
            continue
        result[i] = (freq, True,
            config.sys_clk_mhz, config.sys_clk_mhz - freq,
            config.refdiv, config.fbdiv, config.post_div1, config.post_div2,
            config.vco_freq)

    return result
