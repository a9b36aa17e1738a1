from .limits import PLLLimits, RP2040_LIMITS
from .pll_calc import PLLConfig, find_pll_config, find_pll_config_for
from .generate import HALConfig, pll_config, render_rust
