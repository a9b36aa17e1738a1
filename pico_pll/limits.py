# hardware limits of the RP2040 PLLs, and the defaults the calculator uses.
# consult the RP2040 datasheet, section 2.18 (PLL) for where these come from.

from collections import namedtuple

# fixed divider ranges (inclusive)
FBDIV_MIN = 16
FBDIV_MAX = 320
POSTDIV_MIN = 1
POSTDIV_MAX = 7
REFDIV_MIN = 1
REFDIV_MAX = 63

# default board configuration:
XOSC_MHZ = 12.0 # crystal oscillator
REF_MIN = 5.0 # minimum reference frequency after REFDIV
VCO_MIN = 750.0
VCO_MAX = 1600.0
LOW_VCO = False # on a tie, prefer the higher VCO (less jitter)
LOCKED_REFDIV = None # search every REFDIV

class PLLLimits(namedtuple("PLLLimits", [
        "input_mhz", "vco_min", "vco_max", "ref_min",
        "locked_refdiv", "low_vco"])):
    __slots__ = ()

    # return a copy with some limits changed, e.g. replace(low_vco=True)
    def replace(self, **kwargs):
        return self._replace(**kwargs)

RP2040_LIMITS = PLLLimits(
    input_mhz=XOSC_MHZ,
    vco_min=VCO_MIN,
    vco_max=VCO_MAX,
    ref_min=REF_MIN,
    locked_refdiv=LOCKED_REFDIV,
    low_vco=LOW_VCO,
)
