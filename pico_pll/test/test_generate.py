# test turning frequencies into rp2040_hal PLLConfig expressions

import warnings
from unittest import mock

import numpy as np

from ..limits import RP2040_LIMITS
from ..pll_calc import find_pll_config_for
from ..sweep import enumerate_candidates
from .. import generate
from ..generate import (HALConfig, UnsupportedFrequencyWarning, to_hal_config,
    pll_config, render_rust, expand)

import unittest

# limits no frequency can be made with
IMPOSSIBLE = RP2040_LIMITS.replace(vco_min=745.0, vco_max=755.0,
    locked_refdiv=1)

class TestHALConfig(unittest.TestCase):
    def test_to_hal_config(self):
        self.assertEqual(to_hal_config(find_pll_config_for(176.0)),
            HALConfig(vco_mhz=1584, refdiv=1, post_div1=3, post_div2=3))

    def test_vco_truncated_to_mhz(self):
        # 12/8*301 = 451.5 MHz, the HAL only takes whole MHz
        limits = RP2040_LIMITS.replace(vco_min=400.0, ref_min=1.0,
            locked_refdiv=8)
        config = find_pll_config_for(451.5, limits)
        self.assertEqual(config.fbdiv, 301)
        self.assertEqual(config.vco_freq, 451_500_000)
        self.assertEqual(to_hal_config(config).vco_mhz, 451)

    def test_pll_config(self):
        self.assertEqual(pll_config(480000),
            HALConfig(vco_mhz=1440, refdiv=1, post_div1=3, post_div2=1))
        self.assertEqual(pll_config(20000),
            HALConfig(vco_mhz=840, refdiv=1, post_div1=7, post_div2=6))

    def test_pll_config_inexact(self):
        with self.assertLogs("pico_pll.generate", level="INFO"):
            self.assertIsNotNone(pll_config(133333))

    def test_exact_outputs_not_logged(self):
        # outputs like 151.2 MHz are a whole number of kHz, but not when
        # multiplied back up in floating point
        l = RP2040_LIMITS
        outs = np.unique(enumerate_candidates(
            l.input_mhz, l.vco_min, l.vco_max, l.ref_min)["out_mhz"])
        outs = outs[outs != np.floor(outs)][:200]
        self.assertGreater(len(outs), 0)
        with mock.patch.object(generate.logger, "info") as info:
            for out in outs:
                freq_khz = int(round(out * 1000.0))
                with self.subTest(freq_khz=freq_khz):
                    self.assertIsNotNone(pll_config(freq_khz))
            info.assert_not_called()

    def test_unsupported(self):
        with self.assertWarns(UnsupportedFrequencyWarning):
            self.assertIsNone(pll_config(125000, IMPOSSIBLE))

class TestRender(unittest.TestCase):
    def test_render_some(self):
        self.assertEqual(
            render_rust(HALConfig(1440, 1, 3, 1)),
            "Some(rp2040_hal::pll::PLLConfig { "
            "vco_freq: fugit::HertzU32::MHz(1440), "
            "refdiv: 1, post_div1: 3, post_div2: 1, })")

    def test_render_none(self):
        self.assertEqual(render_rust(None), "None")

    def test_expand(self):
        self.assertEqual(expand("250_000"),
            "Some(rp2040_hal::pll::PLLConfig { "
            "vco_freq: fugit::HertzU32::MHz(1500), "
            "refdiv: 1, post_div1: 6, post_div2: 1, })")

    def test_expand_unsupported(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UnsupportedFrequencyWarning)
            self.assertEqual(expand("125000", IMPOSSIBLE), "None")

    def test_expand_bad_literal(self):
        with self.assertRaises(ValueError):
            expand("480MHz")

if __name__ == "__main__":
    unittest.main()
