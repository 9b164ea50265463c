import colorsys
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from identicon_renderer.color import HUE_SCALE, derive_foreground, hsl_to_rgb, hue_from_hash, parse_hex_prefix
from identicon_renderer.models import Color


class HslTests(unittest.TestCase):
    def test_sextant_selection_matches_bitwise_form(self):
        for sextant in range(7):
            self.assertEqual((sextant + 4) % 6, (sextant | 16) % 6)
            self.assertEqual((sextant + 2) % 6, (sextant | 8) % 6)

    def test_channel_order_per_sextant(self):
        # (max channel, min channel) for the midpoint of each sextant
        expected = [(0, 2), (1, 2), (1, 0), (2, 0), (2, 1), (0, 1)]
        for sextant, (hi, lo) in enumerate(expected):
            rgb = hsl_to_rgb((sextant + 0.5) / 6, 0.5, 0.7)
            self.assertAlmostEqual(rgb[hi], 0.85)
            self.assertAlmostEqual(rgb[lo], 0.55)

    def test_matches_standard_hsl(self):
        for step in range(0, 61):
            h = step / 60
            got = hsl_to_rgb(h, 0.5, 0.7)
            want = colorsys.hls_to_rgb(h % 1.0, 0.7, 0.5)
            for a, b in zip(got, want):
                self.assertAlmostEqual(a, b, places=9)

    def test_dark_lightness_branch(self):
        self.assertEqual(tuple(round(c, 9) for c in hsl_to_rgb(0.0, 0.5, 0.2)), (0.3, 0.1, 0.1))

    def test_channels_stay_in_range(self):
        for suffix in (0, 1, 0x7FFFFFF, 0x1234567, 0xABCDEF0, 0xFFFFFFE, 0xFFFFFFF):
            color = derive_foreground("0" * 15 + format(suffix, "07x"))
            for channel in (color.red, color.green, color.blue):
                self.assertGreaterEqual(channel, 0)
                self.assertLessEqual(channel, 255)


class ForegroundTests(unittest.TestCase):
    def test_hue_uses_last_seven_digits(self):
        image_hash = "0" * 33 + "1234567"
        self.assertAlmostEqual(hue_from_hash(image_hash), 0x1234567 / 0xFFFFFFF)
        self.assertEqual(HUE_SCALE, 0xFFFFFFF)

    def test_full_suffix_is_hue_one(self):
        self.assertEqual(hue_from_hash("0" * 15 + "fffffff"), 1.0)
        color = derive_foreground("0" * 15 + "fffffff")
        self.assertAlmostEqual(color.red, 216.75)
        self.assertAlmostEqual(color.blue, 140.25)

    def test_derived_color(self):
        color = derive_foreground("0" * 33 + "1234567")
        self.assertAlmostEqual(color.red, 216.75)
        self.assertAlmostEqual(color.green, 172.89, places=2)
        self.assertAlmostEqual(color.blue, 140.25)
        self.assertEqual(color.alpha, 255)

    def test_explicit_foreground_wins(self):
        self.assertEqual(derive_foreground("f" * 40, [10, 20, 30]), Color(10, 20, 30, 255))
        self.assertEqual(derive_foreground("f" * 40, (10, 20, 30, 40)), Color(10, 20, 30, 40))

    def test_hex_prefix_parsing(self):
        self.assertEqual(parse_hex_prefix("00000ff"), 255)
        self.assertEqual(parse_hex_prefix("12zz"), 0x12)
        self.assertEqual(parse_hex_prefix("zzzzzzz"), 0)
        self.assertEqual(parse_hex_prefix("ABCDEF0"), 0xABCDEF0)


if __name__ == "__main__":
    unittest.main()
