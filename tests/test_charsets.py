import unittest
import warnings

from ascii_render.charsets import (
    DEFAULT_PALETTE,
    MAX_PALETTE_LENGTH,
    get_palette,
    list_palettes,
    normalize_palette,
    to_char,
)


class TestToChar(unittest.TestCase):

    def test_default_palette_extremes(self):
        self.assertEqual(DEFAULT_PALETTE, "@%#*+=-:. ")
        self.assertEqual(to_char(0), "@")
        self.assertEqual(to_char(255), " ")

    def test_index_formula(self):
        # floor(L * 9 / 255)
        self.assertEqual(to_char(28), "@")
        self.assertEqual(to_char(29), "%")
        self.assertEqual(to_char(128), "+")
        self.assertEqual(to_char(254), ".")

    def test_result_always_in_palette(self):
        for palette in (DEFAULT_PALETTE, "ab", "x", get_palette("ultra"), get_palette("blocks")):
            for level in range(256):
                for invert in (False, True):
                    self.assertIn(to_char(level, invert, palette), palette)

    def test_monotonic_dark_to_light(self):
        """Brighter input never maps to an earlier (darker) palette entry."""
        for palette in (DEFAULT_PALETTE, get_palette("ultra"), "abc"):
            indices = [palette.index(to_char(level, False, palette)) for level in range(256)]
            self.assertEqual(indices, sorted(indices))

    def test_invert_matches_complement(self):
        for palette in (DEFAULT_PALETTE, get_palette("minimal"), "01"):
            for level in range(256):
                self.assertEqual(
                    to_char(level, True, palette),
                    to_char(255 - level, False, palette),
                )

    def test_single_character_palette(self):
        for level in range(256):
            self.assertEqual(to_char(level, False, "#"), "#")
            self.assertEqual(to_char(level, True, "#"), "#")


class TestPalettes(unittest.TestCase):

    def test_presets(self):
        self.assertEqual(get_palette(), DEFAULT_PALETTE)
        self.assertEqual(set(list_palettes()), {"standard", "ultra", "minimal", "blocks"})
        with self.assertRaises(ValueError):
            get_palette("nope")

    def test_empty_palette_rejected(self):
        with self.assertRaises(ValueError):
            normalize_palette("")

    def test_short_palette_unchanged(self):
        self.assertEqual(normalize_palette("@. "), "@. ")

    def test_long_palette_truncated(self):
        chars = "".join(chr(0x100 + i) for i in range(300))
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            palette = normalize_palette(chars)

        self.assertEqual(len(palette), MAX_PALETTE_LENGTH)
        self.assertEqual(palette, chars[:255])
        self.assertEqual(len(caught), 1)
        self.assertEqual(to_char(255, False, palette), chars[254])


if __name__ == "__main__":
    unittest.main()
