# ==============================================================================
# File: tests/test_constant_data.py
# Purpose: Palette mapping decode/fallback, multiplier tables, RGB555 helpers.
# ==============================================================================
import base64
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.core.errors import TableDecodeError
from palette_kit.data import constant_data as cd


class TestPaletteMapping(unittest.TestCase):
    """Embedded RGB555 -> palette index table."""

    def test_table(self):
        print("\n[TEST] Running test_table...")
        table = cd.palette_mapping()
        self.assertEqual(table.shape, (0x8000,))
        self.assertEqual(table.dtype, np.uint8)
        self.assertFalse(table.flags.writeable)
        self.assertEqual(int(table[0]), 1)
        self.assertGreater(len(np.unique(table)), 200)
        self.assertIs(cd.palette_mapping(), table)
        print("[TEST] test_table: OK")

    def test_decode_errors(self):
        with self.assertRaises(TableDecodeError):
            cd.decode_palette_table("not base64 at all!")
        with self.assertRaises(TableDecodeError):
            cd.decode_palette_table(base64.b64encode(b"\x01\x02\x03").decode("ascii"))

    def test_decode_custom_size(self):
        raw = bytes(range(16))
        out = cd.decode_palette_table(base64.b64encode(raw).decode("ascii"), size=16)
        np.testing.assert_array_equal(out, np.arange(16, dtype=np.uint8))

    def test_fallback_is_zero_filled(self):
        with self.assertLogs("palette_kit.data.constant_data", level="WARNING"):
            table = cd._load_palette("%%%")
        self.assertEqual(table.shape, (0x8000,))
        self.assertFalse(table.any())
        self.assertFalse(table.flags.writeable)


class TestMultipliers(unittest.TestCase):
    """Blue-noise multiplier tables."""

    def test_derive_from_all_bytes(self):
        b = np.arange(-128, 128).astype(np.int8)
        m = cd.derive_multipliers(b)
        self.assertEqual(m.dtype, np.float32)
        # m[i] belongs to byte i - 128 and m[255 - i] to its mirror -1 - (i - 128)
        np.testing.assert_allclose(m * m[::-1], 1.0, rtol=4e-4)
        self.assertAlmostEqual(float(m.max()), 4.2326, delta=0.002)
        self.assertAlmostEqual(float(m.min()), 0.23626, delta=0.0005)
        self.assertTrue(np.all(np.diff(m) > 0))

    def test_strength(self):
        b = np.array([100], dtype=np.int8)
        weak = cd.derive_multipliers(b, strength=0.25)[0]
        strong = cd.derive_multipliers(b, strength=1.0)[0]
        self.assertLess(1.0, weak)
        self.assertLess(weak, strong)

    def test_tables(self):
        print("\n[TEST] Running test_tables (builds blue noise on first use)...")
        for name in ("A", "B", "C"):
            with self.subTest(name=name):
                table = cd.tri_blue_noise_multipliers(name)
                self.assertEqual(table.shape, (16384,))
                self.assertEqual(table.dtype, np.float32)
                self.assertFalse(table.flags.writeable)
                geo_mean = float(np.exp(np.mean(np.log(table.astype(np.float64)))))
                self.assertAlmostEqual(geo_mean, 1.0, delta=1e-3)
                self.assertTrue(np.all((table > 0.235) & (table < 4.235)))
                np.testing.assert_array_equal(table, cd.derive_multipliers(cd.tri_blue_noise(name)))
        print("[TEST] test_tables: OK")

    def test_grid_names(self):
        self.assertIs(cd.tri_blue_noise("a"), cd.tri_blue_noise(0))
        self.assertIs(cd.tri_blue_noise_multipliers("c"), cd.tri_blue_noise_multipliers(2))
        with self.assertRaises(KeyError):
            cd.tri_blue_noise("D")
        self.assertIs(cd.tri_blue_noise(np.int64(1)), cd.tri_blue_noise("B"))
        with self.assertRaises(KeyError):
            cd.tri_blue_noise(True)


class TestRgb555(unittest.TestCase):
    """shrink / stretch / palette_index."""

    def test_shrink(self):
        self.assertEqual(cd.shrink(0xFFFFFFFF), 0x7FFF)
        self.assertEqual(cd.shrink(-1), 0x7FFF)
        self.assertEqual(cd.shrink(0xFF0000FF), 0x7C00)
        self.assertEqual(cd.shrink(0x00FF00FF), 0x03E0)
        self.assertEqual(cd.shrink(0x0000FFFF), 0x001F)
        self.assertEqual(cd.shrink_rgb(255, 0, 0), 0x7C00)
        self.assertEqual(cd.shrink_rgb(8, 16, 24), 1 << 10 | 2 << 5 | 3)

    def test_stretch(self):
        self.assertEqual(cd.stretch(0), 0xFF)
        self.assertEqual(cd.stretch(0x7FFF), 0xFFFFFFFF)
        self.assertEqual(cd.stretch(0x7C00), 0xFF0000FF)

    def test_round_trip(self):
        c = np.arange(0x8000)
        np.testing.assert_array_equal(cd.shrink(cd.stretch(c)), c)

    def test_palette_index(self):
        self.assertEqual(cd.palette_index(0x000000FF), int(cd.palette_mapping()[0]))
        colors = np.array([0xFF0000FF, 0x00FF00FF], dtype=np.uint32)
        np.testing.assert_array_equal(cd.palette_index(colors), cd.palette_mapping()[[0x7C00, 0x03E0]])


if __name__ == "__main__":
    unittest.main()
