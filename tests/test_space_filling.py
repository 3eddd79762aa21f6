# ==============================================================================
# File: tests/test_space_filling.py
# Purpose: Hilbert tables and the Pealbert curve: adjacency, inverse, wraparound.
# ==============================================================================
import threading
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.numerics import space_filling as sf


class TestHilbertTables(unittest.TestCase):
    """16x16x16 Hilbert curve tables."""

    def test_morton(self):
        self.assertEqual(sf.morton_encode_3d(0, 0, 0), 0)
        self.assertEqual(sf.morton_encode_3d(1, 2, 3), 53)
        self.assertEqual(sf.morton_encode_3d(5, 0, 0), 65)
        self.assertEqual(sf.morton_encode_3d(31, 31, 31), 32767)

    def test_tables(self):
        print("\n[TEST] Running test_tables...")
        t = sf.hilbert3_tables()
        self.assertEqual(t.x.dtype, np.uint8)
        self.assertEqual(t.distances.dtype, np.uint16)
        for a in t:
            self.assertEqual(a.shape, (4096,))
            self.assertFalse(a.flags.writeable)
        self.assertEqual((t.x[0], t.y[0], t.z[0]), (0, 0, 0))
        self.assertEqual((t.x[1], t.y[1], t.z[1]), (1, 0, 0))
        self.assertEqual((t.x[4095], t.y[4095], t.z[4095]), (0, 0, 15))
        self.assertEqual(int(t.distances[1 | 2 << 4 | 3 << 8]), 50)
        print("[TEST] test_tables: OK")

    def test_tables_are_inverse(self):
        t = sf.hilbert3_tables()
        d = np.arange(4096)
        idx = t.x.astype(np.int64) | t.y.astype(np.int64) << 4 | t.z.astype(np.int64) << 8
        np.testing.assert_array_equal(t.distances[idx], d)
        self.assertEqual(len(np.unique(idx)), 4096)

    def test_hilbert_adjacency(self):
        t = sf.hilbert3_tables()
        step = (np.abs(np.diff(t.x.astype(np.int64))) + np.abs(np.diff(t.y.astype(np.int64)))
                + np.abs(np.diff(t.z.astype(np.int64))))
        self.assertTrue(np.all(step == 1))

    def test_init_is_idempotent_across_threads(self):
        first = sf.hilbert3_tables()
        seen = []
        workers = [threading.Thread(target=lambda: seen.append(sf.hilbert3_tables())) for _ in range(8)]
        for w in workers:
            w.start()
        for w in workers:
            w.join()
        sf.init_3d()
        self.assertTrue(all(s is first for s in seen))
        self.assertIs(sf.hilbert3_tables(), first)


class TestPealbert(unittest.TestCase):
    """32x32x32 curve built from eight Hilbert sections."""

    def test_known_points(self):
        print("\n[TEST] Running test_known_points...")
        expected = {
            0: (0, 0, 0),
            1: (0, 0, 1),
            2: (0, 1, 1),
            100: (3, 6, 1),
            4095: (15, 0, 0),
            4096: (16, 0, 0),
            12345: (14, 19, 14),
            20000: (4, 18, 30),
            32767: (31, 31, 31),
        }
        for d, point in expected.items():
            with self.subTest(d=d):
                self.assertEqual(sf.pealbert_point(d), point)
                self.assertEqual(sf.pealbert_x(d), point[0])
                self.assertEqual(sf.pealbert_y(d), point[1])
                self.assertEqual(sf.pealbert_z(d), point[2])
        print("[TEST] test_known_points: OK")

    def test_adjacency(self):
        d = np.arange(32768)
        x, y, z = sf.pealbert_point(d)
        step = np.abs(np.diff(x)) + np.abs(np.diff(y)) + np.abs(np.diff(z))
        self.assertTrue(np.all(step == 1))

    def test_covers_cube(self):
        x, y, z = sf.pealbert_point(np.arange(32768))
        self.assertEqual(len(np.unique(x | y << 5 | z << 10)), 32768)
        self.assertEqual((x.min(), x.max()), (0, 31))

    def test_round_trip(self):
        d = np.arange(32768)
        x, y, z = sf.pealbert_point(d)
        np.testing.assert_array_equal(sf.pealbert_distance(x, y, z), d)
        self.assertEqual(sf.pealbert_distance(16, 0, 0), 4096)
        self.assertEqual(sf.pealbert_distance(31, 31, 31), 32767)

    def test_wraparound(self):
        self.assertEqual(sf.pealbert_point(32768), (0, 0, 0))
        self.assertEqual(sf.pealbert_point(40000), (24, 11, 7))
        self.assertEqual(sf.pealbert_point(-1), (31, 31, 31))

    def test_check_curve(self):
        with self.assertLogs("palette_kit.numerics.space_filling", level="INFO"):
            problems = sf.check_pealbert_curve()
        self.assertEqual(problems, [])


if __name__ == "__main__":
    unittest.main()
