# ==============================================================================
# File: tests/test_blue_noise.py
# Purpose: Void-and-cluster ranks, triangular levels and the A/B/C grids.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.data import blue_noise as bn


class TestTriangularLevels(unittest.TestCase):
    """Byte multiset used to turn ranks into values."""

    def test_shape_and_symmetry(self):
        print("\n[TEST] Running test_shape_and_symmetry...")
        levels = bn.triangular_levels(16384)
        self.assertEqual(levels.dtype, np.int8)
        self.assertEqual(levels.shape, (16384,))
        self.assertTrue(np.all(np.diff(levels.astype(np.int64)) >= 0))
        counts = np.bincount(levels.astype(np.int64) + 128, minlength=256)
        # counts[i] is value i - 128, its mirror -1 - (i - 128) sits at 255 - i
        np.testing.assert_array_equal(counts, counts[::-1])
        self.assertEqual((int(levels[0]), int(levels[-1])), (-128, 127))
        print("[TEST] test_shape_and_symmetry: OK")

    def test_triangular(self):
        counts = np.bincount(bn.triangular_levels(16384).astype(np.int64) + 128, minlength=256)
        self.assertGreater(counts[128], counts[128 + 64])
        self.assertGreater(counts[128 + 64], counts[255])
        self.assertEqual(int(counts[128]), int(counts[127]))

    def test_odd_count_rejected(self):
        with self.assertRaises(ValueError):
            bn.triangular_levels(101)


class TestVoidAndCluster(unittest.TestCase):
    """Rank generation on a small torus."""

    def test_is_permutation(self):
        ranks = bn.void_and_cluster(32, 1.5, seed=11)
        self.assertEqual(ranks.shape, (1024,))
        np.testing.assert_array_equal(np.sort(ranks), np.arange(1024))

    def test_deterministic(self):
        a = bn.void_and_cluster(32, 1.5, seed=5)
        b = bn.void_and_cluster(32, 1.5, seed=5)
        c = bn.void_and_cluster(32, 1.5, seed=6)
        np.testing.assert_array_equal(a, b)
        self.assertFalse(np.array_equal(a, c))

    def test_sparse_points_are_spread(self):
        """The lowest ranks never touch each other (torus neighbours included)."""
        size = 32
        ranks = bn.void_and_cluster(size, 1.5, seed=3).reshape(size, size)
        mask = ranks < (size * size) // 10
        for dy, dx in ((0, 1), (1, 0)):
            with self.subTest(dy=dy, dx=dx):
                self.assertFalse(np.any(mask & np.roll(mask, (dy, dx), axis=(0, 1))))


class TestTriangularBlueNoise(unittest.TestCase):
    """Full-size A/B/C grids."""

    def test_grids(self):
        print("\n[TEST] Running test_grids (builds three 128x128 grids)...")
        grids = bn.triangular_blue_noise()
        levels = bn.triangular_levels(16384)
        self.assertEqual(len(grids), 3)
        for g in grids:
            self.assertEqual(g.dtype, np.int8)
            self.assertEqual(g.shape, (16384,))
            self.assertFalse(g.flags.writeable)
            np.testing.assert_array_equal(np.sort(g), levels)
        self.assertFalse(np.array_equal(grids[0], grids[1]))
        self.assertFalse(np.array_equal(grids[1], grids[2]))
        self.assertIs(bn.triangular_blue_noise(), grids)
        print("[TEST] test_grids: OK")


if __name__ == "__main__":
    unittest.main()
