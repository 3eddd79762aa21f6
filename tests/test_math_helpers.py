# ==============================================================================
# File: tests/test_math_helpers.py
# Purpose: probit / exp_rough against scipy and numpy references.
# ==============================================================================
import unittest
import numpy as np
from scipy.special import ndtri

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.numerics.math_helpers import exp_rough, probit


class TestProbit(unittest.TestCase):
    """Inverse normal CDF."""

    def test_matches_ndtri(self):
        print("\n[TEST] Running test_matches_ndtri...")
        p = np.concatenate([np.linspace(1e-6, 0.02425, 500), np.linspace(0.02425, 1 - 1e-6, 5000)])
        np.testing.assert_allclose(probit(p), ndtri(p), rtol=1e-5, atol=1e-9)
        print("[TEST] test_matches_ndtri: OK")

    def test_known_values(self):
        self.assertEqual(probit(0.5), 0.0)
        self.assertAlmostEqual(probit(0.975), 1.959963986, places=4)
        self.assertAlmostEqual(probit(255.5 / 256), 2.885622159, places=4)

    def test_odd_symmetry(self):
        p = np.linspace(0.001, 0.499, 777)
        np.testing.assert_allclose(probit(1.0 - p), -probit(p), atol=1e-9)

    def test_float32_in_float32_out(self):
        self.assertEqual(probit(np.float32(0.3)).dtype, np.float32)
        self.assertEqual(probit(np.full(4, 0.3, dtype=np.float32)).dtype, np.float32)


class TestExpRough(unittest.TestCase):
    """Cheap exp."""

    def test_relative_error(self):
        x = np.linspace(-20.0, 20.0, 40001)
        rel = np.abs(exp_rough(x) / np.exp(x) - 1.0)
        self.assertLess(float(rel.max()), 2e-4)

    def test_powers_of_two(self):
        self.assertEqual(exp_rough(0.0), 1.0)
        self.assertAlmostEqual(exp_rough(np.log(8.0)), 8.0, places=4)

    def test_reciprocal_pairs(self):
        x = np.linspace(0.0, 1.5, 301)
        np.testing.assert_allclose(exp_rough(x) * exp_rough(-x), 1.0, rtol=4e-4)

    def test_multiplier_extreme(self):
        self.assertAlmostEqual(exp_rough(probit(255.5 / 256) * 0.5), 4.2325772, delta=0.002)


if __name__ == "__main__":
    unittest.main()
