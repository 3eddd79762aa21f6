# ==============================================================================
# File: tests/test_trig_tools.py
# Purpose: Accuracy and range checks for the fast trig approximations.
# ==============================================================================
import math
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.numerics import trig_tools as tt


class TestSinCos(unittest.TestCase):
    """sin/cos in radians, degrees and turns."""

    def setUp(self):
        self.x = np.linspace(-math.pi, math.pi, 20001)

    def test_sin_error(self):
        print("\n[TEST] Running test_sin_error...")
        err = np.max(np.abs(tt.sin(self.x) - np.sin(self.x)))
        self.assertLess(err, 0.0011)
        print(f"[TEST] test_sin_error: OK (max error {err:.5f})")

    def test_cos_error(self):
        err = np.max(np.abs(tt.cos(self.x) - np.cos(self.x)))
        self.assertLess(err, 0.0011)

    def test_degrees_and_turns(self):
        deg = np.degrees(self.x)
        turns = self.x / (2 * math.pi)
        self.assertLess(np.max(np.abs(tt.sin_deg(deg) - np.sin(self.x))), 0.0011)
        self.assertLess(np.max(np.abs(tt.cos_deg(deg) - np.cos(self.x))), 0.0011)
        self.assertLess(np.max(np.abs(tt.sin_turns(turns) - np.sin(self.x))), 0.0011)
        self.assertLess(np.max(np.abs(tt.cos_turns(turns) - np.cos(self.x))), 0.0011)

    def test_bounded(self):
        x = np.random.default_rng(3).uniform(-1e6, 1e6, 100000)
        for fn in (tt.sin, tt.cos, tt.sin_deg, tt.cos_deg, tt.sin_turns, tt.cos_turns):
            with self.subTest(fn=fn.__name__):
                y = fn(x)
                self.assertLessEqual(float(np.max(np.abs(y))), 1.0 + 1e-12)

    def test_exact_points(self):
        self.assertAlmostEqual(tt.cos(0.0), 1.0, places=9)
        self.assertEqual(tt.sin(0.0), 0.0)
        self.assertAlmostEqual(tt.sin(math.pi / 2), 1.0, places=6)
        self.assertAlmostEqual(tt.sin(-math.pi), 0.0, places=6)
        self.assertAlmostEqual(tt.sin_deg(90.0), 1.0, places=9)
        self.assertAlmostEqual(tt.sin_turns(-0.25), -1.0, places=9)

    def test_dtype_and_shape(self):
        self.assertIsInstance(tt.sin(0.3), float)
        self.assertEqual(tt.sin(np.float32(0.3)).dtype, np.float32)
        grid = np.zeros((4, 5), dtype=np.float32)
        out = tt.cos(grid)
        self.assertEqual(out.shape, (4, 5))
        self.assertEqual(out.dtype, np.float32)


class TestAtan2(unittest.TestCase):
    """atan2 variants over a grid of points around the origin."""

    def setUp(self):
        ang = np.linspace(-math.pi, math.pi, 4001)
        r = np.array([0.001, 0.5, 1.0, 1000.0])
        self.y = (np.sin(ang)[:, None] * r).ravel()
        self.x = (np.cos(ang)[:, None] * r).ravel()
        self.true = np.arctan2(self.y, self.x)

    def test_radians(self):
        print("\n[TEST] Running test_radians...")
        approx = tt.atan2(self.y, self.x)
        diff = np.abs(approx - self.true)
        diff = np.minimum(diff, 2 * math.pi - diff)  # -pi and pi are the same angle
        self.assertLess(np.max(diff), 0.001)
        self.assertTrue(np.all(approx > -math.pi - 1e-6) and np.all(approx <= math.pi + 1e-6))
        print("[TEST] test_radians: OK")

    def test_degrees(self):
        approx = tt.atan2_deg(self.y, self.x)
        diff = np.abs(approx - np.degrees(self.true))
        diff = np.minimum(diff, 360.0 - diff)
        self.assertLess(np.max(diff), 0.06)

    def test_turns_range(self):
        approx = tt.atan2_turns(self.y, self.x)
        self.assertTrue(np.all(approx >= 0.0) and np.all(approx < 1.0))
        expected = np.mod(self.true / (2 * math.pi), 1.0)
        diff = np.abs(approx - expected)
        diff = np.minimum(diff, 1.0 - diff)
        self.assertLess(np.max(diff), 0.0002)

    def test_zero_y(self):
        self.assertEqual(tt.atan2_turns(0.0, 5.0), 0.0)
        self.assertEqual(tt.atan2_turns(0.0, 0.0), 0.0)
        self.assertEqual(tt.atan2(0.0, 1.0), 0.0)
        self.assertAlmostEqual(tt.atan2(0.0, -1.0), math.pi, places=6)
        self.assertAlmostEqual(tt.atan2_turns(0.0, -1.0), 0.5, places=6)

    def test_broadcast(self):
        out = tt.atan2(np.ones(3), 1.0)
        self.assertEqual(out.shape, (3,))
        self.assertAlmostEqual(float(out[0]), math.pi / 4, places=3)


class TestArcFunctions(unittest.TestCase):
    """asin/acos: the rational forms and the atan2-based unit forms."""

    def setUp(self):
        self.a = np.linspace(-1.0, 1.0, 2001)

    def test_rational_asin_acos(self):
        self.assertLess(np.max(np.abs(tt.asin(self.a) - np.arcsin(self.a))), 0.03)
        self.assertLess(np.max(np.abs(tt.acos(self.a) - np.arccos(self.a))), 0.03)
        self.assertEqual(tt.asin(0.0), 0.0)

    def test_asin_turns(self):
        approx = tt.asin_turns(self.a)
        expected = np.mod(np.arcsin(self.a) / (2 * math.pi), 1.0)
        diff = np.abs(approx - expected)
        diff = np.minimum(diff, 1.0 - diff)
        self.assertLess(np.max(diff), 0.0002)
        self.assertAlmostEqual(tt.asin_turns(-1.0), 0.75, places=6)
        self.assertAlmostEqual(tt.asin_turns(1.0), 0.25, places=6)
        self.assertEqual(tt.asin_turns(0.0), 0.0)

    def test_acos_turns(self):
        approx = tt.acos_turns(self.a)
        expected = np.arccos(self.a) / (2 * math.pi)
        self.assertLess(np.max(np.abs(approx - expected)), 0.0002)
        self.assertAlmostEqual(tt.acos_turns(-1.0), 0.5, places=6)
        self.assertEqual(tt.acos_turns(1.0), 0.0)

    def test_degree_forms(self):
        self.assertLess(np.max(np.abs(tt.asin_deg(self.a) - np.degrees(np.arcsin(self.a)))), 0.02)
        self.assertLess(np.max(np.abs(tt.acos_deg(self.a) - np.degrees(np.arccos(self.a)))), 0.02)


if __name__ == "__main__":
    unittest.main()
