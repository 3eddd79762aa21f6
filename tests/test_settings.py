# ==============================================================================
# File: tests/test_settings.py
# Purpose: Settings loading, merging and validation.
# ==============================================================================
import json
import os
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.core import DEFAULT_SETTINGS, ValidationError, deep_merge, load_settings


class TestSettings(unittest.TestCase):
    """load_settings / validate_dict / deep_merge."""

    def test_defaults(self):
        print("\n[TEST] Running test_defaults...")
        s = DEFAULT_SETTINGS
        self.assertEqual(s.blue_noise.size, 128)
        self.assertEqual(s.blue_noise.cells, 16384)
        self.assertEqual(len(s.blue_noise.seeds), 3)
        self.assertEqual(s.multipliers.strength, 0.5)
        self.assertEqual(load_settings(s.to_dict()), s)
        print("[TEST] test_defaults: OK")

    def test_frozen(self):
        with self.assertRaises(Exception):
            DEFAULT_SETTINGS.multipliers.strength = 1.0

    def test_overrides(self):
        s = load_settings(overrides={"blue_noise": {"sigma": 2.5}, "multipliers": {"strength": 0.75}})
        self.assertEqual(s.blue_noise.sigma, 2.5)
        self.assertEqual(s.blue_noise.size, 128)
        self.assertEqual(s.multipliers.strength, 0.75)

    def test_deep_merge_does_not_mutate(self):
        base = {"a": {"b": 1, "c": [1, 2]}}
        merged = deep_merge(base, {"a": {"c": [3]}})
        self.assertEqual(merged, {"a": {"b": 1, "c": [3]}})
        self.assertEqual(base, {"a": {"b": 1, "c": [1, 2]}})

    def test_invalid_values(self):
        bad = [
            {"blue_noise": {"size": 64}},
            {"blue_noise": {"sigma": 0}},
            {"blue_noise": {"initial_density": 0.7}},
            {"blue_noise": {"seeds": [1, 2]}},
            {"blue_noise": {"seeds": [1, 2, -3]}},
            {"multipliers": {"strength": -1.0}},
        ]
        for cfg in bad:
            with self.subTest(cfg=cfg):
                with self.assertRaises(ValidationError):
                    load_settings(cfg)

    def test_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "settings.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"multipliers": {"strength": 0.3}}, f)
            self.assertEqual(load_settings(path).multipliers.strength, 0.3)
            with self.assertRaises(ValidationError):
                load_settings(os.path.join(tmp, "missing.json"))

    def test_bad_source_type(self):
        with self.assertRaises(TypeError):
            load_settings(42)


if __name__ == "__main__":
    unittest.main()
