# ========================
# file: palette_kit/core/settings.py
# ========================
from __future__ import annotations
import copy
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union

from .constants import BLUE_NOISE_CELLS, BLUE_NOISE_NAMES, BLUE_NOISE_SIDE
from .errors import ValidationError


DEFAULT_SETTINGS_DICT: Dict[str, Any] = {
    "blue_noise": {
        "size": BLUE_NOISE_SIDE,
        "sigma": 1.9,
        "initial_density": 0.1,
        "seeds": [0x1A2B3C4D, 0x5E6F7081, 0x92A3B4C5],
    },
    "multipliers": {
        "strength": 0.5,
    },
}


@dataclass(frozen=True)
class BlueNoiseSettings:
    size: int
    sigma: float
    initial_density: float
    seeds: Tuple[int, ...]

    @property
    def cells(self) -> int:
        return self.size * self.size


@dataclass(frozen=True)
class MultiplierSettings:
    strength: float


@dataclass(frozen=True)
class Settings:
    blue_noise: BlueNoiseSettings
    multipliers: MultiplierSettings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blue_noise": {
                "size": self.blue_noise.size,
                "sigma": self.blue_noise.sigma,
                "initial_density": self.blue_noise.initial_density,
                "seeds": list(self.blue_noise.seeds),
            },
            "multipliers": {
                "strength": self.multipliers.strength,
            },
        }


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Checks a merged settings dict.

    Raises ValidationError on the first failing check.
    """
    bn = dict(cfg.get("blue_noise", {}))
    size = int(bn.get("size", 0))
    _require(
        size * size == BLUE_NOISE_CELLS,
        f"blue_noise.size must give {BLUE_NOISE_CELLS} cells",
    )
    _require(float(bn.get("sigma", 0.0)) > 0.0, "blue_noise.sigma must be > 0")
    density = float(bn.get("initial_density", 0.0))
    _require(0.0 < density < 0.5, "blue_noise.initial_density must be in (0, 0.5)")
    seeds = bn.get("seeds")
    _require(
        isinstance(seeds, (list, tuple)) and len(seeds) == len(BLUE_NOISE_NAMES),
        f"blue_noise.seeds must hold {len(BLUE_NOISE_NAMES)} integers",
    )
    _require(all(isinstance(s, int) and s >= 0 for s in seeds), "blue_noise.seeds must be non-negative ints")

    mul = dict(cfg.get("multipliers", {}))
    _require(float(mul.get("strength", 0.0)) > 0.0, "multipliers.strength must be > 0")


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_settings(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load settings from a JSON path or dict, merge with defaults and apply overrides.

    Args:
        source: path to a JSON file, a raw dict, or None for the defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        Settings (immutable dataclass)
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise ValidationError(f"settings file '{source}' not found")
        data = _load_json_file(source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path, dict or None")

    merged = deep_merge(DEFAULT_SETTINGS_DICT, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    bn = merged["blue_noise"]
    return Settings(
        blue_noise=BlueNoiseSettings(
            size=int(bn["size"]),
            sigma=float(bn["sigma"]),
            initial_density=float(bn["initial_density"]),
            seeds=tuple(int(s) for s in bn["seeds"]),
        ),
        multipliers=MultiplierSettings(
            strength=float(merged["multipliers"]["strength"]),
        ),
    )


DEFAULT_SETTINGS: Settings = load_settings()
