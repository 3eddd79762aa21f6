# ========================
# file: palette_kit/core/__init__.py
# ========================
from .errors import PaletteKitError, TableDecodeError, ValidationError
from .settings import (
    DEFAULT_SETTINGS,
    BlueNoiseSettings,
    MultiplierSettings,
    Settings,
    deep_merge,
    load_settings,
)

__all__ = [
    "PaletteKitError",
    "TableDecodeError",
    "ValidationError",
    "DEFAULT_SETTINGS",
    "BlueNoiseSettings",
    "MultiplierSettings",
    "Settings",
    "deep_merge",
    "load_settings",
]
