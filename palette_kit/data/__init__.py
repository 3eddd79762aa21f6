# ========================
# file: palette_kit/data/__init__.py
# ========================
from .constant_data import (
    decode_palette_table,
    palette_index,
    palette_mapping,
    shrink,
    stretch,
    tri_blue_noise,
    tri_blue_noise_multipliers,
)

__all__ = [
    "decode_palette_table",
    "palette_index",
    "palette_mapping",
    "shrink",
    "stretch",
    "tri_blue_noise",
    "tri_blue_noise_multipliers",
]
