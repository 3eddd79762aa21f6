# ==============================================================================
# File: palette_kit/data/constant_data.py
# Purpose: Palette mapping table, blue-noise multiplier tables, RGB555 helpers.
# ==============================================================================
"""
Large constant tables, built lazily and handed out as read-only numpy arrays.

palette_mapping(): 32768 bytes, one palette index per RGB555 color, decoded
from base64 text embedded in the package. A table that fails to decode is
replaced by zeros (a warning is logged).

tri_blue_noise_multipliers(which): 16384 float32 multipliers per blue-noise
grid. Byte b becomes exp(probit((b + 128.5) / 256) * strength), so the table
has a geometric mean of about 1 and every value above 1 has its reciprocal
somewhere below 1.
"""
from __future__ import annotations
import base64
import binascii
import logging
import numbers
import threading
import time
from typing import Dict, Union

import numpy as np

from ..core.constants import BLUE_NOISE_INDEX, BLUE_NOISE_NAMES, MASK32, PALETTE_MAPPING_SIZE
from ..core.errors import TableDecodeError
from ..core.settings import DEFAULT_SETTINGS
from ..numerics.math_helpers import exp_rough, probit
from ._palette_table import PALETTE_TABLE_B64
from .blue_noise import triangular_blue_noise

logger = logging.getLogger(__name__)

_LOCK = threading.Lock()
_PALETTE: np.ndarray | None = None
_MULTIPLIERS: Dict[str, np.ndarray] = {}


# --- palette mapping ---

def decode_palette_table(text: str, size: int = PALETTE_MAPPING_SIZE) -> np.ndarray:
    """Strict base64 -> uint8[size]. Raises TableDecodeError on bad text or a wrong length."""
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TableDecodeError(f"palette table is not valid base64: {e}") from e
    if len(raw) != size:
        raise TableDecodeError(f"palette table has {len(raw)} bytes, expected {size}")
    return np.frombuffer(raw, dtype=np.uint8).copy()


def _load_palette(text: str) -> np.ndarray:
    try:
        table = decode_palette_table(text)
    except TableDecodeError as e:
        logger.warning(f"{e}; using an all-zero palette mapping")
        table = np.zeros(PALETTE_MAPPING_SIZE, dtype=np.uint8)
    table.setflags(write=False)
    return table


def palette_mapping() -> np.ndarray:
    """uint8[32768]: palette index for each RGB555 color."""
    global _PALETTE
    if _PALETTE is not None:
        return _PALETTE
    with _LOCK:
        if _PALETTE is None:
            t0 = time.perf_counter()
            _PALETTE = _load_palette(PALETTE_TABLE_B64)
            logger.info(f"Palette mapping decoded in {(time.perf_counter() - t0) * 1000:.1f} ms")
    return _PALETTE


# --- blue noise ---

def _grid_name(which: Union[str, int]) -> str:
    if isinstance(which, str) and which.upper() in BLUE_NOISE_INDEX:
        return which.upper()
    if (isinstance(which, numbers.Integral) and not isinstance(which, (bool, np.bool_))
            and 0 <= which < len(BLUE_NOISE_NAMES)):
        return BLUE_NOISE_NAMES[int(which)]
    raise KeyError(f"unknown blue noise grid {which!r}, expected one of {BLUE_NOISE_NAMES}")


def tri_blue_noise(which: Union[str, int]) -> np.ndarray:
    """Blue-noise grid 'A', 'B' or 'C' (or 0..2) as read-only int8[16384]."""
    return triangular_blue_noise()[BLUE_NOISE_INDEX[_grid_name(which)]]


def derive_multipliers(noise: np.ndarray, strength: float = 0.5) -> np.ndarray:
    """Maps signed bytes to float32 multipliers: exp_rough(probit((b + 128.5) / 256) * strength)."""
    b = np.asarray(noise).astype(np.float64)
    return exp_rough(probit((b + 128.5) / 256.0) * strength).astype(np.float32)


def tri_blue_noise_multipliers(which: Union[str, int]) -> np.ndarray:
    """float32[16384] multipliers derived from tri_blue_noise(which)."""
    name = _grid_name(which)
    table = _MULTIPLIERS.get(name)
    if table is not None:
        return table
    noise = tri_blue_noise(name)
    with _LOCK:
        table = _MULTIPLIERS.get(name)
        if table is None:
            table = derive_multipliers(noise, DEFAULT_SETTINGS.multipliers.strength)
            table.setflags(write=False)
            _MULTIPLIERS[name] = table
    return table


# --- RGB555 ---

def shrink(rgba8888):
    """RGBA8888 -> RGB555 (alpha dropped). Signed and unsigned 32-bit inputs both work."""
    c = np.asarray(rgba8888).astype(np.int64) & MASK32
    out = (c >> 17 & 0x7C00) | (c >> 14 & 0x3E0) | (c >> 11 & 0x1F)
    return int(out) if np.ndim(rgba8888) == 0 else out


def shrink_rgb(r, g, b):
    """8-bit channels -> RGB555."""
    r, g, b = (np.asarray(v).astype(np.int64) for v in (r, g, b))
    out = (r & 0xF8) << 7 | (g & 0xF8) << 2 | (b & 0xFF) >> 3
    return int(out) if out.ndim == 0 else out


def stretch(rgb555):
    """RGB555 -> opaque RGBA8888 as an unsigned int; each channel's top 3 bits fill its low bits."""
    c = np.asarray(rgb555).astype(np.int64)
    out = ((c << 17 & 0xF8000000) | (c << 12 & 0x07000000)
           | (c << 14 & 0xF80000) | (c << 9 & 0x070000)
           | (c << 11 & 0xF800) | (c << 6 & 0x0700) | 0xFF)
    return int(out) if np.ndim(rgb555) == 0 else out


def palette_index(rgba8888):
    """Palette index for an RGBA8888 color through the palette mapping."""
    idx = palette_mapping()[shrink(rgba8888)]
    return int(idx) if np.ndim(rgba8888) == 0 else idx
