# palette_kit/numerics/bits.py
from __future__ import annotations
import numpy as np

from ..core.constants import MASK32, MASK64

# Canonical NaN bit patterns (all NaNs hash the same).
_NAN_BITS_32 = 0x7FC00000
_NAN_BITS_64 = 0x7FF8000000000000


def u32(n: int) -> int: return n & MASK32


def s32(n: int) -> int:
    """Low 32 bits of n as a signed int."""
    n &= MASK32
    return n - 0x100000000 if n & 0x80000000 else n


def s64(n: int) -> int:
    """Low 64 bits of n as a signed int."""
    n &= MASK64
    return n - 0x10000000000000000 if n & 0x8000000000000000 else n


def rotl64(n: int, r: int) -> int:
    return ((n << r) | (n >> (64 - r))) & MASK64


def float_to_int_bits(values) -> np.ndarray:
    """IEEE-754 single bit patterns as int32, with NaNs made canonical."""
    arr = np.ascontiguousarray(values, dtype=np.float32)
    bits = arr.view(np.int32).copy()
    bits[np.isnan(arr)] = _NAN_BITS_32
    return bits


def double_to_long_bits(values) -> np.ndarray:
    """IEEE-754 double bit patterns as int64, with NaNs made canonical."""
    arr = np.ascontiguousarray(values, dtype=np.float64)
    bits = arr.view(np.int64).copy()
    bits[np.isnan(arr)] = _NAN_BITS_64
    return bits
