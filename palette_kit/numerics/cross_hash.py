# ==============================================================================
# File: palette_kit/numerics/cross_hash.py
# Purpose: 32-bit and 64-bit hashes for sequences, stable across platforms.
# ==============================================================================
"""
Water / Wheat / Woo hash family.

Sequences are consumed four elements at a time: two pairs are mixed with
``mum`` (one multiply, then the upper half folded into the lower) and the
results are accumulated into the running state with another ``mum``. The
0-3 leftover elements go through a fixed tail switch whose constants depend
on the element kind. ``hash32`` finishes the way waterhash does, ``hash64``
uses the slightly stronger wheathash finish. Long and double sequences use
four independent lanes and ``wow`` (operands XOR-rotated into each other
before the multiply), since 64-bit elements need more mixing per lane.

All arithmetic is modulo 2**64. Results are signed, like Java ints/longs,
so they match Java code using the same hashes bit for bit.
"""
from __future__ import annotations
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Callable, List, Optional

import numpy as np

from ..core.constants import (
    B0, B1, B2, B3, B4, B5,
    BOOL_FALSE, BOOL_TRUE,
    MASK64,
    OBJECT_MUL_32, OBJECT_MUL_64,
    SEED_32, SEED_64, SEED_WOO,
)
from .bits import double_to_long_bits, float_to_int_bits, rotl64, s32, s64, u32

_MISSING = object()


class ElementKind(Enum):
    BOOL = "bool"
    BYTE = "byte"
    SHORT = "short"
    CHAR = "char"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    OBJECT = "object"


_INT_DTYPES = {
    ElementKind.BYTE: np.int8,
    ElementKind.SHORT: np.int16,
    ElementKind.CHAR: np.uint16,
    ElementKind.INT: np.int32,
    ElementKind.LONG: np.int64,
}


# --- Mixers ---

def mum(a: int, b: int) -> int:
    """Multiplies two values that carry ~32 bits each and folds the high half down."""
    n = (a * b) & MASK64
    return (n - (n >> 32)) & MASK64


def wow(a: int, b: int) -> int:
    """Like mum, but for operands with all 64 bits in use."""
    a &= MASK64
    b &= MASK64
    n = ((a ^ rotl64(b, 39)) * (b ^ rotl64(a, 39))) & MASK64
    return n ^ (n >> 32)


# --- Tail switches (len & 3 in 1..3) ---

def _tail_bool(seed: int, v: List[int], n: int, r: int) -> int:
    if r == 1:
        t = v[n - 1] == BOOL_TRUE
        return mum(seed ^ (0x9E37 if t else 0x7F4A), B3 ^ (0x79B9 if t else 0x7C15))
    if r == 2:
        return mum(seed ^ v[n - 2], B0 ^ v[n - 1])
    # the last element is mixed in as a sign-extended 32-bit literal
    return mum(seed ^ v[n - 3], B2 ^ v[n - 2]) ^ mum(seed ^ s32(v[n - 1]), B4)


def _tail_byte(seed: int, v: List[int], n: int, r: int) -> int:
    if r == 1:
        return mum(seed ^ B2, B1 ^ v[n - 1])
    if r == 2:
        return mum(seed ^ B3, v[n - 2] ^ v[n - 1] << 8 ^ B4)
    return mum(seed ^ v[n - 3] ^ v[n - 2] << 8, B2 ^ v[n - 1])


def _tail_short(seed: int, v: List[int], n: int, r: int) -> int:
    if r == 1:
        return mum(seed ^ B3, B4 ^ v[n - 1])
    if r == 2:
        return mum(seed ^ v[n - 2], B3 ^ v[n - 1])
    # 32-bit intermediate: chars shifted by 16 overflow into the sign bit
    return mum(seed ^ s32(v[n - 3] ^ v[n - 2] << 16), B1 ^ v[n - 1])


def _tail_int(seed: int, v: List[int], n: int, r: int) -> int:
    if r == 1:
        x = v[n - 1]
        return mum(seed ^ (u32(x) >> 16), B3 ^ (x & 0xFFFF))
    if r == 2:
        return mum(seed ^ v[n - 2], B0 ^ v[n - 1])
    return mum(seed ^ v[n - 3], B2 ^ v[n - 2]) ^ mum(seed ^ v[n - 1], B4)


_TAILS = {
    ElementKind.BOOL: _tail_bool,
    ElementKind.BYTE: _tail_byte,
    ElementKind.SHORT: _tail_short,
    ElementKind.CHAR: _tail_short,
    ElementKind.INT: _tail_int,
    ElementKind.FLOAT: _tail_int,
    ElementKind.OBJECT: _tail_int,
}


# --- Core loops ---

def _water(v: List[int], tail: Callable[[int, List[int], int, int], int], seed: int) -> int:
    n = len(v)
    for i in range(3, n, 4):
        seed = mum(
            mum(v[i - 3] ^ B1, v[i - 2] ^ B2) + seed,
            mum(v[i - 1] ^ B3, v[i] ^ B4))
    r = n & 3
    if r == 0:
        return mum(B1 ^ seed, B4 + seed)
    return tail(seed, v, n, r)


def _finish32(seed: int, n: int) -> int:
    return s32(mum(seed ^ (seed << 16), n ^ B0))


def _finish64(seed: int, n: int) -> int:
    seed = ((seed ^ (seed << 16)) * (n ^ B0)) & MASK64
    return s64(seed - (seed >> 31) + (seed << 33))


def _woo(v: List[int]) -> int:
    seed = SEED_WOO
    a = seed ^ B4
    b = rotl64(seed, 17) ^ B3
    c = rotl64(seed, 31) ^ B2
    d = rotl64(seed, 47) ^ B1
    n = len(v)
    for i in range(3, n, 4):
        a = ((v[i - 3] ^ a) * B1) & MASK64; a = (rotl64(a, 23) * B3) & MASK64
        b = ((v[i - 2] ^ b) * B2) & MASK64; b = (rotl64(b, 25) * B4) & MASK64
        c = ((v[i - 1] ^ c) * B3) & MASK64; c = (rotl64(c, 29) * B5) & MASK64
        d = ((v[i] ^ d) * B4) & MASK64; d = (rotl64(d, 31) * B1) & MASK64
        seed = (seed + a + b + c + d) & MASK64
    seed = (seed + B5) & MASK64
    r = n & 3
    if r == 1:
        seed = wow(seed, B1 ^ v[n - 1])
    elif r == 2:
        seed = wow(seed + v[n - 2], B2 + v[n - 1])
    elif r == 3:
        seed = wow(seed + v[n - 3], B2 + v[n - 2]) ^ wow(seed + v[n - 1], seed ^ B3)
    return ((seed ^ (seed << 16)) * (n ^ B0 ^ (seed >> 32))) & MASK64


# --- Object hashing ---

def hash_code(obj: Any) -> int:
    """32-bit hash code of a single object, following the JVM conventions where they exist."""
    if obj is None:
        return 0
    if isinstance(obj, (bool, np.bool_)):
        return 1231 if obj else 1237
    if isinstance(obj, (int, np.integer)):
        v = int(obj)
        if -0x80000000 <= v <= 0x7FFFFFFF:
            return v
        v &= MASK64
        return s32(v ^ (v >> 32))
    if isinstance(obj, (float, np.floating)):
        bits = int(double_to_long_bits(float(obj))[0]) & MASK64
        return s32(bits ^ (bits >> 32))
    if isinstance(obj, str):
        h = 0
        for c in _utf16_units(obj):
            h = (31 * h + c) & 0xFFFFFFFF
        return s32(h)
    # unhashable objects (dict, set, __hash__ = None) fall back to identity
    h = id(obj) if type(obj).__hash__ is None else hash(obj)
    h &= MASK64
    return s32(h ^ (h >> 32))


def hash32_object(obj: Any) -> int:
    if obj is None:
        return 0
    h = s32(hash_code(obj) * OBJECT_MUL_32)
    return s32(h ^ (u32(h) >> 16))


def hash64_object(obj: Any) -> int:
    if obj is None:
        return 0
    h = (hash_code(obj) * OBJECT_MUL_64) & MASK64
    return s64(h - (h >> 31) + (h << 33))


# --- Input normalization ---

def _utf16_units(s: str) -> List[int]:
    return np.frombuffer(s.encode("utf-16-le", "surrogatepass"), dtype="<u2").tolist()


def _kind_for_dtype(dt: np.dtype) -> ElementKind:
    if dt.kind == "b":
        return ElementKind.BOOL
    if dt.kind in "iu":
        if dt.itemsize == 1:
            return ElementKind.BYTE
        if dt.itemsize == 2:
            return ElementKind.SHORT if dt.kind == "i" else ElementKind.CHAR
        if dt.itemsize == 4:
            return ElementKind.INT
        return ElementKind.LONG
    if dt.kind == "f":
        return ElementKind.FLOAT if dt.itemsize <= 4 else ElementKind.DOUBLE
    return ElementKind.OBJECT


def _as_array(data: Any) -> np.ndarray:
    if isinstance(data, str):
        return np.frombuffer(data.encode("utf-16-le", "surrogatepass"), dtype="<u2")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.int8)
    return np.asarray(data)


def _element_hash(x: Any) -> int:
    """32-bit hash of one element of an object sequence."""
    if x is None:
        return 0
    if isinstance(x, (str, bytes, bytearray, memoryview, np.ndarray, list, tuple)):
        return hash32(x)
    return hash32_object(x)


def _coerce_kind(kind) -> ElementKind:
    try:
        return ElementKind(kind)
    except ValueError as e:
        raise TypeError(f"unsupported element kind {kind!r}") from e


def _widen(data: Any, kind: Optional[ElementKind]):
    """Returns (kind, values) with every element widened to a Python int the way
    Java promotes it to a 64-bit long."""
    if kind is not None:
        kind = _coerce_kind(kind)
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray, memoryview)):
        return ElementKind.OBJECT, [_element_hash(x) for x in data]
    if kind is ElementKind.OBJECT:
        return kind, [_element_hash(x) for x in data]

    arr = _as_array(data)
    if arr.ndim > 1:
        # an array of arrays: rows hash on their own, row hashes combine as ints
        return ElementKind.OBJECT, [hash32(row, kind) for row in arr]
    arr = arr.ravel()
    if kind is None:
        kind = _kind_for_dtype(arr.dtype)
        if kind is ElementKind.OBJECT:
            return kind, [_element_hash(x) for x in arr.tolist()]

    if kind is ElementKind.BOOL:
        return kind, [BOOL_TRUE if t else BOOL_FALSE for t in arr.astype(bool).tolist()]
    if kind is ElementKind.FLOAT:
        return kind, float_to_int_bits(arr).tolist()
    if kind is ElementKind.DOUBLE:
        return kind, double_to_long_bits(arr).tolist()
    return kind, arr.astype(_INT_DTYPES[kind]).tolist()


def _is_stream(data: Any) -> bool:
    return (
        isinstance(data, Iterable)
        and not isinstance(data, (Sequence, np.ndarray, bytes, bytearray, memoryview, str))
    )


# --- Streaming variant (plain iterables) ---

def _stream(data: Iterable, seed: int) -> tuple:
    it = iter(data)
    n = 0
    while True:
        first = next(it, _MISSING)
        if first is _MISSING:
            break
        n += 1
        h1 = _element_hash(first) ^ B1
        lanes = []
        for salt in (B2, B3, B4):
            x = next(it, _MISSING)
            if x is _MISSING:
                lanes.append(salt)
            else:
                n += 1
                lanes.append(_element_hash(x) ^ salt ^ n)
        seed = mum(mum(h1, lanes[0]) + seed, mum(lanes[1], lanes[2]))
    return seed, n


# --- Public API ---

def _digest(data: Any, kind, start, end, length, wide: bool) -> int:
    if data is None:
        return 0
    if kind is None and _is_stream(data):
        seed, n = _stream(data, SEED_64 if wide else SEED_32)
        return _finish64(seed, n) if wide else _finish32(seed, n)
    if kind is None and not isinstance(data, (Iterable, np.ndarray)):
        return hash64_object(data) if wide else hash32_object(data)

    kind, values = _widen(data, kind)
    if length is not None:
        values = values[:length]

    ranged = start is not None or end is not None
    if ranged:
        # bounds are clamped to [0, len], never counted from the end
        n = len(values)
        start = 0 if start is None else min(max(start, 0), n)
        end = n if end is None else min(max(end, 0), n)
        if start >= end:
            return 0
        values = values[start:end]

    n = len(values)
    if kind in (ElementKind.LONG, ElementKind.DOUBLE):
        seed = _woo(values)
        if wide:
            return s64(seed - (seed >> 31) + (seed << 33))
        return s32(seed - (seed >> 32))

    seed = _water(values, _TAILS[kind], SEED_64 if wide else SEED_32)
    if wide and not ranged:
        return _finish64(seed, n)
    # ranged hashes always take the 32-bit finish, whatever the state width
    return _finish32(seed, n)


def hash32(
    data: Any,
    kind: ElementKind | str | None = None,
    *,
    start: int | None = None,
    end: int | None = None,
    length: int | None = None,
) -> int:
    """32-bit hash of ``data`` (signed int).

    Args:
        data: str, bytes-like, numpy array, list/tuple (hashed element-wise),
            any other iterable (streaming variant), a single object, or None (-> 0)
        kind: element kind override; the data is coerced to that fixed width
        start, end: hash only the elements in [start, end), both clamped to
            [0, len]; an empty range -> 0. Arrays with ndim > 1 hash row by row
        length: hash only the first ``length`` elements
    """
    return _digest(data, kind, start, end, length, wide=False)


def hash64(
    data: Any,
    kind: ElementKind | str | None = None,
    *,
    start: int | None = None,
    end: int | None = None,
    length: int | None = None,
) -> int:
    """64-bit hash of ``data`` (signed int). Same arguments as :func:`hash32`."""
    return _digest(data, kind, start, end, length, wide=True)
