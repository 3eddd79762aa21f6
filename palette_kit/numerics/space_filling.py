# ==============================================================================
# File: palette_kit/numerics/space_filling.py
# Purpose: 3D Hilbert (16^3) tables and the 32^3 "Pealbert" curve built on them.
# ==============================================================================
"""
The Hilbert tables cover a 16x16x16 cube: ``x[d], y[d], z[d]`` give the cell at
distance ``d`` and ``distances[x | y << 4 | z << 8]`` gives it back.

The Pealbert curve stitches eight copies of that cube into a 32x32x32 cube.
Each run of 4096 steps (a "section") reuses the Hilbert cube with its axes
permuted, flipped or moved by 16, so the end of one section touches the start
of the next. Every step moves exactly one unit along one axis.
"""
from __future__ import annotations
import logging
import threading
import time
from typing import List, NamedTuple

import numpy as np
from numba import njit

from ..core.constants import HILBERT_POINTS, HILBERT_SIDE, PEALBERT_POINTS

logger = logging.getLogger(__name__)


class HilbertTables(NamedTuple):
    x: np.ndarray          # uint8[4096]
    y: np.ndarray          # uint8[4096]
    z: np.ndarray          # uint8[4096]
    distances: np.ndarray  # uint16[4096], index x | y << 4 | z << 8


_LOCK = threading.Lock()
_TABLES: HilbertTables | None = None


@njit(inline='always', cache=True)
def _morton(i1: int, i2: int, i3: int) -> int:
    i1 = ((i1 & 0x1F) * 0x01041041 & 0x10204081) * 0x00011111 & 0x12490000
    i2 = ((i2 & 0x1F) * 0x01041041 & 0x10204081) * 0x00011111 & 0x12490000
    i3 = ((i3 & 0x1F) * 0x01041041 & 0x10204081) * 0x00011111 & 0x12490000
    return (i1 >> 16) | (i2 >> 15) | (i3 >> 14)


def morton_encode_3d(i1: int, i2: int, i3: int) -> int:
    """Interleaves three 5-bit indices into a 15-bit Morton code (i1 in the lowest bit)."""
    return int(_morton(int(i1), int(i2), int(i3)))


@njit(cache=True)
def _build_hilbert(side: int):
    n = side * side * side
    xs = np.zeros(n, dtype=np.uint8)
    ys = np.zeros(n, dtype=np.uint8)
    zs = np.zeros(n, dtype=np.uint8)
    dist = np.zeros(n, dtype=np.uint16)
    for x in range(side):
        for y in range(side):
            for z in range(side):
                h = _morton(x, y, z)
                block = 9
                hcode = (h >> block) & 7
                shift = 0
                signs = 0
                while block > 0:
                    block -= 3
                    hcode <<= 2
                    mcode = (0x20212021 >> hcode) & 3
                    shift = (0x48 >> (7 - shift - mcode)) & 3
                    signs = (signs | (signs << 3)) >> mcode
                    signs = (signs ^ (0x53560300 >> hcode)) & 7
                    mcode = (h >> block) & 7
                    hcode = mcode
                    hcode = ((hcode | (hcode << 3)) >> shift) & 7
                    hcode ^= signs
                    h ^= (mcode ^ hcode) << block
                # Gray-code fold
                h ^= (h >> 1) & 0x92492492
                h ^= (h & 0x92492492) >> 1
                xs[h] = x
                ys[h] = y
                zs[h] = z
                dist[x | (y << 4) | (z << 8)] = h
    return xs, ys, zs, dist


def init_3d() -> None:
    """Builds the Hilbert tables once. Safe to call from several threads."""
    global _TABLES
    if _TABLES is not None:
        return
    with _LOCK:
        if _TABLES is not None:
            return
        t0 = time.perf_counter()
        arrays = _build_hilbert(HILBERT_SIDE)
        for a in arrays:
            a.setflags(write=False)
        _TABLES = HilbertTables(*arrays)
        logger.info(f"Hilbert tables ({HILBERT_POINTS} points) built in {(time.perf_counter() - t0) * 1000:.1f} ms")


def hilbert3_tables() -> HilbertTables:
    init_3d()
    return _TABLES


# Per-section transforms, coordinate = offset + sign * hilbert[source axis].
# Axis order 0 = x, 1 = y, 2 = z.
_SECTION_SOURCE = np.array([
    [2, 0, 0, 2, 0, 2, 2, 0],   # x
    [1, 2, 1, 1, 1, 1, 1, 2],   # y
    [0, 1, 2, 0, 2, 0, 0, 1],   # z
], dtype=np.intp)
_SECTION_SIGN = np.array([
    [1, 1, 1, -1, 1, 1, 1, -1],
    [1, 1, 1, 1, 1, -1, -1, 1],
    [1, 1, 1, -1, 1, -1, -1, -1],
], dtype=np.int64)
_SECTION_OFFSET = np.array([
    [0, 16, 16, 15, 0, 0, 16, 31],
    [0, 0, 16, 16, 16, 15, 15, 16],
    [0, 0, 0, 15, 16, 31, 31, 31],
], dtype=np.int64)


def _axis(d, axis: int):
    tables = hilbert3_tables()
    base = (tables.x, tables.y, tables.z)
    arr = np.asarray(d).astype(np.int64) & (PEALBERT_POINTS - 1)
    section = arr >> 12
    step = arr & (HILBERT_POINTS - 1)
    src = _SECTION_SOURCE[axis][section]
    picked = np.choose(src, [base[0][step], base[1][step], base[2][step]]).astype(np.int64)
    out = _SECTION_OFFSET[axis][section] + _SECTION_SIGN[axis][section] * picked
    if np.ndim(d) == 0:
        return int(out)
    return out


def pealbert_x(d):
    """x of the Pealbert point at distance ``d`` (wrapped to 0..32767)."""
    return _axis(d, 0)


def pealbert_y(d):
    return _axis(d, 1)


def pealbert_z(d):
    return _axis(d, 2)


def pealbert_point(d):
    """(x, y, z) at distance ``d``; ints for a scalar, int64 arrays for an array."""
    return _axis(d, 0), _axis(d, 1), _axis(d, 2)


def pealbert_distance(x, y, z):
    """Inverse of pealbert_point: distance of the cell (x, y, z), each in 0..31."""
    dist = hilbert3_tables().distances
    xa = np.asarray(x).astype(np.int64) & 31
    ya = np.asarray(y).astype(np.int64) & 31
    za = np.asarray(z).astype(np.int64) & 31
    ix, iy, iz = xa & 15, ya & 15, za & 15
    hx, hy, hz = xa >= 16, ya >= 16, za >= 16

    index = np.select(
        [
            ~hz & ~hy & ~hx,
            ~hz & ~hy & hx,
            ~hz & hy & ~hx,
            ~hz & hy & hx,
            hz & ~hy,
            hz & hy & ~hx,
        ],
        [
            iz | iy << 4 | ix << 8,
            ix | iz << 4 | iy << 8,
            (15 - iz) | iy << 4 | (15 - ix) << 8,
            ix | iy << 4 | iz << 8,
            (15 - iz) | (15 - iy) << 4 | ix << 8,
            ix | iy << 4 | iz << 8,
        ],
        default=(15 - ix) | (15 - iz) << 4 | iy << 8,
    )
    offset = np.select(
        [
            ~hz & ~hy & ~hx,
            ~hz & ~hy & hx,
            ~hz & hy & ~hx,
            ~hz & hy & hx,
            hz & ~hy & ~hx,
            hz & ~hy & hx,
            hz & hy & ~hx,
        ],
        [0x0000, 0x1000, 0x3000, 0x2000, 0x5000, 0x6000, 0x4000],
        default=0x7000,
    )
    out = dist[index].astype(np.int64) + offset
    if np.ndim(x) == 0 and np.ndim(y) == 0 and np.ndim(z) == 0:
        return int(out)
    return out


def check_pealbert_curve() -> List[str]:
    """Walks the whole curve; returns a description of every broken step (empty if valid)."""
    t0 = time.perf_counter()
    d = np.arange(PEALBERT_POINTS, dtype=np.int64)
    px, py, pz = pealbert_point(d)
    problems: List[str] = []

    step = np.abs(np.diff(px)) + np.abs(np.diff(py)) + np.abs(np.diff(pz))
    for i in np.nonzero(step != 1)[0]:
        problems.append(
            f"step {i} -> {i + 1} is not a unit move: "
            f"({px[i]}, {py[i]}, {pz[i]}) -> ({px[i + 1]}, {py[i + 1]}, {pz[i + 1]})"
        )

    back = pealbert_distance(px, py, pz)
    for i in np.nonzero(back != d)[0]:
        problems.append(f"distance {i} maps to ({px[i]}, {py[i]}, {pz[i]}) which maps back to {back[i]}")

    for p in problems:
        logger.warning(p)
    logger.info(f"Pealbert check: {len(problems)} problems in {(time.perf_counter() - t0) * 1000:.1f} ms")
    return problems
