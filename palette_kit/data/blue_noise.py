# ==============================================================================
# File: palette_kit/data/blue_noise.py
# Purpose: Deterministic void-and-cluster blue noise with triangular byte levels.
# ==============================================================================
"""
Blue-noise grids used by the dither multiplier tables.

Ranks come from Ulichney's void-and-cluster method on a torus: a Gaussian
energy field is kept for the current set of points, the "tightest cluster" is
the point with the most energy and the "largest void" the empty cell with
the least. Ranks are then mapped to bytes through a triangular distribution,
so values near 0 are common and values near -128 / 127 are rare.
"""
from __future__ import annotations
import logging
import threading
import time
from typing import Tuple

import numpy as np
from numba import njit

from ..core.constants import BLUE_NOISE_NAMES
from ..core.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

_LOCK = threading.Lock()
_GRIDS: Tuple[np.ndarray, ...] | None = None


def _torus_kernel(size: int, sigma: float) -> np.ndarray:
    d = np.arange(size, dtype=np.float64)
    d = np.minimum(d, size - d)
    d2 = d[:, None] ** 2 + d[None, :] ** 2
    return np.exp(-d2 / (2.0 * sigma * sigma))


@njit(cache=True)
def _splat(energy: np.ndarray, kernel: np.ndarray, cy: int, cx: int, sign: float) -> None:
    n = energy.shape[0]
    for y in range(n):
        ky = (y - cy) % n
        for x in range(n):
            energy[y, x] += sign * kernel[ky, (x - cx) % n]


@njit(cache=True)
def _tightest_cluster(pattern: np.ndarray, energy: np.ndarray) -> int:
    n = pattern.shape[0]
    best = -1
    best_e = -np.inf
    for i in range(n * n):
        y = i // n
        x = i - y * n
        if pattern[y, x] and energy[y, x] > best_e:
            best_e = energy[y, x]
            best = i
    return best


@njit(cache=True)
def _largest_void(pattern: np.ndarray, energy: np.ndarray) -> int:
    n = pattern.shape[0]
    best = -1
    best_e = np.inf
    for i in range(n * n):
        y = i // n
        x = i - y * n
        if not pattern[y, x] and energy[y, x] < best_e:
            best_e = energy[y, x]
            best = i
    return best


@njit(cache=True)
def _rank_pattern(initial: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    n = initial.shape[0]
    cells = n * n
    pattern = initial.copy()
    energy = np.zeros((n, n), dtype=np.float64)
    ones = 0
    for y in range(n):
        for x in range(n):
            if pattern[y, x]:
                _splat(energy, kernel, y, x, 1.0)
                ones += 1

    # Relax the initial pattern: move the tightest cluster into the largest void until stable.
    for _ in range(cells):
        c = _tightest_cluster(pattern, energy)
        pattern[c // n, c % n] = False
        _splat(energy, kernel, c // n, c % n, -1.0)
        v = _largest_void(pattern, energy)
        pattern[v // n, v % n] = True
        _splat(energy, kernel, v // n, v % n, 1.0)
        if v == c:
            break

    ranks = np.empty(cells, dtype=np.int64)

    # Phase 1: peel the prototype, densest points get the highest ranks below `ones`.
    proto = pattern.copy()
    proto_energy = energy.copy()
    for rank in range(ones - 1, -1, -1):
        c = _tightest_cluster(proto, proto_energy)
        proto[c // n, c % n] = False
        _splat(proto_energy, kernel, c // n, c % n, -1.0)
        ranks[c] = rank

    # Phase 2: fill the largest voids.
    for rank in range(ones, cells):
        v = _largest_void(pattern, energy)
        pattern[v // n, v % n] = True
        _splat(energy, kernel, v // n, v % n, 1.0)
        ranks[v] = rank

    return ranks


def void_and_cluster(size: int, sigma: float, seed: int, initial_density: float = 0.1) -> np.ndarray:
    """Ranks 0..size*size-1 in row-major order, flattened."""
    rng = np.random.default_rng(seed)
    initial = rng.random((size, size)) < initial_density
    if not initial.any():
        initial[int(rng.integers(size)), int(rng.integers(size))] = True
    return _rank_pattern(initial, _torus_kernel(size, sigma))


def triangular_levels(count: int) -> np.ndarray:
    """Sorted int8 multiset of ``count`` bytes, triangular over [-128, 127] and mirrored: count(b) == count(-1 - b)."""
    if count % 2:
        raise ValueError(f"count must be even, got {count}")
    half = count // 2
    v = np.arange(128)
    weights = 128.0 - v  # 128 at 0 / -1, 1 at 127 / -128
    quota = half * weights / weights.sum()
    counts = np.floor(quota).astype(np.int64)
    leftover = half - int(counts.sum())
    if leftover:
        order = np.argsort(-(quota - counts), kind="stable")
        counts[order[:leftover]] += 1
    upper = np.repeat(v, counts)
    lower = -1 - upper
    return np.sort(np.concatenate([lower, upper])).astype(np.int8)


def generate_triangular_grid(seed: int, settings: Settings = DEFAULT_SETTINGS) -> np.ndarray:
    """One blue-noise grid as int8 of shape (size*size,): rank r gets the r-th smallest level."""
    bn = settings.blue_noise
    ranks = void_and_cluster(bn.size, bn.sigma, seed, bn.initial_density)
    return triangular_levels(bn.cells)[ranks]


def triangular_blue_noise() -> Tuple[np.ndarray, ...]:
    """The three grids A, B and C, built once from the default settings and read-only."""
    global _GRIDS
    if _GRIDS is not None:
        return _GRIDS
    with _LOCK:
        if _GRIDS is None:
            t0 = time.perf_counter()
            grids = []
            for name, seed in zip(BLUE_NOISE_NAMES, DEFAULT_SETTINGS.blue_noise.seeds):
                g = generate_triangular_grid(seed)
                g.setflags(write=False)
                grids.append(g)
                logger.debug(f"blue noise {name} (seed {seed:#x}) ready")
            _GRIDS = tuple(grids)
            logger.info(f"Blue noise grids built in {(time.perf_counter() - t0) * 1000:.1f} ms")
    return _GRIDS
