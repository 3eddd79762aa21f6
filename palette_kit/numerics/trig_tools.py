# ==============================================================================
# File: palette_kit/numerics/trig_tools.py
# Purpose: Fast approximations of sin/cos/atan2/asin/acos (radians, degrees, turns).
# ==============================================================================
"""
Approximate trigonometry for color math, where a few thousandths of error are
invisible and speed matters more.

Every function accepts a Python float, a numpy scalar or an array. float32
input is computed in float32, everything else in float64. Scalars in give
scalars out.

Error: sin/cos stay within ~0.0011 of the true value, atan2 within
~0.0002 radians, the rational asin/acos within ~0.023 near +-1 (the
``*_turns`` / ``*_deg`` arc functions reuse the atan2 polynomial and are
much tighter). Inputs are not validated: out-of-domain values give NaN or
out-of-range results instead of raising.
"""
from __future__ import annotations
from typing import NamedTuple

import numpy as np

from .arrays import finish as _finish, prep_float as _prep


class _Unit(NamedTuple):
    scale: float      # radians -> unit
    quarter: float
    half: float
    full: float
    wrap: bool        # angles reported in [0, full) instead of (-half, half]


RADIANS = _Unit(1.0, 1.57079637, 3.14159274, 6.28318548, False)
DEGREES = _Unit(57.29577951308232, 90.0, 180.0, 360.0, False)
TURNS = _Unit(0.15915494309189535, 0.25, 0.5, 1.0, True)

# Period scale factors: input -> quarter turns.
_TO_QUARTERS_RAD = 0.6366197723675814
_TO_QUARTERS_DEG = 0.011111111111111112
_TO_QUARTERS_TURNS = 4.0


# --- sin / cos ---

def _wave(q: np.ndarray, dt) -> np.ndarray:
    """Parabolic sine over quarter-turn units ``q``."""
    with np.errstate(invalid="ignore"):
        whole = np.trunc(q)
        floor = np.where(q >= 0.0, whole, whole - 1.0)
        floor = np.nan_to_num(floor, nan=0.0, posinf=0.0, neginf=0.0).astype(np.int64) & -2
        t = q - floor.astype(dt)
        t = t * (dt(2.0) - t)
        return t * (dt(-0.775) - dt(0.225) * t) * ((floor & 2) - 1).astype(dt)


def _sin_scaled(x, to_quarters: float, phase: float):
    arr, dt = _prep(x)
    q = arr * dt(to_quarters)
    if phase:
        q = q + dt(phase)
    return _finish(_wave(q, dt), x)


def sin(radians):
    return _sin_scaled(radians, _TO_QUARTERS_RAD, 0.0)


def cos(radians):
    return _sin_scaled(radians, _TO_QUARTERS_RAD, 1.0)


def sin_deg(degrees):
    return _sin_scaled(degrees, _TO_QUARTERS_DEG, 0.0)


def cos_deg(degrees):
    return _sin_scaled(degrees, _TO_QUARTERS_DEG, 1.0)


def sin_turns(turns):
    """Sine where 1.0 is a full turn (360 degrees)."""
    return _sin_scaled(turns, _TO_QUARTERS_TURNS, 0.0)


def cos_turns(turns):
    return _sin_scaled(turns, _TO_QUARTERS_TURNS, 1.0)


# --- atan2 family ---

def _atan_poly(a: np.ndarray, dt) -> np.ndarray:
    s = a * a
    return ((dt(-0.0464964749) * s + dt(0.15931422)) * s - dt(0.327622764)) * s * a + a


def _first_quadrant(ax: np.ndarray, ay: np.ndarray, unit: _Unit, dt) -> np.ndarray:
    """Angle of (ax, ay) for non-negative components, in ``unit``."""
    steep = ax < ay
    with np.errstate(divide="ignore", invalid="ignore"):
        a = np.where(steep, ax / ay, ay / ax)
    p = _atan_poly(a, dt)
    if unit.scale != 1.0:
        p = p * dt(unit.scale)
    return np.where(steep, dt(unit.quarter) - p, p)


def _atan2(y, x, unit: _Unit):
    ya, dt_y = _prep(y)
    xa, dt_x = _prep(x)
    dt = np.float32 if dt_y is np.float32 and dt_x is np.float32 else np.float64
    ya, xa = np.broadcast_arrays(ya.astype(dt, copy=False), xa.astype(dt, copy=False))
    r = _first_quadrant(np.abs(xa), np.abs(ya), unit, dt)
    half = dt(unit.half)
    if unit.wrap:
        out = np.where(xa < 0.0,
                       np.where(ya < 0.0, half + r, half - r),
                       np.where(ya < 0.0, dt(unit.full) - r, r))
        out = np.where(out >= dt(unit.full), dt(0.0), out)  # full - tiny can round to full
    else:
        out = np.where(xa < 0.0,
                       np.where(ya < 0.0, -half + r, half - r),
                       np.where(ya < 0.0, -r, r))
    out = np.where((ya == 0.0) & (xa >= 0.0), dt(0.0), out).astype(dt, copy=False)
    return _finish(out, y, x)


def atan2(y, x):
    """Approximate atan2 in radians, range (-pi, pi]."""
    return _atan2(y, x, RADIANS)


def atan2_deg(y, x):
    """Approximate atan2 in degrees, range (-180, 180]."""
    return _atan2(y, x, DEGREES)


def atan2_turns(y, x):
    """Approximate atan2 in turns, range [0, 1). ``atan2_turns(0, x >= 0)`` is exactly 0."""
    return _atan2(y, x, TURNS)


# --- asin / acos ---

def _pade_asin(arr: np.ndarray, dt) -> np.ndarray:
    a2 = arr * arr
    return (arr * (dt(1.0) + a2 * (dt(-0.141514171442891431) + a2 * dt(-0.719110791477959357)))) / \
        (dt(1.0) + a2 * (dt(-0.439110389941411144) + a2 * dt(-0.471306172023844527)))


def asin(a):
    """Rational approximation of asin in radians, range [-pi/2, pi/2]."""
    arr, dt = _prep(a)
    return _finish(_pade_asin(arr, dt), a)


def acos(a):
    """Rational approximation of acos in radians, range [0, pi]."""
    arr, dt = _prep(a)
    return _finish(dt(1.5707963267948966) - _pade_asin(arr, dt), a)


def _asin_units(n, unit: _Unit):
    arr, dt = _prep(n)
    with np.errstate(invalid="ignore"):
        r = _first_quadrant(np.sqrt(dt(1.0) - arr * arr), np.abs(arr), unit, dt)
    neg = arr < 0.0
    if unit.wrap:
        out = np.where(neg, dt(unit.full) - r, r)
        out = np.where(out >= dt(unit.full), dt(0.0), out)
    else:
        out = np.where(neg, -r, r)
    out = np.where(arr == 0.0, dt(0.0), out).astype(dt, copy=False)
    return _finish(out, n)


def _acos_units(n, unit: _Unit):
    arr, dt = _prep(n)
    with np.errstate(invalid="ignore"):
        r = _first_quadrant(np.abs(arr), np.sqrt((dt(1.0) + arr) * (dt(1.0) - arr)), unit, dt)
    out = np.where(arr < 0.0, dt(unit.half) - r, r).astype(dt, copy=False)
    return _finish(out, n)


def asin_deg(n):
    return _asin_units(n, DEGREES)


def acos_deg(n):
    return _acos_units(n, DEGREES)


def asin_turns(n):
    """asin in turns: [0, 0.25] for n >= 0, (0.75, 1) for n < 0."""
    return _asin_units(n, TURNS)


def acos_turns(n):
    """acos in turns, range [0, 0.5]."""
    return _acos_units(n, TURNS)
