# palette_kit/numerics/math_helpers.py
"""
Small numeric helpers shared by the constant tables.

probit: inverse of the standard normal CDF, Acklam's rational approximation
(relative error below 1e-5, largest near the tail boundaries p = 0.02425 and
1 - 0.02425).
exp_rough: exp(x) as 2**(x*log2(e)), a cubic on the fractional part of the
exponent and ldexp for the integer part (relative error < 2e-4).
"""
from __future__ import annotations
import numpy as np

from .arrays import finish, prep_float

_A = (-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
      1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00)
_B = (-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
      6.680131188771972e+01, -1.328068155288572e+01)
_C = (-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
      -2.549671010229528e+00, 4.374664141464968e+00, 2.938163982698783e+00)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
      3.754408661907416e+00)

_P_LOW = 0.02425
_LOG2E = 1.4426950408889634


def _horner(coeffs, x: np.ndarray) -> np.ndarray:
    acc = np.full_like(x, coeffs[0])
    for c in coeffs[1:]:
        acc = acc * x + c
    return acc


def _tail(p: np.ndarray) -> np.ndarray:
    q = np.sqrt(-2.0 * np.log(p))
    return _horner(_C, q) / (_horner(_D, q) * q + 1.0)


def probit(p):
    """Inverse normal CDF. probit(0.5) == 0, probit(1 - p) == -probit(p)."""
    arr, dt = prep_float(p)
    x = arr.astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        q = x - 0.5
        r = q * q
        mid = _horner(_A, r) * q / (_horner(_B, r) * r + 1.0)
        low = _tail(x)
        high = -_tail(1.0 - x)
    out = np.where(x < _P_LOW, low, np.where(x > 1.0 - _P_LOW, high, mid))
    return finish(out.astype(dt), p)


def exp_rough(x):
    """Cheap exp(x)."""
    arr, dt = prep_float(x)
    t = arr.astype(np.float64) * _LOG2E
    with np.errstate(invalid="ignore", over="ignore"):
        n = np.floor(t)
        f = t - n
        poly = 1.0 + f * (0.6960656421638072 + f * (0.224494337302845 + f * 0.07944023841053369))
        n = np.clip(np.nan_to_num(n, nan=0.0), -2000, 2000).astype(np.int32)
        out = np.ldexp(poly, n)
    return finish(out.astype(dt), x)
