# ========================
# file: palette_kit/numerics/__init__.py
# ========================
from . import cross_hash, trig_tools
from .cross_hash import ElementKind, hash32, hash64
from .math_helpers import exp_rough, probit
from .space_filling import (
    check_pealbert_curve,
    hilbert3_tables,
    init_3d,
    morton_encode_3d,
    pealbert_distance,
    pealbert_point,
)

__all__ = [
    "cross_hash",
    "trig_tools",
    "ElementKind",
    "hash32",
    "hash64",
    "exp_rough",
    "probit",
    "check_pealbert_curve",
    "hilbert3_tables",
    "init_3d",
    "morton_encode_3d",
    "pealbert_distance",
    "pealbert_point",
]
