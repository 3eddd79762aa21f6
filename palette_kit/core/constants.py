# ==============================================================================
# File: palette_kit/core/constants.py
# Purpose: Global constants (hash mixing constants, seeds, table sizes).
# ==============================================================================
from __future__ import annotations
from typing import Dict

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# =======================================================================
# HASH FAMILY (Water / Wheat / Woo)
# =======================================================================

# --- "Big" mixing constants, stored as unsigned 64-bit values ---
B0 = 0xA0761D6478BD642F
B1 = 0xE7037ED1A0B428DB
B2 = 0x8EBC6AF09C88C6E3
B3 = 0x589965CC75374CC3
B4 = 0x1D8E4E27C47D124F
B5 = 0xEB44ACCAB455D165

# Starting state for the 32-bit output path (b1 ^ b1 >>> 41 ^ b1 << 53).
SEED_32 = -260224914646652572 & MASK64
# Starting state for the 64-bit output path (b1 ^ b1 >>> 29 ^ b1 >>> 43 ^ b1 << 7 ^ b1 << 53).
SEED_64 = 9069147967908697017
# Starting state for the four-lane long/double path (b0 ^ b0 >>> 23 ^ b0 >>> 48 ^ b0 << 7 ^ b0 << 53).
SEED_WOO = 0x1E98AE18CA351B28

# Values a boolean element stands for.
BOOL_TRUE = 0x9E3779B9
BOOL_FALSE = 0x7F4A7C15

# Multipliers used to spread a single object hash code.
OBJECT_MUL_32 = 0x9E375
OBJECT_MUL_64 = 0x9E3779B97F4A7C15

# =======================================================================
# SPACE-FILLING CURVES
# =======================================================================
HILBERT_SIDE = 16
HILBERT_POINTS = HILBERT_SIDE ** 3          # 4096
PEALBERT_SIDE = 32
PEALBERT_POINTS = PEALBERT_SIDE ** 3        # 32768

# =======================================================================
# CONSTANT DATA
# =======================================================================
PALETTE_MAPPING_SIZE = 0x8000               # one entry per RGB555 color
BLUE_NOISE_SIDE = 128
BLUE_NOISE_CELLS = BLUE_NOISE_SIDE * BLUE_NOISE_SIDE   # 16384

BLUE_NOISE_NAMES = ("A", "B", "C")
BLUE_NOISE_INDEX: Dict[str, int] = {name: i for i, name in enumerate(BLUE_NOISE_NAMES)}
