"""palette_kit: hashing, fast trig, space-filling curves and constant tables for palette code."""
__version__ = "0.1.0"
