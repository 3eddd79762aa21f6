# ========================
# file: palette_kit/core/errors.py
# ========================
class PaletteKitError(Exception):
    """Base error for palette_kit."""


class ValidationError(PaletteKitError):
    """Raised when settings fail validation."""


class TableDecodeError(PaletteKitError):
    """Raised when an embedded table cannot be interpreted as raw bytes."""
