"""
chromansi color space conversions
=================================

Scalar functions work on ColorRGB / ColorHSL (or plain tuples) and return
value types; the ``np_`` variants take and return ``(..., 3)`` arrays.

RGB → HSL:
    rgb_to_hsl(rgb), np_rgb_to_hsl(rgb_array)

HSL → RGB:
    hsl_to_rgb(hsl), np_hsl_to_rgb(hsl_array)

Hex ↔ RGB:
    hex_to_rgb(hex_string), rgb_to_hex(rgb, prefix="#")
"""

from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb, normalize_hue
from .hex import hex_to_rgb, rgb_to_hex

__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "normalize_hue",
    "hex_to_rgb",
    "rgb_to_hex",
]
