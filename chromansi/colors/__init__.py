"""
chromansi color classes
=======================

Immutable value types for RGB and HSL colors.

>>> from chromansi.colors import ColorRGB, ColorHSL
>>> ColorRGB((300, -5, 128)).value   # channels saturate, never wrap
(255, 0, 128)
>>> round(ColorRGB("#ff8000").to_hsl().h, 2)
30.12

Instances are frozen after ``__init__``: assigning any attribute raises
``AttributeError``. Building one color type from the other converts it.

The color algebra (``blend``, ``complement``, ``lighten``, ``darken``) lives
in ``arithmetic`` and is also attached to ``ColorRGB`` as methods.
"""

from .color_base import ColorBase
from .rgb import ColorRGB, new_rgb, BLACK
from .hsl import ColorHSL
from .arithmetic import blend, complement, lighten, darken


__all__ = [
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "new_rgb",
    "BLACK",
    "blend",
    "complement",
    "lighten",
    "darken",
]
