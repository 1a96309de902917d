from __future__ import annotations
from typing import Sequence, Tuple, Union

Scalar = int | float
IntTriple = Tuple[int, int, int]
FloatTriple = Tuple[float, float, float]
ScalarTriple = Tuple[Scalar, Scalar, Scalar]
HexString = str
PaletteIndex = int

# Anything accepted where an RGB color is expected: a ColorRGB instance,
# a plain (r, g, b) sequence, or a hex string.
RGBLike = Union["ColorRGB", Sequence[Scalar], HexString]
HSLLike = Union["ColorHSL", Sequence[Scalar]]

HUE_360 = 360.0
CHANNEL_MAX = 255
