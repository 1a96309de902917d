from __future__ import annotations
from typing import ClassVar, Optional, Tuple
from .color_base import ColorBase


class ColorHSL(ColorBase):
    """HSL color: hue in degrees (kept as given), saturation and lightness in [0, 1]."""
    __slots__ = ()

    mode: ClassVar[str] = "hsl"
    _type: ClassVar[type] = float
    bounds: ClassVar[Tuple[Optional[Tuple[float, float]], ...]] = (None, (0.0, 1.0), (0.0, 1.0))
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)

    def _convert_from(self, other: ColorBase) -> ColorBase:
        from ..conversions.hsl import rgb_to_hsl  # local import to avoid cycles
        return rgb_to_hsl(other)

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    def to_rgb(self):
        from ..conversions.hsl import hsl_to_rgb
        return hsl_to_rgb(self)
