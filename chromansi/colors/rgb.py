from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple
from .color_base import ColorBase


class ColorRGB(ColorBase):
    """Integer RGB color, each channel clamped into [0, 255].

    Accepts an ``(r, g, b)`` sequence, a hex string (``"#RRGGBB"`` or
    ``"RRGGBB"``) or another color, which is converted.
    """
    __slots__ = ()

    mode: ClassVar[str] = "rgb"
    _type: ClassVar[type] = int
    bounds: ClassVar[Tuple[Optional[Tuple[int, int]], ...]] = ((0, 255), (0, 255), (0, 255))
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    def _prepare(self, value: Any) -> Any:
        if isinstance(value, str):
            from ..conversions.hex import hex_to_rgb  # local import to avoid cycles
            return hex_to_rgb(value).value
        return value

    def _convert_from(self, other: ColorBase) -> ColorBase:
        from ..conversions.hsl import hsl_to_rgb
        return hsl_to_rgb(other)

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @classmethod
    def from_hex(cls, hex_string: str) -> ColorRGB:
        from ..conversions.hex import hex_to_rgb
        return hex_to_rgb(hex_string)

    @classmethod
    def from_hsl(cls, hsl) -> ColorRGB:
        from ..conversions.hsl import hsl_to_rgb
        return hsl_to_rgb(hsl)

    def to_hex(self, prefix: str = "#") -> str:
        from ..conversions.hex import rgb_to_hex
        return rgb_to_hex(self, prefix=prefix)

    def to_hsl(self):
        from ..conversions.hsl import rgb_to_hsl
        return rgb_to_hsl(self)


def new_rgb(r: int, g: int, b: int) -> ColorRGB:
    """Build a ColorRGB, saturating every channel into [0, 255]. Never fails."""
    return ColorRGB((r, g, b))


BLACK = ColorRGB(ColorRGB.null_value)
