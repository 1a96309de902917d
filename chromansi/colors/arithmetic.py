import warnings
from boundednumbers.functions import clamp, cyclic_wrap_float
from .rgb import ColorRGB, BLACK
from .hsl import ColorHSL
from ..conversions.hsl import rgb_to_hsl, hsl_to_rgb
from ..errors import BlendRatioWarning
from ..types.color_types import HUE_360
from ..utils import round_half_up


def blend(c1, c2, ratio: float) -> ColorRGB:
    """
    Linearly interpolate two colors channel by channel.

    ``ratio`` 0 gives ``c1`` and 1 gives ``c2``. A ratio outside [0, 1]
    returns black and emits a ``BlendRatioWarning``.
    """
    if not 0.0 <= ratio <= 1.0:
        warnings.warn(
            f"Blend ratio {ratio!r} is outside [0, 1]; returning black",
            BlendRatioWarning,
            stacklevel=2,
        )
        return BLACK

    a = ColorRGB.coerce(c1)
    b = ColorRGB.coerce(c2)
    keep = 1.0 - ratio
    return ColorRGB(tuple(
        round_half_up(x * keep + y * ratio) for x, y in zip(a.value, b.value)
    ))

def complement(c) -> ColorRGB:
    """Rotate the hue by 180 degrees."""
    hsl = rgb_to_hsl(c)
    hue = cyclic_wrap_float(hsl.h + 180.0, 0.0, HUE_360)
    return hsl_to_rgb(ColorHSL((hue, hsl.s, hsl.l)))

def lighten(c, amount: float) -> ColorRGB:
    """Add ``amount`` to the HSL lightness, clamped to [0, 1]."""
    hsl = rgb_to_hsl(c)
    lightness = clamp(hsl.l + amount, 0.0, 1.0)
    return hsl_to_rgb(ColorHSL((hsl.h, hsl.s, lightness)))

def darken(c, amount: float) -> ColorRGB:
    return lighten(c, -amount)


# Expose the algebra as ColorRGB methods
ColorRGB.blend = blend
ColorRGB.complement = complement
ColorRGB.lighten = lighten
ColorRGB.darken = darken
