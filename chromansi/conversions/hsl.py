import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float
from ..colors.rgb import ColorRGB, new_rgb
from ..colors.hsl import ColorHSL
from ..types.color_types import HUE_360, CHANNEL_MAX
from ..utils import round_half_up, np_round_half_up


def normalize_hue(h: float) -> float:
    """Wrap hue into [0, 360) with a floating modulo (negative hues included)."""
    return cyclic_wrap_float(float(h), 0.0, HUE_360)

## RGB to HSL conversions

def rgb_to_hsl(rgb) -> ColorHSL:
    """
    Convert an RGB color to HSL.

    Gray inputs (including black and white) are achromatic: hue and
    saturation are both 0.

    Args:
        rgb: ColorRGB, (r, g, b) sequence with channels in [0, 255], or hex string

    Returns:
        ColorHSL: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    rgb = ColorRGB.coerce(rgb)
    r, g, b = (c / CHANNEL_MAX for c in rgb.value)
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        return ColorHSL((0.0, 0.0, lightness))

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif max_c == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0
    hue /= 6.0

    return ColorHSL((hue * HUE_360, saturation, lightness))

def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        hsl: float array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    rgb = np.clip(np.asarray(rgb, dtype=float), 0, CHANNEL_MAX) / CHANNEL_MAX
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask = delta > 0
    upper = mask & (lightness > 0.5)
    lower = mask & ~(lightness > 0.5)
    saturation[upper] = delta[upper] / (2.0 - max_c[upper] - min_c[upper])
    saturation[lower] = delta[lower] / (max_c[lower] + min_c[lower])

    # Same precedence as the scalar path: red, then green, then blue
    hue = np.zeros_like(max_c)
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0

    return np.stack([hue / 6.0 * HUE_360, saturation, lightness], axis=-1)

## HSL to RGB conversions

def hsl_to_rgb(hsl) -> ColorRGB:
    """
    Convert HSL to RGB with the chroma / intermediate / match decomposition.

    Hue is wrapped into [0, 360) first, then split into six half-open
    60 degree sectors.

    Args:
        hsl: ColorHSL or (h, s, l) sequence

    Returns:
        ColorRGB with channels rounded half up and clamped into [0, 255]
    """
    hsl = ColorHSL.coerce(hsl)
    h = normalize_hue(hsl.h) / 60.0
    s = hsl.s
    l = hsl.l

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(h % 2.0 - 1))
    m = l - c / 2

    if h < 1:
        r, g, b = c, x, 0.0
    elif h < 2:
        r, g, b = x, c, 0.0
    elif h < 3:
        r, g, b = 0.0, c, x
    elif h < 4:
        r, g, b = 0.0, x, c
    elif h < 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return new_rgb(
        round_half_up((r + m) * CHANNEL_MAX),
        round_half_up((g + m) * CHANNEL_MAX),
        round_half_up((b + m) * CHANNEL_MAX),
    )

def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array-like of shape (..., 3): hue in degrees (any range),
            saturation and lightness in [0, 1]

    Returns:
        rgb: int array of shape (..., 3), channels in [0, 255]
    """
    hsl = np.asarray(hsl, dtype=float)
    h = np.mod(hsl[..., 0], HUE_360) / 60.0
    s = np.clip(hsl[..., 1], 0.0, 1.0)
    l = np.clip(hsl[..., 2], 0.0, 1.0)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs(np.mod(h, 2.0) - 1))
    m = l - c / 2
    zero = np.zeros_like(c)

    sector = np.clip(np.floor(h).astype(int), 0, 5)
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1) * CHANNEL_MAX
    return np.clip(np_round_half_up(rgb), 0, CHANNEL_MAX)
