import string
import warnings
from itertools import takewhile
from ..colors.rgb import ColorRGB
from ..errors import InvalidHexWarning
from ..types.color_types import HexString

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(hex_string: HexString) -> ColorRGB:
    """
    Parse ``"#RRGGBB"`` or ``"RRGGBB"`` into a ColorRGB.

    Parsing is lenient: the longest leading run of hex digits is read as one
    base-16 number (an empty run reads as 0) and its low 24 bits are split
    into red (bits 16-23), green (8-15) and blue (0-7). Anything that is not
    exactly six hex digits still returns a color but emits an
    ``InvalidHexWarning``.
    """
    digits = hex_string[1:] if hex_string.startswith("#") else hex_string
    run = "".join(takewhile(_HEX_DIGITS.__contains__, digits))

    if len(digits) != 6 or len(run) != 6:
        warnings.warn(
            f"Malformed hex color {hex_string!r}; expected 6 hex digits",
            InvalidHexWarning,
            stacklevel=2,
        )

    value = int(run, 16) & 0xFFFFFF if run else 0
    return ColorRGB(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))

def rgb_to_hex(rgb, prefix: str = "#") -> str:
    """Format an RGB color as lowercase ``#rrggbb``."""
    r, g, b = ColorRGB.coerce(rgb).value
    return f"{prefix}{r:02x}{g:02x}{b:02x}"
