"""chromansi: RGB/HSL color math and ANSI terminal coloring."""

from .colors.rgb import ColorRGB, new_rgb, BLACK
from .colors.hsl import ColorHSL
from .colors.color_base import ColorBase
from .colors.arithmetic import blend, complement, lighten, darken
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    hex_to_rgb,
    rgb_to_hex,
)
from .gradient import gradient_colors, gradient_text
from .ansi import (
    NamedColor,
    ensure_terminal_ready,
    format_text,
    true_color,
    palette_color,
    hex_color,
    hsl_color,
    gradient_color,
    named_color,
    black,
    red,
    green,
    yellow,
    blue,
    magenta,
    cyan,
    white,
    emit_true_color,
    emit_palette_color,
    emit_hex,
    emit_hsl,
    emit_named,
    emit_gradient,
)
from .errors import (
    ChromansiError,
    GradientStopError,
    ChromansiWarning,
    BlendRatioWarning,
    InvalidHexWarning,
    TerminalSetupWarning,
)

__version__ = "1.0.0"

__all__ = [
    # value types
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "new_rgb",
    "BLACK",
    # algebra
    "blend",
    "complement",
    "lighten",
    "darken",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    # gradients
    "gradient_colors",
    "gradient_text",
    "gradient_color",
    # ansi
    "NamedColor",
    "ensure_terminal_ready",
    "format_text",
    "true_color",
    "palette_color",
    "hex_color",
    "hsl_color",
    "named_color",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "emit_true_color",
    "emit_palette_color",
    "emit_hex",
    "emit_hsl",
    "emit_named",
    "emit_gradient",
    # errors
    "ChromansiError",
    "GradientStopError",
    "ChromansiWarning",
    "BlendRatioWarning",
    "InvalidHexWarning",
    "TerminalSetupWarning",
]
