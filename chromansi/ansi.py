"""
ANSI SGR foreground coloring.

Two layers:

- builders (``true_color``, ``palette_color``, ``hex_color``, ``hsl_color``,
  ``gradient_color``, ``NamedColor.wrap`` and the ``red()``-style helpers) return
  the escaped string and have no side effects;
- emitters (``emit_*``) format a template with arguments, make sure the
  terminal interprets escape codes, and write the result to a stream
  (``sys.stdout`` by default) in a single ``write`` call.

>>> true_color((10, 20, 30), "x")
'\\x1b[38;2;10;20;30mx\\x1b[0m'
"""
from __future__ import annotations
import sys
import threading
import warnings
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, TextIO, Union
from .colors.rgb import ColorRGB
from .conversions.hex import hex_to_rgb
from .conversions.hsl import hsl_to_rgb
from .errors import TerminalSetupWarning
from .gradient import gradient_text
from .types.color_types import HexString, HSLLike, PaletteIndex, RGBLike
from .utils import resolve_stream

ESC = "\x1b"
RESET = f"{ESC}[0m"
TRUE_COLOR_PREFIX = f"{ESC}[38;2;"
PALETTE_PREFIX = f"{ESC}[38;5;"


class NamedColor(IntEnum):
    """The eight basic terminal colors, valued by their SGR foreground code."""
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @property
    def sgr(self) -> str:
        return f"{ESC}[{int(self)}m"

    def wrap(self, text: str) -> str:
        return f"{self.sgr}{text}{RESET}"


# ---------------------------------------------------------------------------
# Terminal readiness
# ---------------------------------------------------------------------------

_STD_OUTPUT_HANDLE = -11
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


def _enable_virtual_terminal() -> None:
    """Turn on escape-code processing for the Windows console; no-op elsewhere."""
    if sys.platform != "win32":
        return
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    handle = kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
    mode = wintypes.DWORD()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        raise ctypes.WinError(ctypes.get_last_error())
    if not kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING):
        raise ctypes.WinError(ctypes.get_last_error())


_terminal_hook: Callable[[], None] = _enable_virtual_terminal
_terminal_ready = False
_terminal_lock = threading.Lock()


def ensure_terminal_ready() -> bool:
    """
    Run the terminal setup hook at most once per process.

    Safe to call from several threads: callers block on the lock until the
    hook has finished, so nobody sees ``True`` while setup is still running.
    The flag is set once the hook returns or fails and is never reset; any
    exception from the hook is reported once as a ``TerminalSetupWarning``
    and the hook is not retried.
    """
    global _terminal_ready
    if _terminal_ready:
        return True
    with _terminal_lock:
        if not _terminal_ready:
            try:
                _terminal_hook()
            except Exception as exc:
                warnings.warn(
                    f"Could not enable ANSI escape processing: {exc}",
                    TerminalSetupWarning,
                    stacklevel=2,
                )
            finally:
                _terminal_ready = True
    return True


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_text(template: str, *args: Any, **kwargs: Any) -> str:
    """``str.format`` the template, or return it verbatim when no arguments are given."""
    if not args and not kwargs:
        return template
    return template.format(*args, **kwargs)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def true_color_sgr(rgb: RGBLike) -> str:
    r, g, b = ColorRGB.coerce(rgb).value
    return f"{TRUE_COLOR_PREFIX}{r};{g};{b}m"

def true_color(rgb: RGBLike, text: str) -> str:
    return f"{true_color_sgr(rgb)}{text}{RESET}"

def palette_color(index: PaletteIndex, text: str) -> str:
    # Only 0-255 means anything to a terminal, but the index is not checked
    return f"{PALETTE_PREFIX}{index}m{text}{RESET}"

def hex_color(hex_string: HexString, text: str) -> str:
    return true_color(hex_to_rgb(hex_string), text)

def hsl_color(hsl: HSLLike, text: str) -> str:
    return true_color(hsl_to_rgb(hsl), text)

def gradient_color(stops: Iterable[RGBLike], text: str) -> str:
    """
    Color every character of ``text`` along the gradient, followed by a single reset.

    Raises:
        GradientStopError: fewer than two stops
    """
    colored = "".join(
        f"{true_color_sgr(color)}{char}" for char, color in gradient_text(stops, text)
    )
    return f"{colored}{RESET}"

def named_color(color: Union[NamedColor, str], text: str) -> str:
    if isinstance(color, str):
        color = NamedColor[color.upper()]
    return NamedColor(color).wrap(text)

def black(text: str) -> str:
    return NamedColor.BLACK.wrap(text)

def red(text: str) -> str:
    return NamedColor.RED.wrap(text)

def green(text: str) -> str:
    return NamedColor.GREEN.wrap(text)

def yellow(text: str) -> str:
    return NamedColor.YELLOW.wrap(text)

def blue(text: str) -> str:
    return NamedColor.BLUE.wrap(text)

def magenta(text: str) -> str:
    return NamedColor.MAGENTA.wrap(text)

def cyan(text: str) -> str:
    return NamedColor.CYAN.wrap(text)

def white(text: str) -> str:
    return NamedColor.WHITE.wrap(text)


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------

def _write(payload: str, stream: Optional[TextIO]) -> None:
    ensure_terminal_ready()
    resolve_stream(stream).write(payload)

def emit_true_color(rgb: RGBLike, template: str, *args: Any,
                    stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    """Write ``ESC[38;2;R;G;Bm`` + formatted text + ``ESC[0m``."""
    _write(true_color(rgb, format_text(template, *args, **kwargs)), stream)

def emit_palette_color(index: PaletteIndex, template: str, *args: Any,
                       stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    """Write ``ESC[38;5;Nm`` + formatted text + ``ESC[0m``."""
    _write(palette_color(index, format_text(template, *args, **kwargs)), stream)

def emit_hex(hex_string: HexString, template: str, *args: Any,
             stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    _write(hex_color(hex_string, format_text(template, *args, **kwargs)), stream)

def emit_hsl(hsl: HSLLike, template: str, *args: Any,
             stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    _write(hsl_color(hsl, format_text(template, *args, **kwargs)), stream)

def emit_named(color: Union[NamedColor, str], template: str, *args: Any,
               stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    _write(named_color(color, format_text(template, *args, **kwargs)), stream)

def emit_gradient(stops: Iterable[RGBLike], template: str, *args: Any,
                  stream: Optional[TextIO] = None, **kwargs: Any) -> None:
    """
    Write the formatted text as a per-character gradient.

    With fewer than two stops ``GradientStopError`` propagates and nothing
    is written.
    """
    _write(gradient_color(stops, format_text(template, *args, **kwargs)), stream)
