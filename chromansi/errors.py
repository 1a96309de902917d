"""
Exception and warning taxonomy for chromansi.

Hard failures derive from ``ChromansiError`` (and ``ValueError`` where the
caller passed a bad value). Degraded-but-continuing behavior is reported with
``warnings.warn`` using a ``ChromansiWarning`` subclass, so callers can turn
any of them into errors with ``warnings.simplefilter("error", ...)``.
"""


class ChromansiError(Exception):
    """Base class for chromansi errors."""


class GradientStopError(ChromansiError, ValueError):
    """Raised when a gradient is requested with fewer than two color stops."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 colors are required for a gradient, got {count}")


class ChromansiWarning(UserWarning):
    """Base class for chromansi warnings."""


class BlendRatioWarning(ChromansiWarning):
    """Blend ratio outside [0, 1]; black was returned instead."""


class InvalidHexWarning(ChromansiWarning):
    """Hex input is not exactly six hex digits; the parse is unreliable."""


class TerminalSetupWarning(ChromansiWarning):
    """Enabling ANSI processing on the terminal failed."""
