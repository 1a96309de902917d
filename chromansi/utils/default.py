import sys
from typing import Optional, TextIO, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def resolve_stream(stream: Optional[TextIO]) -> TextIO:
    """Return ``stream``, falling back to whatever ``sys.stdout`` is right now."""
    return value_or_default(stream, sys.stdout)
