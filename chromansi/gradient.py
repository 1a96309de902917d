"""
Per-character multi-stop gradients.

A gradient is an ordered sequence of at least two color stops spread evenly
over the characters of a string: the first character gets the first stop,
the last character gets the last stop, and everything in between is linearly
interpolated in RGB within its segment.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple
import numpy as np
from .colors.rgb import ColorRGB
from .errors import GradientStopError
from .types.color_types import RGBLike
from .utils import np_round_half_up


def _as_stops(stops: Iterable[RGBLike]) -> List[ColorRGB]:
    stops = [ColorRGB.coerce(stop) for stop in stops]
    if len(stops) < 2:
        raise GradientStopError(len(stops))
    return stops

def gradient_positions(length: int) -> np.ndarray:
    """Normalized position ``t`` in [0, 1] for each of ``length`` characters.

    A single character sits at ``t = 0``.
    """
    if length <= 1:
        return np.zeros(max(length, 0))
    return np.arange(length, dtype=float) / (length - 1)

def gradient_colors(stops: Iterable[RGBLike], length: int) -> List[ColorRGB]:
    """
    Interpolated color for each of ``length`` evenly spaced positions.

    Args:
        stops: ordered color stops, at least two (ColorRGB, (r, g, b) or hex)
        length: number of positions

    Returns:
        list of ColorRGB, ``length`` long

    Raises:
        GradientStopError: fewer than two stops
    """
    stops = _as_stops(stops)
    if length <= 0:
        return []

    anchors = np.array([stop.value for stop in stops], dtype=float)
    n_segments = len(stops) - 1

    pos = gradient_positions(length) * n_segments
    # t == 1 lands on the last segment's end rather than past it
    seg = np.clip(np.floor(pos).astype(int), 0, n_segments - 1)
    f = (pos - seg)[:, np.newaxis]

    colors = anchors[seg] * (1 - f) + anchors[seg + 1] * f
    return [ColorRGB(tuple(row)) for row in np_round_half_up(colors)]

def gradient_text(stops: Iterable[RGBLike], text: str) -> List[Tuple[str, ColorRGB]]:
    """Pair every character of ``text`` with its gradient color."""
    return list(zip(text, gradient_colors(stops, len(text))))
