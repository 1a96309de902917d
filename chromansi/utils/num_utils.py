import math
import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized ``round_half_up`` returning an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)
