import math
import numpy as np
from numpy import ndarray as NDArray


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (``Math.round`` semantics)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized :func:`round_half_up`. Returns an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(np.int64)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
