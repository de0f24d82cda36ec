"""
Core series transforms shared by every indicator.

Input coercion, period validation and trailing-window statistics. All
indicators return a DerivedSeries: a plain list with one entry per input
sample, where ``None`` marks positions that are not computable yet.
"""

import numpy as np
import pandas as pd
from typing import List, Optional, Sequence, Union


# Type aliases
ArrayLike = Union[Sequence[float], np.ndarray, pd.Series]
DerivedSeries = List[Optional[float]]


# ============================================================================
# Input Handling
# ============================================================================

def as_array(x: ArrayLike) -> np.ndarray:
    """Coerce a price sequence to a 1-d float64 array."""
    if isinstance(x, pd.Series):
        arr = x.to_numpy(dtype=np.float64)
    else:
        arr = np.asarray(x, dtype=np.float64)

    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-d series, got {arr.ndim} dimensions")
    if not np.isfinite(arr).all():
        raise ValueError("Non-finite values found in series")
    return arr


def check_period(n: int, name: str = "n") -> int:
    """Validate a window size; periods must be positive integers."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"{name} must be positive, got {n}")
    return int(n)


def empty_series(length: int) -> DerivedSeries:
    """All-absent series of the given length."""
    return [None] * length


def latest(series: DerivedSeries) -> Optional[float]:
    """Most recent present value of a series, or None."""
    for value in reversed(series):
        if value is not None:
            return value
    return None


# ============================================================================
# Rolling Statistics
# ============================================================================

def trailing_windows(arr: np.ndarray, n: int) -> np.ndarray:
    """
    Trailing windows of length n.

    Row ``j`` holds ``arr[j:j + n]``, i.e. the window ending at index
    ``j + n - 1``. Returns an empty (0, n) view when arr is shorter than n.
    """
    if len(arr) < n:
        return np.empty((0, n), dtype=np.float64)
    return np.lib.stride_tricks.sliding_window_view(arr, n)


def rolling_mean(arr: np.ndarray, n: int) -> np.ndarray:
    """Mean of each full trailing window (length ``len(arr) - n + 1``)."""
    return trailing_windows(arr, n).mean(axis=1)


def rolling_var(arr: np.ndarray, n: int, mean: Optional[np.ndarray] = None) -> np.ndarray:
    """Population variance (ddof=0) of each full trailing window."""
    windows = trailing_windows(arr, n)
    if mean is None:
        mean = windows.mean(axis=1)
    return ((windows - mean[:, None]) ** 2).mean(axis=1)


def align(values: np.ndarray, length: int, offset: int) -> DerivedSeries:
    """
    Place computed values back on the input index.

    ``values[j]`` lands at position ``offset + j``; every other position is
    None.
    """
    result = empty_series(length)
    for j, value in enumerate(values):
        result[offset + j] = float(value)
    return result


def diff(arr: np.ndarray) -> np.ndarray:
    """First difference with a leading zero, same length as arr."""
    if len(arr) == 0:
        return arr.copy()
    return np.concatenate(([0.0], np.diff(arr)))
