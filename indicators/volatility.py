"""
Volatility bands and range-based indicators.
"""

import math

import numpy as np
from typing import Dict, Tuple

from .core import ArrayLike, DerivedSeries, as_array, check_period, empty_series, rolling_mean, rolling_var, align


# ============================================================================
# True Range and ATR
# ============================================================================

def _ohlc_arrays(high: ArrayLike, low: ArrayLike, close: ArrayLike) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    h, l, c = as_array(high), as_array(low), as_array(close)
    if not len(h) == len(l) == len(c):
        raise ValueError(f"high, low and close differ in length: {len(h)}, {len(l)}, {len(c)}")
    return h, l, c


def _true_range_calc(high: np.ndarray, low: np.ndarray, close: np.ndarray) -> np.ndarray:
    """True range for indices 1..len-1."""
    prev_close = close[:-1]
    hl = high[1:] - low[1:]
    hc = np.abs(high[1:] - prev_close)
    lc = np.abs(low[1:] - prev_close)
    return np.maximum(hl, np.maximum(hc, lc))


def true_range(high: ArrayLike, low: ArrayLike, close: ArrayLike) -> DerivedSeries:
    """
    True Range.

    TR = max(High - Low, abs(High - PrevClose), abs(Low - PrevClose))

    The first bar has no previous close and is None.
    """
    h, l, c = _ohlc_arrays(high, low, close)
    if len(c) < 2:
        return empty_series(len(c))
    return align(_true_range_calc(h, l, c), len(c), 1)


def atr(high: ArrayLike, low: ArrayLike, close: ArrayLike, n: int = 14) -> DerivedSeries:
    """
    Average True Range.

    Simple mean of the last n true ranges; present from index n onwards.
    """
    n = check_period(n)
    h, l, c = _ohlc_arrays(high, low, close)
    if len(c) <= n:
        return empty_series(len(c))
    return align(rolling_mean(_true_range_calc(h, l, c), n), len(c), n)


# ============================================================================
# Bands
# ============================================================================

def bollinger_bands(close: ArrayLike, n: int = 20, k: float = 2.0) -> Dict[str, DerivedSeries]:
    """
    Bollinger Bands.

    Parameters:
    -----------
    close : ArrayLike
        Price series
    n : int
        Window for the middle band and the deviation
    k : float
        Standard deviation multiplier, must be non-negative

    Returns:
    --------
    dict with keys:
        - upper: Upper band
        - middle: Middle band (SMA)
        - lower: Lower band

    The deviation is the population standard deviation (divide by n) of the
    same window the middle band averages.
    """
    n = check_period(n)
    if not math.isfinite(k) or k < 0:
        raise ValueError(f"k must be finite and non-negative, got {k}")
    values = as_array(close)
    length = len(values)

    middle = rolling_mean(values, n)
    std = np.sqrt(rolling_var(values, n, mean=middle))

    return {
        'upper': align(middle + k * std, length, n - 1),
        'middle': align(middle, length, n - 1),
        'lower': align(middle - k * std, length, n - 1),
    }
