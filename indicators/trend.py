"""
Trend indicators and moving averages.
"""

import logging
from functools import reduce
from typing import Optional

from .core import ArrayLike, DerivedSeries, as_array, check_period, empty_series, rolling_mean, align

logger = logging.getLogger(__name__)


# ============================================================================
# Moving Averages
# ============================================================================

def sma(close: ArrayLike, n: int) -> DerivedSeries:
    """
    Simple Moving Average.

    Mean of the n samples ending at each index. The first n-1 positions are
    None; with n=1 the input is copied.
    """
    n = check_period(n)
    values = as_array(close)
    return align(rolling_mean(values, n), len(values), n - 1)


def ema(close: ArrayLike, n: int) -> DerivedSeries:
    """
    Exponential Moving Average.

    Parameters:
    -----------
    close : ArrayLike
        Price series
    n : int
        Period for EMA

    The multiplier is ``2 / (n + 1)``. The value at index n-1 is seeded with
    the SMA of the first n samples; every later value is
    ``(close[i] - prev) * alpha + prev``. Earlier positions are None.
    """
    n = check_period(n)
    values = as_array(close)
    length = len(values)
    if length < n:
        logger.debug("ema(%d): %d samples, nothing to compute", n, length)
        return empty_series(length)

    alpha = 2.0 / (n + 1)
    seed = float(values[:n].mean())

    def step(acc: DerivedSeries, price: float) -> DerivedSeries:
        prev: Optional[float] = acc[-1]
        acc.append(None if prev is None else (float(price) - prev) * alpha + prev)
        return acc

    return reduce(step, values[n:], empty_series(n - 1) + [seed])
