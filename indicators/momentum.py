"""
Momentum and oscillator indicators.

RSI and MACD over closing prices. Both return DerivedSeries aligned to the
input index.
"""

import logging
import numpy as np
from typing import Dict

from .core import ArrayLike, DerivedSeries, as_array, check_period, empty_series, rolling_mean, align, diff
from .trend import ema

logger = logging.getLogger(__name__)


# ============================================================================
# RSI (Relative Strength Index)
# ============================================================================

def _rsi_calc(close: np.ndarray, n: int) -> np.ndarray:
    """RSI for every index i >= n, using simple trailing means of gain/loss."""
    deltas = diff(close)
    gains = np.maximum(deltas, 0.0)
    losses = np.maximum(-deltas, 0.0)

    # Window ending at i starts at i - n + 1; index 0 carries no change.
    avg_gain = rolling_mean(gains, n)[1:]
    avg_loss = rolling_mean(losses, n)[1:]

    rsi = np.full(len(avg_gain), 100.0)
    nonzero = avg_loss != 0
    rs = avg_gain[nonzero] / avg_loss[nonzero]
    rsi[nonzero] = 100.0 - (100.0 / (1.0 + rs))
    return rsi


def rsi(close: ArrayLike, n: int = 14) -> DerivedSeries:
    """
    Relative Strength Index.

    RSI = 100 - (100 / (1 + RS))
    RS = Average Gain / Average Loss

    The averages are plain means of the last n gains and losses (no Wilder
    smoothing). Positions before index n are None, and RSI is exactly 100
    wherever the average loss is zero.
    """
    n = check_period(n)
    values = as_array(close)
    if len(values) <= n:
        return empty_series(len(values))
    return align(_rsi_calc(values, n), len(values), n)


# ============================================================================
# MACD (Moving Average Convergence Divergence)
# ============================================================================

def _signal_line(macd_line: DerivedSeries, signal: int) -> DerivedSeries:
    """
    EMA of the present MACD values, scattered back to their positions.

    Absent entries are skipped rather than treated as zero, so the signal
    seed is the mean of the first ``signal`` real MACD values.
    """
    present = [(i, v) for i, v in enumerate(macd_line) if v is not None]
    result = empty_series(len(macd_line))
    if not present:
        return result

    indices, values = zip(*present)
    for i, value in zip(indices, ema(values, signal)):
        result[i] = value
    return result


def macd(close: ArrayLike, fast: int = 12, slow: int = 26, signal: int = 9) -> Dict[str, DerivedSeries]:
    """
    MACD indicator.

    Returns:
    --------
    dict with keys: 'macd', 'signal', 'histogram'
    """
    fast = check_period(fast, "fast")
    slow = check_period(slow, "slow")
    signal = check_period(signal, "signal")
    values = as_array(close)

    ema_fast = ema(values, fast)
    ema_slow = ema(values, slow)

    macd_line = [
        None if f is None or s is None else f - s
        for f, s in zip(ema_fast, ema_slow)
    ]
    signal_line = _signal_line(macd_line, signal)
    histogram = [
        None if m is None or s is None else m - s
        for m, s in zip(macd_line, signal_line)
    ]

    logger.debug("macd(%d, %d, %d) over %d samples", fast, slow, signal, len(values))
    return {
        'macd': macd_line,
        'signal': signal_line,
        'histogram': histogram
    }


def macd_signal(close: ArrayLike, fast: int = 12, slow: int = 26, signal: int = 9) -> DerivedSeries:
    """MACD signal line only."""
    return macd(close, fast, slow, signal)['signal']


def macd_hist(close: ArrayLike, fast: int = 12, slow: int = 26, signal: int = 9) -> DerivedSeries:
    """MACD histogram only."""
    return macd(close, fast, slow, signal)['histogram']
