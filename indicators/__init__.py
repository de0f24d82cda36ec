"""
Technical indicators for chart overlays and strategy evaluation.

Every function is a pure transform over the full input:
- Output is aligned to the input index (same length)
- Positions without enough history are None, never NaN
- No state is kept between calls

Standard signature: fn(series, n=..., **params)
"""

from .core import *
from .trend import *
from .momentum import *
from .volatility import *
from .volume import *

__all__ = [
    # Core
    'ArrayLike', 'DerivedSeries', 'as_array', 'check_period', 'latest',

    # Moving averages
    'sma', 'ema',

    # Momentum
    'rsi', 'macd', 'macd_signal', 'macd_hist',

    # Volatility
    'true_range', 'atr', 'bollinger_bands',

    # Volume
    'volume_ratio',
]
