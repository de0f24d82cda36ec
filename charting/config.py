"""
Chart indicator configuration.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from indicators import check_period
from .points import POSITIVE_COLOR, NEGATIVE_COLOR

SMA_PERIODS = (20, 50)
EMA_PERIODS = (20,)
BOLLINGER_PERIOD = 20
BOLLINGER_K = 2.0
RSI_PERIOD = 14
RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9


@dataclass(frozen=True)
class ChartConfig:
    """Which indicators a chart shows and with which parameters."""

    # Price overlays
    sma_periods: Tuple[int, ...] = SMA_PERIODS
    ema_periods: Tuple[int, ...] = EMA_PERIODS
    show_bollinger: bool = True
    bollinger_period: int = BOLLINGER_PERIOD
    bollinger_k: float = BOLLINGER_K

    # RSI pane
    show_rsi: bool = True
    rsi_period: int = RSI_PERIOD
    rsi_overbought: float = RSI_OVERBOUGHT  # Upper guide line
    rsi_oversold: float = RSI_OVERSOLD  # Lower guide line

    # MACD pane
    show_macd: bool = True
    macd_fast: int = MACD_FAST
    macd_slow: int = MACD_SLOW
    macd_signal: int = MACD_SIGNAL

    # Histogram colours
    positive_color: str = POSITIVE_COLOR
    negative_color: str = NEGATIVE_COLOR

    def __post_init__(self):
        object.__setattr__(self, 'sma_periods', tuple(self.sma_periods))
        object.__setattr__(self, 'ema_periods', tuple(self.ema_periods))

        periods = {
            'bollinger_period': self.bollinger_period,
            'rsi_period': self.rsi_period,
            'macd_fast': self.macd_fast,
            'macd_slow': self.macd_slow,
            'macd_signal': self.macd_signal,
        }
        for p in self.sma_periods:
            periods[f'sma_periods[{p}]'] = p
        for p in self.ema_periods:
            periods[f'ema_periods[{p}]'] = p

        for name, value in periods.items():
            check_period(value, name)

        if not math.isfinite(self.bollinger_k) or self.bollinger_k < 0:
            raise ValueError("bollinger_k must be finite and non-negative")
        for name in ('rsi_overbought', 'rsi_oversold'):
            level = getattr(self, name)
            if not 0 <= level <= 100:
                raise ValueError(f"{name} must be between 0 and 100")
        if self.rsi_oversold >= self.rsi_overbought:
            raise ValueError("rsi_oversold must be below rsi_overbought")


def create_chart_config(sma_periods: Tuple[int, ...] = SMA_PERIODS,
                        ema_periods: Tuple[int, ...] = EMA_PERIODS,
                        show_bollinger: bool = True, show_rsi: bool = True,
                        show_macd: bool = True, **overrides) -> ChartConfig:
    """
    Convenience function to create a ChartConfig with common settings.

    Args:
        sma_periods: Periods of the SMA overlays (e.g. (20, 50))
        ema_periods: Periods of the EMA overlays
        show_bollinger: Draw Bollinger Bands on the price chart
        show_rsi: Build the RSI pane
        show_macd: Build the MACD pane
        **overrides: Any other ChartConfig field

    Returns:
        Configured ChartConfig
    """
    return ChartConfig(
        sma_periods=tuple(sma_periods),
        ema_periods=tuple(ema_periods),
        show_bollinger=show_bollinger,
        show_rsi=show_rsi,
        show_macd=show_macd,
        **overrides
    )
