"""
Chart assembly.

Computes the configured indicators for one bar sequence and hands back
chart-ready point series, or a DataFrame for strategy evaluation.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from indicators import sma, ema, rsi, macd, bollinger_bands
from .config import ChartConfig
from .data import Bar, closes, timestamps, validate_bars
from .points import PointSeries, to_points, to_histogram_points

logger = logging.getLogger(__name__)


@dataclass
class RSIPane:
    """RSI line plus its overbought/oversold guide levels."""
    values: PointSeries
    overbought: float
    oversold: float


@dataclass
class MACDPane:
    """MACD and signal lines plus the coloured histogram."""
    macd: PointSeries
    signal: PointSeries
    histogram: PointSeries


@dataclass
class ChartData:
    """Everything a price chart with indicator panes needs."""
    overlays: Dict[str, PointSeries]
    rsi: Optional[RSIPane] = None
    macd: Optional[MACDPane] = None


def build_price_overlays(bars: List[Bar], config: ChartConfig) -> Dict[str, PointSeries]:
    """
    Line overlays drawn on top of the price series.

    Keys are ``sma_<n>``, ``ema_<n>`` and, when enabled, ``bb_upper``,
    ``bb_middle`` and ``bb_lower``.
    """
    prices = closes(bars)
    times = timestamps(bars)

    overlays = {}
    for n in config.sma_periods:
        overlays[f'sma_{n}'] = to_points(times, sma(prices, n))
    for n in config.ema_periods:
        overlays[f'ema_{n}'] = to_points(times, ema(prices, n))

    if config.show_bollinger:
        bands = bollinger_bands(prices, config.bollinger_period, config.bollinger_k)
        for key in ('upper', 'middle', 'lower'):
            overlays[f'bb_{key}'] = to_points(times, bands[key])

    return overlays


def build_rsi_pane(bars: List[Bar], config: ChartConfig) -> RSIPane:
    """RSI pane with guide levels taken from the config."""
    values = rsi(closes(bars), config.rsi_period)
    return RSIPane(
        values=to_points(timestamps(bars), values),
        overbought=config.rsi_overbought,
        oversold=config.rsi_oversold,
    )


def build_macd_pane(bars: List[Bar], config: ChartConfig) -> MACDPane:
    """MACD pane; the histogram is coloured by sign."""
    times = timestamps(bars)
    result = macd(closes(bars), config.macd_fast, config.macd_slow, config.macd_signal)
    return MACDPane(
        macd=to_points(times, result['macd']),
        signal=to_points(times, result['signal']),
        histogram=to_histogram_points(
            times, result['histogram'],
            positive_color=config.positive_color,
            negative_color=config.negative_color,
        ),
    )


def build_chart(bars: List[Bar], config: Optional[ChartConfig] = None) -> ChartData:
    """
    Compute every configured indicator for a bar sequence.

    Args:
        bars: Bars in ascending time order
        config: Chart configuration (default: ChartConfig())

    Returns:
        ChartData; panes are None when disabled
    """
    config = config or ChartConfig()
    validate_bars(bars)

    longest = max(
        list(config.sma_periods) + list(config.ema_periods)
        + [config.bollinger_period, config.rsi_period + 1,
           config.macd_slow + config.macd_signal - 1]
    )
    if len(bars) < longest:
        logger.debug("Only %d bars; some indicators need %d and will be partly empty",
                     len(bars), longest)

    chart = ChartData(overlays=build_price_overlays(bars, config))
    if config.show_rsi:
        chart.rsi = build_rsi_pane(bars, config)
    if config.show_macd:
        chart.macd = build_macd_pane(bars, config)

    logger.debug("Built chart over %d bars with overlays %s", len(bars), sorted(chart.overlays))
    return chart


def indicator_frame(bars: List[Bar], config: Optional[ChartConfig] = None) -> pd.DataFrame:
    """
    All configured indicators as a DataFrame indexed by bar time.

    Columns are nullable Float64; positions without a value hold pd.NA.
    """
    config = config or ChartConfig()
    validate_bars(bars)
    prices = closes(bars)

    columns = {'close': prices}
    for n in config.sma_periods:
        columns[f'sma_{n}'] = sma(prices, n)
    for n in config.ema_periods:
        columns[f'ema_{n}'] = ema(prices, n)
    if config.show_bollinger:
        bands = bollinger_bands(prices, config.bollinger_period, config.bollinger_k)
        for key in ('upper', 'middle', 'lower'):
            columns[f'bb_{key}'] = bands[key]
    if config.show_rsi:
        columns['rsi'] = rsi(prices, config.rsi_period)
    if config.show_macd:
        result = macd(prices, config.macd_fast, config.macd_slow, config.macd_signal)
        columns['macd'] = result['macd']
        columns['macd_signal'] = result['signal']
        columns['macd_histogram'] = result['histogram']

    index = pd.Index(timestamps(bars), name='time')
    return pd.DataFrame(
        {name: pd.array(values, dtype='Float64') for name, values in columns.items()},
        index=index,
    )
