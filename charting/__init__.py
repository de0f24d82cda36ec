"""
Chart assembly on top of the indicators package.

Formats indicator series into point lists and builds the overlays and
panes of a price chart from OHLC bars.
"""

from .data import Bar, bars_from_frame, bars_from_records, validate_bars, closes, timestamps
from .points import (
    Point, HistogramPoint, PointSeries, to_points, to_histogram_points,
    POSITIVE_COLOR, NEGATIVE_COLOR
)
from .config import ChartConfig, create_chart_config
from .chart import (
    ChartData, RSIPane, MACDPane,
    build_price_overlays, build_rsi_pane, build_macd_pane, build_chart, indicator_frame
)

__version__ = "1.0.0"

__all__ = [
    # Bars
    'Bar',
    'bars_from_frame',
    'bars_from_records',
    'validate_bars',
    'closes',
    'timestamps',

    # Points
    'Point',
    'HistogramPoint',
    'PointSeries',
    'to_points',
    'to_histogram_points',
    'POSITIVE_COLOR',
    'NEGATIVE_COLOR',

    # Configuration
    'ChartConfig',
    'create_chart_config',

    # Assembly
    'ChartData',
    'RSIPane',
    'MACDPane',
    'build_price_overlays',
    'build_rsi_pane',
    'build_macd_pane',
    'build_chart',
    'indicator_frame',
]
