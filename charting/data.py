"""
Bar input handling for chart assembly.
Normalizes OHLC bars handed over by the data layer.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd


@dataclass(frozen=True)
class Bar:
    """A single OHLC bar. Only ``close`` feeds the price indicators."""

    time: Any
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None


REQUIRED_COLUMNS = ['time', 'open', 'high', 'low', 'close']


def bars_from_frame(df: pd.DataFrame) -> List[Bar]:
    """
    Build bars from a DataFrame.

    Expected columns:
    - time: any comparable, increasing timestamp (epoch seconds, datetimes)
    - open, high, low, close: prices
    - volume: optional

    Args:
        df: DataFrame with one row per bar

    Returns:
        List of Bar in row order
    """
    missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")

    has_volume = 'volume' in df.columns
    bars = []
    for row in df.itertuples(index=False):
        volume = float(row.volume) if has_volume and not pd.isna(row.volume) else None
        bars.append(Bar(
            time=row.time,
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
            volume=volume,
        ))
    return bars


def bars_from_records(records: Iterable[Mapping[str, Any]]) -> List[Bar]:
    """Build bars from mappings with time/open/high/low/close[/volume] keys."""
    bars = []
    for i, record in enumerate(records):
        missing = [key for key in REQUIRED_COLUMNS if key not in record]
        if missing:
            raise ValueError(f"Record {i} is missing keys: {missing}")
        volume = record.get('volume')
        bars.append(Bar(
            time=record['time'],
            open=float(record['open']),
            high=float(record['high']),
            low=float(record['low']),
            close=float(record['close']),
            volume=None if volume is None else float(volume),
        ))
    return bars


def validate_bars(bars: List[Bar]) -> bool:
    """
    Validate that the bars are usable for indicator computation.

    Args:
        bars: Bars to validate

    Returns:
        True if valid, raises ValueError if invalid
    """
    for i, bar in enumerate(bars):
        prices = (bar.open, bar.high, bar.low, bar.close)
        if not all(math.isfinite(p) for p in prices):
            raise ValueError(f"Non-finite price in bar {i}")
        if bar.high < bar.low:
            raise ValueError(f"Invalid OHLC data in bar {i}: high < low")

    for i in range(1, len(bars)):
        if not bars[i].time > bars[i - 1].time:
            raise ValueError(f"Timestamps are not strictly increasing at bar {i}")

    return True


def closes(bars: List[Bar]) -> List[float]:
    """Closing prices, in bar order."""
    return [bar.close for bar in bars]


def timestamps(bars: List[Bar]) -> List[Any]:
    """Bar times, parallel to ``closes``."""
    return [bar.time for bar in bars]
