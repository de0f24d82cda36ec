"""
Shared fixtures for indicator and chart tests.
"""
import pytest
import numpy as np
import pandas as pd

from charting import Bar


@pytest.fixture
def random_walk():
    """Deterministic random-walk closes with both gains and losses."""
    rng = np.random.default_rng(7)
    return list(100 + np.cumsum(rng.normal(0, 1, 200)))


@pytest.fixture
def sample_frame():
    """OHLCV DataFrame with a mild uptrend, one row per minute."""
    rng = np.random.default_rng(42)
    n = 60
    close = 100 + np.arange(n) * 0.5 + rng.normal(0, 1, n)
    return pd.DataFrame({
        'time': 1_700_000_000 + np.arange(n) * 60,
        'open': close - 0.2,
        'high': close + 1.0,
        'low': close - 1.0,
        'close': close,
        'volume': rng.integers(1_000, 5_000, n).astype(float),
    })


@pytest.fixture
def sample_bars(sample_frame):
    """The sample frame as a list of Bar."""
    return [
        Bar(time=int(row.time), open=row.open, high=row.high, low=row.low,
            close=row.close, volume=row.volume)
        for row in sample_frame.itertuples(index=False)
    ]
