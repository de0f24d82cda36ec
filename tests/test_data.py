"""
Tests for bar input handling.
"""
import pytest
import numpy as np
import pandas as pd

from charting import Bar, bars_from_frame, bars_from_records, validate_bars, closes, timestamps


class TestBarsFromFrame:

    def test_builds_bars_in_order(self, sample_frame):
        bars = bars_from_frame(sample_frame)

        assert len(bars) == len(sample_frame)
        assert bars[0].close == pytest.approx(sample_frame['close'].iloc[0])
        assert bars[-1].time == sample_frame['time'].iloc[-1]
        assert bars[0].volume is not None

    def test_volume_optional(self, sample_frame):
        bars = bars_from_frame(sample_frame.drop(columns=['volume']))
        assert all(bar.volume is None for bar in bars)

    def test_missing_volume_value(self, sample_frame):
        frame = sample_frame.copy()
        frame.loc[0, 'volume'] = np.nan
        assert bars_from_frame(frame)[0].volume is None

    def test_missing_columns(self, sample_frame):
        with pytest.raises(ValueError, match="Missing required columns"):
            bars_from_frame(sample_frame.drop(columns=['close']))


class TestBarsFromRecords:

    def test_builds_bars(self):
        bars = bars_from_records([
            {'time': 1, 'open': 1, 'high': 2, 'low': 0.5, 'close': 1.5},
            {'time': 2, 'open': 1.5, 'high': 2.5, 'low': 1, 'close': 2, 'volume': 10},
        ])
        assert bars == [
            Bar(1, 1.0, 2.0, 0.5, 1.5),
            Bar(2, 1.5, 2.5, 1.0, 2.0, 10.0),
        ]

    def test_missing_keys(self):
        with pytest.raises(ValueError, match="Record 0"):
            bars_from_records([{'time': 1, 'close': 1.0}])


class TestValidateBars:

    def test_valid(self, sample_bars):
        assert validate_bars(sample_bars)
        assert validate_bars([])

    def test_high_below_low(self):
        with pytest.raises(ValueError, match="high < low"):
            validate_bars([Bar(1, 1.0, 0.5, 1.0, 0.8)])

    def test_non_finite(self):
        with pytest.raises(ValueError, match="Non-finite"):
            validate_bars([Bar(1, 1.0, 2.0, 0.5, float('nan'))])

    def test_unordered_timestamps(self):
        bars = [Bar(2, 1, 2, 0.5, 1), Bar(1, 1, 2, 0.5, 1)]
        with pytest.raises(ValueError, match="strictly increasing"):
            validate_bars(bars)

    def test_duplicate_timestamps(self):
        bars = [Bar(1, 1, 2, 0.5, 1), Bar(1, 1, 2, 0.5, 1)]
        with pytest.raises(ValueError):
            validate_bars(bars)

    def test_datetime_times(self):
        times = pd.date_range('2024-01-01', periods=3, freq='h')
        bars = [Bar(t, 1, 2, 0.5, 1) for t in times]
        assert validate_bars(bars)


class TestProjections:

    def test_closes_and_timestamps(self, sample_bars):
        assert closes(sample_bars) == [bar.close for bar in sample_bars]
        assert timestamps(sample_bars) == [bar.time for bar in sample_bars]
        assert len(closes(sample_bars)) == len(timestamps(sample_bars))
