"""
Tests for point formatting.
"""
import pytest

from charting import (
    Point, HistogramPoint, PointSeries, to_points, to_histogram_points,
    POSITIVE_COLOR, NEGATIVE_COLOR,
)


class TestToPoints:
    """Test line point formatting."""

    def test_drops_absent_values(self):
        points = list(to_points([1, 2, 3, 4], [None, 1.5, None, 2.5]))
        assert points == [Point(2, 1.5), Point(4, 2.5)]

    def test_restartable(self):
        series = to_points([1, 2, 3], [None, 1.0, 2.0])
        assert list(series) == list(series)
        assert len(series) == 2

    def test_later_input_changes_do_not_leak(self):
        times = [1, 2, 3]
        values = [1.0, 2.0, 3.0]
        series = to_points(times, values)
        values.pop()
        times[0] = 99
        values[0] = None

        assert list(series) == [Point(1, 1.0), Point(2, 2.0), Point(3, 3.0)]
        assert len(series) == 3

    def test_zero_is_kept(self):
        assert list(to_points([1], [0.0])) == [Point(1, 0.0)]

    def test_empty(self):
        series = to_points([], [])
        assert list(series) == []
        assert len(series) == 0

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError, match="differ in length"):
            to_points([1, 2], [1.0])

    def test_is_point_series(self):
        assert isinstance(to_points([1], [1.0]), PointSeries)


class TestHistogramPoints:
    """Test histogram point formatting."""

    def test_colour_follows_sign(self):
        points = list(to_histogram_points([1, 2, 3, 4], [0.5, None, -0.25, 0.0]))

        assert points == [
            HistogramPoint(1, 0.5, POSITIVE_COLOR),
            HistogramPoint(3, -0.25, NEGATIVE_COLOR),
            HistogramPoint(4, 0.0, POSITIVE_COLOR),
        ]
        assert [p.is_positive for p in points] == [True, False, True]

    def test_no_smoothing_between_points(self):
        colors = [p.color for p in to_histogram_points([1, 2, 3], [1.0, -1e-12, 1.0])]
        assert colors == [POSITIVE_COLOR, NEGATIVE_COLOR, POSITIVE_COLOR]

    def test_custom_colours(self):
        points = list(to_histogram_points([1, 2], [1.0, -1.0],
                                          positive_color='green', negative_color='red'))
        assert [p.color for p in points] == ['green', 'red']

    def test_empty(self):
        assert list(to_histogram_points([], [])) == []
