"""
Point formatting for chart series.

Turns a DerivedSeries plus parallel timestamps into {time, value} points,
dropping positions where the indicator is not computable.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence

POSITIVE_COLOR = '#00FF88'
NEGATIVE_COLOR = '#FF4444'


@dataclass(frozen=True)
class Point:
    """A single line-series point."""
    time: Any
    value: float


@dataclass(frozen=True)
class HistogramPoint:
    """A histogram bar coloured by the sign of its value."""
    time: Any
    value: float
    color: str

    @property
    def is_positive(self) -> bool:
        return self.value >= 0


class PointSeries:
    """
    Lazy, restartable sequence of points.

    Inputs are copied at construction and points are built on each
    iteration, so the same PointSeries can be consumed any number of times
    and later changes to the caller's lists do not leak in.
    """

    def __init__(self, times: Sequence[Any], values: Sequence[Optional[float]],
                 make_point: Callable[[Any, float], Any]):
        if len(times) != len(values):
            raise ValueError(
                f"Timestamps and values differ in length: {len(times)} != {len(values)}"
            )
        self._times = tuple(times)
        self._values = tuple(values)
        self._make_point = make_point

    def __iter__(self) -> Iterator[Any]:
        for time, value in zip(self._times, self._values):
            if value is not None:
                yield self._make_point(time, value)

    def __len__(self) -> int:
        return sum(1 for value in self._values if value is not None)

    def __repr__(self) -> str:
        return f"PointSeries({len(self)} points)"


def to_points(times: Sequence[Any], series: Sequence[Optional[float]]) -> PointSeries:
    """
    Line points for every present value, in input order.

    Args:
        times: Timestamps parallel to series
        series: DerivedSeries to format

    Returns:
        PointSeries of Point
    """
    return PointSeries(times, series, Point)


def to_histogram_points(times: Sequence[Any], series: Sequence[Optional[float]],
                        positive_color: str = POSITIVE_COLOR,
                        negative_color: str = NEGATIVE_COLOR) -> PointSeries:
    """
    Histogram points for every present value.

    Colour depends only on the sign of each value: non-negative values get
    ``positive_color``, negative ones ``negative_color``.
    """
    def make_point(time: Any, value: float) -> HistogramPoint:
        color = positive_color if value >= 0 else negative_color
        return HistogramPoint(time, value, color)

    return PointSeries(times, series, make_point)
