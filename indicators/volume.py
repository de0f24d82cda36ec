"""
Volume-based helpers.
"""

from .core import ArrayLike, as_array, check_period


def volume_ratio(volume: ArrayLike, lookback: int = 20) -> float:
    """
    Current volume relative to the recent average.

    The last volume is divided by the mean of the ``lookback - 1`` volumes
    before it. Returns 1.0 when fewer than ``lookback`` volumes are available
    or when that mean is not positive.
    """
    lookback = check_period(lookback, "lookback")
    values = as_array(volume)
    if lookback < 2 or len(values) < lookback:
        return 1.0

    recent = values[-lookback:]
    avg_volume = float(recent[:-1].mean())
    if avg_volume <= 0:
        return 1.0
    return float(recent[-1]) / avg_volume
