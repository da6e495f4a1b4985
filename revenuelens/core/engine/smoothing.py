"""
Smoothing Models - Simple, exponential and weighted moving averages.

MA and WMA mark the first window-1 positions as None (not yet defined);
EMA seeds itself with the first value and has no warm-up gap.
"""

from collections.abc import Sequence


def _check_window(window: int) -> None:
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")


def moving_average(values: Sequence[float], window: int) -> list[float | None]:
    """Trailing arithmetic mean over `window` values."""
    _check_window(window)
    result: list[float | None] = []
    for i in range(len(values)):
        if i < window - 1:
            result.append(None)
        else:
            result.append(sum(values[i - window + 1:i + 1]) / window)
    return result


def exponential_moving_average(values: Sequence[float], alpha: float = 0.3) -> list[float]:
    """EMA[0] = v[0]; EMA[t] = alpha * v[t] + (1 - alpha) * EMA[t-1]."""
    if not values:
        return []
    result = [float(values[0])]
    for value in values[1:]:
        result.append(alpha * value + (1 - alpha) * result[-1])
    return result


def weighted_moving_average(values: Sequence[float], window: int) -> list[float | None]:
    """Trailing average with linear weights 1..window, most recent heaviest."""
    _check_window(window)
    weights = range(1, window + 1)
    weight_sum = window * (window + 1) / 2

    result: list[float | None] = []
    for i in range(len(values)):
        if i < window - 1:
            result.append(None)
        else:
            chunk = values[i - window + 1:i + 1]
            result.append(sum(v * w for v, w in zip(chunk, weights)) / weight_sum)
    return result


def last_defined(series: Sequence[float | None]) -> float | None:
    """Last non-None value of a smoothed series."""
    for value in reversed(series):
        if value is not None:
            return value
    return None
