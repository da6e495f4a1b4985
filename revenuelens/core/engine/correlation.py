"""
Correlation Engine - Pearson correlation and lag autocorrelation.
"""

import math
from collections.abc import Sequence

from revenuelens.core.domain.result import AutocorrelationPoint
from revenuelens.core.engine.descriptive import mean


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Pearson r over the overlapping prefix of xs and ys.

    Returns 0.0 ("no correlation") for fewer than 2 pairs or when either
    side has zero variance.
    """
    n = min(len(xs), len(ys))
    if n < 2:
        return 0.0
    xs, ys = xs[:n], ys[:n]
    x_mean = mean(xs)
    y_mean = mean(ys)

    num = dx2 = dy2 = 0.0
    for x, y in zip(xs, ys):
        dx = x - x_mean
        dy = y - y_mean
        num += dx * dy
        dx2 += dx ** 2
        dy2 += dy ** 2

    if dx2 == 0 or dy2 == 0:
        return 0.0
    return num / math.sqrt(dx2 * dy2)


def autocorrelation(values: Sequence[float], max_lag: int = 7) -> list[AutocorrelationPoint]:
    """
    Biased ACF for lags 1..min(max_lag, n-1), ascending.

    Every lag is normalized by the series' own sum of squared deviations.
    """
    n = len(values)
    mu = mean(values)
    denom = sum((v - mu) ** 2 for v in values)

    points = []
    for lag in range(1, min(max_lag, n - 1) + 1):
        num = sum((values[i] - mu) * (values[i - lag] - mu) for i in range(lag, n))
        points.append(AutocorrelationPoint(lag=lag, correlation=num / denom if denom != 0 else 0.0))
    return points
