"""
Descriptive Core - Summary statistics every other engine module builds on.

Empty or degenerate input yields neutral values (0) instead of errors.
"""

import math
from collections.abc import Sequence

from revenuelens.core.domain.result import ConfidenceInterval, RollingStat

Z_95 = 1.96


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by n); 0.0 when n < 2."""
    n = len(values)
    if n < 2:
        return 0.0
    mu = mean(values)
    return math.sqrt(sum((v - mu) ** 2 for v in values) / n)


def coefficient_of_variation(values: Sequence[float]) -> float:
    """std_dev / mean, or 0.0 when the mean is zero."""
    mu = mean(values)
    if mu == 0:
        return 0.0
    return std_dev(values) / mu


def z_scores(values: Sequence[float]) -> list[float]:
    """Standardize each value against the whole sequence; all zeros on zero variance."""
    mu = mean(values)
    sigma = std_dev(values)
    if sigma == 0:
        return [0.0 for _ in values]
    return [(v - mu) / sigma for v in values]


def confidence_interval(values: Sequence[float]) -> ConfidenceInterval:
    """95% interval for the mean: mean +/- 1.96 * sigma / sqrt(n)."""
    mu = mean(values)
    n = len(values)
    margin = Z_95 * std_dev(values) / math.sqrt(n) if n > 0 else 0.0
    return ConfidenceInterval(lower=mu - margin, upper=mu + margin, margin=margin)


def rolling_stats(values: Sequence[float], window: int) -> list[RollingStat]:
    """Trailing-window mean, std and CV per position."""
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    stats = []
    for i in range(len(values)):
        if i < window - 1:
            stats.append(RollingStat(index=i, mean=None, std=None, cv=None))
            continue
        chunk = values[i - window + 1:i + 1]
        mu = mean(chunk)
        sigma = std_dev(chunk)
        stats.append(RollingStat(index=i, mean=mu, std=sigma, cv=sigma / mu if mu > 0 else 0.0))
    return stats


def compound_growth_rate(start: float, end: float, periods: int) -> float:
    """(end / start) ** (1 / periods) - 1; 0.0 when start <= 0 or periods <= 0."""
    if start <= 0 or periods <= 0:
        return 0.0
    return (end / start) ** (1 / periods) - 1
