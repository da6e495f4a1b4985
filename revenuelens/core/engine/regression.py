"""
Regression Model - OLS fit of values against their position 0..n-1.

The independent variable is the time step, not the calendar date; callers
holding dates map them through IndexedDay.
"""

from collections.abc import Sequence

from revenuelens.core.domain.result import RegressionResult
from revenuelens.core.engine.correlation import pearson_correlation
from revenuelens.core.engine.descriptive import mean


def linear_regression(values: Sequence[float]) -> RegressionResult:
    """
    Fit y = slope * x + intercept with x = 0..n-1.

    Args:
        values: Observations in time order

    Returns:
        RegressionResult; a flat line at the single value (or 0) when n < 2
    """
    n = len(values)
    if n < 2:
        level = float(values[0]) if n == 1 else 0.0
        return RegressionResult(slope=0.0, intercept=level, r_squared=0.0)

    xs = list(range(n))
    x_mean = mean(xs)
    y_mean = mean(values)

    ss_xy = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, values))
    ss_xx = sum((x - x_mean) ** 2 for x in xs)

    slope = ss_xy / ss_xx if ss_xx != 0 else 0.0
    intercept = y_mean - slope * x_mean
    # Squared Pearson r equals the coefficient of determination for simple OLS.
    r_squared = min(1.0, pearson_correlation(xs, values) ** 2)

    return RegressionResult(slope=slope, intercept=intercept, r_squared=r_squared)


def fitted_values(result: RegressionResult, n: int) -> list[float]:
    """In-sample predictions for positions 0..n-1."""
    return [result.predict(i) for i in range(n)]


def residuals(values: Sequence[float], result: RegressionResult | None = None) -> list[float]:
    """values - fitted line, refitting when no result is given."""
    result = result or linear_regression(values)
    return [v - result.predict(i) for i, v in enumerate(values)]
