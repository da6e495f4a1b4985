"""
Forecast Engine - Multi-model projection of a daily revenue history.

Four models run side by side over the same history:
- linear: OLS trend extrapolated per future offset
- ma / ema / wma: flat projection of each smoother's last defined value

A single residual-based 95% band surrounds the linear estimate. Its width is
constant over the horizon.
"""

import logging
import math
from collections.abc import Sequence

from revenuelens.core.domain.result import ErrorMetrics, ForecastPoint, RegressionResult
from revenuelens.core.domain.series import DailySeries, IndexedDay
from revenuelens.core.engine.descriptive import Z_95, std_dev
from revenuelens.core.engine.regression import linear_regression, residuals
from revenuelens.core.engine.smoothing import (
    exponential_moving_average,
    last_defined,
    moving_average,
    weighted_moving_average,
)

logger = logging.getLogger(__name__)


def forecast_confidence_band(
    predicted: float,
    values: Sequence[float],
    regression: RegressionResult | None = None,
) -> tuple[float, float]:
    """predicted -/+ 1.96 * sigma of the in-sample OLS residuals."""
    se = std_dev(residuals(values, regression))
    return predicted - Z_95 * se, predicted + Z_95 * se


def generate_forecast(
    revenues: Sequence[float],
    periods: int = 7,
    window: int = 7,
    alpha: float = 0.3,
    future: Sequence[IndexedDay] | None = None,
) -> list[ForecastPoint]:
    """
    Project `periods` steps past the end of `revenues`.

    No minimum history is enforced here: short input gives degenerate output
    (e.g. a zero-width band) rather than an error.

    Args:
        revenues: History in time order
        periods: Number of future steps
        window: MA/WMA window
        alpha: EMA smoothing factor
        future: Optional (position, date) pairs used to date each step

    Returns:
        One ForecastPoint per future offset
    """
    n = len(revenues)
    if n == 0:
        return []

    regression = linear_regression(revenues)
    se = std_dev(residuals(revenues, regression))

    last_ma = last_defined(moving_average(revenues, window)) or 0.0
    last_ema = last_defined(exponential_moving_average(revenues, alpha)) or 0.0
    last_wma = last_defined(weighted_moving_average(revenues, window)) or 0.0
    logger.debug(
        f"Forecast n={n} slope={regression.slope:.4f} se={se:.4f} "
        f"ma={last_ma:.2f} ema={last_ema:.2f} wma={last_wma:.2f}"
    )

    points = []
    for i in range(periods):
        linear = regression.predict(n + i)
        points.append(ForecastPoint(
            offset=i + 1,
            linear=linear,
            ma=last_ma,
            ema=last_ema,
            wma=last_wma,
            lower=linear - Z_95 * se,
            upper=linear + Z_95 * se,
            date=future[i].date if future is not None and i < len(future) else None,
        ))
    return points


def forecast_series(
    series: DailySeries,
    periods: int = 7,
    window: int = 7,
    alpha: float = 0.3,
) -> list[ForecastPoint]:
    """generate_forecast with each step dated after the last observed day."""
    return generate_forecast(
        series.revenues,
        periods=periods,
        window=window,
        alpha=alpha,
        future=series.future_days(periods),
    )


def error_metrics(actual: Sequence[float], forecast: Sequence[float | None]) -> ErrorMetrics:
    """
    MAE, MSE, RMSE and MAPE (percent) over the overlapping prefix.

    Undefined forecast positions are skipped in the sums; MAPE ignores zero actuals.
    """
    n = min(len(actual), len(forecast))
    if n == 0:
        return ErrorMetrics()

    abs_sum = sq_sum = pct_sum = 0.0
    pct_count = 0
    for a, f in zip(actual[:n], forecast[:n]):
        if f is None:
            continue
        err = a - f
        abs_sum += abs(err)
        sq_sum += err ** 2
        if a != 0:
            pct_sum += abs(err / a)
            pct_count += 1

    mse = sq_sum / n
    return ErrorMetrics(
        mae=abs_sum / n,
        mse=mse,
        rmse=math.sqrt(mse),
        mape=pct_sum / pct_count * 100 if pct_count > 0 else 0.0,
    )
