"""
Decomposition Engine - Additive split R(t) = T(t) + S(t) + E(t).

1. Trend T: OLS line over the series position
2. Seasonal S: weekday average of the de-trended revenue, re-centered so the
   seven weekday terms average to zero
3. Residual E: whatever is left, so the identity holds exactly
"""

from collections.abc import Sequence
from datetime import date

from revenuelens.core.domain.result import DecompositionPoint
from revenuelens.core.domain.series import DailySeries, IndexedDay
from revenuelens.core.engine.descriptive import mean
from revenuelens.core.engine.regression import linear_regression

WEEKDAYS = 7


def weekday_seasonal_indices(days: Sequence[IndexedDay], detrended: Sequence[float]) -> list[float]:
    """Re-centered average of `detrended` per weekday (Monday=0)."""
    totals = [0.0] * WEEKDAYS
    counts = [0] * WEEKDAYS
    for day, value in zip(days, detrended, strict=True):
        dow = day.date.weekday()
        totals[dow] += value
        counts[dow] += 1

    averages = [t / c if c > 0 else 0.0 for t, c in zip(totals, counts)]
    level = mean(averages)
    return [a - level for a in averages]


def decompose_days(days: Sequence[IndexedDay], revenues: Sequence[float]) -> list[DecompositionPoint]:
    """Decompose revenues observed on the given (position, date) pairs."""
    regression = linear_regression(revenues)
    trends = [regression.predict(day.position) for day in days]
    seasonal = weekday_seasonal_indices(days, [r - t for r, t in zip(revenues, trends, strict=True)])

    points = []
    for day, revenue, trend in zip(days, revenues, trends):
        s = seasonal[day.date.weekday()]
        points.append(DecompositionPoint(
            date=day.date,
            revenue=revenue,
            trend=trend,
            seasonal=s,
            residual=revenue - trend - s,
        ))
    return points


def additive_decomposition(dates: Sequence[date], revenues: Sequence[float]) -> list[DecompositionPoint]:
    """One point per input date, in input order."""
    days = [IndexedDay(position=i, date=d) for i, d in enumerate(dates)]
    return decompose_days(days, revenues)


def decompose_series(series: DailySeries) -> list[DecompositionPoint]:
    return decompose_days(series.indexed_days(), series.revenues)
