"""
Analytics Report Service - The orchestration layer of RevenueLens.

This service runs the fetch-compute cycle for one request:
1. Fetch the daily aggregate series from the provider
2. Compute summary statistics and the health index
3. Run decomposition, detection, smoothing and correlation diagnostics
4. Forecast when the history is long enough
"""

import logging
from datetime import date

from revenuelens.core.domain.result import AnalyticsReport, CorrelationSummary, ErrorMetrics, SummaryStats
from revenuelens.core.domain.series import DailySeries
from revenuelens.core.domain.settings import AnalyticsSettings
from revenuelens.core.engine.correlation import autocorrelation, pearson_correlation
from revenuelens.core.engine.decomposition import decompose_series
from revenuelens.core.engine.descriptive import (
    coefficient_of_variation,
    compound_growth_rate,
    confidence_interval,
    mean,
    rolling_stats,
    std_dev,
)
from revenuelens.core.engine.detection import detect_anomalies, detect_structural_breaks
from revenuelens.core.engine.forecast import error_metrics, forecast_series
from revenuelens.core.engine.health import enterprise_health_index
from revenuelens.core.engine.regression import linear_regression
from revenuelens.core.engine.sensitivity import break_even_analysis, sensitivity_simulation
from revenuelens.core.engine.smoothing import (
    exponential_moving_average,
    moving_average,
    weighted_moving_average,
)
from revenuelens.core.ports.aggregate_provider import DailyAggregateProvider

logger = logging.getLogger(__name__)

# MAPE assumed when there is too little history to measure one
DEFAULT_MAPE = 20.0


def series_cagr(revenues: list[float]) -> float:
    """Compound growth from the first to the last day, zero days counted as 1."""
    if len(revenues) < 2:
        return 0.0
    return compound_growth_rate(revenues[0] or 1, revenues[-1] or 1, len(revenues))


def one_step_ema_mape(revenues: list[float], alpha: float) -> float:
    """MAPE of using yesterday's EMA as today's forecast."""
    if len(revenues) < 2:
        return DEFAULT_MAPE
    ema = exponential_moving_average(revenues, alpha)
    return error_metrics(revenues[1:], ema[:-1]).mape


def in_sample_ma_error(revenues: list[float], ma: list[float | None]) -> ErrorMetrics:
    """Error of the defined MA values against the actuals they line up with."""
    defined = [v for v in ma if v is not None]
    if len(defined) < 2:
        return ErrorMetrics()
    return error_metrics(revenues[len(revenues) - len(defined):], defined)


def compute_report(
    series: DailySeries,
    settings: AnalyticsSettings | None = None,
    fixed_cost: float = 0.0,
) -> AnalyticsReport:
    """
    Compute every analytics section for a daily series.

    Sections needing more history than available are left empty.
    """
    settings = settings or AnalyticsSettings()
    revenues = series.revenues
    quantities = series.quantities
    n = len(series)

    total_revenue = sum(revenues)
    cv = coefficient_of_variation(revenues)
    cagr = series_cagr(revenues)
    summary = SummaryStats(
        days=n,
        total_revenue=total_revenue,
        total_quantity=sum(quantities),
        mean=mean(revenues),
        std_dev=std_dev(revenues),
        cv=cv,
        cagr=cagr,
        mean_interval=confidence_interval(revenues),
    )

    break_even = break_even_analysis(total_revenue, fixed_cost)
    health = enterprise_health_index(
        cagr=cagr,
        cv=cv,
        profit_margin=break_even.profit_margin,
        mape=one_step_ema_mape(revenues, settings.ema_alpha),
    )

    base_revenue = mean(revenues)
    base_quantity = mean(quantities)
    base_price = base_revenue / base_quantity if base_quantity > 0 else 1.0
    sensitivity = sensitivity_simulation(base_revenue, base_quantity, base_price, fixed_cost)

    if n < settings.min_history:
        logger.warning(f"Only {n} days of data, need {settings.min_history} for analytics")
        return AnalyticsReport(
            summary=summary,
            health=health,
            break_even=break_even,
            sensitivity=sensitivity,
        )

    logger.info(f"Computing analytics over {n} days ({series.dates[0]} to {series.dates[-1]})")
    window = min(settings.forecasting_window, n)
    ma = moving_average(revenues, window)

    forecast = []
    if n >= settings.min_forecast_history:
        logger.info(f"Forecasting {settings.forecast_periods} days ahead")
        forecast = forecast_series(
            series,
            periods=settings.forecast_periods,
            window=window,
            alpha=settings.ema_alpha,
        )
    else:
        logger.warning(f"Only {n} days of data, need {settings.min_forecast_history} to forecast")

    return AnalyticsReport(
        summary=summary,
        health=health,
        break_even=break_even,
        sensitivity=sensitivity,
        regression=linear_regression(revenues),
        decomposition=decompose_series(series),
        anomalies=detect_anomalies(series.dates, revenues, settings.anomaly_threshold),
        structural_breaks=detect_structural_breaks(revenues, settings.break_sensitivity),
        moving_average=ma,
        exponential_moving_average=exponential_moving_average(revenues, settings.ema_alpha),
        weighted_moving_average=weighted_moving_average(revenues, window),
        autocorrelation=autocorrelation(revenues, settings.max_lag),
        rolling=rolling_stats(revenues, window),
        correlations=CorrelationSummary(
            weekday_revenue=pearson_correlation(series.weekdays, revenues),
            quantity_revenue=pearson_correlation(quantities, revenues),
        ),
        in_sample_error=in_sample_ma_error(revenues, ma),
        forecast=forecast,
    )


class AnalyticsService:
    """
    Builds analytics reports from whatever daily aggregate source is plugged in.
    """

    def __init__(
        self,
        provider: DailyAggregateProvider,
        settings: AnalyticsSettings | None = None,
    ):
        """
        Initialize the service.

        Args:
            provider: Port producing the daily aggregate series
            settings: Engine knobs (defaults when omitted)
        """
        self.provider = provider
        self.settings = settings or AnalyticsSettings()

    async def build_report(
        self,
        start: date | None = None,
        end: date | None = None,
        fixed_cost: float = 0.0,
    ) -> AnalyticsReport:
        """
        Fetch the series for [start, end] and compute the full report.
        """
        logger.info(f"Fetching daily aggregates start={start} end={end}")
        series = await self.provider.get_daily_aggregates(start=start, end=end)

        if len(series) == 0:
            logger.warning("No daily aggregates found for the requested range")

        return compute_report(series, self.settings, fixed_cost=fixed_cost)
