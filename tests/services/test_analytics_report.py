"""
Tests for the AnalyticsService / compute_report orchestration.
"""
from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from revenuelens.core.domain.series import DailySeries
from revenuelens.core.domain.settings import AnalyticsSettings
from revenuelens.core.ports.aggregate_provider import DailyAggregateProvider
from revenuelens.core.services.analytics_report import (
    AnalyticsService,
    compute_report,
    in_sample_ma_error,
    one_step_ema_mape,
    series_cagr,
)


@pytest.fixture
def mock_provider():
    provider = MagicMock(spec=DailyAggregateProvider)
    provider.get_daily_aggregates = AsyncMock()
    return provider


def test_flat_week_end_to_end(flat_series):
    """Seven identical days of 100."""
    report = compute_report(flat_series, fixed_cost=0.0)

    assert report.summary.mean == pytest.approx(100.0)
    assert report.summary.std_dev == 0.0
    assert report.summary.cv == 0.0
    assert report.regression.slope == 0.0
    assert report.regression.r_squared == 0.0
    assert all(v == pytest.approx(100.0) for v in report.moving_average if v is not None)
    assert all(v == pytest.approx(100.0) for v in report.weighted_moving_average if v is not None)
    assert report.exponential_moving_average == pytest.approx([100.0] * 7)
    assert not any(a.is_anomaly for a in report.anomalies)
    assert report.structural_breaks == []
    assert report.health.components.stability == 100
    assert len(report.forecast) == 14


def test_health_inputs_come_from_the_series(flat_series):
    report = compute_report(flat_series, fixed_cost=350.0)
    # 700 revenue against 350 cost -> 50% margin saturates profitability
    assert report.break_even.profit_margin == pytest.approx(0.5)
    assert report.health.components.profitability == 100
    assert report.health.components.growth == 50
    assert report.health.components.forecast_reliability == 100
    assert report.health.score == 88


def test_sensitivity_baseline_uses_average_price(flat_series):
    report = compute_report(flat_series)
    base = report.sensitivity[0]
    # mean revenue 100 over mean quantity 50 -> price 2
    assert base.estimated_revenue == pytest.approx(100.0)
    assert len(report.sensitivity) == 7


def test_short_history_skips_analytics():
    series = DailySeries.from_values([date(2024, 1, 1), date(2024, 1, 2)], [10.0, 20.0], [1, 2])
    report = compute_report(series)
    assert report.summary.days == 2
    assert report.regression is None
    assert report.decomposition == []
    assert report.forecast == []
    assert len(report.sensitivity) == 7


def test_forecast_requires_minimum_history():
    dates = [date(2024, 1, 1) + timedelta(days=i) for i in range(5)]
    report = compute_report(DailySeries.from_values(dates, [10.0, 12.0, 11.0, 13.0, 12.0]))
    assert len(report.decomposition) == 5
    assert report.forecast == []


def test_settings_drive_the_report(weekly_series):
    settings = AnalyticsSettings(forecast_periods=3, max_lag=2, forecasting_window=4)
    report = compute_report(weekly_series, settings)
    assert len(report.forecast) == 3
    assert report.forecast[0].date == weekly_series.dates[-1] + timedelta(days=1)
    assert [p.lag for p in report.autocorrelation] == [1, 2]
    assert report.moving_average[:3] == [None, None, None]
    assert report.moving_average[3] is not None


def test_weekday_correlation_and_quantity_correlation(weekly_series):
    report = compute_report(weekly_series)
    # quantities are revenue / 2 truncated
    assert report.correlations.quantity_revenue == pytest.approx(1.0, abs=1e-3)
    assert -1.0 <= report.correlations.weekday_revenue <= 1.0


def test_empty_series():
    report = compute_report(DailySeries())
    assert report.summary.days == 0
    assert report.summary.total_revenue == 0
    assert report.health.components.forecast_reliability == 60


def test_series_cagr_treats_zero_as_one():
    assert series_cagr([0.0, 4.0]) == pytest.approx(1.0)
    assert series_cagr([5.0]) == 0.0


def test_one_step_ema_mape():
    assert one_step_ema_mape([100.0], 0.3) == 20.0
    # yesterday's EMA 100 against today's 200 -> 50%
    assert one_step_ema_mape([100.0, 200.0], 0.3) == pytest.approx(50.0)


def test_in_sample_ma_error_alignment():
    metrics = in_sample_ma_error([1.0, 2.0, 3.0, 5.0], [None, 1.5, 2.5, 4.0])
    assert metrics.mae == pytest.approx((0.5 + 0.5 + 1.0) / 3)
    assert in_sample_ma_error([1.0], [1.0]).mae == 0.0


@pytest.mark.asyncio
async def test_build_report_fetches_range(mock_provider, flat_series):
    mock_provider.get_daily_aggregates.return_value = flat_series
    service = AnalyticsService(mock_provider)

    report = await service.build_report(start=date(2024, 1, 1), end=date(2024, 1, 7), fixed_cost=10.0)

    mock_provider.get_daily_aggregates.assert_awaited_once_with(start=date(2024, 1, 1), end=date(2024, 1, 7))
    assert report.summary.days == 7
    assert report.break_even.break_even == 10.0


@pytest.mark.asyncio
async def test_build_report_empty_range(mock_provider):
    mock_provider.get_daily_aggregates.return_value = DailySeries()
    service = AnalyticsService(mock_provider)

    report = await service.build_report()

    assert report.summary.days == 0
    assert report.forecast == []
