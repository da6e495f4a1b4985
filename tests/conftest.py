"""
Pytest configuration and shared series fixtures.
"""
from datetime import date, timedelta

import pytest

from revenuelens.core.domain.series import DailySeries

START = date(2024, 1, 1)  # a Monday


def consecutive_dates(n, start=START):
    return [start + timedelta(days=i) for i in range(n)]


@pytest.fixture
def flat_series():
    """Seven identical days of 100 revenue."""
    return DailySeries.from_values(consecutive_dates(7), [100.0] * 7, [50] * 7)


@pytest.fixture
def weekly_series():
    """Four weeks of a weekend-heavy pattern on a rising trend."""
    pattern = [80, 85, 90, 95, 110, 140, 120]
    revenues = [pattern[i % 7] + 2.0 * i for i in range(28)]
    quantities = [int(r / 2) for r in revenues]
    return DailySeries.from_values(consecutive_dates(28), revenues, quantities)
