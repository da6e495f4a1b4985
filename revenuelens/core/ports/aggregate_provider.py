"""
DailyAggregateProvider Port - Interface for sourcing the daily revenue series.

Implementations roll raw transactions up into one row per calendar day. The
engine only ever sees the aggregated series, never individual transactions.
"""

from abc import ABC, abstractmethod
from datetime import date

from revenuelens.core.domain.series import DailySeries


class DailyAggregateProvider(ABC):
    """
    Abstract interface for daily aggregate sources.

    Implementations:
    - DataFrameAggregateProvider: in-memory pandas transaction frame
    """

    @abstractmethod
    async def get_daily_aggregates(
        self,
        start: date | None = None,
        end: date | None = None,
    ) -> DailySeries:
        """
        Get the ordered daily aggregate series for a date range.

        Args:
            start: First day to include (inclusive), None for unbounded
            end: Last day to include (inclusive), None for unbounded

        Returns:
            DailySeries with one entry per day that had at least one transaction
        """
        ...
