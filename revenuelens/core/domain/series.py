"""
Series Domain Model - The daily aggregate series every analytics call consumes.

Uses Pydantic for validation of the individual daily rows.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field


class DailyAggregate(BaseModel):
    """One calendar day of transactions rolled up into revenue and quantity."""

    model_config = ConfigDict(frozen=True)

    date: date
    revenue: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class IndexedDay:
    """Pairs the regression time index with the calendar day it stands for."""

    position: int
    date: date


class DailySeries:
    """
    Ordered-by-date sequence of daily aggregates.

    Days without transactions are absent, so consecutive positions are not
    necessarily consecutive calendar days.
    """

    def __init__(self, days: list[DailyAggregate] | tuple[DailyAggregate, ...] = ()):
        ordered = tuple(sorted(days, key=lambda d: d.date))
        seen = set()
        for day in ordered:
            if day.date in seen:
                raise ValueError(f"Duplicate daily aggregate for {day.date.isoformat()}")
            seen.add(day.date)
        self._days = ordered

    @classmethod
    def from_values(
        cls,
        dates: list[date],
        revenues: list[float],
        quantities: list[int] | None = None,
    ) -> "DailySeries":
        """Build a series from parallel lists."""
        if len(dates) != len(revenues):
            raise ValueError("dates and revenues must have the same length")
        quantities = quantities if quantities is not None else [0] * len(dates)
        return cls([
            DailyAggregate(date=d, revenue=r, quantity=q)
            for d, r, q in zip(dates, revenues, quantities)
        ])

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self):
        return iter(self._days)

    def __getitem__(self, index):
        return self._days[index]

    @property
    def days(self) -> tuple[DailyAggregate, ...]:
        return self._days

    @property
    def dates(self) -> list[date]:
        return [d.date for d in self._days]

    @property
    def revenues(self) -> list[float]:
        return [d.revenue for d in self._days]

    @property
    def quantities(self) -> list[int]:
        return [d.quantity for d in self._days]

    @property
    def weekdays(self) -> list[int]:
        """Weekday number per day, Monday=0."""
        return [d.date.weekday() for d in self._days]

    def indexed_days(self) -> list[IndexedDay]:
        return [IndexedDay(position=i, date=d.date) for i, d in enumerate(self._days)]

    def future_days(self, periods: int) -> list[IndexedDay]:
        """
        Positions and dates following the last observed day.

        Future dates advance one calendar day per step from the last observation.
        """
        if not self._days:
            return []
        n = len(self._days)
        last = self._days[-1].date
        return [
            IndexedDay(position=n + i, date=last + timedelta(days=i + 1))
            for i in range(periods)
        ]
