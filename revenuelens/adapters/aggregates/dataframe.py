"""
DataFrame Aggregate Provider - Rolls a pandas transaction frame up into days.

Expected columns: 'date', 'quantity' and either 'total_revenue' or
'unit_price' (revenue is then quantity * unit_price).
"""

import logging
from datetime import date

import pandas as pd

from revenuelens.core.domain.series import DailyAggregate, DailySeries
from revenuelens.core.ports.aggregate_provider import DailyAggregateProvider

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "quantity")


def _normalize(transactions: pd.DataFrame) -> pd.DataFrame:
    missing = [c for c in REQUIRED_COLUMNS if c not in transactions.columns]
    if missing:
        raise ValueError(f"Transactions missing required columns: {missing}")
    if "total_revenue" not in transactions.columns and "unit_price" not in transactions.columns:
        raise ValueError("Transactions need a 'total_revenue' or 'unit_price' column")

    frame = transactions.copy()
    frame["date"] = pd.to_datetime(frame["date"]).dt.date
    for column in ("quantity", "unit_price", "total_revenue"):
        if column in frame.columns:
            frame[column] = pd.to_numeric(frame[column], errors="coerce")

    if "total_revenue" not in frame.columns:
        frame["total_revenue"] = frame["quantity"] * frame["unit_price"]
    elif "unit_price" in frame.columns:
        # Rows entered without a total fall back to quantity * unit_price
        frame["total_revenue"] = frame["total_revenue"].fillna(frame["quantity"] * frame["unit_price"])
    return frame


def aggregate_transactions(
    transactions: pd.DataFrame,
    start: date | None = None,
    end: date | None = None,
) -> DailySeries:
    """
    Sum revenue and quantity per calendar day.

    Args:
        transactions: One row per transaction
        start: First day to include (inclusive)
        end: Last day to include (inclusive)

    Returns:
        DailySeries sorted by date; days without transactions are absent
    """
    if transactions.empty:
        return DailySeries()

    frame = _normalize(transactions)
    if start is not None:
        frame = frame[frame["date"] >= start]
    if end is not None:
        frame = frame[frame["date"] <= end]
    if frame.empty:
        return DailySeries()

    daily = (
        frame.groupby("date", sort=True)
        .agg(revenue=("total_revenue", "sum"), quantity=("quantity", "sum"))
        .reset_index()
    )
    logger.info(f"Aggregated {len(frame)} transactions into {len(daily)} days")

    return DailySeries([
        DailyAggregate(date=row.date, revenue=float(row.revenue), quantity=int(row.quantity))
        for row in daily.itertuples(index=False)
    ])


class DataFrameAggregateProvider(DailyAggregateProvider):
    """
    Daily aggregate provider backed by an in-memory transaction DataFrame.
    """

    def __init__(self, transactions: pd.DataFrame):
        self.transactions = transactions

    @classmethod
    def from_records(cls, records: list[dict]) -> "DataFrameAggregateProvider":
        return cls(pd.DataFrame.from_records(records))

    async def get_daily_aggregates(
        self,
        start: date | None = None,
        end: date | None = None,
    ) -> DailySeries:
        return aggregate_transactions(self.transactions, start=start, end=end)
