import logging
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from revenuelens.adapters.aggregates.dataframe import DataFrameAggregateProvider
from revenuelens.adapters.config.settings_loader import load_settings
from revenuelens.core.engine.health import enterprise_health_index
from revenuelens.core.engine.sensitivity import sensitivity_simulation
from revenuelens.core.services.analytics_report import AnalyticsService

# Configuration (Load from YAML with Env Overrides)
settings = load_settings()

# Logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

__version__ = "0.1.0"


class TransactionIn(BaseModel):
    """A single sales transaction as submitted by the entry layer."""

    date: date
    quantity: int = Field(ge=0)
    unit_price: float | None = Field(default=None, ge=0)
    total_revenue: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _has_revenue(self):
        if self.unit_price is None and self.total_revenue is None:
            raise ValueError("Either unit_price or total_revenue is required")
        return self


class ReportRequest(BaseModel):
    transactions: list[TransactionIn] = Field(default_factory=list)
    fixed_cost: float = 0.0
    start: date | None = None
    end: date | None = None


class SensitivityRequest(BaseModel):
    base_revenue: float
    base_quantity: float
    base_price: float
    fixed_cost: float = 0.0


class HealthRequest(BaseModel):
    cagr: float
    cv: float
    profit_margin: float
    mape: float


# FastAPI Application
app = FastAPI(title="RevenueLens")


@app.get("/health")
def health_check():
    return {"status": "ok", "version": __version__}


@app.post("/analytics/report")
async def analytics_report(request: ReportRequest):
    """
    Compute the full analytics report for the submitted transactions.
    """
    provider = DataFrameAggregateProvider.from_records(
        [t.model_dump() for t in request.transactions]
    )
    service = AnalyticsService(provider, settings.analytics)
    try:
        report = await service.build_report(
            start=request.start,
            end=request.end,
            fixed_cost=request.fixed_cost,
        )
    except ValueError as e:
        logger.warning(f"Rejected report request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return asdict(report)


@app.post("/analytics/sensitivity")
def analytics_sensitivity(request: SensitivityRequest):
    """
    Run the fixed price/quantity scenario catalog against a baseline.
    """
    scenarios = sensitivity_simulation(
        request.base_revenue,
        request.base_quantity,
        request.base_price,
        request.fixed_cost,
    )
    return [asdict(s) for s in scenarios]


@app.post("/analytics/health-index")
def analytics_health_index(request: HealthRequest):
    return asdict(enterprise_health_index(
        cagr=request.cagr,
        cv=request.cv,
        profit_margin=request.profit_margin,
        mape=request.mape,
    ))
