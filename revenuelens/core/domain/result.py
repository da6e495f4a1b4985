"""
Result Domain Models - Value objects returned by the analytics engine.
"""

from dataclasses import dataclass, field
import datetime


@dataclass(frozen=True)
class RegressionResult:
    """Ordinary least squares fit over the implicit time index 0..n-1."""

    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class DecompositionPoint:
    """Additive split of a single day: revenue == trend + seasonal + residual."""

    date: datetime.date
    revenue: float
    trend: float
    seasonal: float
    residual: float


@dataclass(frozen=True)
class AnomalyPoint:
    """Z-score of a single day against the whole series."""

    date: datetime.date
    revenue: float
    zscore: float
    is_anomaly: bool = False


@dataclass(frozen=True)
class ForecastPoint:
    """
    A single future step.

    The lower/upper band only bounds the linear estimate.
    """

    offset: int
    linear: float
    ma: float
    ema: float
    wma: float
    lower: float
    upper: float
    date: datetime.date | None = None


@dataclass(frozen=True)
class AutocorrelationPoint:
    lag: int
    correlation: float


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float
    margin: float


@dataclass(frozen=True)
class RollingStat:
    """Trailing-window statistics; None until the window fills."""

    index: int
    mean: float | None
    std: float | None
    cv: float | None


@dataclass(frozen=True)
class ErrorMetrics:
    mae: float = 0.0
    mse: float = 0.0
    rmse: float = 0.0
    mape: float = 0.0  # percentage points


@dataclass(frozen=True)
class SensitivityScenario:
    scenario: str
    price_change: float  # percent
    quantity_change: float  # percent
    estimated_revenue: float
    estimated_profit: float


@dataclass(frozen=True)
class BreakEvenResult:
    profit: float
    profit_margin: float  # fraction
    surplus_deficit: float
    break_even: float


@dataclass(frozen=True)
class HealthComponents:
    growth: int
    stability: int
    profitability: int
    forecast_reliability: int


@dataclass(frozen=True)
class HealthIndex:
    """Composite 0-100 score with its four sub-scores."""

    score: int
    components: HealthComponents
    classification: str


@dataclass(frozen=True)
class SummaryStats:
    days: int
    total_revenue: float
    total_quantity: int
    mean: float
    std_dev: float
    cv: float
    cagr: float
    mean_interval: ConfidenceInterval


@dataclass(frozen=True)
class CorrelationSummary:
    weekday_revenue: float = 0.0
    quantity_revenue: float = 0.0


@dataclass(frozen=True)
class AnalyticsReport:
    """Everything computed for one daily series in a single request."""

    summary: SummaryStats
    health: HealthIndex
    break_even: BreakEvenResult
    sensitivity: list[SensitivityScenario]
    regression: RegressionResult | None = None
    decomposition: list[DecompositionPoint] = field(default_factory=list)
    anomalies: list[AnomalyPoint] = field(default_factory=list)
    structural_breaks: list[int] = field(default_factory=list)
    moving_average: list[float | None] = field(default_factory=list)
    exponential_moving_average: list[float] = field(default_factory=list)
    weighted_moving_average: list[float | None] = field(default_factory=list)
    autocorrelation: list[AutocorrelationPoint] = field(default_factory=list)
    rolling: list[RollingStat] = field(default_factory=list)
    correlations: CorrelationSummary = field(default_factory=CorrelationSummary)
    in_sample_error: ErrorMetrics = field(default_factory=ErrorMetrics)
    forecast: list[ForecastPoint] = field(default_factory=list)
