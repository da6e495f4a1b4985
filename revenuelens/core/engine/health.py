"""
Health Index Calculator - Composite 0-100 score.

Equal 25% weights over growth, stability, profitability and forecast
reliability, each sub-score clamped to [0, 100].
"""

import math

from revenuelens.core.domain.result import HealthComponents, HealthIndex

HEALTH_BANDS: tuple[tuple[int, str], ...] = (
    (75, "Excellent"),
    (60, "Good"),
    (45, "Moderate"),
)
AT_RISK = "At Risk"


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def classify_health(score: float) -> str:
    for floor, label in HEALTH_BANDS:
        if score >= floor:
            return label
    return AT_RISK


def enterprise_health_index(cagr: float, cv: float, profit_margin: float, mape: float) -> HealthIndex:
    """
    Args:
        cagr: Compound growth rate (0.05 == 5%)
        cv: Coefficient of variation of daily revenue
        profit_margin: Profit as a fraction of revenue
        mape: Forecast MAPE in percentage points

    Returns:
        HealthIndex with the rounded score, rounded components and band label
    """
    growth = _clamp(50 + cagr * 100)  # 0% growth -> 50
    stability = _clamp((1 - cv) * 100)
    profitability = _clamp(profit_margin * 200)  # 50% margin saturates
    reliability = _clamp(100 - mape * 2)  # 50% MAPE -> 0

    score = _round_half_up(0.25 * (growth + stability + profitability + reliability))
    return HealthIndex(
        score=score,
        components=HealthComponents(
            growth=_round_half_up(growth),
            stability=_round_half_up(stability),
            profitability=_round_half_up(profitability),
            forecast_reliability=_round_half_up(reliability),
        ),
        classification=classify_health(score),
    )
