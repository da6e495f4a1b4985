"""
Sensitivity Simulator - Price/quantity what-if scenarios and break-even figures.

Revenue is modelled as price * quantity with price and quantity perturbed
independently; costs are treated as fixed for the period.
"""

from revenuelens.core.domain.result import BreakEvenResult, SensitivityScenario

# (label, price change, quantity change) as fractions
SCENARIOS: tuple[tuple[str, float, float], ...] = (
    ("Base", 0.0, 0.0),
    ("+5% Price", 0.05, 0.0),
    ("-5% Price", -0.05, 0.0),
    ("+10% Qty", 0.0, 0.10),
    ("-10% Qty", 0.0, -0.10),
    ("+5% Price, +10% Qty", 0.05, 0.10),
    ("-5% Price, -10% Qty", -0.05, -0.10),
)


def sensitivity_simulation(
    base_revenue: float,
    base_quantity: float,
    base_price: float,
    fixed_cost: float = 0.0,
) -> list[SensitivityScenario]:
    """
    Apply the fixed scenario catalog to a baseline.

    `base_revenue` is accepted for the caller's record only; every scenario
    revenue, Base included, is recomputed from price and quantity.
    """
    results = []
    for label, price_delta, qty_delta in SCENARIOS:
        revenue = base_price * (1 + price_delta) * base_quantity * (1 + qty_delta)
        results.append(SensitivityScenario(
            scenario=label,
            price_change=price_delta * 100,
            quantity_change=qty_delta * 100,
            estimated_revenue=revenue,
            estimated_profit=revenue - fixed_cost,
        ))
    return results


def break_even_analysis(revenue: float, total_cost: float) -> BreakEvenResult:
    """Profit, margin (fraction) and surplus/deficit against a fixed cost base."""
    profit = revenue - total_cost
    return BreakEvenResult(
        profit=profit,
        profit_margin=profit / revenue if revenue > 0 else 0.0,
        surplus_deficit=profit,
        break_even=total_cost,
    )


def profit_margin(revenue: float, cost: float) -> float:
    """Margin in percent; 0.0 when there is no revenue."""
    if revenue <= 0:
        return 0.0
    return (revenue - cost) / revenue * 100
