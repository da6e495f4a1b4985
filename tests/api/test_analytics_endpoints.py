from datetime import date, timedelta

from fastapi.testclient import TestClient
from revenuelens.main import app

client = TestClient(app)


def _transactions(days=10, start=date(2024, 1, 1)):
    return [
        {"date": (start + timedelta(days=i)).isoformat(), "quantity": 50, "unit_price": 2.0}
        for i in range(days)
    ]


def test_health_endpoint():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_report_endpoint():
    payload = {"transactions": _transactions(), "fixed_cost": 500.0}

    response = client.post("/analytics/report", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["days"] == 10
    assert data["summary"]["total_revenue"] == 1000.0
    assert data["break_even"]["profit"] == 500.0
    assert len(data["sensitivity"]) == 7
    assert len(data["forecast"]) == 14
    assert data["forecast"][0]["date"] == "2024-01-11"
    # warm-up positions serialize as null
    assert data["moving_average"][0] is None
    assert data["health"]["classification"] in {"Excellent", "Good", "Moderate", "At Risk"}


def test_report_endpoint_date_range():
    payload = {"transactions": _transactions(), "start": "2024-01-03", "end": "2024-01-04"}

    response = client.post("/analytics/report", json=payload)

    assert response.status_code == 200
    assert response.json()["summary"]["days"] == 2


def test_report_endpoint_rejects_transaction_without_price():
    payload = {"transactions": [{"date": "2024-01-01", "quantity": 3}]}

    response = client.post("/analytics/report", json=payload)

    assert response.status_code == 422


def test_report_endpoint_rejects_negative_quantity():
    payload = {"transactions": [{"date": "2024-01-01", "quantity": -3, "unit_price": 1.0}]}

    response = client.post("/analytics/report", json=payload)

    assert response.status_code == 422


def test_sensitivity_endpoint():
    payload = {"base_revenue": 200.0, "base_quantity": 100.0, "base_price": 2.0, "fixed_cost": 50.0}

    response = client.post("/analytics/sensitivity", json=payload)

    assert response.status_code == 200
    scenarios = response.json()
    assert [s["scenario"] for s in scenarios][0] == "Base"
    assert scenarios[0]["estimated_revenue"] == 200.0
    assert scenarios[0]["estimated_profit"] == 150.0
    assert len(scenarios) == 7


def test_health_index_endpoint():
    payload = {"cagr": 0.0, "cv": 0.0, "profit_margin": 0.25, "mape": 0.0}

    response = client.post("/analytics/health-index", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 75
    assert data["components"] == {
        "growth": 50,
        "stability": 100,
        "profitability": 50,
        "forecast_reliability": 100,
    }
    assert data["classification"] == "Excellent"
