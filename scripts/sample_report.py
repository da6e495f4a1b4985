"""
Sample Report Script for RevenueLens.
Generates synthetic daily transactions and posts them to a running API.
"""
import asyncio
import math
import random
from datetime import date, timedelta
import httpx

API_URL = "http://localhost:8000"
PRICES = {"plain": 1.20, "special": 2.50}


def generate_transactions(days=42, spike_at=30, seed=7):
    """
    Weekly-seasonal demand with mild growth and one spike day.
    """
    rng = random.Random(seed)
    start = date.today() - timedelta(days=days)
    transactions = []

    for i in range(days):
        day = start + timedelta(days=i)
        # Skip some Sundays to leave gaps, like a shop closed on those days
        if day.weekday() == 6 and rng.random() < 0.5:
            continue

        base = 60 + 0.5 * i + 15 * math.sin(2 * math.pi * day.weekday() / 7)
        if i == spike_at:
            base *= 2.5  # SPIKE

        for item, price in PRICES.items():
            qty = max(0, int(base * (0.7 if item == "plain" else 0.3) + rng.uniform(-5, 5)))
            transactions.append({"date": day.isoformat(), "quantity": qty, "unit_price": price})
    return transactions


async def post_report(fixed_cost=1500.0):
    transactions = generate_transactions()
    print(f"Posting {len(transactions)} transactions to {API_URL}/analytics/report...")

    async with httpx.AsyncClient() as client:
        response = await client.post(
            f"{API_URL}/analytics/report",
            json={"transactions": transactions, "fixed_cost": fixed_cost},
            timeout=30.0,
        )

    if response.status_code != 200:
        print(f"Report failed: {response.status_code} {response.text}")
        return

    report = response.json()
    health = report["health"]
    print(f"Health index: {health['score']}/100 ({health['classification']})")
    print(f"Components: {health['components']}")
    flagged = [a["date"] for a in report["anomalies"] if a["is_anomaly"]]
    print(f"Anomalous days: {flagged}")
    print(f"Structural breaks at positions: {report['structural_breaks']}")
    for point in report["forecast"][:7]:
        print(f"  {point['date']}: {point['linear']:.2f} [{point['lower']:.2f}, {point['upper']:.2f}]")

if __name__ == "__main__":
    asyncio.run(post_report())
