"""
Anomaly & Structural-Break Detectors.

Both compare against whole-series statistics from the descriptive core.
"""

from collections.abc import Sequence
from datetime import date

from revenuelens.core.domain.result import AnomalyPoint
from revenuelens.core.engine.descriptive import mean, std_dev, z_scores

BREAK_CONTEXT = 5


def detect_anomalies(
    dates: Sequence[date],
    revenues: Sequence[float],
    threshold: float = 2.0,
) -> list[AnomalyPoint]:
    """
    Flag days whose |z| exceeds `threshold`.

    A zero-variance series has all z = 0 and flags nothing.
    """
    scores = z_scores(revenues)
    return [
        AnomalyPoint(date=d, revenue=r, zscore=z, is_anomaly=abs(z) > threshold)
        for d, r, z in zip(dates, revenues, scores, strict=True)
    ]


def detect_structural_breaks(values: Sequence[float], sensitivity: float = 1.5) -> list[int]:
    """
    Indices where the mean of the 5 preceding points and the mean of the
    5 points starting at the index differ by more than sensitivity * sigma.

    Adjacent flags are not merged, so one real shift usually shows up as a
    run of consecutive indices.
    """
    sigma = std_dev(values)
    breaks = []
    for i in range(BREAK_CONTEXT, len(values) - BREAK_CONTEXT):
        left = values[i - BREAK_CONTEXT:i]
        right = values[i:i + BREAK_CONTEXT]
        if abs(mean(left) - mean(right)) > sensitivity * sigma:
            breaks.append(i)
    return breaks
