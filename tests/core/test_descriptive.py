"""
Tests for the descriptive statistics core.
"""
import math

import pytest

from revenuelens.core.engine.descriptive import (
    coefficient_of_variation,
    compound_growth_rate,
    confidence_interval,
    mean,
    rolling_stats,
    std_dev,
    z_scores,
)


def test_mean_and_std():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert mean(values) == pytest.approx(5.0)
    # Population standard deviation divides by n
    assert std_dev(values) == pytest.approx(2.0)


def test_neutral_defaults():
    assert mean([]) == 0.0
    assert std_dev([]) == 0.0
    assert std_dev([42.0]) == 0.0
    assert coefficient_of_variation([]) == 0.0
    assert coefficient_of_variation([-1.0, 1.0]) == 0.0


def test_coefficient_of_variation():
    assert coefficient_of_variation([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == pytest.approx(0.4)


def test_z_scores_zero_variance():
    assert z_scores([3.0, 3.0, 3.0]) == [0.0, 0.0, 0.0]


def test_z_scores():
    assert z_scores([1.0, 3.0]) == pytest.approx([-1.0, 1.0])


def test_confidence_interval():
    ci = confidence_interval([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    margin = 1.96 * 2.0 / math.sqrt(8)
    assert ci.margin == pytest.approx(margin)
    assert ci.lower == pytest.approx(5.0 - margin)
    assert ci.upper == pytest.approx(5.0 + margin)
    assert confidence_interval([]).margin == 0.0


def test_rolling_stats_warm_up():
    stats = rolling_stats([1.0, 2.0, 3.0, 4.0], 3)
    assert stats[0].mean is None and stats[1].std is None
    assert stats[2].mean == pytest.approx(2.0)
    assert stats[3].mean == pytest.approx(3.0)
    assert stats[3].cv == pytest.approx(std_dev([2.0, 3.0, 4.0]) / 3.0)


def test_compound_growth_rate():
    assert compound_growth_rate(100.0, 121.0, 2) == pytest.approx(0.1)
    assert compound_growth_rate(0.0, 50.0, 3) == 0.0
    assert compound_growth_rate(10.0, 50.0, 0) == 0.0
