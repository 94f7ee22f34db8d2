"""Tests for in-sample accuracy metrics."""

import math

import pytest

from projection_core.forecasting.accuracy import evaluate_accuracy
from projection_core.forecasting.trend import TrendEstimate, fit_trend


def test_perfect_fit() -> None:
    """Test that an exact line scores zero error."""
    values = [50.0 + 7.0 * i for i in range(8)]

    metrics = evaluate_accuracy(values, fit_trend(values))

    assert metrics.mape == pytest.approx(0.0, abs=1e-9)
    assert metrics.rmse == pytest.approx(0.0, abs=1e-9)
    assert metrics.accuracy == pytest.approx(100.0)


def test_constant_offset() -> None:
    """Test MAPE and RMSE against a line that misses by 10 everywhere."""
    metrics = evaluate_accuracy([100.0] * 4, TrendEstimate(slope=0.0, intercept=110.0))

    assert metrics.mape == pytest.approx(10.0)
    assert metrics.rmse == pytest.approx(10.0)
    assert metrics.accuracy == pytest.approx(90.0)


def test_zero_actuals_excluded_from_mape() -> None:
    """Test that zero months are skipped for MAPE but count for RMSE."""
    metrics = evaluate_accuracy([0.0, 100.0], TrendEstimate(slope=110.0, intercept=0.0))

    assert metrics.mape == pytest.approx(10.0)
    assert metrics.rmse == pytest.approx(math.sqrt(50.0))


def test_all_zero_history() -> None:
    """Test that an all-zero series gives MAPE 0 rather than NaN."""
    values = [0.0, 0.0, 0.0]

    metrics = evaluate_accuracy(values, fit_trend(values))

    assert metrics.mape == 0.0
    assert metrics.rmse == 0.0
    assert metrics.accuracy == 100.0


def test_accuracy_floored_at_zero() -> None:
    """Test that a very poor fit reports zero accuracy."""
    metrics = evaluate_accuracy([1.0, 1.0, 1.0], TrendEstimate(slope=0.0, intercept=500.0))

    assert metrics.mape > 100.0
    assert metrics.accuracy == 0.0
