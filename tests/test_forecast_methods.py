"""Tests for the forecast method strategies."""

import numpy as np
import pytest

from projection_core.exceptions import ConfigError
from projection_core.forecasting.models import (
    ExponentialMethod,
    LinearMethod,
    ManualGrowthMethod,
    SeasonalMethod,
    WeightedAverageMethod,
    get_forecast_method,
)
from projection_core.forecasting.models.moving_average import weighted_moving_average
from projection_core.forecasting.trend import TrendEstimate, fit_trend
from projection_core.forecasting.types import ForecastMethodName

FLAT = TrendEstimate(slope=0.0, intercept=0.0)


def test_linear_continues_the_line() -> None:
    """Test that step i lands at index n + i - 1 of the fitted line."""
    values = np.array([100.0, 110.0, 120.0, 130.0])

    forecast = LinearMethod().forecast(values, fit_trend(values), steps=3)

    assert forecast == pytest.approx([140.0, 150.0, 160.0])


def test_linear_reproduces_synthetic_line() -> None:
    """Test a perfectly linear series v[i] = a + b*i for every forecast step."""
    a, b, n = 250.0, -3.5, 10
    values = np.array([a + b * i for i in range(n)])

    forecast = LinearMethod().forecast(values, fit_trend(values), steps=5)

    assert forecast == pytest.approx([a + b * (n + i - 1) for i in range(1, 6)])


def test_linear_clamps_negative_predictions() -> None:
    """Test that a falling line is clamped at zero."""
    values = np.array([30.0, 20.0, 10.0])

    forecast = LinearMethod().forecast(values, fit_trend(values), steps=3)

    assert forecast == [0.0, 0.0, 0.0]


def test_exponential_two_points() -> None:
    """Test compounding the overall growth rate from the last value."""
    values = np.array([100.0, 121.0])

    forecast = ExponentialMethod().forecast(values, fit_trend(values), steps=2)

    assert forecast[0] == pytest.approx(146.41)
    assert forecast[1] == pytest.approx(121.0 * 1.21**2)


def test_exponential_zero_first_value_is_flat() -> None:
    """Test that a zero starting value disables growth."""
    values = np.array([0.0, 50.0, 80.0])

    forecast = ExponentialMethod().forecast(values, fit_trend(values), steps=3)

    assert forecast == pytest.approx([80.0, 80.0, 80.0])


def test_weighted_moving_average_weights() -> None:
    """Test that the most recent value carries the largest weight."""
    assert weighted_moving_average(np.array([100.0, 110.0, 120.0, 130.0])) == pytest.approx(
        (110.0 * 1 + 120.0 * 2 + 130.0 * 3) / 6
    )
    assert weighted_moving_average(np.array([10.0, 40.0])) == pytest.approx((10.0 + 80.0) / 3)


def test_weighted_average_method_applies_trend_nudge() -> None:
    """Test the (1 + slope * i * 0.1) adjustment."""
    values = np.array([100.0, 110.0, 120.0, 130.0])
    level = (110.0 + 240.0 + 390.0) / 6

    forecast = WeightedAverageMethod().forecast(values, fit_trend(values), steps=2)

    assert forecast[0] == pytest.approx(level * (1 + 10.0 * 1 * 0.1))
    assert forecast[1] == pytest.approx(level * (1 + 10.0 * 2 * 0.1))


def test_seasonal_reuses_value_from_one_year_back() -> None:
    """Test that each step reads the actual twelve months before it."""
    values = np.arange(1.0, 13.0)  # 12 months: 1..12

    forecast = SeasonalMethod().forecast(values, FLAT, steps=13)

    assert forecast[0] == pytest.approx(1.0)
    assert forecast[11] == pytest.approx(12.0)
    # Step 13 is 24 months after the first actual; no history one year back
    assert forecast[12] == pytest.approx(6.5)


def test_seasonal_short_history_uses_mean() -> None:
    """Test the average fallback with less than a year of history."""
    values = np.array([10.0, 20.0, 30.0, 40.0])

    forecast = SeasonalMethod().forecast(values, TrendEstimate(slope=2.0, intercept=0.0), steps=2)

    assert forecast == pytest.approx([25.0 * 1.2, 25.0 * 1.2])


def test_manual_growth_from_assumptions() -> None:
    """Test compounding a user-supplied percentage."""
    values = np.array([100.0, 100.0, 200.0])
    method = ManualGrowthMethod.from_assumptions({"growthRate": 10.0})

    forecast = method.forecast(values, fit_trend(values), steps=2)

    assert forecast == pytest.approx([220.0, 242.0])


def test_manual_growth_defaults_to_zero() -> None:
    """Test that a missing growth rate keeps the last value."""
    values = np.array([100.0, 150.0, 200.0])

    forecast = ManualGrowthMethod.from_assumptions({}).forecast(values, FLAT, steps=3)

    assert forecast == pytest.approx([200.0, 200.0, 200.0])


def test_manual_growth_negative_rate() -> None:
    """Test a shrinking manual projection."""
    values = np.array([100.0, 100.0, 100.0])

    forecast = ManualGrowthMethod(growth_rate=-50.0).forecast(values, FLAT, steps=2)

    assert forecast == pytest.approx([50.0, 25.0])


@pytest.mark.parametrize(
    "name,expected_type",
    [
        (ForecastMethodName.LINEAR, LinearMethod),
        (ForecastMethodName.EXPONENTIAL, ExponentialMethod),
        (ForecastMethodName.WEIGHTED_AVERAGE, WeightedAverageMethod),
        (ForecastMethodName.SEASONAL, SeasonalMethod),
        (ForecastMethodName.MANUAL, ManualGrowthMethod),
        ("weighted_average", WeightedAverageMethod),
    ],
)
def test_get_forecast_method(name, expected_type) -> None:
    """Test resolving every method name."""
    assert isinstance(get_forecast_method(name), expected_type)


def test_get_forecast_method_passes_assumptions() -> None:
    """Test that the manual method receives custom assumptions."""
    method = get_forecast_method(ForecastMethodName.MANUAL, {"growthRate": 7.5})

    assert method.growth_rate == 7.5


def test_get_forecast_method_unknown() -> None:
    """Test that unknown names are rejected."""
    with pytest.raises(ConfigError, match="Unknown forecast method"):
        get_forecast_method("arima")
