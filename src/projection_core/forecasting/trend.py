"""Trend estimation for monthly series.

The trend line is an ordinary least squares fit over the step index of the
series (0..n-1), not over calendar months. Gaps in the input therefore compress
the time axis; use ``build_monthly_series`` to zero-fill before fitting when
that matters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from projection_core.forecasting.config import SEASONAL_PERIOD, TREND_THRESHOLD
from projection_core.forecasting.types import Seasonality, Trend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendEstimate:
    """Fitted trend line ``value = intercept + slope * step``."""

    slope: float
    intercept: float

    def value_at(self, step: float) -> float:
        return self.intercept + self.slope * step


def fit_trend(values: Sequence[float]) -> TrendEstimate:
    """Fit an OLS line over the series using the closed-form sums.

    Args:
        values: Series values ordered by time step.

    Returns:
        TrendEstimate. Both coefficients are 0 when the series has fewer than
        two points or contains a non-finite value.
    """
    y = np.asarray(values, dtype=float)
    n = len(y)
    if n == 0 or not np.all(np.isfinite(y)):
        logger.warning(f"Degenerate series ({n} points or non-finite values), using flat trend")
        return TrendEstimate(slope=0.0, intercept=0.0)

    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        logger.warning(f"Degenerate series ({n} points), using flat trend")
        return TrendEstimate(slope=0.0, intercept=0.0)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    logger.debug(f"Fitted trend over {n} points: slope={slope:.6f}, intercept={intercept:.6f}")
    return TrendEstimate(slope=float(slope), intercept=float(intercept))


def classify_trend(slope: float) -> Trend:
    """Map a slope onto increasing / decreasing / stable."""
    if slope > TREND_THRESHOLD:
        return Trend.INCREASING
    if slope < -TREND_THRESHOLD:
        return Trend.DECREASING
    return Trend.STABLE


def detect_seasonality(num_points: int) -> Seasonality:
    """Flag seasonality when at least one full cycle of history is present.

    This is a presence check on the history length, not a statistical test.
    """
    if num_points >= SEASONAL_PERIOD:
        return Seasonality.DETECTED
    return Seasonality.NOT_DETECTED


def overall_growth_rate(values: Sequence[float]) -> float:
    """Average per-step growth from the first to the last value.

    Computed as ``(last - first) / first / (n - 1)``.

    Returns:
        Growth rate as a fraction. 0 when fewer than two values are given or
        the first value is 0.
    """
    n = len(values)
    if n < 2:
        return 0.0
    first = float(values[0])
    last = float(values[-1])
    if first == 0:
        logger.debug("First value is 0, growth rate defaults to 0")
        return 0.0
    return (last - first) / first / (n - 1)
