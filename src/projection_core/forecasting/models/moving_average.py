"""Weighted moving average with a trend nudge."""

from __future__ import annotations

import numpy as np

from projection_core.forecasting.config import TREND_NUDGE, WEIGHTED_AVERAGE_PERIODS
from projection_core.forecasting.models.base import ForecastMethod
from projection_core.forecasting.trend import TrendEstimate
from projection_core.forecasting.types import ForecastMethodName


def weighted_moving_average(values: np.ndarray, periods: int = WEIGHTED_AVERAGE_PERIODS) -> float:
    """Linearly weighted average of the trailing ``periods`` values.

    The oldest value in the window gets weight 1 and the most recent gets
    weight ``k`` where ``k = min(periods, len(values))``.
    """
    recent = np.asarray(values, dtype=float)[-min(periods, len(values)):]
    weights = np.arange(1, len(recent) + 1, dtype=float)
    return float(np.dot(recent, weights) / weights.sum())


class WeightedAverageMethod(ForecastMethod):
    """Holds the weighted recent level and tilts it by the trend slope."""

    name = ForecastMethodName.WEIGHTED_AVERAGE

    def __init__(self, periods: int = WEIGHTED_AVERAGE_PERIODS) -> None:
        self.periods = periods

    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        level = weighted_moving_average(values, self.periods)
        return level * (1.0 + trend.slope * step * TREND_NUDGE)
