"""Straight-line extrapolation of the fitted trend."""

from __future__ import annotations

import numpy as np

from projection_core.forecasting.models.base import ForecastMethod
from projection_core.forecasting.trend import TrendEstimate
from projection_core.forecasting.types import ForecastMethodName


class LinearMethod(ForecastMethod):
    """Extends the OLS line past the last historical step.

    Step ``i`` sits at index ``n + i - 1`` on the line, so a perfectly linear
    history is continued without a gap.
    """

    name = ForecastMethodName.LINEAR

    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        return trend.value_at(len(values) + step - 1)
