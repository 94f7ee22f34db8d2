"""Same-month-last-year forecasting."""

from __future__ import annotations

import numpy as np

from projection_core.forecasting.config import SEASONAL_PERIOD, TREND_NUDGE
from projection_core.forecasting.models.base import ForecastMethod
from projection_core.forecasting.trend import TrendEstimate
from projection_core.forecasting.types import ForecastMethodName


class SeasonalMethod(ForecastMethod):
    """Reuses the actual from one seasonal period before the target month.

    The target of step ``i`` sits at index ``n - 1 + i``. When the index one
    period earlier falls inside the history its actual is used; otherwise the
    mean of the history stands in. Either base is scaled by
    ``1 + slope * 0.1``.
    """

    name = ForecastMethodName.SEASONAL

    def __init__(self, period: int = SEASONAL_PERIOD) -> None:
        self.period = period

    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        n = len(values)
        lookback = n - 1 + step - self.period
        if 0 <= lookback < n:
            base = float(values[lookback])
        else:
            base = float(np.mean(values))
        return base * (1.0 + trend.slope * TREND_NUDGE)

    def __repr__(self) -> str:
        return f"SeasonalMethod(period={self.period})"
