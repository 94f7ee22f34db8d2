"""Base interface for forecast methods.

Every projection method turns a historical series plus its fitted trend into
one prediction per forecast step. Methods hold no state beyond their own
parameters, so one instance can be reused across runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from projection_core.forecasting.trend import TrendEstimate
from projection_core.forecasting.types import ForecastMethodName


class ForecastMethod(ABC):
    """Abstract base class for forecast methods.

    Subclasses implement predict_step(); forecast() applies it to each step
    of the horizon and clamps the result to be non-negative.
    """

    name: ForecastMethodName

    @abstractmethod
    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        """Predict the value for one forecast step.

        Args:
            values: Historical values, oldest first.
            trend: Trend line fitted over ``values``.
            step: 1-based forecast step (1 is the month after the last actual).

        Returns:
            Raw prediction, which may be negative before clamping.
        """
        pass

    def forecast(self, values: np.ndarray, trend: TrendEstimate, steps: int) -> List[float]:
        """Predict every step from 1 to ``steps``.

        Args:
            values: Historical values, oldest first.
            trend: Trend line fitted over ``values``.
            steps: Number of months to project.

        Returns:
            List of non-negative predictions, one per step.
        """
        history = np.asarray(values, dtype=float)
        return [max(0.0, float(self.predict_step(history, trend, i))) for i in range(1, steps + 1)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
