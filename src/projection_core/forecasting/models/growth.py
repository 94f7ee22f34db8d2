"""Compound growth methods.

Both methods compound a monthly growth rate on top of the last actual value.
They differ only in where the rate comes from: the exponential method derives
it from the history, the manual method takes it from user assumptions.
"""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np

from projection_core.forecasting.models.base import ForecastMethod
from projection_core.forecasting.trend import TrendEstimate, overall_growth_rate
from projection_core.forecasting.types import ForecastMethodName

# Key read from ForecastConfig.custom_assumptions by the manual method
GROWTH_RATE_ASSUMPTION = "growthRate"


def compound(base: float, rate: float, step: int) -> float:
    return base * (1.0 + rate) ** step


class ExponentialMethod(ForecastMethod):
    """Compounds the average historical growth rate from the last value."""

    name = ForecastMethodName.EXPONENTIAL

    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        return compound(float(values[-1]), overall_growth_rate(values), step)


class ManualGrowthMethod(ForecastMethod):
    """Compounds a user-supplied growth rate from the last value.

    Args:
        growth_rate: Monthly growth in percent (5 means +5% per month).
    """

    name = ForecastMethodName.MANUAL

    def __init__(self, growth_rate: float = 0.0) -> None:
        self.growth_rate = float(growth_rate)

    @classmethod
    def from_assumptions(cls, assumptions: Optional[Mapping[str, float]]) -> ManualGrowthMethod:
        """Build the method from ``custom_assumptions``; a missing rate means 0%."""
        rate = (assumptions or {}).get(GROWTH_RATE_ASSUMPTION) or 0.0
        return cls(growth_rate=rate)

    def predict_step(self, values: np.ndarray, trend: TrendEstimate, step: int) -> float:
        return compound(float(values[-1]), self.growth_rate / 100.0, step)

    def __repr__(self) -> str:
        return f"ManualGrowthMethod(growth_rate={self.growth_rate})"
