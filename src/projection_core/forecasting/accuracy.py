"""Backtest accuracy of the fitted trend.

The trend line is scored against the same history it was fitted on. The
resulting numbers describe in-sample fit, not predictive skill on unseen
months.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from projection_core.forecasting.trend import TrendEstimate


@dataclass(frozen=True)
class AccuracyMetrics:
    """In-sample error metrics.

    Attributes:
        mape: Mean absolute percentage error, in percent.
        rmse: Root mean squared error, in value units.
        accuracy: ``max(0, 100 - mape)``.
    """

    mape: float
    rmse: float
    accuracy: float


def evaluate_accuracy(values: Sequence[float], trend: TrendEstimate) -> AccuracyMetrics:
    """Score the trend line against the history.

    Months with an actual of 0 are left out of MAPE. If every actual is 0,
    MAPE is 0.

    Args:
        values: Historical values, oldest first.
        trend: Trend fitted over ``values``.

    Returns:
        AccuracyMetrics.
    """
    actual = np.asarray(values, dtype=float)
    if len(actual) == 0:
        return AccuracyMetrics(mape=0.0, rmse=0.0, accuracy=100.0)

    fitted = trend.intercept + trend.slope * np.arange(len(actual), dtype=float)
    residuals = actual - fitted

    nonzero = actual != 0
    if nonzero.any():
        mape = float(np.mean(np.abs(residuals[nonzero] / actual[nonzero])) * 100.0)
    else:
        mape = 0.0
    rmse = float(np.sqrt(np.mean(residuals**2)))

    return AccuracyMetrics(mape=mape, rmse=rmse, accuracy=max(0.0, 100.0 - mape))
