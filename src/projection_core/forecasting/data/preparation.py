"""Data preparation utilities for monthly forecasting.

This module converts between ``MonthlyDataPoint`` lists and pandas Series and
fills calendar gaps so the trend is fitted over real months.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import pandas as pd

from projection_core.forecasting.types import MonthlyDataPoint

logger = logging.getLogger(__name__)


def to_monthly_series(points: Sequence[MonthlyDataPoint]) -> pd.Series:
    """Build a Series indexed by month start from data points.

    Args:
        points: Monthly data points in any order.

    Returns:
        Float Series with a month-start DatetimeIndex, sorted ascending.
    """
    if not points:
        return pd.Series(dtype=float)

    index = pd.DatetimeIndex([pd.Timestamp(p.month) for p in points]).to_period("M").to_timestamp()
    series = pd.Series([float(p.value) for p in points], index=index)
    return series.sort_index()


def to_data_points(series: pd.Series) -> List[MonthlyDataPoint]:
    """Convert a month-indexed Series back into data points."""
    return [
        MonthlyDataPoint(month=pd.Timestamp(month).date(), value=float(value))
        for month, value in series.items()
    ]


def build_monthly_series(points: Sequence[MonthlyDataPoint]) -> List[MonthlyDataPoint]:
    """Zero-fill missing months between the first and last observed month.

    Months without ledger activity are treated as zero-value months, so each
    step of the result is exactly one calendar month. Points falling in the
    same month are summed.

    Args:
        points: Monthly data points, possibly with gaps.

    Returns:
        Contiguous, ascending list of data points.
    """
    series = to_monthly_series(points)
    if series.empty:
        return []

    series = series.groupby(level=0).sum()
    month_range = pd.date_range(start=series.index.min(), end=series.index.max(), freq="MS")
    filled = series.reindex(month_range, fill_value=0.0)

    missing = len(filled) - len(series)
    if missing:
        logger.warning(f"Zero-filled {missing} months without activity")

    return to_data_points(filled.fillna(0.0))
