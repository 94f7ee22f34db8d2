"""Read-side aggregates built from forecasts.

Revenue/expense/burn-rate summaries and quick projections that return only
the projected months. These consume engine output; they never change it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from projection_core.forecasting.api import ForecastResult, generate
from projection_core.forecasting.config import MAX_HISTORICAL_MONTHS, MIN_HISTORY_POINTS
from projection_core.forecasting.data.preparation import to_data_points, to_monthly_series
from projection_core.forecasting.data.provider import HistoricalSeriesProvider
from projection_core.forecasting.types import (
    ForecastConfig,
    ForecastDataPoint,
    ForecastMethodName,
    MonthlyDataPoint,
    SeriesType,
    Trend,
)

logger = logging.getLogger(__name__)

# Lookback used by quick projections
QUICK_LOOKBACK_MONTHS = 12


@dataclass(frozen=True)
class SeriesSummary:
    """Monthly averages of one forecast.

    Attributes:
        current: Average historical month.
        forecast: Average projected month.
        growth_rate: Average monthly growth over the history, percent.
        trend: Trend of the forecast.
    """

    current: float = 0.0
    forecast: float = 0.0
    growth_rate: float = 0.0
    trend: Trend = Trend.STABLE


@dataclass(frozen=True)
class BurnRateSummary:
    current: float
    forecast: float
    trend: Trend


@dataclass(frozen=True)
class ForecastSummary:
    revenue: SeriesSummary
    expenses: SeriesSummary
    burn_rate: BurnRateSummary


def summarize_series(result: Optional[ForecastResult]) -> SeriesSummary:
    """Average a forecast per month; a missing forecast gives zeros."""
    if result is None:
        return SeriesSummary()
    return SeriesSummary(
        current=result.total_historical / result.config.historical_months,
        forecast=result.total_forecast / result.config.forecast_months,
        growth_rate=result.average_growth_rate,
        trend=result.trend,
    )


def summarize_forecasts(
    revenue: Optional[ForecastResult],
    expenses: Optional[ForecastResult],
) -> ForecastSummary:
    """Combine the active revenue and expense forecasts of an organization.

    Burn rate is expenses minus revenue. Its trend compares the projected
    monthly burn with the current one.

    Args:
        revenue: Active revenue forecast, or None.
        expenses: Active expense forecast, or None.

    Returns:
        ForecastSummary.
    """
    revenue_summary = summarize_series(revenue)
    expense_summary = summarize_series(expenses)

    current_burn = expense_summary.current - revenue_summary.current
    forecast_burn = expense_summary.forecast - revenue_summary.forecast
    if forecast_burn > current_burn:
        burn_trend = Trend.INCREASING
    elif forecast_burn < current_burn:
        burn_trend = Trend.DECREASING
    else:
        burn_trend = Trend.STABLE

    return ForecastSummary(
        revenue=revenue_summary,
        expenses=expense_summary,
        burn_rate=BurnRateSummary(current=current_burn, forecast=forecast_burn, trend=burn_trend),
    )


def project_series(
    series: Sequence[MonthlyDataPoint],
    months: int = 12,
    method: ForecastMethodName = ForecastMethodName.LINEAR,
    series_type: SeriesType = SeriesType.REVENUE,
) -> List[ForecastDataPoint]:
    """Project a series and return only the projected months.

    Returns:
        Projected data points, or an empty list when the series is shorter
        than the engine minimum.
    """
    if len(series) < MIN_HISTORY_POINTS:
        logger.info(f"Skipping projection: only {len(series)} months of history")
        return []

    config = ForecastConfig(
        series_type=series_type,
        historical_months=min(len(series), MAX_HISTORICAL_MONTHS),
        forecast_months=months,
        method=method,
    )
    return generate(config, series).projected_points


def build_burn_rate_series(
    revenue: Sequence[MonthlyDataPoint],
    expenses: Sequence[MonthlyDataPoint],
) -> List[MonthlyDataPoint]:
    """Monthly expenses minus revenue over the months both series cover."""
    aligned = pd.concat(
        [
            to_monthly_series(revenue).rename("revenue"),
            to_monthly_series(expenses).rename("expenses"),
        ],
        axis=1,
        join="inner",
    )
    if aligned.empty:
        return []
    return to_data_points(aligned["expenses"] - aligned["revenue"])


def forecast_revenue(
    provider: HistoricalSeriesProvider, organization_id: str, months: int = 12
) -> List[ForecastDataPoint]:
    history = provider.fetch_historical_series(
        organization_id, SeriesType.REVENUE, QUICK_LOOKBACK_MONTHS
    )
    return project_series(history, months=months, series_type=SeriesType.REVENUE)


def forecast_expenses(
    provider: HistoricalSeriesProvider, organization_id: str, months: int = 12
) -> List[ForecastDataPoint]:
    history = provider.fetch_historical_series(
        organization_id, SeriesType.EXPENSE, QUICK_LOOKBACK_MONTHS
    )
    return project_series(history, months=months, series_type=SeriesType.EXPENSE)


def forecast_burn_rate(
    provider: HistoricalSeriesProvider, organization_id: str, months: int = 12
) -> List[ForecastDataPoint]:
    """Linear projection of monthly burn (expenses minus revenue).

    Projected burn is clamped at 0 like every other projection, so months
    where revenue is expected to exceed expenses show no burn.
    """
    revenue = provider.fetch_historical_series(
        organization_id, SeriesType.REVENUE, QUICK_LOOKBACK_MONTHS
    )
    expenses = provider.fetch_historical_series(
        organization_id, SeriesType.EXPENSE, QUICK_LOOKBACK_MONTHS
    )
    return project_series(build_burn_rate_series(revenue, expenses), months=months)
