"""Public API for the forecast generation engine.

This module provides the two entry points of the engine, ``generate`` and
``retrain``, operating on in-memory monthly series with no side effects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from projection_core.exceptions import DataQualityError, InsufficientHistoryError
from projection_core.forecasting.accuracy import evaluate_accuracy
from projection_core.forecasting.confidence import estimate_confidence, historical_std
from projection_core.forecasting.config import MIN_HISTORY_POINTS, MONEY_DECIMALS, SLOPE_DECIMALS
from projection_core.forecasting.models import get_forecast_method
from projection_core.forecasting.trend import (
    classify_trend,
    detect_seasonality,
    fit_trend,
    overall_growth_rate,
)
from projection_core.forecasting.types import (
    Confidence,
    ForecastConfig,
    ForecastDataPoint,
    MonthlyDataPoint,
    RetrainParams,
    Seasonality,
    Trend,
)

if TYPE_CHECKING:
    from projection_core.forecasting.data.provider import HistoricalSeriesProvider

logger = logging.getLogger(__name__)


@dataclass
class ForecastResult:
    """Result of a forecast run.

    Attributes:
        config: Configuration the result was computed with.
        data_points: Historical months followed by projected months.
        accuracy: ``max(0, 100 - mape)``; in-sample fit of the trend line.
        mape: Mean absolute percentage error of the trend line, in percent.
        rmse: Root mean squared error of the trend line.
        trend: Direction of the fitted trend.
        trend_slope: Slope of the fitted trend, value per month.
        seasonality: Whether a full seasonal cycle of history is present.
        total_historical: Sum of historical actuals.
        total_forecast: Sum of projected predictions.
        average_growth_rate: Average monthly growth over the history, percent.
        start_date: First historical month.
        end_date: Last projected month.
        forecast_id: Identifier assigned by the caller's store. Kept by retrain.
        last_trained_at: Wall-clock time of the last computation. Not part of
            equality, so identical inputs compare equal.
    """

    config: ForecastConfig
    data_points: List[ForecastDataPoint]
    accuracy: float
    mape: float
    rmse: float
    trend: Trend
    trend_slope: float
    seasonality: Seasonality
    total_historical: float
    total_forecast: float
    average_growth_rate: float
    start_date: date
    end_date: date
    forecast_id: Optional[str] = None
    last_trained_at: Optional[datetime] = field(default=None, compare=False)

    @property
    def historical_points(self) -> List[ForecastDataPoint]:
        return [dp for dp in self.data_points if not dp.is_projected]

    @property
    def projected_points(self) -> List[ForecastDataPoint]:
        return [dp for dp in self.data_points if dp.is_projected]

    def to_dataframe(self) -> pd.DataFrame:
        """Flatten data points into a DataFrame.

        Returns:
            DataFrame with columns: period, actual, predicted, lower_bound,
            upper_bound, confidence, projected
        """
        rows = [
            {
                "period": dp.period,
                "actual": dp.actual,
                "predicted": dp.predicted,
                "lower_bound": dp.lower_bound,
                "upper_bound": dp.upper_bound,
                "confidence": dp.confidence.value,
                "projected": dp.is_projected,
            }
            for dp in self.data_points
        ]
        columns = [
            "period",
            "actual",
            "predicted",
            "lower_bound",
            "upper_bound",
            "confidence",
            "projected",
        ]
        if not rows:
            return pd.DataFrame(columns=columns)

        df = pd.DataFrame(rows, columns=columns)
        df["period"] = pd.to_datetime(df["period"])
        return df


def add_months(month: date, months: int) -> date:
    """Advance a date by whole calendar months."""
    return (pd.Timestamp(month) + pd.DateOffset(months=months)).date()


def _round_money(value: float) -> float:
    return round(float(value), MONEY_DECIMALS)


def _compute(config: ForecastConfig, series: Sequence[MonthlyDataPoint]) -> ForecastResult:
    if len(series) < MIN_HISTORY_POINTS:
        raise InsufficientHistoryError(available=len(series), required=MIN_HISTORY_POINTS)

    values = np.array([point.value for point in series], dtype=float)
    non_finite = np.flatnonzero(~np.isfinite(values))
    if non_finite.size:
        raise DataQualityError(
            f"Historical series contains non-finite values at positions {non_finite.tolist()}"
        )

    trend_estimate = fit_trend(values)
    trend = classify_trend(trend_estimate.slope)
    seasonality = detect_seasonality(len(values))

    data_points: List[ForecastDataPoint] = [
        ForecastDataPoint(
            period=point.month,
            actual=float(point.value),
            predicted=float(point.value),
            lower_bound=float(point.value),
            upper_bound=float(point.value),
            confidence=Confidence.HIGH,
        )
        for point in series
    ]

    method = get_forecast_method(config.method, config.custom_assumptions)
    predictions = method.forecast(values, trend_estimate, config.forecast_months)
    std = historical_std(values)
    last_month = series[-1].month

    for step, predicted in enumerate(predictions, start=1):
        band = estimate_confidence(predicted, std, step)
        data_points.append(
            ForecastDataPoint(
                period=add_months(last_month, step),
                predicted=_round_money(predicted),
                lower_bound=_round_money(band.lower_bound),
                upper_bound=_round_money(band.upper_bound),
                confidence=band.confidence,
            )
        )

    metrics = evaluate_accuracy(values, trend_estimate)
    growth_rate = overall_growth_rate(values) * 100.0

    logger.debug(
        f"{method!r}: slope={trend_estimate.slope:.4f}, mape={metrics.mape:.2f}, "
        f"rmse={metrics.rmse:.2f}"
    )

    return ForecastResult(
        config=config,
        data_points=data_points,
        accuracy=_round_money(metrics.accuracy),
        mape=_round_money(metrics.mape),
        rmse=_round_money(metrics.rmse),
        trend=trend,
        trend_slope=round(trend_estimate.slope, SLOPE_DECIMALS),
        seasonality=seasonality,
        total_historical=_round_money(values.sum()),
        total_forecast=_round_money(sum(predictions)),
        average_growth_rate=_round_money(growth_rate),
        start_date=series[0].month,
        end_date=data_points[-1].period,
    )


def generate(
    config: ForecastConfig,
    series: Sequence[MonthlyDataPoint],
    forecast_id: Optional[str] = None,
) -> ForecastResult:
    """Generate a forecast from an already-fetched monthly series.

    This function:
    - does NOT fetch or persist anything,
    - returns equal results for equal inputs (``last_trained_at`` aside),
    - MAY log progress via the logging module.

    Args:
        config: Forecast configuration. Validated and normalized first.
        series: Monthly history, ascending by month.
        forecast_id: Optional identifier to attach to the result.

    Returns:
        ForecastResult with historical and projected data points.

    Raises:
        ConfigError: If the configuration is invalid.
        InsufficientHistoryError: If fewer than 3 months of history are given.
        DataQualityError: If a historical value is NaN or infinite.
    """
    config = config.validate()
    logger.info(
        f"Generating {config.method.value} forecast: {len(series)} historical months, "
        f"{config.forecast_months} months ahead"
    )
    result = _compute(config, series)
    result.forecast_id = forecast_id
    result.last_trained_at = datetime.now(timezone.utc)
    return result


def _retrain_config(config: ForecastConfig, params: Union[RetrainParams, None]) -> ForecastConfig:
    params = params or RetrainParams()
    overrides = {
        name: getattr(params, name)
        for name in ("historical_months", "forecast_months", "method")
        if getattr(params, name) is not None
    }
    return replace(config, **overrides).validate()


def retrain(
    existing: ForecastResult,
    params: Union[RetrainParams, None],
    series: Sequence[MonthlyDataPoint],
) -> ForecastResult:
    """Recompute an existing forecast in place.

    The new configuration is the existing one with every non-None field of
    ``params`` applied. All derived fields of ``existing`` are replaced;
    its identity and ``forecast_id`` are kept.

    Args:
        existing: Result to update.
        params: Overrides for historical_months, forecast_months and method.
        series: Fresh monthly history, ascending by month.

    Returns:
        The same ``existing`` object, updated.

    Raises:
        ConfigError: If the updated configuration is invalid.
        InsufficientHistoryError: If fewer than 3 months of history are given.
    """
    config = _retrain_config(existing.config, params)

    logger.info(
        f"Retraining forecast {existing.forecast_id or '<unsaved>'} with "
        f"{config.method.value}, {len(series)} historical months"
    )
    fresh = _compute(config, series)

    for result_field in fields(ForecastResult):
        if result_field.name in ("forecast_id", "last_trained_at"):
            continue
        setattr(existing, result_field.name, getattr(fresh, result_field.name))
    existing.last_trained_at = datetime.now(timezone.utc)
    return existing


def forecast_from_provider(
    provider: HistoricalSeriesProvider,
    organization_id: str,
    config: ForecastConfig,
    forecast_id: Optional[str] = None,
) -> ForecastResult:
    """Fetch history from a provider and generate a forecast.

    Args:
        provider: Source of monthly history.
        organization_id: Tenant whose ledger is forecast.
        config: Forecast configuration; its historical_months is the lookback.
        forecast_id: Optional identifier to attach to the result.

    Returns:
        ForecastResult.

    Raises:
        ConfigError: If the configuration is invalid.
        InsufficientHistoryError: If the provider returns fewer than 3 months.
    """
    config = config.validate()
    series = provider.fetch_historical_series(
        organization_id,
        config.series_type,
        config.historical_months,
        account_ref=config.account_ref,
    )
    return generate(config, series, forecast_id=forecast_id)


def retrain_from_provider(
    provider: HistoricalSeriesProvider,
    organization_id: str,
    existing: ForecastResult,
    params: Union[RetrainParams, None] = None,
) -> ForecastResult:
    """Re-fetch history from a provider and retrain an existing forecast.

    History is fetched with the updated configuration, so a new
    historical_months in ``params`` changes the lookback.

    Args:
        provider: Source of monthly history.
        organization_id: Tenant whose ledger is forecast.
        existing: Result to update in place.
        params: Overrides for historical_months, forecast_months and method.

    Returns:
        The same ``existing`` object, updated.

    Raises:
        ConfigError: If the updated configuration is invalid.
        InsufficientHistoryError: If the provider returns fewer than 3 months.
    """
    config = _retrain_config(existing.config, params)
    series = provider.fetch_historical_series(
        organization_id,
        config.series_type,
        config.historical_months,
        account_ref=config.account_ref,
    )
    return retrain(existing, params, series)
