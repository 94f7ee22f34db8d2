"""Monthly forecasting module.

This module projects monthly ledger series forward with confidence bands,
trend and seasonality classification, and in-sample accuracy.

Example:
    >>> from datetime import date
    >>> from projection_core.forecasting import (
    ...     ForecastConfig, ForecastMethodName, MonthlyDataPoint, generate,
    ... )
    >>>
    >>> history = [
    ...     MonthlyDataPoint(date(2025, 1, 1), 100.0),
    ...     MonthlyDataPoint(date(2025, 2, 1), 110.0),
    ...     MonthlyDataPoint(date(2025, 3, 1), 120.0),
    ...     MonthlyDataPoint(date(2025, 4, 1), 130.0),
    ... ]
    >>> config = ForecastConfig(forecast_months=2, method=ForecastMethodName.LINEAR)
    >>> result = generate(config, history)
    >>> [dp.predicted for dp in result.projected_points]
    [140.0, 150.0]

"""

from projection_core.forecasting.api import (
    ForecastResult,
    forecast_from_provider,
    generate,
    retrain,
    retrain_from_provider,
)
from projection_core.forecasting.types import (
    Confidence,
    ForecastConfig,
    ForecastDataPoint,
    ForecastMethodName,
    MonthlyDataPoint,
    RetrainParams,
    Seasonality,
    SeriesType,
    Trend,
)

__all__ = [
    "Confidence",
    "ForecastConfig",
    "ForecastDataPoint",
    "ForecastMethodName",
    "ForecastResult",
    "MonthlyDataPoint",
    "RetrainParams",
    "Seasonality",
    "SeriesType",
    "Trend",
    "forecast_from_provider",
    "generate",
    "retrain",
    "retrain_from_provider",
]
