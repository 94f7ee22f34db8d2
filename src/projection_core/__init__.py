"""Projection Core - monthly revenue and expense forecasting.

This package provides the forecast generation engine of the financial
back-office: given a monthly history of revenue, expenses or a ledger
account, it projects the series forward with confidence bands and reports
trend, seasonality and in-sample accuracy.

Module Structure:
    projection_core.forecasting: Engine entry points (generate, retrain)
    projection_core.forecasting.models: Forecast methods
    projection_core.forecasting.data: Ledger loading and series providers
    projection_core.forecasting.summary: Revenue/expense/burn-rate summaries
    projection_core.exceptions: Error hierarchy

Quick Start:
    >>> from projection_core.forecasting import ForecastConfig, generate
    >>> from projection_core.forecasting.data import LedgerSeriesProvider, load_ledger_entries
    >>>
    >>> ledger = load_ledger_entries(Path("ledger.csv"))
    >>> provider = LedgerSeriesProvider(ledger)
    >>> history = provider.fetch_historical_series("org-1", "revenue", 12)
    >>> result = generate(ForecastConfig(forecast_months=6), history)
    >>> print(result.total_forecast)
"""

__version__ = "0.1.0"

from projection_core.exceptions import (
    ConfigError,
    DataQualityError,
    InsufficientHistoryError,
    ProjectionError,
)

__all__ = [
    "ConfigError",
    "DataQualityError",
    "InsufficientHistoryError",
    "ProjectionError",
    "__version__",
]
