"""Data loading, preparation and series providers."""

from projection_core.forecasting.data.loaders import load_ledger_entries
from projection_core.forecasting.data.preparation import (
    build_monthly_series,
    to_data_points,
    to_monthly_series,
)
from projection_core.forecasting.data.provider import (
    HistoricalSeriesProvider,
    LedgerSeriesProvider,
)

__all__ = [
    "HistoricalSeriesProvider",
    "LedgerSeriesProvider",
    "build_monthly_series",
    "load_ledger_entries",
    "to_data_points",
    "to_monthly_series",
]
