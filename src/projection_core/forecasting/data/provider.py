"""Historical series providers.

The engine consumes already-materialized monthly series. Providers sit at the
boundary and turn raw ledger entries into those series.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Protocol

import pandas as pd

from projection_core.exceptions import DataQualityError
from projection_core.forecasting.data.loaders import LEDGER_COLUMNS
from projection_core.forecasting.data.preparation import build_monthly_series, to_data_points
from projection_core.forecasting.types import MonthlyDataPoint, SeriesType

logger = logging.getLogger(__name__)

# Ledger entry type aggregated for each series type; None means all entries
ENTRY_TYPES = {
    SeriesType.REVENUE: "income",
    SeriesType.EXPENSE: "expense",
    SeriesType.ACCOUNT: None,
}


class HistoricalSeriesProvider(Protocol):
    """Protocol for sources of monthly history.

    Implementations return points ascending by month. Each value is the
    monetary sum of matching ledger activity for one calendar month.
    """

    def fetch_historical_series(
        self,
        organization_id: str,
        series_type: SeriesType,
        lookback_months: int,
        account_ref: Optional[str] = None,
    ) -> List[MonthlyDataPoint]: ...


class LedgerSeriesProvider:
    """Aggregates an in-memory ledger table into monthly series.

    Args:
        ledger: DataFrame with columns organization, date, type, amount and
            optionally account and is_archived (see ``load_ledger_entries``).
        as_of: Reference date for the lookback window. Defaults to today.
        fill_missing_months: If True, months without matching entries between
            the first and last observed month are returned as zero-value
            months. If False they are omitted.

    Raises:
        DataQualityError: If required columns are missing.
    """

    def __init__(
        self,
        ledger: pd.DataFrame,
        as_of: Optional[date] = None,
        fill_missing_months: bool = True,
    ) -> None:
        missing_columns = [col for col in LEDGER_COLUMNS if col not in ledger.columns]
        if missing_columns:
            raise DataQualityError(
                f"Missing required columns in ledger: {missing_columns}. "
                f"Required: {LEDGER_COLUMNS}"
            )
        self.ledger = ledger
        self.as_of = as_of
        self.fill_missing_months = fill_missing_months

    def window_start(self, lookback_months: int) -> pd.Timestamp:
        """First day of the month ``lookback_months`` before the reference date."""
        reference = pd.Timestamp(self.as_of or date.today())
        return (reference - pd.DateOffset(months=lookback_months)).to_period("M").to_timestamp()

    def fetch_historical_series(
        self,
        organization_id: str,
        series_type: SeriesType,
        lookback_months: int,
        account_ref: Optional[str] = None,
    ) -> List[MonthlyDataPoint]:
        """Sum matching ledger entries per calendar month.

        Args:
            organization_id: Tenant to filter on.
            series_type: Which entry type to aggregate.
            lookback_months: Number of months before ``as_of`` to include.
            account_ref: Optional account to filter on.

        Returns:
            Monthly data points ascending by month.
        """
        df = self.ledger
        dates = pd.to_datetime(df["date"])
        mask = (df["organization"] == organization_id) & (dates >= self.window_start(lookback_months))

        if "is_archived" in df.columns:
            mask &= ~df["is_archived"].fillna(False).astype(bool)

        entry_type = ENTRY_TYPES[SeriesType(series_type)]
        if entry_type is not None:
            mask &= df["type"] == entry_type

        if account_ref is not None:
            if "account" not in df.columns:
                logger.warning("Ledger has no account column, account filter matches nothing")
                return []
            mask &= df["account"] == account_ref

        matched = df.loc[mask]
        if matched.empty:
            logger.info(f"No ledger activity for {organization_id} ({SeriesType(series_type).value})")
            return []

        monthly = (
            matched.groupby(dates[mask].dt.to_period("M"))["amount"].sum().sort_index()
        )
        monthly.index = monthly.index.to_timestamp()
        points = to_data_points(monthly)

        if self.fill_missing_months:
            points = build_monthly_series(points)

        logger.debug(f"Fetched {len(points)} months for {organization_id}")
        return points
