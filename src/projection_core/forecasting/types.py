"""Shared types for the forecasting engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Optional

from projection_core.exceptions import ConfigError
from projection_core.forecasting.config import (
    MAX_FORECAST_MONTHS,
    MAX_HISTORICAL_MONTHS,
    MIN_HISTORY_POINTS,
)


class SeriesType(str, Enum):
    """Kind of ledger activity a forecast is built from."""

    REVENUE = "revenue"
    EXPENSE = "expense"
    ACCOUNT = "account"


class ForecastMethodName(str, Enum):
    """Closed set of projection methods."""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    WEIGHTED_AVERAGE = "weighted_average"
    SEASONAL = "seasonal"
    MANUAL = "manual"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Seasonality(str, Enum):
    DETECTED = "detected"
    NOT_DETECTED = "not_detected"


@dataclass(frozen=True)
class MonthlyDataPoint:
    """One calendar month of aggregated ledger activity.

    Attributes:
        month: First day of the calendar month.
        value: Monetary sum for the month in the reporting currency.
    """

    month: date
    value: float


@dataclass(frozen=True)
class ForecastDataPoint:
    """One month of a forecast result.

    Historical months carry ``actual`` and collapse the band onto it.
    Projected months leave ``actual`` as None.
    """

    period: date
    predicted: float
    lower_bound: float
    upper_bound: float
    confidence: Confidence
    actual: Optional[float] = None

    @property
    def is_projected(self) -> bool:
        return self.actual is None


@dataclass(frozen=True)
class ForecastConfig:
    """Configuration for a single forecast run.

    Attributes:
        series_type: Which ledger activity the history was built from.
        historical_months: Lookback window requested from the series provider.
        forecast_months: Number of months to project.
        method: Projection method.
        account_ref: External account id, required for account-linked series.
        custom_assumptions: Free-form numeric assumptions. The manual method
            reads ``growthRate`` (percent per month) from here.
    """

    series_type: SeriesType = SeriesType.REVENUE
    historical_months: int = 12
    forecast_months: int = 12
    method: ForecastMethodName = ForecastMethodName.LINEAR
    account_ref: Optional[str] = None
    custom_assumptions: Dict[str, float] = field(default_factory=dict)

    def __hash__(self) -> int:
        # custom_assumptions is a dict; hash its items
        return hash(
            (
                self.series_type,
                self.historical_months,
                self.forecast_months,
                self.method,
                self.account_ref,
                frozenset(self.custom_assumptions.items()),
            )
        )

    def validate(self) -> ForecastConfig:
        """Check ranges and enum values, returning a normalized copy.

        String values for ``series_type`` and ``method`` are converted to
        their enum members.

        Returns:
            ForecastConfig with enum-typed fields.

        Raises:
            ConfigError: If any field is out of range or unknown.
        """
        try:
            series_type = SeriesType(self.series_type)
        except ValueError:
            raise ConfigError(
                f"Unknown series type: {self.series_type!r}. "
                f"Expected one of {[s.value for s in SeriesType]}"
            ) from None
        try:
            method = ForecastMethodName(self.method)
        except ValueError:
            raise ConfigError(
                f"Unknown forecast method: {self.method!r}. "
                f"Expected one of {[m.value for m in ForecastMethodName]}"
            ) from None

        if not MIN_HISTORY_POINTS <= self.historical_months <= MAX_HISTORICAL_MONTHS:
            raise ConfigError(
                f"historical_months must be between {MIN_HISTORY_POINTS} and "
                f"{MAX_HISTORICAL_MONTHS}, got {self.historical_months}"
            )
        if not 1 <= self.forecast_months <= MAX_FORECAST_MONTHS:
            raise ConfigError(
                f"forecast_months must be between 1 and {MAX_FORECAST_MONTHS}, "
                f"got {self.forecast_months}"
            )
        if series_type is SeriesType.ACCOUNT and not self.account_ref:
            raise ConfigError("Account-linked forecasts require an account_ref")

        return ForecastConfig(
            series_type=series_type,
            historical_months=self.historical_months,
            forecast_months=self.forecast_months,
            method=method,
            account_ref=self.account_ref,
            custom_assumptions=dict(self.custom_assumptions),
        )


@dataclass(frozen=True)
class RetrainParams:
    """Overrides accepted by retrain. None keeps the existing value."""

    historical_months: Optional[int] = None
    forecast_months: Optional[int] = None
    method: Optional[ForecastMethodName] = None
