"""Domain-specific exceptions for projection core.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from ProjectionError for easy catching.
"""


class ProjectionError(Exception):
    """Base exception for all projection core errors.

    Users can catch this exception to handle any error raised by the
    forecasting engine or its data helpers.
    """

    pass


class ConfigError(ProjectionError):
    """Raised when a forecast configuration is invalid.

    This exception is raised when:
    - historical_months or forecast_months are out of range
    - An unknown forecast method or series type is requested
    - An account-linked forecast has no account reference
    """

    pass


class DataQualityError(ProjectionError):
    """Raised when input data checks fail.

    This exception is raised when:
    - Required columns are missing from a ledger table
    - A ledger amount cannot be parsed as a number
    - A historical series holds NaN or infinite values
    """

    pass


class InsufficientHistoryError(DataQualityError):
    """Raised when a historical series is too short to forecast.

    Attributes:
        available: Number of historical points supplied.
        required: Minimum number of points the engine needs.
    """

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient historical data for forecasting: got {available} months, "
            f"need at least {required}"
        )
