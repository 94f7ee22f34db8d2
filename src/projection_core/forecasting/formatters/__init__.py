"""Output formatting utilities."""

from projection_core.forecasting.formatters.console import format_forecast_for_console

__all__ = ["format_forecast_for_console"]
