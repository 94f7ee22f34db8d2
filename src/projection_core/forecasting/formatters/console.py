"""Console output formatting utilities."""

from __future__ import annotations

from projection_core.forecasting.api import ForecastResult


def format_forecast_for_console(result: ForecastResult) -> str:
    """Build a human-readable report of a forecast for console output.

    Args:
        result: ForecastResult to describe

    Returns:
        Human-readable text string for console output
    """
    if not result.data_points:
        return "No forecast data available."

    config = result.config
    lines = []
    lines.append(
        f"{config.series_type.value.capitalize()} Forecast - Next {config.forecast_months} Months "
        f"({config.method.value})"
    )
    lines.append("=" * 60)
    lines.append(f"Trend: {result.trend.value} (slope {result.trend_slope:,.3f}/month)")
    lines.append(f"Seasonality: {result.seasonality.value.replace('_', ' ')}")
    lines.append(
        f"In-sample accuracy: {result.accuracy:.2f}% "
        f"(MAPE {result.mape:.2f}%, RMSE ${result.rmse:,.2f})"
    )
    lines.append(f"Average growth: {result.average_growth_rate:.2f}% per month")
    lines.append("")

    lines.append("Historical:")
    for dp in result.historical_points:
        lines.append(f"  {dp.period.strftime('%Y-%m')}: ${dp.actual:,.2f}")
    lines.append(f"  Total: ${result.total_historical:,.2f}")
    lines.append("")

    lines.append("Projected:")
    for dp in result.projected_points:
        lines.append(
            f"  {dp.period.strftime('%Y-%m')}: ${dp.predicted:,.2f} "
            f"[${dp.lower_bound:,.2f} - ${dp.upper_bound:,.2f}] {dp.confidence.value}"
        )
    lines.append(f"  Total: ${result.total_forecast:,.2f}")

    return "\n".join(lines)
