"""Example: Comparing Forecast Methods on a Revenue Ledger

This example builds a small synthetic ledger, aggregates it into a monthly
revenue series with LedgerSeriesProvider, and runs every forecast method on
the same history so their projections can be compared side by side.

A month without revenue is left out of the ledger on purpose: the provider
zero-fills it by default so the trend is fitted over real calendar months.
"""

from datetime import date

import pandas as pd

from projection_core.forecasting import ForecastConfig, ForecastMethodName, SeriesType, generate
from projection_core.forecasting.data import LedgerSeriesProvider
from projection_core.forecasting.formatters import format_forecast_for_console

months = pd.date_range("2024-01-01", periods=18, freq="MS")
ledger = pd.DataFrame(
    {
        "organization": "org-demo",
        "date": months + pd.Timedelta(days=14),
        "type": "income",
        "account": "sales",
        "amount": [10_000 + 450 * i + (800 if m.month == 12 else 0) for i, m in enumerate(months)],
        "is_archived": False,
    }
)
# Drop one month to show zero-filling
ledger = ledger[ledger["date"].dt.month != 5].reset_index(drop=True)

provider = LedgerSeriesProvider(ledger, as_of=date(2025, 7, 1))
history = provider.fetch_historical_series("org-demo", SeriesType.REVENUE, lookback_months=24)

print("=" * 80)
print(f"Loaded {len(history)} months of revenue history")
print("=" * 80)

rows = []
for method in ForecastMethodName:
    config = ForecastConfig(
        series_type=SeriesType.REVENUE,
        historical_months=24,
        forecast_months=6,
        method=method,
        custom_assumptions={"growthRate": 3.0},
    )
    result = generate(config, history)
    rows.append(
        {
            "method": method.value,
            "total_forecast": result.total_forecast,
            "first_month": result.projected_points[0].predicted,
            "last_month": result.projected_points[-1].predicted,
        }
    )

print("\nMethod comparison (6 months ahead):")
print(pd.DataFrame(rows).to_string(index=False))

print("\n" + "=" * 80)
print("Linear forecast detail")
print("=" * 80)
linear = generate(ForecastConfig(historical_months=24, forecast_months=6), history)
print(format_forecast_for_console(linear))
