"""CLI wrapper for the forecast generation engine.

This module provides a command-line interface for forecasting from a ledger
CSV. All core forecasting logic is in projection_core.forecasting.api.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from projection_core.exceptions import ProjectionError
from projection_core.forecasting.api import forecast_from_provider
from projection_core.forecasting.data.loaders import load_ledger_entries
from projection_core.forecasting.data.provider import LedgerSeriesProvider
from projection_core.forecasting.formatters.console import format_forecast_for_console
from projection_core.forecasting.models.growth import GROWTH_RATE_ASSUMPTION
from projection_core.forecasting.types import ForecastConfig, ForecastMethodName, SeriesType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Forecast monthly ledger activity.")
    parser.add_argument(
        "--ledger",
        type=str,
        required=True,
        help="Path to a ledger CSV (organization, date, type, amount[, account, is_archived])",
    )
    parser.add_argument("--organization", type=str, required=True, help="Organization id")
    parser.add_argument(
        "--series-type",
        type=str,
        default=SeriesType.REVENUE.value,
        choices=[s.value for s in SeriesType],
        help="Ledger activity to forecast (default: revenue)",
    )
    parser.add_argument(
        "--account",
        type=str,
        help="Account id, required with --series-type account",
    )
    parser.add_argument(
        "--method",
        type=str,
        default=ForecastMethodName.LINEAR.value,
        choices=[m.value for m in ForecastMethodName],
        help="Forecast method (default: linear)",
    )
    parser.add_argument(
        "--history",
        type=int,
        default=12,
        help="Months of history to use (default: 12)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=12,
        help="Number of months to forecast ahead (default: 12)",
    )
    parser.add_argument(
        "--growth-rate",
        type=float,
        help="Monthly growth in percent for the manual method",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        help="Reference date (YYYY-MM-DD) for the lookback window (default: today)",
    )
    parser.add_argument(
        "--keep-gaps",
        action="store_true",
        help="Do not zero-fill months without ledger activity",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Parses command-line arguments, loads the ledger, runs the forecast and
    prints a console report.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    assumptions = {}
    if args.growth_rate is not None:
        assumptions[GROWTH_RATE_ASSUMPTION] = args.growth_rate

    config = ForecastConfig(
        series_type=SeriesType(args.series_type),
        historical_months=args.history,
        forecast_months=args.horizon,
        method=ForecastMethodName(args.method),
        account_ref=args.account,
        custom_assumptions=assumptions,
    )

    try:
        print("[1/2] Loading ledger...")
        ledger = load_ledger_entries(Path(args.ledger))
        print(f"[OK] Loaded {len(ledger)} entries")

        print(f"[2/2] Generating {args.horizon}-month {args.method} forecast...")
        provider = LedgerSeriesProvider(
            ledger, as_of=args.as_of, fill_missing_months=not args.keep_gaps
        )
        result = forecast_from_provider(provider, args.organization, config)
    except (FileNotFoundError, ProjectionError) as e:
        print(f"[ERROR] Forecast failed: {e}")
        return 1

    print("")
    print(format_forecast_for_console(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
