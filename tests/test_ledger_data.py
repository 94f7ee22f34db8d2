"""Tests for ledger loading, series preparation and the ledger provider."""

from datetime import date

import pandas as pd
import pytest

from projection_core.exceptions import DataQualityError
from projection_core.forecasting.data import (
    LedgerSeriesProvider,
    build_monthly_series,
    load_ledger_entries,
    to_monthly_series,
)
from projection_core.forecasting.types import MonthlyDataPoint, SeriesType


def make_ledger() -> pd.DataFrame:
    rows = [
        ("org-1", "2024-05-31", "income", "acc-1", 5000.0, False),
        ("org-1", "2025-01-05", "income", "acc-1", 100.0, False),
        ("org-1", "2025-01-20", "income", "acc-2", 50.0, False),
        ("org-1", "2025-01-15", "expense", "acc-9", 80.0, False),
        ("org-1", "2025-02-10", "income", "acc-1", 200.0, False),
        ("org-1", "2025-02-11", "income", "acc-1", 999.0, True),
        ("org-1", "2025-04-03", "income", "acc-2", 300.0, False),
        ("org-2", "2025-01-05", "income", "acc-1", 1000.0, False),
    ]
    df = pd.DataFrame(
        rows, columns=["organization", "date", "type", "account", "amount", "is_archived"]
    )
    df["date"] = pd.to_datetime(df["date"])
    return df


def test_build_monthly_series_fills_gaps() -> None:
    """Test zero-filling missing months between first and last."""
    points = [
        MonthlyDataPoint(date(2025, 4, 1), 300.0),
        MonthlyDataPoint(date(2025, 1, 1), 150.0),
    ]

    filled = build_monthly_series(points)

    assert filled == [
        MonthlyDataPoint(date(2025, 1, 1), 150.0),
        MonthlyDataPoint(date(2025, 2, 1), 0.0),
        MonthlyDataPoint(date(2025, 3, 1), 0.0),
        MonthlyDataPoint(date(2025, 4, 1), 300.0),
    ]


def test_build_monthly_series_merges_same_month() -> None:
    """Test that points in the same month are summed."""
    points = [
        MonthlyDataPoint(date(2025, 1, 1), 10.0),
        MonthlyDataPoint(date(2025, 1, 17), 5.0),
        MonthlyDataPoint(date(2025, 2, 1), 7.0),
    ]

    filled = build_monthly_series(points)

    assert filled == [
        MonthlyDataPoint(date(2025, 1, 1), 15.0),
        MonthlyDataPoint(date(2025, 2, 1), 7.0),
    ]


def test_build_monthly_series_empty() -> None:
    """Test that no points give no series."""
    assert build_monthly_series([]) == []


def test_to_monthly_series_index() -> None:
    """Test that days are normalized to month start."""
    series = to_monthly_series([MonthlyDataPoint(date(2025, 3, 14), 1.0)])

    assert series.index[0] == pd.Timestamp("2025-03-01")


def test_window_start() -> None:
    """Test the first day of the lookback window."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    assert provider.window_start(5) == pd.Timestamp("2025-01-01")
    assert provider.window_start(12) == pd.Timestamp("2024-06-01")


def test_revenue_series_zero_filled() -> None:
    """Test revenue aggregation with archived, expense and other tenants excluded."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    points = provider.fetch_historical_series("org-1", SeriesType.REVENUE, 12)

    assert points == [
        MonthlyDataPoint(date(2025, 1, 1), 150.0),
        MonthlyDataPoint(date(2025, 2, 1), 200.0),
        MonthlyDataPoint(date(2025, 3, 1), 0.0),
        MonthlyDataPoint(date(2025, 4, 1), 300.0),
    ]


def test_revenue_series_keeps_gaps_when_asked() -> None:
    """Test the compatibility mode that omits empty months."""
    provider = LedgerSeriesProvider(
        make_ledger(), as_of=date(2025, 6, 15), fill_missing_months=False
    )

    points = provider.fetch_historical_series("org-1", "revenue", 12)

    assert [p.month for p in points] == [date(2025, 1, 1), date(2025, 2, 1), date(2025, 4, 1)]


def test_lookback_includes_older_entries() -> None:
    """Test that a longer window reaches older entries."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    points = provider.fetch_historical_series("org-1", SeriesType.REVENUE, 13)

    assert points[0] == MonthlyDataPoint(date(2024, 5, 1), 5000.0)
    assert len(points) == 12


def test_expense_series() -> None:
    """Test expense aggregation."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    points = provider.fetch_historical_series("org-1", SeriesType.EXPENSE, 12)

    assert points == [MonthlyDataPoint(date(2025, 1, 1), 80.0)]


def test_account_series_ignores_entry_type() -> None:
    """Test account-linked aggregation."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    points = provider.fetch_historical_series(
        "org-1", SeriesType.ACCOUNT, 12, account_ref="acc-2"
    )

    assert points[0] == MonthlyDataPoint(date(2025, 1, 1), 50.0)
    assert points[-1] == MonthlyDataPoint(date(2025, 4, 1), 300.0)
    assert len(points) == 4


def test_unknown_organization_returns_empty() -> None:
    """Test that a tenant without activity gets no points."""
    provider = LedgerSeriesProvider(make_ledger(), as_of=date(2025, 6, 15))

    assert provider.fetch_historical_series("org-404", SeriesType.REVENUE, 12) == []


def test_provider_requires_columns() -> None:
    """Test that a ledger without amounts is rejected."""
    with pytest.raises(DataQualityError, match="amount"):
        LedgerSeriesProvider(make_ledger().drop(columns=["amount"]))


def test_load_ledger_entries(tmp_path) -> None:
    """Test reading a ledger CSV without optional columns."""
    csv_path = tmp_path / "ledger.csv"
    csv_path.write_text(
        "organization,date,type,amount\n"
        "org-1,2025-02-01,income,20\n"
        "org-1,2025-01-01,income,10\n"
    )

    df = load_ledger_entries(csv_path)

    assert list(df["amount"]) == [10.0, 20.0]
    assert df["date"].iloc[0] == pd.Timestamp("2025-01-01")
    assert not df["is_archived"].any()
    assert "account" in df.columns


def test_load_ledger_entries_missing_columns(tmp_path) -> None:
    """Test that missing required columns are reported."""
    csv_path = tmp_path / "ledger.csv"
    csv_path.write_text("organization,date,amount\norg-1,2025-01-01,10\n")

    with pytest.raises(DataQualityError, match="type"):
        load_ledger_entries(csv_path)


def test_load_ledger_entries_missing_file(tmp_path) -> None:
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_ledger_entries(tmp_path / "missing.csv")


def test_load_ledger_entries_numeric_accounts_with_blanks(tmp_path) -> None:
    """Test that numeric account ids stay as written when some cells are blank."""
    csv_path = tmp_path / "ledger.csv"
    csv_path.write_text(
        "organization,date,type,account,amount\n"
        "org-1,2025-01-05,income,4000,10\n"
        "org-1,2025-02-05,income,,99\n"
        "org-1,2025-03-05,income,4000,30\n"
    )

    df = load_ledger_entries(csv_path)
    provider = LedgerSeriesProvider(df, as_of=date(2025, 4, 15))
    points = provider.fetch_historical_series(
        "org-1", SeriesType.ACCOUNT, 12, account_ref="4000"
    )

    assert df["account"].iloc[0] == "4000"
    assert points == [
        MonthlyDataPoint(date(2025, 1, 1), 10.0),
        MonthlyDataPoint(date(2025, 2, 1), 0.0),
        MonthlyDataPoint(date(2025, 3, 1), 30.0),
    ]


def test_load_ledger_entries_unparseable_amount(tmp_path) -> None:
    """Test that bad amounts are reported by line instead of read as zero."""
    csv_path = tmp_path / "ledger.csv"
    csv_path.write_text(
        "organization,date,type,amount\n"
        "org-1,2025-01-01,income,10\n"
        "org-1,2025-02-01,income,n/a-ish\n"
        "org-1,2025-03-01,income,\n"
    )

    with pytest.raises(DataQualityError, match=r"lines \[3, 4\]"):
        load_ledger_entries(csv_path)
