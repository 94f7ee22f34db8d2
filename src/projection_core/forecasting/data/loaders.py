"""Data loading utilities for the forecasting CLI."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from projection_core.exceptions import DataQualityError

LEDGER_COLUMNS = ["organization", "date", "type", "amount"]


def load_ledger_entries(csv_path: Path) -> pd.DataFrame:
    """Load ledger entries from a CSV file.

    Expected columns: organization, date, type (income/expense), amount and
    optionally account and is_archived.

    Args:
        csv_path: Path to the ledger CSV.

    Returns:
        DataFrame sorted by organization and date, with ``date`` parsed,
        ``account`` as string and ``is_archived`` as bool.

    Raises:
        FileNotFoundError: If the CSV file does not exist
        DataQualityError: If required columns are missing or an amount
            cannot be parsed
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Ledger file not found at {csv_path}")

    # Ids are text; a numeric id column with blanks would parse as float
    df = pd.read_csv(csv_path, dtype={"organization": str, "account": str})

    missing_columns = [col for col in LEDGER_COLUMNS if col not in df.columns]
    if missing_columns:
        raise DataQualityError(
            f"Missing required columns in ledger: {missing_columns}. Required: {LEDGER_COLUMNS}"
        )

    df["organization"] = df["organization"].astype(str)
    df["date"] = pd.to_datetime(df["date"])

    amounts = pd.to_numeric(df["amount"], errors="coerce")
    if amounts.isna().any():
        # Line numbers as in the file: header is line 1
        bad_lines = (df.index[amounts.isna()] + 2).tolist()
        raise DataQualityError(
            f"Unparseable amount in ledger at lines {bad_lines}: "
            f"{df.loc[amounts.isna(), 'amount'].tolist()}"
        )
    df["amount"] = amounts.astype(float)

    if "account" not in df.columns:
        df["account"] = None
    if "is_archived" not in df.columns:
        df["is_archived"] = False
    df["is_archived"] = df["is_archived"].fillna(False).astype(bool)

    return df.sort_values(["organization", "date"]).reset_index(drop=True)
