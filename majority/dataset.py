from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_values(path: Path, column: str | None = None) -> list:
    """Load one column of values from a CSV, or one value per line from a .txt file.

    Empty CSV cells are dropped, so the column never carries NaN placeholders.
    """
    path = Path(path)
    if path.suffix.lower() == ".txt":
        lines = path.read_text(errors="ignore").splitlines()
        return [line.strip() for line in lines if line.strip()]

    df = pd.read_csv(path)
    if column is None:
        column = df.columns[0]
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not found; available: {list(df.columns)}")
    return df[column].dropna().tolist()


def coerce_numeric(values: list) -> list:
    """Convert values to numbers when all of them parse; otherwise return them unchanged."""
    try:
        return pd.to_numeric(pd.Series(values, dtype=object)).tolist()
    except (ValueError, TypeError):
        return values


def is_numeric_column(values: list) -> bool:
    """True when every value is a number (booleans excluded)."""
    series = pd.Series(values)
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)
