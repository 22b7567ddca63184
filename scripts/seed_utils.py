"""
Spreadsheet helpers shared by the seed import scripts.
"""
from pathlib import Path

import pandas as pd


def read_sheet(path) -> pd.DataFrame:
    """Read an .xlsx/.xls or .csv sheet into a DataFrame."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path)
    return pd.read_excel(path)


def cell(row, column, default=""):
    """Stripped string value of a cell, or the default when empty/missing."""
    value = row.get(column)
    if value is None or pd.isna(value):
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def number(row, column, default=None):
    value = row.get(column)
    if value is None or pd.isna(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
