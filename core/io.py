"""Source dataset loading and validation."""

import pandas as pd
from typing import Dict, Mapping

from config import TABLE_NAMES, REQUIRED_COLUMNS
from core.types import ValidationResult


def load_flight_tables() -> Dict[str, pd.DataFrame]:
    """
    Load the five NYC 2013 flight tables from the nycflights13 package.

    Returns:
        Dict of table name -> DataFrame, in load order
    """
    import nycflights13

    print("📂 Loading nycflights13 tables...")
    tables = {name: getattr(nycflights13, name) for name in TABLE_NAMES}

    for name, df in tables.items():
        print(f"   {name}: {len(df):,} rows")

    return tables


def validate_tables(tables: Mapping[str, pd.DataFrame]) -> ValidationResult:
    """
    Validate a table set before it is written to the database.

    Checks:
    - Every fixed table name is present
    - Columns used by the fixed queries exist
    - Tables are non-empty (warning only)

    Args:
        tables: Mapping of table name -> DataFrame

    Returns:
        ValidationResult with status and messages
    """
    errors = []
    warnings = []

    missing_tables = set(TABLE_NAMES) - set(tables)
    if missing_tables:
        errors.append(f"Missing required tables: {sorted(missing_tables)}")

    row_counts = {}
    for name in TABLE_NAMES:
        if name not in tables:
            continue

        df = tables[name]
        row_counts[name] = len(df)

        missing_cols = REQUIRED_COLUMNS.get(name, set()) - set(df.columns)
        if missing_cols:
            errors.append(f"Table '{name}' missing columns: {sorted(missing_cols)}")

        if df.empty:
            warnings.append(f"Table '{name}' is empty")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        missing_tables=missing_tables,
        row_counts=row_counts,
    )
