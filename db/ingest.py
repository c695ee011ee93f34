"""
Data loading pipeline: in-memory tables → DuckDB file
"""
import pandas as pd
from pathlib import Path
from typing import Dict, Mapping, Optional

from config import TABLE_NAMES, DEFAULT_DB_PATH
from core.io import load_flight_tables, validate_tables
from db.schema import get_connection, get_table_names


def write_tables(
    tables: Mapping[str, pd.DataFrame],
    db_path: Optional[Path] = None
) -> Dict[str, int]:
    """
    Write each table to the database under its fixed name.

    Existing tables are replaced, never appended to, so rerunning with the
    same inputs leaves the same contents behind.

    Args:
        tables: Mapping of table name -> DataFrame
        db_path: Target database file (created if missing)

    Returns:
        Row count per written table

    Raises:
        ValueError: If the table set fails validation
        duckdb.IOException: If the target path is not writable
    """
    validation = validate_tables(tables)
    if not validation.is_valid:
        raise ValueError(f"Invalid table set: {'; '.join(validation.errors)}")

    for warning in validation.warnings:
        print(f"⚠️  {warning}")

    row_counts = {}
    with get_connection(db_path, read_only=False) as conn:
        for name in TABLE_NAMES:
            frame = tables[name]
            conn.register("_source_frame", frame)
            try:
                conn.execute(f'CREATE OR REPLACE TABLE "{name}" AS SELECT * FROM _source_frame')
            finally:
                conn.unregister("_source_frame")

            row_counts[name] = len(frame)
            print(f"💾 Wrote {name}: {len(frame):,} rows")

    return row_counts


def load_flights_database(
    db_path: Optional[Path] = None,
    force: bool = False
) -> Dict[str, int]:
    """
    Populate the database with the nycflights13 tables.

    Skips the load when every table is already present, unless ``force``
    is set.

    Returns:
        Row count per table
    """
    path = Path(db_path) if db_path else None

    if not force and _has_all_tables(path):
        with get_connection(path) as conn:
            counts = {
                name: conn.execute(f'SELECT COUNT(*) FROM "{name}"').fetchone()[0]
                for name in TABLE_NAMES
            }
        print("✅ Database already loaded (use force=True to reload)")
        return counts

    counts = write_tables(load_flight_tables(), path)
    print(f"✅ Loaded {sum(counts.values()):,} rows across {len(counts)} tables")
    return counts


def _has_all_tables(db_path: Optional[Path]) -> bool:
    if not (db_path or DEFAULT_DB_PATH).exists():
        return False

    with get_connection(db_path) as conn:
        present = set(get_table_names(conn))

    return set(TABLE_NAMES) <= present


if __name__ == "__main__":
    import sys

    force = "--force" in sys.argv[1:]
    load_flights_database(force=force)
