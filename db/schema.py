"""
DuckDB connection handling and catalog inspection for the flights database.
"""
import duckdb
import pandas as pd
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional

from config import DEFAULT_DB_PATH


@contextmanager
def get_connection(
    db_path: Optional[Path] = None,
    read_only: bool = True
) -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """
    Open a DuckDB connection scoped to a block of work.

    The connection is closed on every exit path, including errors raised
    inside the block. Read-only is the default; only the loader opens the
    file for writing.

    Args:
        db_path: Database file (default: data/flights.duckdb)
        read_only: Reject write statements on this connection

    Raises:
        duckdb.IOException: File missing (read-only) or not writable
    """
    path = Path(db_path) if db_path else DEFAULT_DB_PATH

    if not read_only:
        path.parent.mkdir(parents=True, exist_ok=True)

    conn = duckdb.connect(str(path), read_only=read_only)
    try:
        yield conn
    finally:
        conn.close()


def get_table_names(conn: duckdb.DuckDBPyConnection) -> List[str]:
    """Table names visible on an open connection."""
    rows = conn.execute(
        """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_schema = 'main'
        ORDER BY table_name
        """
    ).fetchall()
    return [row[0] for row in rows]


def list_tables(db_path: Optional[Path] = None) -> List[str]:
    """List table names in the database, sorted."""
    with get_connection(db_path) as conn:
        return get_table_names(conn)


def table_row_counts(db_path: Optional[Path] = None) -> pd.DataFrame:
    """Row count per table, ordered by table name."""
    with get_connection(db_path) as conn:
        records = [
            {
                "table_name": name,
                "row_count": conn.execute(f'SELECT COUNT(*) FROM "{name}"').fetchone()[0],
            }
            for name in get_table_names(conn)
        ]

    return pd.DataFrame(records, columns=["table_name", "row_count"])


def describe_table(table: str, db_path: Optional[Path] = None) -> pd.DataFrame:
    """
    Column names and types for a single table.

    Raises:
        ValueError: If the table does not exist
    """
    with get_connection(db_path) as conn:
        if table not in get_table_names(conn):
            raise ValueError(f"Table not found: {table}")

        return conn.execute(f'DESCRIBE "{table}"').df()


if __name__ == "__main__":
    print(f"📊 Tables in {DEFAULT_DB_PATH}:\n")
    print(table_row_counts().to_string(index=False))
