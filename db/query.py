"""
DuckDB-powered read-only queries over the flights database.
"""
import pandas as pd
from pathlib import Path
from typing import Callable, Dict, Optional

from config import DEFAULT_ROW_LIMIT
from db.schema import get_connection


AIRLINES_SQL = "SELECT * FROM airlines LIMIT {limit}"

FLIGHTS_SQL = "SELECT * FROM flights LIMIT {limit}"

FLIGHTS_PER_PLANE_SQL = """
    SELECT
        tailnum,
        COUNT(*) AS n_flights,
        AVG(distance) AS avg_distance
    FROM flights
    GROUP BY tailnum
    ORDER BY n_flights DESC, tailnum
"""

# One row per distinct plane/carrier pairing before counting, so a plane
# flown many times by the same airline is counted once. Flights without a
# tail number identify no plane.
FLEET_COMPOSITION_SQL = """
    SELECT
        fp.manufacturer,
        fp.model,
        a.name AS airline,
        COUNT(*) AS n_planes
    FROM (
        SELECT DISTINCT f.tailnum, f.carrier, p.manufacturer, p.model
        FROM flights f
        LEFT JOIN planes p ON f.tailnum = p.tailnum
        WHERE f.tailnum IS NOT NULL
    ) fp
    JOIN airlines a ON fp.carrier = a.carrier
    GROUP BY fp.manufacturer, fp.model, a.name
    ORDER BY n_planes DESC, fp.manufacturer, fp.model, airline
"""


def run_query(sql: str, db_path: Optional[Path] = None) -> pd.DataFrame:
    """
    Execute a statement on a read-only connection and return the result.

    Errors from DuckDB (missing file, bad SQL, writes against the read-only
    connection) propagate unchanged.
    """
    with get_connection(db_path, read_only=True) as conn:
        return conn.execute(sql).df()


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def query_airlines(limit: int = DEFAULT_ROW_LIMIT, db_path: Optional[Path] = None) -> pd.DataFrame:
    """First ``limit`` rows of the airline directory."""
    return run_query(AIRLINES_SQL.format(limit=_check_limit(limit)), db_path)


def query_flights(limit: int = DEFAULT_ROW_LIMIT, db_path: Optional[Path] = None) -> pd.DataFrame:
    """First ``limit`` flight records, unfiltered."""
    return run_query(FLIGHTS_SQL.format(limit=_check_limit(limit)), db_path)


def query_flights_per_plane(db_path: Optional[Path] = None) -> pd.DataFrame:
    """
    Flight count and mean distance per tail number.

    Returns:
        DataFrame with tailnum, n_flights, avg_distance; busiest planes first
    """
    return run_query(FLIGHTS_PER_PLANE_SQL, db_path)


def query_fleet_composition(db_path: Optional[Path] = None) -> pd.DataFrame:
    """
    Count distinct planes per manufacturer, model and airline.

    Planes missing from the aircraft directory keep NULL manufacturer/model;
    filtering them out is left to the caller.

    Returns:
        DataFrame with manufacturer, model, airline, n_planes
    """
    return run_query(FLEET_COMPOSITION_SQL, db_path)


# Walkthrough order
FIXED_QUERIES: Dict[str, Callable[..., pd.DataFrame]] = {
    "airlines": query_airlines,
    "flights": query_flights,
    "flights_per_plane": query_flights_per_plane,
    "fleet_composition": query_fleet_composition,
}

LIMITED_QUERIES = {"airlines", "flights"}


def run_fixed_query(
    name: str,
    limit: int = DEFAULT_ROW_LIMIT,
    db_path: Optional[Path] = None
) -> pd.DataFrame:
    """Run one of the walkthrough queries by name."""
    if name not in FIXED_QUERIES:
        raise ValueError(f"Unknown query: {name} (choose from {', '.join(FIXED_QUERIES)})")

    func = FIXED_QUERIES[name]
    if name in LIMITED_QUERIES:
        return func(limit=limit, db_path=db_path)
    return func(db_path=db_path)


if __name__ == "__main__":
    import sys

    name = sys.argv[1] if len(sys.argv) > 1 else "airlines"
    df = run_fixed_query(name)
    print(f"\n🔍 {name} ({len(df):,} rows):\n")
    print(df.head(10).to_string(index=False))
