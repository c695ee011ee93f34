#!/usr/bin/env python3
"""
Flights DuckDB Walkthrough CLI

Load the nycflights13 tables into DuckDB, then run the walkthrough queries
and charts from the command line.
"""
import argparse
from pathlib import Path
import sys

import duckdb

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config import DEFAULT_AIRLINE, DEFAULT_DB_PATH, DEFAULT_ROW_LIMIT
from db.ingest import load_flights_database
from db.query import FIXED_QUERIES, run_fixed_query, run_query
from db.schema import table_row_counts
from ui.charts import (
    prepare_fleet_tiles,
    create_flights_distance_scatter,
    create_fleet_tile_chart,
)
from ui.exports import format_table, export_result_csv, export_result_parquet


def cmd_load(args):
    """Load the five tables into the database."""
    load_flights_database(args.db, force=args.force)
    print(f"   Location: {args.db or DEFAULT_DB_PATH}")


def cmd_tables(args):
    """List tables and row counts."""
    df = table_row_counts(args.db)

    if df.empty:
        print("⚠️  No tables found. Use 'load' to add data.")
        return

    print("\n📊 Tables:\n")
    print(format_table(df))


def cmd_query(args):
    """Run one of the walkthrough queries."""
    df = run_fixed_query(args.name, limit=args.limit, db_path=args.db)
    print(f"\n🔍 {args.name}:\n")
    print(format_table(df, max_rows=args.rows))


def cmd_sql(args):
    """Run an ad-hoc statement on a read-only connection."""
    df = run_query(args.statement, args.db)
    print(format_table(df, max_rows=args.rows))


def cmd_plot(args):
    """Render one of the two charts to HTML."""
    if args.chart == "scatter":
        fig = create_flights_distance_scatter(run_fixed_query("flights_per_plane", db_path=args.db))
    else:
        tiles = prepare_fleet_tiles(run_fixed_query("fleet_composition", db_path=args.db), args.airline)
        if tiles.empty:
            print(f"⚠️  No planes with known manufacturer/model for {args.airline}")
            sys.exit(1)
        fig = create_fleet_tile_chart(tiles, args.airline)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output))
    print(f"✅ Chart written: {output}")


def cmd_export(args):
    """Save a walkthrough query result to CSV or Parquet."""
    output = Path(args.output)
    df = run_fixed_query(args.name, limit=args.limit, db_path=args.db)

    if output.suffix == ".parquet":
        export_result_parquet(df, output)
    elif output.suffix == ".csv":
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(export_result_csv(df))
    else:
        print("❌ Output path must end in .csv or .parquet")
        sys.exit(1)

    print(f"✅ Exported {len(df):,} rows to {output}")


def cmd_run(args):
    """Full walkthrough: load, then every query in order."""
    load_flights_database(args.db)

    for name in FIXED_QUERIES:
        df = run_fixed_query(name, limit=args.limit, db_path=args.db)
        print(f"\n🔍 {name}:\n")
        print(format_table(df, max_rows=args.rows))


def main():
    parser = argparse.ArgumentParser(
        description="Flights DuckDB Walkthrough",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load the data (skipped if already loaded)
  ./walkthrough.py load

  # Show the first 10 airlines
  ./walkthrough.py query airlines

  # Ad-hoc read-only SQL
  ./walkthrough.py sql "SELECT origin, COUNT(*) FROM flights GROUP BY origin"

  # Fleet heat map for one airline
  ./walkthrough.py plot tiles --output charts/fleet.html --airline "Delta Air Lines Inc."
        """
    )

    parser.add_argument(
        "--db",
        type=Path,
        help="Path to DuckDB file (default: data/flights.duckdb)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    parser_load = subparsers.add_parser("load", help="Load nycflights13 into the database")
    parser_load.add_argument("--force", action="store_true", help="Reload even if tables exist")
    parser_load.set_defaults(func=cmd_load)

    parser_tables = subparsers.add_parser("tables", help="List tables and row counts")
    parser_tables.set_defaults(func=cmd_tables)

    parser_query = subparsers.add_parser("query", help="Run a walkthrough query")
    parser_query.add_argument("name", choices=list(FIXED_QUERIES), help="Query name")
    parser_query.add_argument("--limit", type=int, default=DEFAULT_ROW_LIMIT, help="Row limit for airlines/flights")
    parser_query.add_argument("--rows", type=int, default=20, help="Rows to print")
    parser_query.set_defaults(func=cmd_query)

    parser_sql = subparsers.add_parser("sql", help="Run a read-only SQL statement")
    parser_sql.add_argument("statement", help="SQL text")
    parser_sql.add_argument("--rows", type=int, default=20, help="Rows to print")
    parser_sql.set_defaults(func=cmd_sql)

    parser_plot = subparsers.add_parser("plot", help="Render a chart to HTML")
    parser_plot.add_argument("chart", choices=["scatter", "tiles"], help="Chart type")
    parser_plot.add_argument("--output", required=True, help="Output .html file")
    parser_plot.add_argument("--airline", default=DEFAULT_AIRLINE, help="Airline for the tile plot")
    parser_plot.set_defaults(func=cmd_plot)

    parser_export = subparsers.add_parser("export", help="Export a query result")
    parser_export.add_argument("name", choices=list(FIXED_QUERIES), help="Query name")
    parser_export.add_argument("output", help="Output .csv or .parquet file")
    parser_export.add_argument("--limit", type=int, default=DEFAULT_ROW_LIMIT, help="Row limit for airlines/flights")
    parser_export.set_defaults(func=cmd_export)

    parser_run = subparsers.add_parser("run", help="Run the full walkthrough")
    parser_run.add_argument("--limit", type=int, default=DEFAULT_ROW_LIMIT, help="Row limit for airlines/flights")
    parser_run.add_argument("--rows", type=int, default=20, help="Rows to print per query")
    parser_run.set_defaults(func=cmd_run)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (duckdb.Error, ValueError) as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
