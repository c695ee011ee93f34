"""Configuration constants for the Flights DuckDB walkthrough."""

from pathlib import Path
from typing import Dict, List, Set

# Application Metadata
APP_TITLE = "Flights DuckDB Walkthrough"
APP_ICON = "✈️"
VERSION = "1.0.0"

# Database
DEFAULT_DB_PATH = Path(__file__).parent / "data" / "flights.duckdb"

# Source tables, in load order
TABLE_NAMES: List[str] = ["airlines", "airports", "flights", "planes", "weather"]

# Columns the fixed queries depend on
REQUIRED_COLUMNS: Dict[str, Set[str]] = {
    "airlines": {"carrier", "name"},
    "flights": {"carrier", "tailnum", "distance"},
    "planes": {"tailnum", "manufacturer", "model"},
}

# Query Defaults
DEFAULT_ROW_LIMIT = 10
DEFAULT_AIRLINE = "United Air Lines Inc."

# UI Theme
THEME_COLORS = {
    "background": "#0E1117",
    "surface": "#1E2329",
    "primary": "#00D9FF",  # Cyan
    "secondary": "#FFB800",  # Amber
    "error": "#FF4B4B",
    "neutral": "#64748B",
    "text": "#FAFAFA",
    "text_dim": "#94A3B8",
}

# Chart Settings
CHART_HEIGHT = 500
CHART_TEMPLATE = "plotly_dark"
MARKER_SIZE = 7
MARKER_OPACITY = 0.6
TILE_COLORSCALE = "Viridis"

# Display Settings
MAX_TABLE_ROWS = 20

# Export Settings
EXPORT_PARQUET_COMPRESSION = "zstd"
