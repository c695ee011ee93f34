"""UI module for the Flights DuckDB walkthrough."""

__all__ = [
    "apply_custom_theme",
    "render_sidebar",
    "render_table_summary",
    "render_validation_status",
    "prepare_fleet_tiles",
    "create_flights_distance_scatter",
    "create_fleet_tile_chart",
    "format_table",
    "export_result_csv",
    "export_result_parquet",
]
