"""Core module for the Flights DuckDB walkthrough."""

__all__ = [
    "load_flight_tables",
    "validate_tables",
    "ValidationResult",
]
