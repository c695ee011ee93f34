"""
Database Layer - Local DuckDB File

Purpose:
- Loader: writes the five flight tables (read-write, replace semantics)
- Queries: fixed walkthrough statements on read-only connections
"""
