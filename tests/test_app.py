"""Tests for the Streamlit walkthrough page."""

from pathlib import Path

import duckdb
import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).parent.parent / "app.py")


@pytest.fixture
def app_db(monkeypatch):
    """Point the page at a given database file."""
    def use(path):
        monkeypatch.setattr("config.DEFAULT_DB_PATH", Path(path))
        return AppTest.from_file(APP_PATH, default_timeout=60)
    return use


def error_texts(at):
    return [e.value for e in at.error]


def test_page_renders_loaded_database(app_db, db_path):
    at = app_db(db_path).run()

    assert not at.exception
    assert error_texts(at) == []
    assert at.selectbox[0].value == "United Air Lines Inc."


def test_page_without_database(app_db, tmp_path):
    at = app_db(tmp_path / "flights.duckdb").run()

    assert not at.exception
    assert any("No database yet" in i.value for i in at.info)


def test_invalid_table_set_is_not_written(app_db, tmp_path, small_tables, monkeypatch):
    """A failed validation is reported and nothing reaches the database."""
    tables = {k: v for k, v in small_tables.items() if k != "planes"}
    monkeypatch.setattr("core.io.load_flight_tables", lambda: tables)
    path = tmp_path / "flights.duckdb"

    at = app_db(path).run()
    at.button[0].click().run()

    assert not path.exists()
    assert any("Validation failed" in text for text in error_texts(at))


def test_load_button_writes_tables(app_db, tmp_path, small_tables, monkeypatch):
    monkeypatch.setattr("core.io.load_flight_tables", lambda: small_tables)
    path = tmp_path / "flights.duckdb"

    at = app_db(path).run()
    at.button[0].click().run()

    assert path.exists()
    assert any("Tables written" in s.value for s in at.success)
    assert error_texts(at) == []


def test_database_missing_tables(app_db, tmp_path):
    path = tmp_path / "flights.duckdb"
    conn = duckdb.connect(str(path))
    conn.execute("CREATE TABLE airlines AS SELECT 'UA' AS carrier, 'United Air Lines Inc.' AS name")
    conn.close()

    at = app_db(path).run()

    assert not at.exception
    assert any("missing tables" in w.value for w in at.warning)


def test_query_error_is_reported(app_db, tmp_path):
    """A table without the columns a query needs shows an error instead of a traceback."""
    path = tmp_path / "flights.duckdb"
    conn = duckdb.connect(str(path))
    conn.execute("CREATE TABLE airlines AS SELECT 'UA' AS carrier, 'United Air Lines Inc.' AS name")
    conn.execute("CREATE TABLE airports AS SELECT 'EWR' AS faa")
    conn.execute("CREATE TABLE flights AS SELECT 'UA' AS carrier, 'N101UA' AS tailnum")
    conn.execute("CREATE TABLE planes AS SELECT 'N101UA' AS tailnum, 'BOEING' AS manufacturer, '737' AS model")
    conn.execute("CREATE TABLE weather AS SELECT 'EWR' AS origin")
    conn.close()

    at = app_db(path).run()

    assert any("Error querying database" in text for text in error_texts(at))
