"""Shared fixtures: a tiny hand-made flights dataset."""

import pytest
import pandas as pd

from db.ingest import write_tables


@pytest.fixture
def small_tables():
    """2 airlines, 3 aircraft, 5 flights. Plane N101UA is flown by both airlines."""
    airlines = pd.DataFrame({
        "carrier": ["AA", "UA"],
        "name": ["American Airlines Inc.", "United Air Lines Inc."],
    })

    airports = pd.DataFrame({
        "faa": ["EWR", "JFK", "ORD"],
        "name": ["Newark Liberty Intl", "John F Kennedy Intl", "Chicago Ohare Intl"],
        "lat": [40.69, 40.64, 41.98],
        "lon": [-74.17, -73.78, -87.90],
    })

    planes = pd.DataFrame({
        "tailnum": ["N101UA", "N102UA", "N201AA"],
        "year": [2004, 2006, 2011],
        "manufacturer": ["BOEING", "BOEING", "AIRBUS"],
        "model": ["737-824", "737-824", "A320-232"],
    })

    flights = pd.DataFrame({
        "year": [2013] * 5,
        "month": [1, 1, 1, 2, 2],
        "day": [1, 2, 3, 1, 2],
        "carrier": ["UA", "UA", "UA", "AA", "AA"],
        "tailnum": ["N101UA", "N101UA", "N102UA", "N201AA", "N101UA"],
        "origin": ["EWR", "EWR", "JFK", "JFK", "EWR"],
        "dest": ["ORD", "ORD", "ORD", "ORD", "ORD"],
        "distance": [719.0, 719.0, 740.0, 740.0, 162.0],
    })

    weather = pd.DataFrame({
        "origin": ["EWR", "JFK"],
        "year": [2013, 2013],
        "month": [1, 1],
        "day": [1, 1],
        "hour": [5, 5],
        "temp": [39.02, 39.92],
    })

    return {
        "airlines": airlines,
        "airports": airports,
        "flights": flights,
        "planes": planes,
        "weather": weather,
    }


@pytest.fixture
def db_path(tmp_path, small_tables):
    """Database file loaded with ``small_tables``."""
    path = tmp_path / "flights.duckdb"
    write_tables(small_tables, path)
    return path
