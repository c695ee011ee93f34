"""
Flights DuckDB Walkthrough
==========================

Loads the NYC 2013 flights tables into a local DuckDB file and walks
through four SQL queries and two charts.

Run with: streamlit run app.py
"""

import streamlit as st
import pandas as pd
import duckdb

from core.io import load_flight_tables, validate_tables
from db.ingest import write_tables
from db.query import (
    AIRLINES_SQL,
    FLIGHTS_SQL,
    FLIGHTS_PER_PLANE_SQL,
    FLEET_COMPOSITION_SQL,
    run_fixed_query,
)
from db.schema import list_tables, table_row_counts

from ui.layout import (
    apply_custom_theme,
    render_sidebar,
    render_table_summary,
    render_validation_status,
)
from ui.charts import (
    prepare_fleet_tiles,
    create_flights_distance_scatter,
    create_fleet_tile_chart,
)
from ui.exports import export_result_csv

from config import (
    APP_TITLE,
    APP_ICON,
    DEFAULT_AIRLINE,
    DEFAULT_DB_PATH,
    DEFAULT_ROW_LIMIT,
    MAX_TABLE_ROWS,
    TABLE_NAMES,
)


@st.cache_data(show_spinner=False)
def cached_query(name: str, limit: int, db_path: str) -> pd.DataFrame:
    return run_fixed_query(name, limit=limit, db_path=db_path)


def render_query(title: str, name: str, sql: str, limit: int = DEFAULT_ROW_LIMIT) -> pd.DataFrame:
    """Show a query's SQL, its result table and a CSV download."""
    st.header(title)
    st.code(sql.format(limit=limit).strip(), language="sql")

    df = cached_query(name, limit, str(DEFAULT_DB_PATH))
    st.dataframe(df.head(MAX_TABLE_ROWS), use_container_width=True)
    st.caption(f"{len(df):,} rows")

    st.download_button(
        "📥 Download CSV",
        data=export_result_csv(df),
        file_name=f"{name}.csv",
        mime="text/csv",
        key=f"download_{name}",
    )
    return df


# Page config
st.set_page_config(
    page_title=APP_TITLE,
    page_icon=APP_ICON,
    layout="wide",
)

apply_custom_theme()
render_sidebar(str(DEFAULT_DB_PATH))

st.markdown(f"# {APP_ICON} {APP_TITLE}")
st.markdown("---")

# ==================== STEP 1: LOAD ====================
st.header("1. Load the data")

if st.button("🚀 Load nycflights13 into DuckDB", type="primary"):
    with st.spinner("Writing tables..."):
        try:
            tables = load_flight_tables()
            validation = validate_tables(tables)
            render_validation_status(validation)

            if validation.is_valid:
                write_tables(tables, DEFAULT_DB_PATH)
                st.cache_data.clear()
                st.success("✅ Tables written")
        except (duckdb.Error, ValueError) as e:
            st.error(f"❌ Error loading data: {str(e)}")
            st.exception(e)

if not DEFAULT_DB_PATH.exists():
    st.info("💡 No database yet. Load the data above to continue.")
    st.stop()

# ==================== STEP 2: QUERIES ====================
try:
    missing = set(TABLE_NAMES) - set(list_tables(DEFAULT_DB_PATH))
    if missing:
        st.warning(f"⚠️ Database is missing tables: {', '.join(sorted(missing))}. Reload the data above.")
        st.stop()

    render_table_summary(table_row_counts(DEFAULT_DB_PATH))
    st.markdown("---")

    render_query("2. Airlines", "airlines", AIRLINES_SQL)
    render_query("3. Flights", "flights", FLIGHTS_SQL)

    per_plane = render_query("4. Flights per plane", "flights_per_plane", FLIGHTS_PER_PLANE_SQL)
    st.plotly_chart(create_flights_distance_scatter(per_plane), use_container_width=True)

    fleet = render_query("5. Fleet composition", "fleet_composition", FLEET_COMPOSITION_SQL)

    airlines = sorted(fleet["airline"].dropna().unique())
    airline = st.selectbox(
        "Airline",
        airlines,
        index=airlines.index(DEFAULT_AIRLINE) if DEFAULT_AIRLINE in airlines else 0,
    )

    tiles = prepare_fleet_tiles(fleet, airline)
    if tiles.empty:
        st.warning(f"⚠️ No planes with known manufacturer/model for {airline}")
    else:
        st.plotly_chart(create_fleet_tile_chart(tiles, airline), use_container_width=True)

except duckdb.Error as e:
    st.error(f"❌ Error querying database: {str(e)}")
    st.exception(e)
