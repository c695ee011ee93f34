"""Layout components and custom theme for the Streamlit walkthrough."""

import pandas as pd
import streamlit as st

from config import APP_TITLE, VERSION, THEME_COLORS


def apply_custom_theme():
    """
    Apply a dark, monospace-heavy theme with custom CSS.

    Headers and tables use mono fonts; code snippets (the SQL shown next to
    each result) pick up the primary colour.
    """
    st.markdown(f"""
    <style>
        h1, h2, h3 {{
            font-family: 'IBM Plex Mono', 'Courier New', monospace;
            font-weight: 700;
            letter-spacing: -0.5px;
        }}

        h1 {{
            color: {THEME_COLORS['primary']};
            font-size: 2.3rem;
        }}

        h2 {{
            color: {THEME_COLORS['secondary']};
            font-size: 1.6rem;
            margin-top: 2rem;
        }}

        [data-testid="stMetricValue"] {{
            font-family: 'JetBrains Mono', 'Consolas', monospace;
            font-size: 1.4rem;
        }}

        [data-testid="stMetricLabel"] {{
            font-size: 0.85rem;
            color: {THEME_COLORS['text_dim']};
            text-transform: uppercase;
        }}

        .dataframe {{
            font-family: 'JetBrains Mono', monospace;
            font-size: 0.85rem;
        }}

        code {{
            background-color: {THEME_COLORS['surface']};
            color: {THEME_COLORS['primary']};
            border-radius: 4px;
            font-family: 'JetBrains Mono', monospace;
        }}

        hr {{
            border-color: {THEME_COLORS['text_dim']};
            opacity: 0.2;
        }}
    </style>
    """, unsafe_allow_html=True)


def render_table_summary(counts_df: pd.DataFrame):
    """
    Render one metric card per loaded table.

    Args:
        counts_df: DataFrame with table_name and row_count columns
    """
    st.markdown("### 📊 Loaded Tables")

    if counts_df.empty:
        st.info("No tables loaded yet.")
        return

    columns = st.columns(len(counts_df))
    for col, row in zip(columns, counts_df.itertuples(index=False)):
        with col:
            st.metric(label=row.table_name, value=f"{row.row_count:,}")


def render_sidebar(db_path: str):
    """Sidebar with database location and cache controls."""
    with st.sidebar:
        st.markdown("## ⚙️ Controls")
        st.caption(f"Database: `{db_path}`")

        if st.button("🗑️ Clear Cache", use_container_width=True):
            st.cache_data.clear()
            st.success("Cache cleared!")
            st.rerun()

        st.markdown("---")
        st.markdown("## ℹ️ About")
        st.caption(f"""
        **{APP_TITLE} v{VERSION}**

        Loads the NYC 2013 flights data into a local DuckDB file
        and explores it with plain SQL.

        Built with Streamlit, DuckDB, and Plotly.
        """)


def render_validation_status(validation_result):
    """
    Render table-set validation status with errors/warnings.

    Args:
        validation_result: ValidationResult object
    """
    if validation_result.is_valid:
        st.success(f"✅ Tables validated: {validation_result}")
    else:
        st.error(f"❌ Validation failed: {validation_result}")

    if validation_result.errors:
        with st.expander("❌ Errors", expanded=True):
            for error in validation_result.errors:
                st.error(error)

    if validation_result.warnings:
        with st.expander("⚠️ Warnings"):
            for warning in validation_result.warnings:
                st.warning(warning)
