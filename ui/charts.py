"""Chart generation module using Plotly."""

import plotly.graph_objects as go
import pandas as pd

from config import (
    CHART_HEIGHT,
    CHART_TEMPLATE,
    DEFAULT_AIRLINE,
    MARKER_OPACITY,
    MARKER_SIZE,
    THEME_COLORS,
    TILE_COLORSCALE,
)


def prepare_fleet_tiles(fleet_df: pd.DataFrame, airline: str = DEFAULT_AIRLINE) -> pd.DataFrame:
    """
    Keep one airline's planes with a known manufacturer and model.

    Args:
        fleet_df: Result of the fleet composition query
        airline: Full airline name (e.g., "United Air Lines Inc.")

    Returns:
        Filtered copy with the original columns

    Raises:
        KeyError: If manufacturer, model or airline columns are missing
    """
    df = fleet_df.dropna(subset=["manufacturer", "model"])
    df = df[df["airline"] == airline]
    return df.reset_index(drop=True)


def create_flights_distance_scatter(per_plane_df: pd.DataFrame) -> go.Figure:
    """Scatter of flights per plane against its mean flight distance."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=per_plane_df["n_flights"],
        y=per_plane_df["avg_distance"],
        text=per_plane_df["tailnum"] if "tailnum" in per_plane_df.columns else None,
        name="Planes",
        mode="markers",
        marker=dict(color=THEME_COLORS["primary"], size=MARKER_SIZE, opacity=MARKER_OPACITY),
        hovertemplate="%{text}<br>Flights: %{x}<br>Mean distance: %{y:.0f} mi<extra></extra>",
    ))

    fig.update_layout(
        template=CHART_TEMPLATE,
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=40, b=10),
        title="Flights per plane vs. mean distance",
        xaxis_title="Number of flights",
        yaxis_title="Mean distance (miles)",
        showlegend=False
    )

    return fig


def create_fleet_tile_chart(tiles_df: pd.DataFrame, airline: str = DEFAULT_AIRLINE) -> go.Figure:
    """
    Tile plot of plane counts by model (x) and manufacturer (y).

    Expects the output of ``prepare_fleet_tiles``.
    """
    grid = tiles_df.pivot_table(
        index="manufacturer",
        columns="model",
        values="n_planes",
        aggfunc="sum"
    )

    fig = go.Figure()

    fig.add_trace(go.Heatmap(
        x=list(grid.columns),
        y=list(grid.index),
        z=grid.values,
        colorscale=TILE_COLORSCALE,
        colorbar=dict(title="Planes"),
        xgap=1,
        ygap=1,
        hovertemplate="%{y} %{x}<br>Planes: %{z}<extra></extra>",
    ))

    fig.update_layout(
        template=CHART_TEMPLATE,
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=40, b=10),
        title=f"Fleet composition: {airline}",
        xaxis_title="Model",
        yaxis_title="Manufacturer",
    )
    fig.update_xaxes(type="category", tickangle=-45)
    fig.update_yaxes(type="category")

    return fig
