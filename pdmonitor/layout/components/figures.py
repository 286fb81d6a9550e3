"""
pdmonitor/layout/components/figures.py
───────────────────────────────────────
Plotly figures for the chart views (PRPD, PRPS, signal trace).
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc

from pdmonitor.analytics.projections import (
    prps_intensity_range,
    prps_slices,
    signal_series,
    sine_reference,
    split_scatter,
)
from pdmonitor.data.models import ChartDataset

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"
CHART_HEIGHT = 500

_GRAPH_CONFIG = {
    "responsive": True,
    "displayModeBar": True,
    "modeBarButtonsToRemove": ["lasso2d", "select2d"],
    "displaylogo": False,
}


def _base_layout(x_title: str, y_title: str, showlegend: bool = True) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 50, "r": 20, "t": 20, "b": 40},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"title": {"text": x_title}, "gridcolor": GRID_CLR, "showgrid": True, "zeroline": False},
        "yaxis": {"title": {"text": y_title}, "gridcolor": GRID_CLR, "showgrid": True, "zeroline": False},
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}, "orientation": "h", "y": -0.2},
        "showlegend": showlegend,
        "height": CHART_HEIGHT,
    }


def prpd_figure(dataset: ChartDataset) -> go.Figure:
    """Amplitude vs phase scatter coloured by intensity, over the sine reference."""
    columns = split_scatter(dataset.scatter_points)
    reference = sine_reference(dataset)

    fig = go.Figure()
    if reference is not None:
        fig.add_scatter(
            x=reference[0],
            y=reference[1],
            mode="lines",
            name="相位参考",
            line={"color": "rgba(156,163,175,0.5)", "dash": "dot"},
            hoverinfo="skip",
        )
    fig.add_scatter(
        x=columns.phase,
        y=columns.amplitude,
        mode="markers",
        name="放电点",
        marker={
            "color": columns.intensity,
            "colorscale": "Viridis",
            "size": 4,
            "showscale": True,
            "colorbar": {"title": {"text": "密度"}, "thickness": 20, "len": 0.75},
        },
        hovertemplate="相位 %{x:.1f}°<br>幅值 %{y:.2f} dBmV<extra></extra>",
    )

    layout = _base_layout("相位 (°)", "幅值 (dBmV)")
    layout["xaxis"]["range"] = [0, 360]
    fig.update_layout(**layout)
    return fig


def prps_figure(dataset: ChartDataset) -> go.Figure:
    """One single-row heatmap per sequence step on a shared phase axis."""
    fig = go.Figure()
    for step in prps_slices(dataset):
        fig.add_heatmap(
            x=step.x,
            y=[step.step],
            z=[step.z],
            coloraxis="coloraxis",
            hovertemplate="相位段 %{x}<br>幅值段 %{y}<br>%{z}<extra></extra>",
        )

    layout = _base_layout("相位段", "幅值段", showlegend=False)
    coloraxis: dict = {"colorscale": "Viridis"}
    z_range = prps_intensity_range(dataset)
    if z_range is not None:
        coloraxis.update(cmin=z_range[0], cmax=z_range[1])
    layout["coloraxis"] = coloraxis
    fig.update_layout(**layout)
    return fig


def signal_figure(dataset: ChartDataset) -> go.Figure:
    """Peak value against sample index."""
    x, y = signal_series(dataset)
    fig = go.Figure()
    fig.add_scatter(
        x=x,
        y=y,
        mode="lines",
        name="信号强度",
        line={"color": "#58a6ff", "width": 1},
        hovertemplate="采样点 %{x}<br>%{y:.2f} dBmV<extra></extra>",
    )
    fig.update_layout(**_base_layout("采样点", "信号强度 (dBmV)"))
    return fig


def chart_graph(fig: go.Figure, graph_id: str) -> dcc.Graph:
    return dcc.Graph(
        id=graph_id,
        figure=fig,
        config=_GRAPH_CONFIG,
        style={"width": "100%", "height": f"{CHART_HEIGHT}px"},
    )
