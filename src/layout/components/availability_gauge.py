"""
src/layout/components/availability_gauge.py
────────────────────────────────────────────
Fleet availability gauge using Plotly indicator chart.
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc

from config.risk import ALERT_AVAILABILITY, AVAILABILITY_TARGET, CRITICAL_AVAILABILITY
from src.analytics.risk import risk_color

CARD_BG = "#161b22"
MUTED = "#8b949e"


def availability_figure(availability: float | None, title: str, height: int = 200) -> go.Figure:
    """
    Gauge with the three risk bands and the availability target marker.

    A None availability renders an empty gauge in the muted color.
    """
    color = risk_color(availability) if availability is not None else MUTED

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=availability if availability is not None else 0.0,
        number={"suffix": "%", "valueformat": ".1f", "font": {"color": color, "size": 28}},
        title={"text": title, "font": {"color": MUTED, "size": 12}},
        gauge={
            "axis": {
                "range": [50, 100],
                "tickwidth": 1,
                "tickcolor": "#30363d",
                "tickfont": {"color": MUTED, "size": 9},
            },
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": "rgba(0,0,0,0)",
            "borderwidth": 0,
            "steps": [
                {"range": [50, CRITICAL_AVAILABILITY], "color": "rgba(218,54,51,0.15)"},
                {"range": [CRITICAL_AVAILABILITY, ALERT_AVAILABILITY], "color": "rgba(232,160,32,0.12)"},
                {"range": [ALERT_AVAILABILITY, 100], "color": "rgba(46,164,79,0.10)"},
            ],
            "threshold": {
                "line": {"color": "#2ea44f", "width": 2},
                "thickness": 0.75,
                "value": AVAILABILITY_TARGET,
            },
        },
    ))

    fig.update_layout(
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin=dict(l=20, r=20, t=40, b=20),
        height=height,
        font=dict(color="#c9d1d9"),
    )
    return fig


def availability_gauge(availability: float | None, title: str, height: int = 200) -> dcc.Graph:
    return dcc.Graph(
        figure=availability_figure(availability, title, height),
        config={"displayModeBar": False},
        style={"height": f"{height}px"},
    )
