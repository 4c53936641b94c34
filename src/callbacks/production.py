"""
src/callbacks/production.py
────────────────────────────
Shift production page callbacks.
"""
from __future__ import annotations

from collections.abc import Sequence

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, State

from config.equipment import NO_CRITICAL_EQUIPMENT
from config.risk import ALERT_AVAILABILITY, CRITICAL_AVAILABILITY, RISK_COLORS, RiskLevel
from src.analytics.filters import filter_operational
from src.analytics.kpis import ProductionKpis, availability_trend, compute_production_kpis, format_millions
from src.analytics.risk import risk_color
from src.data.models import OperationalRecord
from src.data.simulator import to_dataframe
from src.i18n.translator import t
from src.layout.components.kpi_card import format_kpi, mini_kpi

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"


def _layout(height: int = 300) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 10, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR},
        "yaxis": {"gridcolor": GRID_CLR},
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}},
        "height": height,
        "showlegend": True,
    }


def production_figure(records: Sequence[OperationalRecord], lang: str | None = None) -> go.Figure:
    """Daily plan vs actual tonnage (shifts summed), failure days marked."""
    fig = go.Figure()
    if records:
        daily = (
            to_dataframe(records)
            .assign(failure=lambda d: d["critical_equipment"] != NO_CRITICAL_EQUIPMENT)
            .groupby("date")
            .agg(plan=("plan_production", "sum"), actual=("actual_production", "sum"), failure=("failure", "any"))
        )
        fig.add_scatter(x=daily.index, y=daily["plan"], name=t("kpi.plan", lang),
                        line={"color": MUTED, "width": 1.5, "dash": "dot"}, mode="lines")
        fig.add_scatter(x=daily.index, y=daily["actual"], name=t("kpi.actual", lang),
                        line={"color": "#58a6ff", "width": 1.5}, mode="lines")
        failures = daily[daily["failure"]]
        fig.add_scatter(x=failures.index, y=failures["actual"], name=t("charts.failure", lang),
                        mode="markers", marker={"color": RISK_COLORS[RiskLevel.CRITICAL], "size": 7})
    fig.update_layout(**_layout())
    return fig


def shift_availability_figure(records: Sequence[OperationalRecord], lang: str | None = None) -> go.Figure:
    trend = availability_trend(records)
    fig = go.Figure()
    fig.add_scatter(x=trend.index, y=trend.values, name=t("kpi.availability", lang),
                    line={"color": "#2ea44f", "width": 1.5}, mode="lines")
    fig.add_hline(y=ALERT_AVAILABILITY, line_dash="dot", line_color=RISK_COLORS[RiskLevel.ALERT], line_width=1)
    fig.add_hline(y=CRITICAL_AVAILABILITY, line_dash="solid", line_color=RISK_COLORS[RiskLevel.CRITICAL], line_width=1)
    fig.update_layout(**_layout(240))
    return fig


def kpi_strip(kpis: ProductionKpis, lang: str | None = None) -> dbc.Row:
    deviation_color = MUTED
    if kpis.deviation_mean is not None:
        deviation_color = "#2ea44f" if kpis.deviation_mean >= 0 else "#da3633"
    avail_color = risk_color(kpis.availability_mean) if kpis.availability_mean is not None else MUTED

    cells = [
        (t("kpi.plan", lang), f"{kpis.plan_total:,} t", "#c9d1d9"),
        (t("kpi.actual", lang), f"{kpis.actual_total:,} t", "#58a6ff"),
        (t("kpi.deviation", lang), f"{format_kpi(kpis.deviation_mean, 2)}%", deviation_color),
        (t("kpi.cost", lang), f"{format_millions(kpis.cost_total)} USD", "#da3633"),
        (t("kpi.availability", lang), f"{format_kpi(kpis.availability_mean)}%", avail_color),
        (t("kpi.failure_periods", lang), str(kpis.failure_periods), "#e8a020"),
    ]
    return dbc.Row(
        [dbc.Col(mini_kpi(label, value, color), xs=6, md=2) for label, value, color in cells],
        className="g-2",
        style={"padding": "8px 0"},
    )


def register(app, records: Sequence[OperationalRecord]) -> None:

    @app.callback(
        [
            Output("prod-kpi-strip", "children"),
            Output("prod-chart-production", "figure"),
            Output("prod-chart-availability", "figure"),
        ],
        [
            Input("prod-area", "value"),
            Input("prod-shift", "value"),
            Input("prod-dates", "start_date"),
            Input("prod-dates", "end_date"),
        ],
        State("store-lang", "data"),
    )
    def update_production(area, shift, start_date, end_date, lang):
        filtered = filter_operational(
            records,
            area=area or None,
            shift=shift or None,
            date_from=(start_date or "")[:10] or None,
            date_to=(end_date or "")[:10] or None,
        )
        kpis = compute_production_kpis(filtered)
        return kpi_strip(kpis, lang), production_figure(filtered, lang), shift_availability_figure(filtered, lang)
