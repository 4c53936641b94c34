"""
src/pages/production.py
────────────────────────
Shift production page: plan vs actual, deviation cost and availability
for the generated operational records.
"""
from __future__ import annotations

from collections.abc import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from src.data.models import Area, OperationalRecord, Shift
from src.i18n.translator import t

MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}


def layout(records: Sequence[OperationalRecord], lang: str | None = None) -> html.Div:
    date_min = records[0].date if records else None
    date_max = records[-1].date if records else None
    all_option = [{"label": t("filters.all", lang), "value": ""}]

    return html.Div(
        [
            html.Div(
                [
                    html.H2(t("nav.production", lang), className="page-title"),
                    html.P(t("charts.production", lang), className="page-subtitle"),
                ],
                className="page-header",
            ),

            # ── Controls ───────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.Label(t("filters.area", lang), style=_LABEL_STYLE),
                            dcc.Dropdown(
                                id="prod-area",
                                options=all_option + [{"label": a.value, "value": a.value} for a in Area],
                                value="",
                                clearable=False,
                                className="dark-dropdown",
                            ),
                        ],
                        md=3,
                    ),
                    dbc.Col(
                        [
                            html.Label(t("filters.shift", lang), style=_LABEL_STYLE),
                            dcc.Dropdown(
                                id="prod-shift",
                                options=all_option + [{"label": s.value, "value": s.value} for s in Shift],
                                value="",
                                clearable=False,
                                className="dark-dropdown",
                            ),
                        ],
                        md=3,
                    ),
                    dbc.Col(
                        [
                            html.Label(t("filters.date_range", lang), style=_LABEL_STYLE),
                            dcc.DatePickerRange(
                                id="prod-dates",
                                min_date_allowed=date_min,
                                max_date_allowed=date_max,
                                start_date=date_min,
                                end_date=date_max,
                                display_format="DD/MM/YYYY",
                            ),
                        ],
                        md=6,
                    ),
                ],
                className="g-3 mb-3",
            ),

            # ── KPI strip (dynamic) ────────────────────────────────────────────
            html.Div(id="prod-kpi-strip", className="mb-3"),

            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div(t("charts.production", lang), className="chart-title"),
                                dcc.Graph(id="prod-chart-production", config={"displayModeBar": False}),
                            ],
                            className="chart-card",
                        ),
                        md=12,
                    ),
                ],
                className="g-3 mb-3",
            ),
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div(t("charts.availability_trend", lang), className="chart-title"),
                                dcc.Graph(id="prod-chart-availability", config={"displayModeBar": False}),
                            ],
                            className="chart-card",
                        ),
                        md=12,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
