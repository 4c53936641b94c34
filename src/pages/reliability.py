"""
src/pages/reliability.py
─────────────────────────
Asset reliability page: filters, KPIs, charts, risk panel, improvement
simulation and the top-impact table.

Selector options come from the loaded dataset; dynamic content is injected
via callbacks.
"""
from __future__ import annotations

from collections.abc import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.risk import IMPROVEMENT_SCENARIOS_PCT
from src.analytics.filters import filter_options
from src.data.models import AssetReliabilityRecord
from src.i18n.translator import t

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}

QUICK_FILTERS = ("7d", "30d", "top5")


def _options(values: list[str], lang: str | None) -> list[dict]:
    return [{"label": t("filters.all", lang), "value": ""}] + [
        {"label": v[:1].upper() + v[1:], "value": v} for v in values
    ]


def _dropdown(label: str, element_id: str, values: list[str], lang: str | None) -> dbc.Col:
    return dbc.Col(
        [
            html.Label(label, style=_LABEL_STYLE),
            dcc.Dropdown(
                id=element_id,
                options=_options(values, lang),
                value="",
                clearable=False,
                className="dark-dropdown",
            ),
        ],
        md=2,
    )


def _chart_card(title: str, graph_id: str, md: int) -> dbc.Col:
    return dbc.Col(
        html.Div(
            [
                html.Div(title, className="chart-title"),
                dcc.Graph(id=graph_id, config={"displayModeBar": False}),
            ],
            className="chart-card",
        ),
        md=md,
    )


def layout(records: Sequence[AssetReliabilityRecord], lang: str | None = None) -> html.Div:
    opts = filter_options(records)
    return html.Div(
        [
            html.Div(
                [
                    html.H2(t("app.title", lang), className="page-title"),
                    html.P(t("app.subtitle", lang), className="page-subtitle"),
                ],
                className="page-header",
            ),

            # ── Filters ────────────────────────────────────────────────────────
            dbc.Row(
                [
                    _dropdown(t("filters.area", lang), "filter-area", opts.areas, lang),
                    _dropdown(t("filters.asset_type", lang), "filter-type", opts.asset_types, lang),
                    _dropdown(t("filters.asset", lang), "filter-asset", opts.assets, lang),
                    dbc.Col(
                        [
                            html.Label(t("filters.date_range", lang), style=_LABEL_STYLE),
                            dcc.DatePickerRange(
                                id="filter-dates",
                                min_date_allowed=opts.date_min,
                                max_date_allowed=opts.date_max,
                                start_date=opts.date_min,
                                end_date=opts.date_max,
                                display_format="DD/MM/YYYY",
                            ),
                        ],
                        md=4,
                    ),
                    dbc.Col(
                        html.Button(
                            t("filters.reset", lang),
                            id="btn-reset",
                            n_clicks=0,
                            className="btn btn-outline-secondary btn-sm",
                            style={"marginTop": "22px"},
                        ),
                        md=2,
                    ),
                ],
                className="g-3 mb-2",
            ),
            html.Div(
                [
                    html.Button(
                        t(f"filters.quick_{name}", lang),
                        id={"type": "quick-chip", "index": name},
                        n_clicks=0,
                        className="btn btn-outline-info btn-sm",
                        style={"marginRight": "6px"},
                    )
                    for name in QUICK_FILTERS
                ],
                className="mb-3",
            ),

            # ── KPI banner (dynamic) ───────────────────────────────────────────
            html.Div(id="rel-kpi-banner", className="mb-3"),

            # ── Charts ─────────────────────────────────────────────────────────
            dbc.Row(
                [
                    _chart_card(t("charts.availability_trend", lang), "rel-chart-availability", 8),
                    dbc.Col(
                        html.Div(
                            [
                                html.Div(t("kpi.availability", lang), className="chart-title"),
                                html.Div(id="rel-gauge"),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                ],
                className="g-3 mb-3",
            ),
            dbc.Row(
                [
                    _chart_card(t("charts.mtbf_mttr", lang), "rel-chart-mtbf-mttr", 6),
                    _chart_card(t("charts.ranking", lang), "rel-chart-ranking", 6),
                ],
                className="g-3 mb-3",
            ),

            # ── Risk panel + simulation ────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div(t("risk.panel", lang), className="chart-title"),
                                html.Div(id="rel-risk-list"),
                                html.Div(id="rel-insight", style={"fontSize": ".8rem", "color": MUTED, "marginTop": "10px"}),
                            ],
                            className="chart-card",
                        ),
                        md=6,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                html.Div(t("simulation.title", lang), className="chart-title"),
                                html.Div(
                                    [
                                        html.Button(
                                            f"+{pct:g}%",
                                            id={"type": "sim-btn", "index": pct},
                                            n_clicks=0,
                                            className="btn btn-outline-success btn-sm",
                                            style={"marginRight": "6px"},
                                        )
                                        for pct in IMPROVEMENT_SCENARIOS_PCT
                                    ],
                                    className="mb-2",
                                ),
                                html.Div(id="rel-sim-result"),
                            ],
                            className="chart-card",
                        ),
                        md=6,
                    ),
                ],
                className="g-3 mb-3",
            ),

            # ── Table ──────────────────────────────────────────────────────────
            html.Div(
                [
                    html.Div(t("table.title", lang), className="chart-title"),
                    html.Div(id="rel-table"),
                ],
                className="chart-card",
            ),
        ],
        style={"padding": "1.5rem"},
    )
