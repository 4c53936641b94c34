"""
src/callbacks/reliability.py
─────────────────────────────
Asset reliability page callbacks.

The dataset is owned by app.py and handed to register(); every update
recomputes aggregates from the filtered subset.
"""
from __future__ import annotations

from collections.abc import Sequence

import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objects as go
from dash import ALL, Input, Output, State, ctx, html

from config.risk import AVAILABILITY_TARGET, RISK_BG, RISK_COLORS, RISK_PANEL_SIZE, RiskLevel
from src.analytics.filters import FilterCriteria, apply_filters, apply_quick_filter, filter_options, quick_range_criteria
from src.analytics.kpis import (
    FleetKpis,
    asset_ranking,
    availability_trend,
    compute_fleet_kpis,
    format_date,
    format_millions,
    simulate_improvement,
    top_impact_records,
)
from src.analytics.risk import build_insight, classify_availability, risk_color
from src.data.models import AssetReliabilityRecord
from src.i18n.translator import t
from src.layout.components.availability_gauge import availability_gauge
from src.layout.components.kpi_card import format_kpi, kpi_card
from src.layout.components.risk_badge import risk_badge, risk_dot

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"


def _base_layout(height: int = 260) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 10, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR, "showgrid": True},
        "yaxis": {"gridcolor": GRID_CLR, "showgrid": True},
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}},
        "height": height,
    }


def _truncate(name: str, width: int) -> str:
    return name if len(name) <= width else name[: width - 2] + "…"


# ── Figures ───────────────────────────────────────────────────────────────────


def availability_trend_figure(records: Sequence[AssetReliabilityRecord], lang: str | None = None) -> go.Figure:
    trend = availability_trend(records)
    fig = go.Figure()
    fig.add_scatter(
        x=[format_date(d) for d in trend.index],
        y=trend.values,
        line={"color": "#58a6ff", "width": 2, "shape": "spline"},
        fill="tozeroy",
        fillcolor="rgba(88,166,255,0.08)",
        name=t("charts.availability_trend", lang),
        mode="lines",
        hovertemplate="%{x}<br>%{y:.1f}%<extra></extra>",
    )
    fig.add_hline(
        y=AVAILABILITY_TARGET, line_dash="dash", line_color=RISK_COLORS[RiskLevel.NORMAL], line_width=1,
        annotation_text=t("charts.target", lang), annotation_font_color=RISK_COLORS[RiskLevel.NORMAL],
        annotation_font_size=9,
    )
    fig.update_layout(**{**_base_layout(), "yaxis": {"range": [60, 100], "gridcolor": GRID_CLR}})
    return fig


def mtbf_mttr_figure(ranking: pd.DataFrame) -> go.Figure:
    labels = [_truncate(a, 16) for a in ranking["asset"]]
    fig = go.Figure()
    fig.add_bar(x=labels, y=ranking["mtbf"], name="MTBF (hrs)", marker_color="rgba(46,164,79,0.7)")
    fig.add_bar(x=labels, y=ranking["mttr"], name="MTTR (hrs)", marker_color="rgba(232,160,32,0.7)")
    fig.update_layout(**{**_base_layout(), "barmode": "group"})
    return fig


def ranking_figure(ranking: pd.DataFrame) -> go.Figure:
    colors = [RISK_BG[RiskLevel(level)] for level in ranking["risk"]]
    fig = go.Figure()
    fig.add_bar(
        y=[_truncate(a, 20) for a in ranking["asset"]],
        x=ranking["impact"] / 1e6,
        orientation="h",
        marker_color=colors,
        hovertemplate="USD %{x:.3f} MM<extra></extra>",
        showlegend=False,
    )
    fig.update_layout(**{**_base_layout(), "yaxis": {"autorange": "reversed", "gridcolor": GRID_CLR}})
    return fig


# ── Panels ────────────────────────────────────────────────────────────────────


def kpi_banner(kpis: FleetKpis, lang: str | None = None) -> dbc.Row:
    avail_color = risk_color(kpis.availability_mean) if kpis.availability_mean is not None else MUTED
    impact = format_millions(kpis.impact_total) if kpis.record_count else "—"
    return dbc.Row(
        [
            dbc.Col(kpi_card(
                t("kpi.availability", lang), format_kpi(kpis.availability_mean), "%", avail_color,
                sub_label=t("kpi.assets_records", lang).format(assets=kpis.asset_count, records=kpis.record_count),
                border_color=avail_color,
            ), xs=6, md=3),
            dbc.Col(kpi_card(t("kpi.mtbf", lang), format_kpi(kpis.mtbf_mean), "hrs", "#2ea44f",
                             sub_label=t("kpi.mtbf_sub", lang)), xs=6, md=3),
            dbc.Col(kpi_card(t("kpi.mttr", lang), format_kpi(kpis.mttr_mean), "hrs", "#e8a020",
                             sub_label=t("kpi.mttr_sub", lang)), xs=6, md=3),
            dbc.Col(kpi_card(t("kpi.impact", lang), impact, "USD", "#da3633",
                             sub_label=t("kpi.impact_sub", lang)), xs=6, md=3),
        ],
        className="g-3",
    )


def risk_panel(ranking: pd.DataFrame, lang: str | None = None) -> html.Div:
    if ranking.empty:
        return html.Div(t("risk.empty", lang), style={"color": MUTED, "padding": "20px", "textAlign": "center"})

    items = []
    for _, row in ranking.head(RISK_PANEL_SIZE).iterrows():
        level = RiskLevel(row["risk"])
        color = RISK_COLORS[level]
        items.append(
            html.Div(
                [
                    risk_dot(level, lang),
                    html.Div(
                        [
                            html.Div(row["asset"], style={"fontWeight": "600", "fontSize": ".85rem"}),
                            html.Div(
                                f"{row['area']} · {row['asset_type'].capitalize()} · {row['availability']:.1f}%",
                                style={"fontSize": ".7rem", "color": MUTED},
                            ),
                        ],
                        style={"flex": "1"},
                    ),
                    html.Div(format_millions(row["impact"]), style={"color": color, "fontWeight": "700", "fontSize": ".85rem"}),
                ],
                style={"display": "flex", "alignItems": "center", "padding": "6px 0", "borderBottom": f"1px solid {GRID_CLR}"},
            )
        )
    return html.Div(items)


def impact_table(records: Sequence[AssetReliabilityRecord], lang: str | None = None) -> html.Div:
    if not records:
        return html.Div(t("insight.empty", lang), style={"color": MUTED, "padding": "20px", "textAlign": "center"})

    headers = ["asset", "area", "type", "date", "availability", "mtbf", "mttr", "failure_hours", "impact", "risk"]
    rows = []
    for r in top_impact_records(records):
        rows.append(html.Tr([
            html.Td(r.asset, style={"fontWeight": "600"}),
            html.Td(r.area.value),
            html.Td(r.asset_type.capitalize()),
            html.Td(format_date(r.date), style={"color": MUTED}),
            html.Td(f"{r.availability:.1f}%", style={"color": risk_color(r.availability), "fontWeight": "700"}),
            html.Td(f"{r.mtbf:.1f}"),
            html.Td(f"{r.mttr:.1f}"),
            html.Td(f"{r.failure_hours:.2f}"),
            html.Td(format_millions(r.economic_impact), style={"color": "#da3633"}),
            html.Td(risk_badge(classify_availability(r.availability), lang)),
        ]))
    return html.Table(
        [
            html.Thead(html.Tr([html.Th(t(f"table.{h}", lang)) for h in headers],
                               style={"color": MUTED, "fontSize": ".65rem", "textTransform": "uppercase"})),
            html.Tbody(rows),
        ],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": ".78rem"},
    )


def simulation_result(records: Sequence[AssetReliabilityRecord], pct: float, lang: str | None = None) -> html.Div:
    if not pct or not records:
        return html.P(t("simulation.prompt", lang), style={"color": MUTED, "fontSize": ".8rem"})

    savings = simulate_improvement(records, pct)
    assets = len({r.asset for r in records})
    return html.Div(
        [
            html.Div(t("simulation.result", lang).format(pct=f"{pct:g}"), style={"fontWeight": "600"}),
            html.Div(
                t("kpi.assets_records", lang).format(assets=assets, records=len(records)),
                style={"fontSize": ".72rem", "color": MUTED},
            ),
            html.Div(f"+ {format_millions(savings)} USD",
                     style={"fontSize": "1.5rem", "fontWeight": "700", "color": "#2ea44f", "marginTop": "6px"}),
        ]
    )


# ── Registration ──────────────────────────────────────────────────────────────


def register(app, records: Sequence[AssetReliabilityRecord]) -> None:
    opts = filter_options(records)

    @app.callback(
        [
            Output("filter-area", "value"),
            Output("filter-type", "value"),
            Output("filter-asset", "value"),
            Output("filter-dates", "start_date"),
            Output("filter-dates", "end_date"),
            Output("store-quick-filter", "data"),
        ],
        [
            Input("btn-reset", "n_clicks"),
            Input({"type": "quick-chip", "index": ALL}, "n_clicks"),
        ],
        prevent_initial_call=True,
    )
    def reset_or_quick_filter(n_reset, n_chips):
        trigger = ctx.triggered_id
        quick = trigger["index"] if isinstance(trigger, dict) else "all"
        criteria = FilterCriteria(date_from=opts.date_min, date_to=opts.date_max)
        if quick in ("7d", "30d"):
            criteria = quick_range_criteria(records, 7 if quick == "7d" else 30)
        return "", "", "", criteria.date_from, criteria.date_to, quick

    @app.callback(
        Output("store-scenario", "data"),
        Input({"type": "sim-btn", "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def select_scenario(n_clicks):
        trigger = ctx.triggered_id
        return float(trigger["index"]) if isinstance(trigger, dict) else 0.0

    @app.callback(
        [
            Output("rel-kpi-banner", "children"),
            Output("rel-gauge", "children"),
            Output("rel-chart-availability", "figure"),
            Output("rel-chart-mtbf-mttr", "figure"),
            Output("rel-chart-ranking", "figure"),
            Output("rel-risk-list", "children"),
            Output("rel-insight", "children"),
            Output("rel-table", "children"),
            Output("rel-sim-result", "children"),
        ],
        [
            Input("filter-area", "value"),
            Input("filter-type", "value"),
            Input("filter-asset", "value"),
            Input("filter-dates", "start_date"),
            Input("filter-dates", "end_date"),
            Input("store-quick-filter", "data"),
            Input("store-scenario", "data"),
        ],
        State("store-lang", "data"),
    )
    def update_reliability(area, asset_type, asset, start_date, end_date, quick, scenario, lang):
        criteria = FilterCriteria(
            area=area or None,
            asset_type=asset_type or None,
            asset=asset or None,
            date_from=(start_date or "")[:10] or None,
            date_to=(end_date or "")[:10] or None,
        )
        filtered = apply_filters(records, criteria)
        if quick == "top5":
            filtered = apply_quick_filter(filtered, "top5")

        kpis = compute_fleet_kpis(filtered)
        ranking = asset_ranking(filtered)
        insight = build_insight(ranking, lang)
        if insight is not None and classify_availability(float(ranking.iloc[0]["availability"])) != RiskLevel.NORMAL:
            insight = "⚠ " + insight

        return (
            kpi_banner(kpis, lang),
            availability_gauge(kpis.availability_mean, t("kpi.availability", lang), height=220),
            availability_trend_figure(filtered, lang),
            mtbf_mttr_figure(ranking),
            ranking_figure(ranking),
            risk_panel(ranking, lang),
            insight or t("insight.empty", lang),
            impact_table(filtered, lang),
            simulation_result(filtered, scenario or 0.0, lang),
        )
