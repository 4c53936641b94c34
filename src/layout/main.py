"""
src/layout/main.py
───────────────────
Root layout: client-side stores, routing, navbar, page slot and footer.

Stores:
  store-lang          active UI language
  store-quick-filter  last quick chip ("7d" | "30d" | "top5" | "all")
  store-scenario      selected availability improvement (%), 0 = none
"""
from dash import dcc, html

from config.settings import settings
from src.i18n.translator import t
from src.layout.navbar import create_navbar

PAGE_BG = "#0d1117"
MUTED = "#8b949e"
BORDER = "#30363d"


def _footer(lang: str) -> html.Footer:
    parts = [t("app.title", lang), "MTBF / MTTR", t("app.footer", lang)]
    return html.Footer(
        " · ".join(parts),
        style={
            "textAlign": "center",
            "padding": ".7rem",
            "fontSize": ".72rem",
            "color": MUTED,
            "borderTop": f"1px solid {BORDER}",
            "marginTop": "2rem",
        },
    )


def create_layout() -> html.Div:
    lang = settings.DEFAULT_LANG
    stores = [
        dcc.Store(id="store-lang", data=lang),
        dcc.Store(id="store-quick-filter", data="all"),
        dcc.Store(id="store-scenario", data=0.0),
    ]
    return html.Div(
        stores
        + [
            dcc.Location(id="url", refresh=False),
            create_navbar(lang),
            html.Div(id="page-content", style={"minHeight": "calc(100vh - 60px)"}),
            _footer(lang),
        ],
        style={"backgroundColor": PAGE_BG, "minHeight": "100vh", "color": "#c9d1d9"},
    )
