"""
src/layout/navbar.py
─────────────────────
Top bar: dashboard title, one link per page and the ES / EN toggle.
"""

import dash_bootstrap_components as dbc
from dash import html

from src.i18n.translator import SUPPORTED_LANGS, t

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"

# (locale key, path, element id)
PAGES = (
    ("nav.reliability", "/", "nav-reliability"),
    ("nav.production", "/production", "nav-production"),
)


def lang_btn_style(active: bool) -> dict:
    return {
        "background": "rgba(88,166,255,0.15)" if active else "transparent",
        "border": f"1px solid {BORDER}",
        "color": ACCENT if active else "#8b949e",
        "borderRadius": "4px",
        "fontSize": ".72rem",
        "fontWeight": "700",
        "padding": "2px 8px",
        "cursor": "pointer",
    }


def _lang_toggle(lang: str | None) -> html.Div:
    current = lang if lang in SUPPORTED_LANGS else SUPPORTED_LANGS[0]
    return html.Div(
        [
            html.Button(code.upper(), id=f"lang-{code}-btn", n_clicks=0, style=lang_btn_style(code == current))
            for code in SUPPORTED_LANGS
        ],
        style={"display": "flex", "gap": "4px", "alignItems": "center", "marginLeft": "12px"},
    )


def create_navbar(lang: str | None = None) -> dbc.Navbar:
    links = [
        dbc.NavItem(dbc.NavLink(t(key, lang), href=path, id=element_id, active="exact"))
        for key, path, element_id in PAGES
    ]
    brand = dbc.NavbarBrand(
        [
            html.Span("⛏", style={"marginRight": "8px", "fontSize": "1.1rem"}),
            html.Span(t("app.title", lang), style={"fontWeight": "700", "letterSpacing": ".04em"}),
        ],
        href="/",
        style={"color": ACCENT, "textDecoration": "none"},
    )
    return dbc.Navbar(
        dbc.Container(
            [
                brand,
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(links + [dbc.NavItem(_lang_toggle(lang))], className="ms-auto", navbar=True),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
