"""
src/callbacks/navigation.py — Page routing, navbar collapse and language toggle.
"""
from __future__ import annotations

from collections.abc import Sequence

from dash import Input, Output, State, ctx

from src.data.models import AssetReliabilityRecord, OperationalRecord
from src.layout.navbar import lang_btn_style


def register(
    app,
    asset_records: Sequence[AssetReliabilityRecord],
    operational_records: Sequence[OperationalRecord],
) -> None:
    """Register routing callbacks; pages are built from the app-owned datasets."""

    # ── Page routing ──────────────────────────────────────────────────────────
    from src.pages import production, reliability

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
        Input("store-lang", "data"),
    )
    def display_page(pathname: str, lang: str):
        if pathname == "/production":
            return production.layout(operational_records, lang)
        return reliability.layout(asset_records, lang)

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Language toggle ───────────────────────────────────────────────────────
    @app.callback(
        Output("store-lang", "data"),
        Output("lang-es-btn", "style"),
        Output("lang-en-btn", "style"),
        Input("lang-es-btn", "n_clicks"),
        Input("lang-en-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def update_lang(n_es: int, n_en: int):
        lang = "en" if ctx.triggered_id == "lang-en-btn" else "es"
        return lang, lang_btn_style(lang == "es"), lang_btn_style(lang == "en")
