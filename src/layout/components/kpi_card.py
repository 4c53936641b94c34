"""
src/layout/components/kpi_card.py
──────────────────────────────────
KPI indicator cards for the reliability and production pages.
"""
from dash import html

CARD_BG = "#161b22"
MUTED = "#8b949e"
EMPTY_VALUE = "—"


def format_kpi(value: float | None, decimals: int = 1) -> str:
    """Fixed-decimal KPI value, or an em dash when there is no data."""
    if value is None:
        return EMPTY_VALUE
    return f"{value:,.{decimals}f}"


def kpi_card(
    label: str,
    value: str,
    unit: str = "",
    color: str = "#c9d1d9",
    sub_label: str = "",
    border_color: str = "#30363d",
) -> html.Div:
    """
    Compact KPI metric card.

    Args:
        label: Metric name (shown above value)
        value: Formatted value string
        unit: Unit suffix rendered smaller next to the value
        color: Value text color (reflects risk level)
        sub_label: Small secondary label below value
        border_color: Card border color
    """
    value_children = [html.Span(value)]
    if unit and value != EMPTY_VALUE:
        value_children.append(html.Span(f" {unit}", style={"fontSize": ".8rem", "color": MUTED, "fontWeight": "400"}))

    children = [
        html.Div(label, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
        html.Div(value_children, style={"fontSize": "1.4rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"}),
    ]
    if sub_label:
        children.append(html.Div(sub_label, style={"fontSize": ".68rem", "color": MUTED, "marginTop": "2px"}))

    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {border_color}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "120px",
        },
    )


def mini_kpi(label: str, value: str, color: str = "#c9d1d9") -> html.Div:
    """Compact inline KPI for the production summary strip."""
    return html.Div([
        html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
        html.Div(value, style={"fontSize": ".85rem", "fontWeight": "700", "color": color}),
    ])
