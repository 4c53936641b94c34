"""
src/layout/components/risk_badge.py
────────────────────────────────────
Traffic-light risk badge and dot components.
"""

from dash import html

from config.risk import RISK_COLORS, RiskLevel
from src.analytics.risk import risk_label


def risk_badge(level: RiskLevel, lang: str | None = None) -> html.Span:
    """Inline risk badge with color-coded border."""
    color = RISK_COLORS.get(level, "#8b949e")
    return html.Span(
        risk_label(level, lang),
        style={
            "fontSize": ".65rem",
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "1px 7px",
            "whiteSpace": "nowrap",
        },
    )


def risk_dot(level: RiskLevel, lang: str | None = None) -> html.Span:
    """Round semaphore light; the label is exposed as a tooltip."""
    color = RISK_COLORS.get(level, "#8b949e")
    return html.Span(
        title=risk_label(level, lang),
        style={
            "display": "inline-block",
            "width": "12px",
            "height": "12px",
            "borderRadius": "50%",
            "backgroundColor": color,
            "boxShadow": f"0 0 6px {color}",
            "marginRight": "10px",
            "flexShrink": "0",
        },
    )
