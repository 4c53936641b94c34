"""
src/analytics/risk.py
─────────────────────
Availability risk classification.

  availability < 80       → critical
  80 ≤ availability < 88  → alert
  otherwise               → normal

Also builds the automatic insight sentence for the highest-impact asset.
"""
from __future__ import annotations

import pandas as pd

from config.risk import ALERT_AVAILABILITY, CRITICAL_AVAILABILITY, RISK_COLORS, RiskLevel
from src.i18n.translator import t


def classify_availability(
    availability: float,
    critical_below: float = CRITICAL_AVAILABILITY,
    alert_below: float = ALERT_AVAILABILITY,
) -> RiskLevel:
    if availability < critical_below:
        return RiskLevel.CRITICAL
    if availability < alert_below:
        return RiskLevel.ALERT
    return RiskLevel.NORMAL


def risk_color(availability: float) -> str:
    return RISK_COLORS[classify_availability(availability)]


def risk_label(level: RiskLevel, lang: str | None = None) -> str:
    return t(f"risk.{level.value}", lang)


def build_insight(ranking: pd.DataFrame, lang: str | None = None) -> str | None:
    """
    One-sentence insight about the asset at the top of an impact ranking.

    Args:
        ranking: Output of kpis.asset_ranking (sorted by impact, descending)
        lang: Language override

    Returns:
        Insight text, or None when the ranking is empty.
    """
    # Local import: kpis imports this module for per-asset risk levels
    from src.analytics.kpis import format_millions

    if ranking.empty:
        return None

    top = ranking.iloc[0]
    level = classify_availability(float(top["availability"]))
    level_key = "insight.level_critical" if level == RiskLevel.CRITICAL else "insight.level_alert"
    return t("insight.template", lang).format(
        asset=top["asset"],
        availability=f"{float(top['availability']):.1f}",
        level=t(level_key, lang),
        impact=format_millions(float(top["impact"])),
    )
