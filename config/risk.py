"""
config/risk.py
──────────────
Availability risk levels, thresholds, and display configuration.

Three-level traffic light on availability (%):
  availability < 80          → critical
  80 ≤ availability < 88     → alert
  availability ≥ 88          → normal
"""

from enum import Enum


class RiskLevel(str, Enum):
    NORMAL = "normal"
    ALERT = "alert"
    CRITICAL = "critical"


CRITICAL_AVAILABILITY = 80.0
ALERT_AVAILABILITY = 88.0

# Reference line drawn on availability charts
AVAILABILITY_TARGET = 90.0

RISK_COLORS: dict[str, str] = {
    RiskLevel.NORMAL: "#2ea44f",
    RiskLevel.ALERT: "#e8a020",
    RiskLevel.CRITICAL: "#da3633",
}

RISK_BG: dict[str, str] = {
    RiskLevel.NORMAL: "rgba(46,164,79,0.75)",
    RiskLevel.ALERT: "rgba(232,160,32,0.75)",
    RiskLevel.CRITICAL: "rgba(218,54,51,0.75)",
}

IMPROVEMENT_SCENARIOS_PCT = (1.0, 2.0, 3.0)
MAX_TABLE_ROWS = 50
RISK_PANEL_SIZE = 6
