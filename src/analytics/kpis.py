"""
src/analytics/kpis.py
─────────────────────
Aggregations over filtered record sets.

Fleet KPIs (asset records):
  availability / MTBF / MTTR  mean over records
  economic impact             sum over records
Production KPIs (shift records):
  plan / actual / cost sums, mean deviation, availability spread

Also: per-asset ranking, availability trend by date, the top-impact
table, and the availability-improvement savings estimate:

  savings = Σ (min(1, a + p) − a) · scheduled_hours · cost_per_hour

All functions accept empty input and return empty / None results.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from config.equipment import NO_CRITICAL_EQUIPMENT
from config.risk import MAX_TABLE_ROWS
from src.analytics.risk import classify_availability
from src.data.models import AssetReliabilityRecord, OperationalRecord
from src.data.simulator import to_dataframe


@dataclass(frozen=True)
class FleetKpis:
    availability_mean: float | None
    mtbf_mean: float | None
    mttr_mean: float | None
    impact_total: float
    asset_count: int
    record_count: int


@dataclass(frozen=True)
class ProductionKpis:
    plan_total: int
    actual_total: int
    deviation_mean: float | None
    cost_total: int
    availability_mean: float | None
    availability_min: float | None
    availability_max: float | None
    availability_median: float | None
    utilization_mean: float | None
    failure_periods: int
    record_count: int


def _opt(value) -> float | None:
    return None if pd.isna(value) else float(value)


def compute_fleet_kpis(records: Sequence[AssetReliabilityRecord]) -> FleetKpis:
    if not records:
        return FleetKpis(None, None, None, 0.0, 0, 0)

    df = to_dataframe(records)
    return FleetKpis(
        availability_mean=_opt(df["availability"].mean()),
        mtbf_mean=_opt(df["mtbf"].mean()),
        mttr_mean=_opt(df["mttr"].mean()),
        impact_total=float(df["economic_impact"].sum()),
        asset_count=int(df["asset"].nunique()),
        record_count=len(df),
    )


def compute_production_kpis(records: Sequence[OperationalRecord]) -> ProductionKpis:
    if not records:
        return ProductionKpis(0, 0, None, 0, None, None, None, None, None, 0, 0)

    df = to_dataframe(records)
    availability = df["availability"]
    return ProductionKpis(
        plan_total=int(df["plan_production"].sum()),
        actual_total=int(df["actual_production"].sum()),
        deviation_mean=_opt(df["deviation"].mean()),
        cost_total=int(df["cost"].sum()),
        availability_mean=_opt(availability.mean()),
        availability_min=_opt(availability.min()),
        availability_max=_opt(availability.max()),
        availability_median=_opt(availability.median()),
        utilization_mean=_opt(df["utilization"].mean()),
        failure_periods=int((df["critical_equipment"] != NO_CRITICAL_EQUIPMENT).sum()),
        record_count=len(df),
    )


def asset_ranking(records: Sequence[AssetReliabilityRecord]) -> pd.DataFrame:
    """
    Per-asset summary sorted by summed economic impact, highest first.

    Columns: asset, area, asset_type, impact, availability, mtbf, mttr, risk
    """
    columns = ["asset", "area", "asset_type", "impact", "availability", "mtbf", "mttr", "risk"]
    if not records:
        return pd.DataFrame(columns=columns)

    df = to_dataframe(records)
    ranking = (
        df.groupby("asset", sort=False)
        .agg(
            area=("area", "first"),
            asset_type=("asset_type", "first"),
            impact=("economic_impact", "sum"),
            availability=("availability", "mean"),
            mtbf=("mtbf", "mean"),
            mttr=("mttr", "mean"),
        )
        .reset_index()
    )
    ranking["risk"] = ranking["availability"].map(lambda a: classify_availability(a).value)
    return ranking.sort_values("impact", ascending=False, kind="stable").reset_index(drop=True)[columns]


def availability_trend(records: Sequence[AssetReliabilityRecord | OperationalRecord]) -> pd.Series:
    """Mean availability per date, ascending by date."""
    if not records:
        return pd.Series(dtype=float, name="availability")
    df = to_dataframe(records)
    return df.groupby("date")["availability"].mean().sort_index()


def top_impact_records(
    records: Sequence[AssetReliabilityRecord],
    limit: int = MAX_TABLE_ROWS,
) -> list[AssetReliabilityRecord]:
    return sorted(records, key=lambda r: r.economic_impact, reverse=True)[:limit]


def simulate_improvement(records: Sequence[AssetReliabilityRecord], improvement_pct: float) -> float:
    """
    Savings (USD) if availability rose by `improvement_pct` points, capped at 100 %.

    Recovered hours are valued at each asset's downtime cost per hour.
    """
    if not records or improvement_pct <= 0:
        return 0.0

    df = to_dataframe(records)
    current = df["availability"] / 100.0
    improved = (current + improvement_pct / 100.0).clip(upper=1.0)
    scheduled = df["operating_hours"] + df["failure_hours"]
    recovered_hours = (improved - current) * scheduled
    return float((recovered_hours * df["downtime_cost_per_hour"]).sum())


# ── Formatting ────────────────────────────────────────────────────────────────


def format_millions(value: float) -> str:
    """1_234_567 → '1.23 MM', 45_600 → '46 K', 950 → '950'."""
    if value >= 1e6:
        return f"{value / 1e6:.2f} MM"
    if value >= 1e3:
        return f"{value / 1e3:.0f} K"
    return f"{value:.0f}"


def format_date(iso_date: str) -> str:
    """'2024-03-15' → '15/03/2024'."""
    y, m, d = iso_date.split("-")
    return f"{d}/{m}/{y}"
