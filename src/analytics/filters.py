"""
src/analytics/filters.py
────────────────────────
Record selection for the dashboard.

Provides:
  - FilterCriteria / apply_filters : area · asset type · asset · date range
  - filter_options                 : distinct values for selectors
  - quick_range_criteria           : last N days ending at the newest record
  - top_assets_by_impact           : N assets with the largest summed impact
  - apply_quick_filter             : "7d" | "30d" | "top5" | "all"
  - filter_operational             : area · shift · date range on shift records

Dates are ISO strings; ranges compare lexicographically and are inclusive.
Empty criteria match everything.
"""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from src.data.models import AssetReliabilityRecord, OperationalRecord

QUICK_RANGES: dict[str, int] = {"7d": 7, "30d": 30}
TOP_N_ASSETS = 5


@dataclass(frozen=True)
class FilterCriteria:
    area: str | None = None
    asset_type: str | None = None
    asset: str | None = None
    date_from: str | None = None
    date_to: str | None = None


@dataclass(frozen=True)
class FilterOptions:
    areas: list[str]
    asset_types: list[str]
    assets: list[str]
    date_min: str | None
    date_max: str | None


def _in_range(day: str, date_from: str | None, date_to: str | None) -> bool:
    if date_from and day < date_from:
        return False
    if date_to and day > date_to:
        return False
    return True


def apply_filters(
    records: Iterable[AssetReliabilityRecord],
    criteria: FilterCriteria,
) -> list[AssetReliabilityRecord]:
    """Return records matching every non-empty criterion, in input order."""
    out = []
    for r in records:
        if criteria.area and r.area != criteria.area:
            continue
        if criteria.asset_type and r.asset_type != criteria.asset_type:
            continue
        if criteria.asset and r.asset != criteria.asset:
            continue
        if not _in_range(r.date, criteria.date_from, criteria.date_to):
            continue
        out.append(r)
    return out


def filter_options(records: Sequence[AssetReliabilityRecord]) -> FilterOptions:
    dates = sorted(r.date for r in records)
    return FilterOptions(
        areas=sorted({r.area.value for r in records}),
        asset_types=sorted({r.asset_type for r in records}),
        assets=sorted({r.asset for r in records}),
        date_min=dates[0] if dates else None,
        date_max=dates[-1] if dates else None,
    )


def quick_range_criteria(records: Sequence[AssetReliabilityRecord], days: int) -> FilterCriteria:
    """Criteria covering the `days` days before the newest record, inclusive."""
    if not records:
        return FilterCriteria()
    newest = max(r.date for r in records)
    start = date.fromisoformat(newest) - timedelta(days=days)
    return FilterCriteria(date_from=start.isoformat(), date_to=newest)


def impact_by_asset(records: Iterable[AssetReliabilityRecord]) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for r in records:
        totals[r.asset] += r.economic_impact
    return dict(totals)


def top_assets_by_impact(records: Iterable[AssetReliabilityRecord], n: int = TOP_N_ASSETS) -> list[str]:
    """Asset names ordered by summed economic impact, highest first."""
    totals = impact_by_asset(records)
    return sorted(totals, key=lambda a: totals[a], reverse=True)[:n]


def restrict_to_top_assets(
    records: Sequence[AssetReliabilityRecord],
    n: int = TOP_N_ASSETS,
) -> list[AssetReliabilityRecord]:
    keep = set(top_assets_by_impact(records, n))
    return [r for r in records if r.asset in keep]


def apply_quick_filter(records: Sequence[AssetReliabilityRecord], name: str) -> list[AssetReliabilityRecord]:
    """
    Shortcut filters from the dashboard chips.

    Unknown names fall back to the full record set.
    """
    if name in QUICK_RANGES:
        return apply_filters(records, quick_range_criteria(records, QUICK_RANGES[name]))
    if name == "top5":
        return restrict_to_top_assets(records, TOP_N_ASSETS)
    return list(records)


def filter_operational(
    records: Iterable[OperationalRecord],
    area: str | None = None,
    shift: str | None = None,
    date_from: str | None = None,
    date_to: str | None = None,
) -> list[OperationalRecord]:
    out = []
    for r in records:
        if area and r.area != area:
            continue
        if shift and r.shift != shift:
            continue
        if not _in_range(r.date, date_from, date_to):
            continue
        out.append(r)
    return out
