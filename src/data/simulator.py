"""
src/data/simulator.py
─────────────────────
Synthetic reliability data generator for the copper mine dashboard.

Generates:
  - One OperationalRecord per (day, shift) over the horizon (730 for a year)
  - One AssetReliabilityRecord per (day, critical asset)

Design:
  - The random source is injected: anything exposing random() → [0, 1)
    (numpy Generator, random.Random, or a scripted source in tests)
  - Reproducible with SIMULATION_SEED when no source is passed
  - Failure events come from a validated table; a bad table fails at
    construction, never mid-generation
  - Output is returned, never stored in module state
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Protocol

import numpy as np
import pandas as pd
from pydantic import BaseModel

from config.equipment import (
    EQUIPMENT_CONFIG,
    FAILURE_EVENTS,
    HOURS_PER_DAY,
    MINE_EQUIPMENT,
    NO_CRITICAL_EQUIPMENT,
    AssetSpec,
)
from config.generator import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from config.settings import settings
from src.data.models import AssetReliabilityRecord, FailureEvent, OperationalRecord, Shift
from src.data.reliability import (
    actual_production,
    apply_failure_events,
    assign_area,
    clamp_availability,
    deviation_cost,
    deviation_pct,
    mtbf_hours,
    mttr_hours,
    plan_production,
    shift_profile,
    variability_factor,
    variability_index,
)

logger = logging.getLogger(__name__)

SHIFTS: tuple[Shift, ...] = (Shift.DAY, Shift.NIGHT)


class RandomSource(Protocol):
    def random(self) -> float:
        """Next independent draw in [0, 1)."""
        ...


# ── Failure-event table ───────────────────────────────────────────────────────


def parse_failure_events(table: Iterable[dict | FailureEvent]) -> list[FailureEvent]:
    """Validate a raw failure-event table into FailureEvent models."""
    return [e if isinstance(e, FailureEvent) else FailureEvent.model_validate(e) for e in table]


def validate_failure_events(events: Iterable[FailureEvent], horizon_days: int) -> None:
    """Reject events that can never apply to the generated horizon."""
    for event in events:
        if event.start_day_index >= horizon_days:
            raise ValueError(
                f"Failure event for {event.equipment_name!r} starts on day {event.start_day_index}, "
                f"outside the {horizon_days}-day horizon"
            )
        if event.equipment_name == NO_CRITICAL_EQUIPMENT:
            raise ValueError(f"Failure event equipment name cannot be the sentinel {NO_CRITICAL_EQUIPMENT!r}")


DEFAULT_FAILURE_EVENTS: list[FailureEvent] = parse_failure_events(FAILURE_EVENTS)
validate_failure_events(DEFAULT_FAILURE_EVENTS, DEFAULT_GENERATOR_CONFIG.horizon_days)


def default_start_date(today: date | None = None) -> date:
    """January 1 of the previous calendar year."""
    today = today or date.today()
    return date(today.year - 1, 1, 1)


# ── Record builders ───────────────────────────────────────────────────────────


def _build_operational_record(
    day_index: int,
    shift: Shift,
    current_date: date,
    events: list[FailureEvent],
    rng: RandomSource,
    config: GeneratorConfig,
    mine_equipment: frozenset[str],
) -> OperationalRecord:
    plan = plan_production(day_index, config)

    availability = config.availability_range.scale(rng.random())
    utilization = config.utilization_range.scale(rng.random())

    availability, critical = apply_failure_events(availability, day_index, events)
    availability = clamp_availability(availability, config)

    profile = shift_profile(shift, config)
    variability = variability_factor(rng.random(), profile)

    actual = actual_production(plan, availability, utilization, profile.factor, variability, config)
    deviation = deviation_pct(actual, plan)
    rounded_deviation = round(deviation, 2) + 0.0  # normalizes -0.0

    # Cost follows the emitted (rounded) deviation so cost == 0 ⇔ deviation ≥ 0
    cost = 0
    if rounded_deviation < 0:
        cost = max(1, round(deviation_cost(actual, plan, deviation, config)))

    mtbf = mtbf_hours(availability, rng.random(), config)
    mttr = mttr_hours(availability, rng.random(), config)
    copper_grade = config.copper_grade_range.scale(rng.random())

    return OperationalRecord(
        date=current_date.isoformat(),
        shift=shift,
        plan_production=round(plan),
        actual_production=round(actual),
        deviation=rounded_deviation,
        variability_index=round(variability_index(deviation), 2),
        availability=round(availability, 2),
        utilization=round(utilization, 2),
        mtbf=round(mtbf),
        mttr=round(mttr, 1),
        copper_grade=round(copper_grade, 2),
        processed_tons=round(actual),
        cost=cost,
        area=assign_area(critical, day_index, mine_equipment),
        critical_equipment=critical,
    )


def _build_asset_record(
    day_index: int,
    current_date: date,
    asset: AssetSpec,
    events: list[FailureEvent],
    rng: RandomSource,
    config: GeneratorConfig,
) -> AssetReliabilityRecord:
    base = asset.availability_low + rng.random() * (asset.availability_high - asset.availability_low)
    own_events = [e for e in events if e.equipment_name == asset.name]
    availability, critical = apply_failure_events(base, day_index, own_events)
    availability = round(clamp_availability(availability, config), 2)

    mtbf = mtbf_hours(availability, rng.random(), config)
    mttr = mttr_hours(availability, rng.random(), config)

    operating_hours = round(HOURS_PER_DAY * availability / 100.0, 2)
    failure_hours = round(HOURS_PER_DAY - operating_hours, 2)

    return AssetReliabilityRecord(
        date=current_date.isoformat(),
        asset=asset.name,
        asset_type=asset.asset_type,
        area=asset.area,
        availability=availability,
        mtbf=round(mtbf, 1),
        mttr=round(mttr, 1),
        operating_hours=operating_hours,
        failure_hours=failure_hours,
        downtime_cost_per_hour=asset.downtime_cost_per_hour,
        economic_impact=round(failure_hours * asset.downtime_cost_per_hour, 2),
        under_failure=critical != NO_CRITICAL_EQUIPMENT,
    )


# ── Public API ────────────────────────────────────────────────────────────────


def _resolve(
    seed: int,
    rng: RandomSource | None,
    events: Iterable[dict | FailureEvent] | None,
    config: GeneratorConfig,
    start_date: date | None,
) -> tuple[RandomSource, list[FailureEvent], date]:
    source = rng if rng is not None else np.random.default_rng(seed)
    if events is None:
        # Built-in schedule: keep only the events that fall inside a shorter horizon
        event_list = [e for e in DEFAULT_FAILURE_EVENTS if e.start_day_index < config.horizon_days]
    else:
        event_list = parse_failure_events(events)
        validate_failure_events(event_list, config.horizon_days)
    return source, event_list, start_date or default_start_date()


def generate_operational_data(
    seed: int = settings.SIMULATION_SEED,
    *,
    rng: RandomSource | None = None,
    events: Iterable[dict | FailureEvent] | None = None,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    start_date: date | None = None,
    mine_equipment: frozenset[str] = MINE_EQUIPMENT,
) -> list[OperationalRecord]:
    """
    Generate `config.horizon_days` × 2 shift records, day-major, Day before Night.

    Args:
        seed: Seed for the default numpy source (ignored when rng is given)
        rng: Injected random source
        events: Failure-event table (defaults to config.equipment.FAILURE_EVENTS)
        config: Modelling constants
        start_date: First calendar day (defaults to Jan 1 of the previous year)
        mine_equipment: Equipment names whose failures are Mine-side

    Raises:
        ValueError / pydantic.ValidationError on an invalid failure-event table
    """
    source, event_list, start = _resolve(seed, rng, events, config, start_date)

    records: list[OperationalRecord] = []
    for day_index in range(config.horizon_days):
        current_date = start + timedelta(days=day_index)
        for shift in SHIFTS:
            records.append(
                _build_operational_record(day_index, shift, current_date, event_list, source, config, mine_equipment)
            )

    logger.info(
        f"Generated {len(records)} operational records from {start.isoformat()} "
        f"with {len(event_list)} failure events"
    )
    return records


def generate_asset_history(
    seed: int = settings.SIMULATION_SEED,
    *,
    rng: RandomSource | None = None,
    events: Iterable[dict | FailureEvent] | None = None,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    start_date: date | None = None,
    assets: Iterable[AssetSpec] | None = None,
) -> list[AssetReliabilityRecord]:
    """
    Generate one daily reliability record per critical asset.

    Failure events only degrade the asset whose name they carry.
    Records are ordered by date, then by catalog order.
    """
    source, event_list, start = _resolve(seed, rng, events, config, start_date)
    asset_list = list(assets) if assets is not None else list(EQUIPMENT_CONFIG.values())

    records: list[AssetReliabilityRecord] = []
    for day_index in range(config.horizon_days):
        current_date = start + timedelta(days=day_index)
        for asset in asset_list:
            records.append(_build_asset_record(day_index, current_date, asset, event_list, source, config))

    logger.info(f"Generated {len(records)} asset records for {len(asset_list)} assets")
    return records


def sort_records(records: Iterable[OperationalRecord]) -> list[OperationalRecord]:
    """Restore canonical (date ascending, Day before Night) order."""
    return sorted(records, key=lambda r: r.sort_key)


def to_dataframe(records: Iterable[BaseModel]) -> pd.DataFrame:
    """Convert generated records to a pandas DataFrame (Python field names)."""
    return pd.DataFrame([r.model_dump(mode="json") for r in records])
