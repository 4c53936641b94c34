"""
src/data/reliability.py
───────────────────────
Pure reliability formulas used by the metrics generator.

Every function is deterministic: random draws are passed in as unit
values u ∈ [0, 1) so the formulas can be checked with exact numbers.

  seasonal      1 + A · sin(2π · day / period)
  plan          base_plan · seasonal
  failure       availability × Π (1 − severity · (1 − elapsed))
  actual        plan · (avail / 95) · (util / 90) · shift · variability
  deviation     (actual − plan) / plan · 100
  cost          |actual − plan| · $/t   (only below plan)
  MTBF / MTTR   piecewise-linear in availability plus jitter, floored
"""
from __future__ import annotations

import math
from collections.abc import Iterable

from config.equipment import NO_CRITICAL_EQUIPMENT
from config.generator import DEFAULT_GENERATOR_CONFIG, GeneratorConfig, ShiftProfile
from src.data.models import Area, FailureEvent, Shift

# ── Production plan ───────────────────────────────────────────────────────────


def seasonal_factor(day_index: int, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> float:
    """Sinusoidal seasonality over the production year."""
    phase = 2.0 * math.pi * day_index / config.seasonal_period_days
    return 1.0 + config.seasonal_amplitude * math.sin(phase)


def plan_production(day_index: int, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> float:
    return config.base_plan_tons * seasonal_factor(day_index, config)


# ── Failure events ────────────────────────────────────────────────────────────


def failure_multiplier(event: FailureEvent, day_index: int) -> float:
    """
    Availability multiplier contributed by one event on a given day.

    1 − severity at the start day, rising linearly toward 1.0 at the end
    of the window; exactly 1.0 outside it.
    """
    elapsed = event.elapsed_fraction(day_index)
    if elapsed is None:
        return 1.0
    return 1.0 - event.severity_impact * (1.0 - elapsed)


def apply_failure_events(
    availability: float,
    day_index: int,
    events: Iterable[FailureEvent],
) -> tuple[float, str]:
    """
    Degrade availability by every event active on `day_index`.

    Overlapping events compound multiplicatively; the reported critical
    equipment is the last matching event in table order.

    Returns:
        (degraded_availability, critical_equipment)
    """
    critical = NO_CRITICAL_EQUIPMENT
    for event in events:
        if not event.is_active(day_index):
            continue
        availability *= failure_multiplier(event, day_index)
        critical = event.equipment_name
    return availability, critical


def clamp_availability(availability: float, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> float:
    return min(100.0, max(config.availability_floor, availability))


# ── Production ────────────────────────────────────────────────────────────────


def shift_profile(shift: Shift, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> ShiftProfile:
    return config.night_shift if shift == Shift.NIGHT else config.day_shift


def variability_factor(u: float, profile: ShiftProfile) -> float:
    """Random loss up to the shift's variability cap: 1 − u · cap."""
    return 1.0 - u * profile.variability_cap


def actual_production(
    plan: float,
    availability: float,
    utilization: float,
    shift_factor: float,
    variability: float,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> float:
    return (
        plan
        * (availability / config.availability_reference)
        * (utilization / config.utilization_reference)
        * shift_factor
        * variability
    )


def deviation_pct(actual: float, plan: float) -> float:
    """Signed percentage gap of actual vs plan."""
    return (actual - plan) / plan * 100.0


def deviation_cost(
    actual: float,
    plan: float,
    deviation: float,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> float:
    """Penalty for tons below plan; zero when deviation ≥ 0."""
    if deviation >= 0:
        return 0.0
    return abs(actual - plan) * config.deviation_cost_per_ton


def variability_index(deviation: float) -> float:
    return 100.0 - abs(deviation)


# ── Reliability ───────────────────────────────────────────────────────────────


def mtbf_hours(availability: float, u: float, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> float:
    """
    Mean time between failures (h), correlated with availability.

    Args:
        availability: Degraded availability (%)
        u: Unit draw for the jitter term
        config: Curve constants
    """
    if availability > config.mtbf_healthy_threshold:
        mtbf = (
            config.mtbf_base
            + (availability - config.mtbf_pivot) * config.mtbf_slope
            + u * config.mtbf_jitter
        )
    else:
        mtbf = config.mtbf_degraded_base + u * config.mtbf_jitter
    return max(config.mtbf_floor, mtbf)


def mttr_hours(availability: float, u: float, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> float:
    """Mean time to repair (h): longer repairs as availability drops."""
    if availability < config.mttr_threshold:
        mttr = (
            config.mttr_base
            - (availability - config.mttr_pivot) / config.mttr_divisor
            + u * config.mttr_jitter
        )
    else:
        mttr = config.mttr_short_base + u * config.mttr_short_jitter
    return max(config.mttr_floor, mttr)


# ── Area assignment ───────────────────────────────────────────────────────────


def assign_area(critical_equipment: str, day_index: int, mine_equipment: frozenset[str]) -> Area:
    """
    Mine if the failing equipment is mine-side, Plant for any other
    failing equipment, otherwise alternate by day parity (even → Plant).
    """
    if critical_equipment in mine_equipment:
        return Area.MINE
    if critical_equipment != NO_CRITICAL_EQUIPMENT:
        return Area.PLANT
    return Area.PLANT if day_index % 2 == 0 else Area.MINE
