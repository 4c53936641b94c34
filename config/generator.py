"""
config/generator.py
───────────────────
Modelling constants for the operational metrics generator.

Every number the generator uses lives here so it can be tuned and tested:
  - production plan and seasonality
  - base availability / utilization draw ranges
  - shift performance factors and variability caps
  - MTBF / MTTR response curves and floors
  - deviation cost per ton
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawRange:
    """Uniform draw interval [low, high)."""
    low: float
    high: float

    def scale(self, u: float) -> float:
        """Map a unit draw u ∈ [0, 1) onto the interval."""
        return self.low + u * (self.high - self.low)


@dataclass(frozen=True)
class ShiftProfile:
    factor: float           # fixed multiplier on output
    variability_cap: float  # maximum random loss fraction


@dataclass(frozen=True)
class GeneratorConfig:
    horizon_days: int = 365

    # Production plan (t per shift period)
    base_plan_tons: float = 80_000.0
    seasonal_amplitude: float = 0.05
    seasonal_period_days: float = 365.0

    # Base performance draws (%)
    availability_range: DrawRange = DrawRange(93.0, 97.0)
    utilization_range: DrawRange = DrawRange(88.0, 92.0)
    availability_floor: float = 1.0

    # actual = plan · (avail / ref) · (util / ref) · shift · variability
    availability_reference: float = 95.0
    utilization_reference: float = 90.0

    day_shift: ShiftProfile = ShiftProfile(factor=1.0, variability_cap=0.08)
    night_shift: ShiftProfile = ShiftProfile(factor=0.97, variability_cap=0.15)

    # Economic penalty for production below plan (USD per ton)
    deviation_cost_per_ton: float = 50.0

    # MTBF (h): healthy curve above the threshold, degraded baseline below
    mtbf_healthy_threshold: float = 50.0
    mtbf_base: float = 200.0
    mtbf_pivot: float = 90.0
    mtbf_slope: float = 10.0
    mtbf_degraded_base: float = 50.0
    mtbf_jitter: float = 20.0
    mtbf_floor: float = 10.0

    # MTTR (h): repair curve below the threshold, short repairs above
    mttr_threshold: float = 95.0
    mttr_base: float = 8.0
    mttr_pivot: float = 80.0
    mttr_divisor: float = 5.0
    mttr_jitter: float = 2.0
    mttr_short_base: float = 2.0
    mttr_short_jitter: float = 1.0
    mttr_floor: float = 1.0

    copper_grade_range: DrawRange = DrawRange(0.8, 1.2)

    def __post_init__(self) -> None:
        if self.horizon_days <= 0:
            raise ValueError(f"horizon_days must be positive, got {self.horizon_days}")
        if self.base_plan_tons <= 0:
            raise ValueError(f"base_plan_tons must be positive, got {self.base_plan_tons}")
        if self.seasonal_period_days <= 0:
            raise ValueError("seasonal_period_days must be positive")
        for name in ("availability_range", "utilization_range", "copper_grade_range"):
            rng = getattr(self, name)
            if rng.low >= rng.high:
                raise ValueError(f"{name} must satisfy low < high, got [{rng.low}, {rng.high})")
        for name in ("availability_range", "utilization_range"):
            rng = getattr(self, name)
            if rng.low <= 0 or rng.high > 100:
                raise ValueError(f"{name} must lie within (0, 100], got [{rng.low}, {rng.high})")
        if not 0 < self.availability_floor <= self.availability_range.low:
            raise ValueError("availability_floor must be positive and below the availability range")
        for name in ("day_shift", "night_shift"):
            profile = getattr(self, name)
            if profile.factor <= 0:
                raise ValueError(f"{name}.factor must be positive")
            if not 0 <= profile.variability_cap < 1:
                raise ValueError(f"{name}.variability_cap must lie in [0, 1)")
        if self.deviation_cost_per_ton <= 0:
            raise ValueError("deviation_cost_per_ton must be positive")
        if self.mtbf_floor <= 0 or self.mttr_floor <= 0:
            raise ValueError("MTBF and MTTR floors must be positive")


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()
