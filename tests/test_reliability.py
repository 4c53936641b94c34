"""
tests/test_reliability.py
─────────────────────────
Tests for the pure reliability formulas.
"""
import math

import pytest

from config.equipment import MINE_EQUIPMENT, NO_CRITICAL_EQUIPMENT
from config.generator import DEFAULT_GENERATOR_CONFIG, DrawRange, GeneratorConfig
from src.data.models import Area, FailureEvent, Shift
from src.data.reliability import (
    actual_production,
    apply_failure_events,
    assign_area,
    clamp_availability,
    deviation_cost,
    deviation_pct,
    failure_multiplier,
    mtbf_hours,
    mttr_hours,
    plan_production,
    seasonal_factor,
    shift_profile,
    variability_factor,
    variability_index,
)

MILL_EVENT = FailureEvent(equipment_name="Molino SAG 1", start_day_index=45, duration_days=5, severity_impact=0.6)


class TestProductionPlan:
    def test_seasonal_factor_at_origin(self):
        assert seasonal_factor(0) == pytest.approx(1.0)

    def test_seasonal_peak_and_trough(self):
        assert seasonal_factor(365 / 4) == pytest.approx(1.05)
        assert seasonal_factor(3 * 365 / 4) == pytest.approx(0.95)

    def test_plan_day_zero(self):
        assert plan_production(0) == pytest.approx(80_000.0)

    def test_plan_stays_within_amplitude(self):
        for day in range(365):
            assert 76_000.0 - 1e-6 <= plan_production(day) <= 84_000.0 + 1e-6


class TestFailureMultiplier:
    def test_start_day(self):
        assert failure_multiplier(MILL_EVENT, 45) == pytest.approx(0.4)

    def test_last_day(self):
        assert failure_multiplier(MILL_EVENT, 49) == pytest.approx(0.88)

    def test_outside_window(self):
        assert failure_multiplier(MILL_EVENT, 44) == 1.0
        assert failure_multiplier(MILL_EVENT, 50) == 1.0

    def test_recovers_monotonically(self):
        values = [failure_multiplier(MILL_EVENT, d) for d in range(45, 50)]
        assert values == sorted(values)


class TestApplyFailureEvents:
    def test_no_active_event(self):
        avail, critical = apply_failure_events(95.0, 10, [MILL_EVENT])
        assert avail == 95.0
        assert critical == NO_CRITICAL_EQUIPMENT

    def test_active_event(self):
        avail, critical = apply_failure_events(95.0, 45, [MILL_EVENT])
        assert avail == pytest.approx(38.0)
        assert critical == "Molino SAG 1"

    def test_overlap_compounds_and_last_event_wins(self):
        shovel = FailureEvent(equipment_name="Pala 5", start_day_index=45, duration_days=2, severity_impact=0.5)
        avail, critical = apply_failure_events(100.0, 45, [MILL_EVENT, shovel])
        assert avail == pytest.approx(100.0 * 0.4 * 0.5)
        assert critical == "Pala 5"

    def test_clamp_keeps_availability_positive(self):
        total = FailureEvent(equipment_name="Pala 5", start_day_index=0, duration_days=1, severity_impact=1.0)
        avail, _ = apply_failure_events(95.0, 0, [total])
        assert avail == 0.0
        assert clamp_availability(avail) == DEFAULT_GENERATOR_CONFIG.availability_floor

    def test_clamp_upper_bound(self):
        assert clamp_availability(120.0) == 100.0


class TestShiftProduction:
    def test_reference_conditions_meet_plan(self):
        assert actual_production(80_000.0, 95.0, 90.0, 1.0, 1.0) == pytest.approx(80_000.0)

    def test_shift_profiles(self):
        assert shift_profile(Shift.DAY).factor == 1.0
        assert shift_profile(Shift.NIGHT).factor == 0.97
        assert shift_profile(Shift.NIGHT).variability_cap == 0.15

    def test_variability_factor_range(self):
        profile = shift_profile(Shift.DAY)
        assert variability_factor(0.0, profile) == 1.0
        assert variability_factor(0.5, profile) == pytest.approx(0.96)

    def test_deviation_and_cost(self):
        dev = deviation_pct(76_800.0, 80_000.0)
        assert dev == pytest.approx(-4.0)
        assert deviation_cost(76_800.0, 80_000.0, dev) == pytest.approx(160_000.0)

    def test_no_cost_above_plan(self):
        dev = deviation_pct(82_000.0, 80_000.0)
        assert dev == pytest.approx(2.5)
        assert deviation_cost(82_000.0, 80_000.0, dev) == 0.0

    def test_variability_index(self):
        assert variability_index(-4.0) == pytest.approx(96.0)
        assert variability_index(2.5) == pytest.approx(97.5)


class TestMtbfMttr:
    def test_mtbf_healthy_curve(self):
        assert mtbf_hours(95.0, 0.5) == pytest.approx(260.0)

    def test_mtbf_degraded_baseline(self):
        assert mtbf_hours(38.0, 0.5) == pytest.approx(60.0)

    def test_mtbf_floor(self):
        assert mtbf_hours(51.0, 0.0) == pytest.approx(10.0)

    def test_mttr_short_repairs(self):
        assert mttr_hours(95.0, 0.5) == pytest.approx(2.5)

    def test_mttr_grows_as_availability_drops(self):
        assert mttr_hours(38.0, 0.5) == pytest.approx(17.4)
        assert mttr_hours(60.0, 0.0) > mttr_hours(90.0, 0.0)

    def test_mttr_floor(self):
        cfg = GeneratorConfig(mttr_base=-100.0)
        assert mttr_hours(90.0, 0.0, cfg) == cfg.mttr_floor


class TestAssignArea:
    def test_mine_equipment(self):
        assert assign_area("Pala 5", 120, MINE_EQUIPMENT) == Area.MINE

    def test_plant_equipment_on_odd_day(self):
        assert assign_area("Chancador Primario", 251, MINE_EQUIPMENT) == Area.PLANT

    def test_parity_without_failure(self):
        assert assign_area(NO_CRITICAL_EQUIPMENT, 0, MINE_EQUIPMENT) == Area.PLANT
        assert assign_area(NO_CRITICAL_EQUIPMENT, 1, MINE_EQUIPMENT) == Area.MINE


class TestGeneratorConfig:
    def test_defaults_valid(self):
        assert DEFAULT_GENERATOR_CONFIG.horizon_days == 365

    def test_draw_range_scale(self):
        assert DrawRange(93.0, 97.0).scale(0.5) == 95.0

    @pytest.mark.parametrize("overrides", [
        {"horizon_days": 0},
        {"availability_range": DrawRange(97.0, 93.0)},
        {"utilization_range": DrawRange(88.0, 120.0)},
        {"deviation_cost_per_ton": 0.0},
        {"availability_floor": 0.0},
    ])
    def test_invalid_config(self, overrides):
        with pytest.raises(ValueError):
            GeneratorConfig(**overrides)

    def test_period_matches_year(self):
        assert math.isclose(DEFAULT_GENERATOR_CONFIG.seasonal_period_days, 365.0)
