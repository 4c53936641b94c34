"""
tests/test_simulator.py
────────────────────────
Tests for the synthetic reliability data generator.
"""
import random
from datetime import date

import pytest
from pydantic import ValidationError

from config.equipment import EQUIPMENT_CONFIG, NO_CRITICAL_EQUIPMENT
from config.generator import GeneratorConfig, ShiftProfile
from src.data.models import Area, Shift
from src.data.simulator import (
    default_start_date,
    generate_asset_history,
    generate_operational_data,
    parse_failure_events,
    sort_records,
    to_dataframe,
    validate_failure_events,
)


def _day(records, day_index, shift=Shift.DAY):
    return records[2 * day_index + (1 if shift == Shift.NIGHT else 0)]


class TestOperationalData:
    def test_record_count(self, operational_records):
        assert len(operational_records) == 730

    def test_day_major_order(self, operational_records, start):
        assert operational_records[0].date == start.isoformat()
        assert operational_records[0].shift == Shift.DAY
        assert operational_records[1].shift == Shift.NIGHT
        assert operational_records == sort_records(operational_records)

    def test_one_record_per_shift_per_day(self, operational_records):
        keys = {(r.date, r.shift) for r in operational_records}
        assert len(keys) == 730
        assert len({r.date for r in operational_records}) == 365

    def test_value_bounds(self, operational_records):
        for r in operational_records:
            assert 0.0 < r.availability <= 100.0
            assert 88.0 <= r.utilization <= 92.0
            assert r.mtbf >= 10
            assert r.mttr >= 1.0
            assert 0.8 <= r.copper_grade <= 1.2
            assert r.processed_tons == r.actual_production

    def test_cost_iff_below_plan(self, operational_records):
        for r in operational_records:
            assert (r.cost > 0) == (r.deviation < 0)

    def test_variability_index_matches_deviation(self, operational_records):
        for r in operational_records:
            assert r.variability_index == pytest.approx(100.0 - abs(r.deviation), abs=0.01)

    def test_reproducible_with_seed(self, start):
        a = generate_operational_data(7, start_date=start)
        b = generate_operational_data(7, start_date=start)
        assert a == b

    def test_different_seeds_differ(self, start):
        a = generate_operational_data(1, start_date=start)
        b = generate_operational_data(2, start_date=start)
        assert a != b

    def test_accepts_numpy_generator(self, start, rng):
        records = generate_operational_data(rng=rng, start_date=start)
        assert records == generate_operational_data(42, start_date=start)

    def test_accepts_stdlib_random(self, start):
        records = generate_operational_data(rng=random.Random(3), start_date=start)
        assert len(records) == 730

    def test_default_start_date(self):
        assert default_start_date(date(2025, 6, 15)) == date(2024, 1, 1)

    def test_horizon_from_config(self, start):
        records = generate_operational_data(start_date=start, config=GeneratorConfig(horizon_days=10))
        assert len(records) == 20
        assert records[-1].date == "2023-01-10"
        assert not any(r.has_failure for r in records)


class TestDeterministicSource:
    def test_first_day_shift_values(self, start, constant_source):
        r = generate_operational_data(rng=constant_source, start_date=start)[0]
        assert r.plan_production == 80_000
        assert r.availability == 95.0
        assert r.utilization == 90.0
        assert r.actual_production == 76_800
        assert r.deviation == pytest.approx(-4.0)
        assert r.cost == 160_000
        assert r.variability_index == pytest.approx(96.0)
        assert r.mtbf == 260
        assert r.mttr == 2.5
        assert r.copper_grade == 1.0
        assert r.area == Area.PLANT
        assert r.critical_equipment == NO_CRITICAL_EQUIPMENT

    def test_night_shift_below_day_shift(self, start, constant_source):
        records = generate_operational_data(rng=constant_source, start_date=start)
        assert _day(records, 0, Shift.NIGHT).actual_production < _day(records, 0).actual_production

    def test_no_loss_matches_plan(self, start, constant_source):
        # availability 95, utilization 90, zero variability loss
        cfg = GeneratorConfig(horizon_days=1, day_shift=ShiftProfile(factor=1.0, variability_cap=0.0))
        r = generate_operational_data(rng=constant_source, start_date=start, config=cfg)[0]
        assert r.actual_production == 80_000
        assert r.deviation == 0.0
        assert r.cost == 0

    def test_draw_order(self, start, scripted_source):
        # availability, utilization, variability, mtbf, mttr, copper
        source = scripted_source([0.0, 1.0 - 1e-12, 0.0, 0.0, 0.0, 0.0])
        r = generate_operational_data(rng=source, start_date=start, config=GeneratorConfig(horizon_days=1))[0]
        assert r.availability == 93.0
        assert r.utilization == pytest.approx(92.0)
        assert r.copper_grade == 0.8
        assert source.calls == 12


class TestFailureEvents:
    def test_mill_window_degrades_then_recovers(self, start, constant_source):
        records = generate_operational_data(rng=constant_source, start_date=start)
        before = _day(records, 44).availability
        window = [_day(records, d).availability for d in range(45, 50)]
        after = _day(records, 50).availability

        assert window[0] < before
        assert window == sorted(window)
        assert window[0] == pytest.approx(38.0)
        assert window[-1] == pytest.approx(83.6)
        assert after == before

    def test_critical_equipment_labels(self, start, constant_source):
        records = generate_operational_data(rng=constant_source, start_date=start)
        assert _day(records, 45).critical_equipment == "Molino SAG 1"
        assert _day(records, 45, Shift.NIGHT).critical_equipment == "Molino SAG 1"
        assert _day(records, 120).critical_equipment == "Pala 5"
        assert _day(records, 256).critical_equipment == "Chancador Primario"
        assert _day(records, 257).critical_equipment == NO_CRITICAL_EQUIPMENT

    def test_failure_areas(self, start, constant_source):
        records = generate_operational_data(rng=constant_source, start_date=start)
        assert _day(records, 121).area == Area.MINE
        assert _day(records, 122).area == Area.MINE
        assert _day(records, 251).area == Area.PLANT

    def test_degraded_reliability_metrics(self, start, constant_source):
        r = _day(generate_operational_data(rng=constant_source, start_date=start), 45)
        assert r.mtbf == 60
        assert r.mttr == pytest.approx(17.4)
        assert r.cost > 0

    def test_failure_count(self, operational_records):
        failing = [r for r in operational_records if r.has_failure]
        assert len(failing) == 2 * (5 + 3 + 7)

    def test_custom_event_table(self, start, constant_source):
        events = [{"equipment_name": "Espesador Cobre", "start_day_index": 0,
                   "duration_days": 1, "severity_impact": 0.5}]
        records = generate_operational_data(rng=constant_source, start_date=start, events=events,
                                            config=GeneratorConfig(horizon_days=2))
        assert records[0].availability == pytest.approx(47.5)
        assert records[2].critical_equipment == NO_CRITICAL_EQUIPMENT

    def test_event_beyond_one_year_with_longer_horizon(self, start, constant_source):
        events = [{"equipment_name": "Pala 5", "start_day_index": 380, "duration_days": 2, "severity_impact": 0.5}]
        records = generate_operational_data(rng=constant_source, start_date=start, events=events,
                                            config=GeneratorConfig(horizon_days=400))
        assert len(records) == 800
        assert _day(records, 380).critical_equipment == "Pala 5"
        assert _day(records, 380).availability == pytest.approx(47.5)

    def test_event_outside_horizon_rejected(self, start):
        events = [{"equipment_name": "Pala 5", "start_day_index": 20, "duration_days": 2, "severity_impact": 0.3}]
        with pytest.raises(ValueError):
            generate_operational_data(start_date=start, events=events, config=GeneratorConfig(horizon_days=10))

    def test_invalid_event_rejected(self, start):
        events = [{"equipment_name": "Pala 5", "start_day_index": 5, "duration_days": 0, "severity_impact": 0.3}]
        with pytest.raises(ValidationError):
            generate_operational_data(start_date=start, events=events)

    def test_sentinel_name_rejected(self):
        events = parse_failure_events([{"equipment_name": NO_CRITICAL_EQUIPMENT, "start_day_index": 1,
                                        "duration_days": 1, "severity_impact": 0.2}])
        with pytest.raises(ValueError):
            validate_failure_events(events, 365)


class TestAssetHistory:
    @pytest.fixture
    def history(self, start):
        return generate_asset_history(42, start_date=start, config=GeneratorConfig(horizon_days=60))

    def test_record_count(self, history):
        assert len(history) == 60 * len(EQUIPMENT_CONFIG)

    def test_catalog_order_per_day(self, history):
        assert [r.asset for r in history[: len(EQUIPMENT_CONFIG)]] == list(EQUIPMENT_CONFIG)

    def test_hours_sum_to_day(self, history):
        for r in history:
            assert r.scheduled_hours == pytest.approx(24.0, abs=0.011)

    def test_economic_impact(self, history):
        for r in history:
            assert r.economic_impact == pytest.approx(r.failure_hours * r.downtime_cost_per_hour, abs=0.01)

    def test_availability_within_asset_range(self, history):
        for r in history:
            if r.under_failure:
                continue
            spec = EQUIPMENT_CONFIG[r.asset]
            assert spec.availability_low <= r.availability <= spec.availability_high

    def test_events_only_hit_their_asset(self, start, constant_source):
        history = generate_asset_history(rng=constant_source, start_date=start,
                                         config=GeneratorConfig(horizon_days=60))
        day_45 = {r.asset: r for r in history if r.date == "2023-02-15"}
        assert day_45["Molino SAG 1"].under_failure
        assert day_45["Molino SAG 1"].availability == pytest.approx(93.5 * 0.4)
        assert not day_45["Pala 5"].under_failure
        assert day_45["Pala 5"].availability == pytest.approx(89.0)


class TestHelpers:
    def test_sort_records_restores_order(self, operational_records):
        shuffled = list(reversed(operational_records[:10]))
        assert sort_records(shuffled) == operational_records[:10]

    def test_to_dataframe(self, operational_records):
        df = to_dataframe(operational_records[:4])
        assert list(df["shift"]) == ["Day", "Night", "Day", "Night"]
        assert "critical_equipment" in df.columns
