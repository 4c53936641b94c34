"""
tests/test_kpis.py
───────────────────
Tests for KPI aggregation, ranking and the improvement simulation.
"""
import pytest

from src.analytics.kpis import (
    asset_ranking,
    availability_trend,
    compute_fleet_kpis,
    compute_production_kpis,
    format_date,
    format_millions,
    simulate_improvement,
    top_impact_records,
)


class TestFleetKpis:
    def test_means_and_sum(self, asset_records):
        k = compute_fleet_kpis(asset_records)
        assert k.availability_mean == pytest.approx((92.0 + 84.0 + 76.0) / 3)
        assert k.mtbf_mean == pytest.approx(250.0)
        assert k.impact_total == pytest.approx(3 * (86_400.0 + 69_120.0 + 37_440.0))
        assert k.asset_count == 3
        assert k.record_count == 9

    def test_empty(self):
        k = compute_fleet_kpis([])
        assert k.availability_mean is None
        assert k.impact_total == 0.0
        assert k.record_count == 0


class TestProductionKpis:
    def test_totals(self, operational_records):
        k = compute_production_kpis(operational_records)
        assert k.plan_total == sum(r.plan_production for r in operational_records)
        assert k.cost_total == sum(r.cost for r in operational_records)
        assert k.failure_periods == 30
        assert k.availability_min <= k.availability_median <= k.availability_max
        assert k.record_count == 730

    def test_empty(self):
        k = compute_production_kpis([])
        assert k.deviation_mean is None
        assert k.failure_periods == 0


class TestRanking:
    def test_sorted_by_impact(self, asset_records):
        ranking = asset_ranking(asset_records)
        assert list(ranking["asset"]) == ["Molino SAG 1", "Pala 5", "Camión CAEX 21"]
        assert list(ranking["risk"]) == ["normal", "alert", "critical"]
        assert ranking.iloc[0]["impact"] == pytest.approx(3 * 86_400.0)

    def test_empty_ranking(self):
        ranking = asset_ranking([])
        assert ranking.empty
        assert "impact" in ranking.columns

    def test_top_impact_records(self, asset_records):
        top = top_impact_records(asset_records, limit=4)
        assert len(top) == 4
        assert top[0].asset == "Molino SAG 1"
        assert top[-1].asset == "Pala 5"


class TestAvailabilityTrend:
    def test_mean_per_date(self, asset_records):
        trend = availability_trend(asset_records)
        assert list(trend.index) == ["2023-03-01", "2023-03-02", "2023-03-03"]
        assert trend.iloc[0] == pytest.approx(84.0)

    def test_empty(self):
        assert availability_trend([]).empty


class TestSimulateImprovement:
    def test_recovered_hours_valued_at_cost(self, make_asset_record):
        records = [make_asset_record(availability=90.0, downtime_cost_per_hour=1_000.0)]
        assert simulate_improvement(records, 2.0) == pytest.approx(0.02 * 24.0 * 1_000.0)

    def test_capped_at_full_availability(self, make_asset_record):
        records = [make_asset_record(availability=99.5, downtime_cost_per_hour=1_000.0)]
        assert simulate_improvement(records, 1.0) == pytest.approx(0.005 * 24.0 * 1_000.0)

    def test_larger_scenarios_save_more(self, asset_records):
        savings = [simulate_improvement(asset_records, p) for p in (1.0, 2.0, 3.0)]
        assert savings == sorted(savings)
        assert savings[0] > 0

    def test_no_records_or_no_improvement(self, asset_records):
        assert simulate_improvement([], 1.0) == 0.0
        assert simulate_improvement(asset_records, 0.0) == 0.0


class TestFormatting:
    @pytest.mark.parametrize("value,expected", [
        (1_234_567.0, "1.23 MM"),
        (45_600.0, "46 K"),
        (950.0, "950"),
        (0.0, "0"),
    ])
    def test_format_millions(self, value, expected):
        assert format_millions(value) == expected

    def test_format_date(self):
        assert format_date("2024-03-15") == "15/03/2024"
