"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the reliability monitor test suite.
"""
import os
from datetime import date

import numpy as np
import pytest

# Small simulated history for anything that reads settings
os.environ.setdefault("HORIZON_DAYS", "30")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("DATA_PATH", "")
os.environ.setdefault("DEFAULT_LANG", "es")


class ConstantSource:
    """Random source that always returns the same draw."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


class ScriptedSource:
    """Random source that replays a fixed sequence of draws, cycling."""

    def __init__(self, values: list[float]):
        self.values = values
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def start() -> date:
    return date(2023, 1, 1)


@pytest.fixture
def constant_source() -> ConstantSource:
    return ConstantSource(0.5)


@pytest.fixture
def operational_records(start):
    from src.data.simulator import generate_operational_data
    return generate_operational_data(42, start_date=start)


@pytest.fixture
def make_asset_record():
    """Factory for hand-built asset records with sensible defaults."""
    from src.data.models import AssetReliabilityRecord

    def _make(**overrides) -> AssetReliabilityRecord:
        availability = overrides.pop("availability", 90.0)
        cost_per_hour = overrides.pop("downtime_cost_per_hour", 1_000.0)
        operating = round(24.0 * availability / 100.0, 2)
        failure = round(24.0 - operating, 2)
        fields = {
            "date": "2023-01-01",
            "asset": "Molino SAG 1",
            "asset_type": "molienda",
            "area": "Plant",
            "availability": availability,
            "mtbf": 250.0,
            "mttr": 4.0,
            "operating_hours": operating,
            "failure_hours": failure,
            "downtime_cost_per_hour": cost_per_hour,
            "economic_impact": round(failure * cost_per_hour, 2),
        }
        fields.update(overrides)
        return AssetReliabilityRecord(**fields)

    return _make


@pytest.fixture
def asset_records(make_asset_record):
    """Three assets over three days, with distinct impact levels."""
    rows = []
    for day in ("2023-03-01", "2023-03-02", "2023-03-03"):
        rows.append(make_asset_record(date=day, asset="Molino SAG 1", availability=92.0,
                                      downtime_cost_per_hour=45_000.0))
        rows.append(make_asset_record(date=day, asset="Pala 5", asset_type="carguío", area="Mine",
                                      availability=84.0, downtime_cost_per_hour=18_000.0))
        rows.append(make_asset_record(date=day, asset="Camión CAEX 21", asset_type="transporte", area="Mine",
                                      availability=76.0, downtime_cost_per_hour=6_500.0))
    return rows


@pytest.fixture
def scripted_source():
    return ScriptedSource
