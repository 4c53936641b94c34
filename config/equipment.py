"""
config/equipment.py
───────────────────
Critical asset catalog and the scheduled failure-event table.

Each asset belongs to an area (Mine / Plant) and an asset type. The
downtime cost per hour drives the economic impact of the asset history
records and the availability-improvement simulation.

Failure events are scheduled degradation windows:
  availability × (1 − severity_impact · (1 − elapsed_fraction))
strongest on the start day, fading linearly to nothing at the window end.
"""
from dataclasses import dataclass

NO_CRITICAL_EQUIPMENT = "N/A"


@dataclass(frozen=True)
class AssetSpec:
    name: str
    area: str                      # "Mine" | "Plant"
    asset_type: str
    downtime_cost_per_hour: float  # USD / h of unavailability
    color: str
    availability_low: float = 93.0   # base daily availability draw (%)
    availability_high: float = 97.0


# ── Asset catalog ─────────────────────────────────────────────────────────────
EQUIPMENT_CONFIG: dict[str, AssetSpec] = {
    "Molino SAG 1": AssetSpec(
        name="Molino SAG 1",
        area="Plant",
        asset_type="molienda",
        downtime_cost_per_hour=45_000.0,
        color="#58a6ff",
        availability_low=90.0,
        availability_high=97.0,
    ),
    "Pala 5": AssetSpec(
        name="Pala 5",
        area="Mine",
        asset_type="carguío",
        downtime_cost_per_hour=18_000.0,
        color="#e8a020",
        availability_low=84.0,
        availability_high=94.0,
    ),
    "Camión CAEX 21": AssetSpec(
        name="Camión CAEX 21",
        area="Mine",
        asset_type="transporte",
        downtime_cost_per_hour=6_500.0,
        color="#f0883e",
        availability_low=80.0,
        availability_high=93.0,
    ),
    "Espesador Cobre": AssetSpec(
        name="Espesador Cobre",
        area="Plant",
        asset_type="espesamiento",
        downtime_cost_per_hour=12_000.0,
        color="#2ea44f",
        availability_low=92.0,
        availability_high=98.0,
    ),
    "Chancador Primario": AssetSpec(
        name="Chancador Primario",
        area="Plant",
        asset_type="chancado",
        downtime_cost_per_hour=30_000.0,
        color="#a371f7",
        availability_low=86.0,
        availability_high=96.0,
    ),
}

# Equipment whose failures place a record in the Mine area
MINE_EQUIPMENT: frozenset[str] = frozenset(
    name for name, spec in EQUIPMENT_CONFIG.items() if spec.area == "Mine"
)

# ── Scheduled failure events ──────────────────────────────────────────────────
# Validated into FailureEvent models by src.data.simulator at import time.
FAILURE_EVENTS: list[dict] = [
    {"equipment_name": "Molino SAG 1", "start_day_index": 45, "duration_days": 5, "severity_impact": 0.6},
    {"equipment_name": "Pala 5", "start_day_index": 120, "duration_days": 3, "severity_impact": 0.4},
    {"equipment_name": "Chancador Primario", "start_day_index": 250, "duration_days": 7, "severity_impact": 0.7},
]

HOURS_PER_DAY = 24.0
