"""
src/data/models.py
──────────────────
Pydantic v2 data models for failure events and generated reliability records.

Wire names follow the dashboard JSON documents:
  OperationalRecord       → camelCase (planProduction, criticalEquipment, …)
  AssetReliabilityRecord  → dashboard names (fecha, activo, disponibilidad, …)
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from config.equipment import NO_CRITICAL_EQUIPMENT

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Shift(str, Enum):
    DAY = "Day"
    NIGHT = "Night"


# Emission order within a day
SHIFT_ORDER: dict[str, int] = {Shift.DAY: 0, Shift.NIGHT: 1}


class Area(str, Enum):
    MINE = "Mine"
    PLANT = "Plant"


# Spanish area names used by the dashboard's own JSON exports
AREA_ALIASES: dict[str, Area] = {"mina": Area.MINE, "planta": Area.PLANT}


def normalize_area(value):
    """Map "Mina" / "Planta" (any case) onto Area; other values pass through."""
    if isinstance(value, str) and not isinstance(value, Area):
        return AREA_ALIASES.get(value.strip().lower(), value)
    return value


class FailureEvent(BaseModel):
    """Scheduled degradation window for one named piece of equipment."""

    model_config = ConfigDict(frozen=True)

    equipment_name: str = Field(min_length=1)
    start_day_index: int = Field(ge=0)
    duration_days: int = Field(gt=0)
    severity_impact: float = Field(gt=0.0, le=1.0)

    @property
    def end_day_index(self) -> int:
        """First day index after the window."""
        return self.start_day_index + self.duration_days

    def is_active(self, day_index: int) -> bool:
        return self.start_day_index <= day_index < self.end_day_index

    def elapsed_fraction(self, day_index: int) -> float | None:
        """
        Returns (day − start) / duration ∈ [0, 1) if the day falls within
        the window, else None.
        """
        if not self.is_active(day_index):
            return None
        return (day_index - self.start_day_index) / self.duration_days


class OperationalRecord(BaseModel):
    """One (day, shift) period of plant production and reliability metrics."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    date: str = Field(pattern=ISO_DATE_PATTERN)
    shift: Shift
    plan_production: int = Field(gt=0)
    actual_production: int = Field(ge=0)
    deviation: float
    variability_index: float = Field(le=100.0)
    availability: float = Field(gt=0.0, le=100.0)
    utilization: float = Field(gt=0.0, le=100.0)
    mtbf: int = Field(gt=0)
    mttr: float = Field(gt=0.0)
    copper_grade: float = Field(ge=0.0, le=100.0)
    processed_tons: int = Field(ge=0)
    cost: int = Field(ge=0)
    area: Area
    critical_equipment: str = NO_CRITICAL_EQUIPMENT

    @field_validator("area", mode="before")
    @classmethod
    def accept_spanish_area(cls, value):
        return normalize_area(value)

    @model_validator(mode="after")
    def _cost_only_below_plan(self) -> OperationalRecord:
        if (self.cost == 0) != (self.deviation >= 0):
            raise ValueError(
                f"cost {self.cost} inconsistent with deviation {self.deviation} on {self.date} {self.shift.value}"
            )
        return self

    @property
    def sort_key(self) -> tuple[str, int]:
        return self.date, SHIFT_ORDER[self.shift]

    @property
    def has_failure(self) -> bool:
        return self.critical_equipment != NO_CRITICAL_EQUIPMENT


class AssetReliabilityRecord(BaseModel):
    """Daily reliability summary for one critical asset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(alias="fecha", pattern=ISO_DATE_PATTERN)
    asset: str = Field(alias="activo", min_length=1)
    asset_type: str = Field(alias="tipo_activo", min_length=1)
    area: Area
    availability: float = Field(alias="disponibilidad", ge=0.0, le=100.0)
    mtbf: float = Field(gt=0.0)
    mttr: float = Field(gt=0.0)
    operating_hours: float = Field(alias="horas_operativas", ge=0.0)
    failure_hours: float = Field(alias="horas_falla", ge=0.0)
    downtime_cost_per_hour: float = Field(alias="costo_hora_indisponibilidad", ge=0.0)
    economic_impact: float = Field(alias="impacto_economico", ge=0.0)
    under_failure: bool = Field(default=False, alias="en_falla")

    @field_validator("area", mode="before")
    @classmethod
    def accept_spanish_area(cls, value):
        return normalize_area(value)

    @property
    def scheduled_hours(self) -> float:
        return self.operating_hours + self.failure_hours
