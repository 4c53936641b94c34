"""
src/data/store.py
─────────────────
JSON import/export for generated record sets.

Provides:
  - records_to_json()  : Serialize records as a flat list-of-objects document
  - records_from_json(): Parse and validate a document (raises on bad input)
  - save_records()     : Write a document to disk
  - load_records()     : Read a document; any read/parse failure → []
  - load_dataset()     : Dashboard dataset from DATA_PATH, or generated

Documents use the wire field names of each model (camelCase for
operational records, dashboard names for asset records).
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from config.generator import GeneratorConfig
from config.settings import settings
from src.data.models import AssetReliabilityRecord, OperationalRecord
from src.data.simulator import generate_asset_history

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


@lru_cache(maxsize=4)
def _adapter(model: type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


# ── Serialization ─────────────────────────────────────────────────────────────


def records_to_json(records: Iterable[BaseModel], indent: int | None = 2) -> str:
    payload = [r.model_dump(mode="json", by_alias=True) for r in records]
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def records_from_json(text: str | bytes, model: type[RecordT] = OperationalRecord) -> list[RecordT]:
    """
    Parse a JSON document into validated records.

    Raises:
        pydantic.ValidationError on malformed JSON or invalid records
    """
    return _adapter(model).validate_json(text)


# ── Files ─────────────────────────────────────────────────────────────────────


def save_records(records: Iterable[BaseModel], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    records = list(records)
    path.write_text(records_to_json(records), encoding="utf-8")
    logger.info(f"Wrote {len(records)} records to {path}")
    return path


def load_records(path: str | Path, model: type[RecordT] = OperationalRecord) -> list[RecordT]:
    """
    Read a record document from disk.

    A missing, unreadable, or invalid document is treated as "no data":
    the failure is logged and an empty list is returned.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not read records from {path}: {e}")
        return []

    try:
        records = records_from_json(text, model)
    except ValidationError as e:
        logger.error(f"Invalid record document {path}: {e.error_count()} errors", exc_info=True)
        return []

    logger.info(f"Loaded {len(records)} {model.__name__} records from {path}")
    return records


def load_dataset(data_path: str = settings.DATA_PATH, seed: int = settings.SIMULATION_SEED) -> list[AssetReliabilityRecord]:
    """
    Asset reliability dataset for the dashboard.

    Reads DATA_PATH when configured; falls back to a generated history when
    the path is unset or yields no records.
    """
    if data_path:
        records = load_records(data_path, AssetReliabilityRecord)
        if records:
            return records
        logger.warning(f"No records in {data_path}; generating a simulated history")

    return generate_asset_history(seed, config=GeneratorConfig(horizon_days=settings.HORIZON_DAYS))
