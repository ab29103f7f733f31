"""Shared serialization utilities for sinks."""

from collections import deque
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from estate_sim.store.world import WorldState


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, deque)):
        return [serialize_value(v) for v in value]
    elif isinstance(value, (set, frozenset)):
        return sorted(serialize_value(v) for v in value)
    return value


def snapshot(world: WorldState) -> dict:
    """Plain-data view of the whole world for display or export."""
    return {
        "summary": serialize_value(world.summary()),
        "cash": serialize_value(world.cash),
        "properties": [to_dict(p) for p in world.properties.values()],
        "loan": to_dict(world.loan),
        "events": [to_dict(e) for e in world.events],
        "outsourced": serialize_value(world.outsourced),
        "manager_hired": world.manager_hired,
        "tax_ledger": to_dict(world.tax_ledger),
        "capital_gains": serialize_value(world.capital_gains),
        "notices": serialize_value(world.notices),
    }
