"""JSON rendering for report payloads."""

from datetime import date
from decimal import Decimal
import json
from typing import Any


def _json_default(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(payload: Any) -> str:
    """Render a report payload, keeping decimals exact as strings."""
    return json.dumps(payload, default=_json_default, indent=2)


__all__ = ["to_json"]
