"""Serialization of results into outbound JSON bytes."""

from __future__ import annotations

import json
import math
from typing import Any

from thermokin.constants import DEFAULT_SCIENTIFIC
from thermokin.decoding import RECORD_FIELDS
from thermokin.formatting import format_number
from thermokin.models import CalculationResult, ThermodynamicRecord


def make_result(
    value: float,
    unit: str,
    *,
    precision: int | None = None,
    scientific: bool = DEFAULT_SCIENTIFIC,
) -> CalculationResult:
    """Wrap a value; ``formatted`` is filled in only when ``precision`` is given."""
    formatted = None
    if precision is not None:
        formatted = format_number(value, precision, scientific)
    return CalculationResult(value=value, unit=unit, formatted=formatted)


def json_number(value: float) -> float | None:
    # JSON has no representation for inf/nan.
    return value if math.isfinite(value) else None


def _dumps(payload: Any) -> bytes:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")


def result_payload(result: CalculationResult) -> dict[str, Any]:
    """JSON-ready mapping; ``formatted`` is left out when absent."""
    payload: dict[str, Any] = {"value": json_number(result.value), "unit": result.unit}
    if result.formatted is not None:
        payload["formatted"] = result.formatted
    return payload


def encode_result(result: CalculationResult) -> bytes:
    return _dumps(result_payload(result))


def encode_record(record: ThermodynamicRecord) -> bytes:
    return _dumps(
        {wire_key: json_number(getattr(record, field)) for wire_key, field in RECORD_FIELDS.items()}
    )
