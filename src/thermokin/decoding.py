"""Decoding of raw request buffers into typed values.

Scalars arrive as UTF-8 literals (``b"298.15"``, ``b"true"``); structured
inputs arrive as UTF-8 JSON. Every operation goes through the helpers here so
that error messages and lenient fallbacks stay uniform.
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable, Mapping, TypeVar

from thermokin.errors import DecodeError, ParseError
from thermokin.models import StoichiometricTerm, ThermodynamicRecord
from thermokin.thermo.species import SpeciesTable

T = TypeVar("T")

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Wire names of ThermodynamicRecord fields.
RECORD_FIELDS = {
    "delta_Hf": "enthalpy_of_formation",
    "S": "entropy",
    "delta_Gf": "gibbs_of_formation",
}


def decode_text(raw: bytes, name: str) -> str:
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Invalid UTF-8 in {name}: {exc}") from exc


def parse_float(raw: bytes, name: str) -> float:
    """Parse a float literal such as ``-241.8``, ``1e13`` or ``inf``.

    Surrounding whitespace and ``_`` digit separators are rejected.
    """
    text = decode_text(raw, name)
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ParseError(f"Failed to parse {name}: invalid float literal {text!r}")
    return float(text)


def parse_int(raw: bytes, name: str) -> int:
    text = decode_text(raw, name)
    if not _INT_PATTERN.fullmatch(text):
        raise ParseError(f"Failed to parse {name}: invalid integer literal {text!r}")
    return int(text)


def parse_precision(raw: bytes, name: str) -> int:
    """Parse a digit count; negative values are rejected."""
    value = parse_int(raw, name)
    if value < 0:
        raise ParseError(f"Failed to parse {name}: precision must be non-negative")
    return value


def parse_bool(raw: bytes, name: str) -> bool:
    text = decode_text(raw, name)
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseError(f"Failed to parse {name}: invalid boolean literal {text!r}")


def parse_or_default(
    parser: Callable[[bytes, str], T],
    raw: bytes | None,
    name: str,
    default: T,
) -> T:
    """Run ``parser`` and fall back to ``default`` if the literal does not parse.

    A missing buffer also yields ``default``. Invalid UTF-8 is still an error.
    """
    if raw is None:
        return default
    try:
        return parser(raw, name)
    except ParseError:
        return default


def _load_json(raw: bytes, name: str) -> Any:
    text = decode_text(raw, name)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"Failed to parse {name}: {exc}") from exc


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except OverflowError:
        # integers beyond the float64 range
        return None


def decode_terms(raw: bytes, name: str) -> tuple[StoichiometricTerm, ...]:
    """Decode ``[["H2", 2], ["O2", 1]]`` into stoichiometric terms."""
    return terms_from_payload(_load_json(raw, name), name)


def terms_from_payload(payload: Any, name: str) -> tuple[StoichiometricTerm, ...]:
    if not isinstance(payload, list):
        raise DecodeError(f"Failed to parse {name}: expected a list of [formula, coefficient] pairs")

    terms = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, list) or len(entry) != 2:
            raise DecodeError(f"Failed to parse {name}: entry {index} is not a [formula, coefficient] pair")
        formula, coefficient = entry
        if not isinstance(formula, str):
            raise DecodeError(f"Failed to parse {name}: entry {index} formula must be a string")
        number = _as_number(coefficient)
        if number is None:
            raise DecodeError(f"Failed to parse {name}: entry {index} coefficient must be a number")
        terms.append(StoichiometricTerm(formula=formula, coefficient=number))
    return tuple(terms)


def decode_record(payload: Any, name: str, formula: str) -> ThermodynamicRecord:
    if not isinstance(payload, Mapping):
        raise DecodeError(f"Failed to parse {name}: record for {formula} must be an object")

    values = {}
    for wire_key, field in RECORD_FIELDS.items():
        if wire_key not in payload:
            raise DecodeError(f"Failed to parse {name}: missing field `{wire_key}` for {formula}")
        number = _as_number(payload[wire_key])
        if number is None:
            raise DecodeError(f"Failed to parse {name}: field `{wire_key}` for {formula} must be a number")
        values[field] = number
    return ThermodynamicRecord(**values)


def decode_species(raw: bytes, name: str) -> SpeciesTable:
    """Decode a ``{formula: {"delta_Hf": .., "S": .., "delta_Gf": ..}}`` object."""
    return species_from_payload(_load_json(raw, name), name)


def species_from_payload(payload: Any, name: str) -> SpeciesTable:
    if not isinstance(payload, dict):
        raise DecodeError(f"Failed to parse {name}: expected an object keyed by formula")
    return SpeciesTable(
        {formula: decode_record(entry, name, formula) for formula, entry in payload.items()}
    )


def float_from_payload(value: Any, name: str) -> float:
    """Read a number from already-parsed JSON; strings go through ``parse_float``."""
    if isinstance(value, str):
        return parse_float(value.encode("utf-8"), name)
    number = _as_number(value)
    if number is None:
        raise ParseError(f"Failed to parse {name}: expected a number, got {value!r}")
    return number


def precision_from_payload(value: Any, name: str, default: int) -> int:
    """Lenient digit count: anything but a non-negative integer yields ``default``."""
    if isinstance(value, str):
        return parse_or_default(parse_precision, value.encode("utf-8"), name, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def flag_from_payload(value: Any, name: str, default: bool) -> bool:
    """Lenient flag: JSON booleans or the literals ``true``/``false``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_or_default(parse_bool, value.encode("utf-8"), name, default)
    return default
