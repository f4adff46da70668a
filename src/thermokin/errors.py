"""Error types raised by thermokin."""

from __future__ import annotations


class ThermokinError(ValueError):
    """Base class for every failure surfaced to a caller."""


class DecodeError(ThermokinError):
    """Bytes are not valid UTF-8 or a structured input is malformed."""


class ParseError(ThermokinError):
    """A numeric or boolean literal does not parse."""


class UnknownSpeciesError(ThermokinError):
    def __init__(self, formula: str, role: str):
        self.formula = formula
        self.role = role
        super().__init__(f"No data found for {role}: {formula}")


class InvalidOrderError(ThermokinError):
    def __init__(self, order: int):
        self.order = order
        super().__init__(f"Unsupported reaction order: {order}")


class UnknownOperationError(ThermokinError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown operation: {name}")
