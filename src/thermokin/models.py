"""Data structures for species, reactions and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from thermokin.thermo.species import SpeciesTable


@dataclass(frozen=True)
class ThermodynamicRecord:
    enthalpy_of_formation: float  # kJ/mol
    entropy: float  # J/(mol·K)
    gibbs_of_formation: float  # kJ/mol


@dataclass(frozen=True)
class StoichiometricTerm:
    formula: str
    coefficient: float


@dataclass(frozen=True)
class ReactionQuery:
    """Reactant and product terms together with the data they refer to."""

    reactants: Sequence[StoichiometricTerm]
    products: Sequence[StoichiometricTerm]
    species: SpeciesTable


@dataclass(frozen=True)
class CalculationResult:
    value: float
    unit: str
    formatted: str | None = None
