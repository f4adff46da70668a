"""Reaction thermodynamics from standard formation data.

Reaction properties follow Hess's law: the coefficient-weighted sum over
products minus the same sum over reactants. Results are plain floats; no
guard is placed on degenerate inputs, so a zero temperature yields ``inf`` or
``nan`` rather than an exception.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from thermokin.constants import R_GAS
from thermokin.models import ReactionQuery, StoichiometricTerm, ThermodynamicRecord
from thermokin.thermo.species import SpeciesTable

FieldSelector = Callable[[ThermodynamicRecord], float]


def enthalpy_of_formation(record: ThermodynamicRecord) -> float:
    return record.enthalpy_of_formation


def entropy(record: ThermodynamicRecord) -> float:
    return record.entropy


def gibbs_of_formation(record: ThermodynamicRecord) -> float:
    return record.gibbs_of_formation


def aggregate(
    terms: Sequence[StoichiometricTerm],
    table: SpeciesTable,
    field_selector: FieldSelector,
    sign: float,
    role: str,
) -> float:
    """Sum ``sign * coefficient * field`` over ``terms`` in input order."""
    total = 0.0
    for term in terms:
        record = table.lookup(term.formula, role)
        total += sign * term.coefficient * field_selector(record)
    return total


def _reaction_property(query: ReactionQuery, field_selector: FieldSelector) -> float:
    reactant_sum = aggregate(query.reactants, query.species, field_selector, -1.0, "reactant")
    product_sum = aggregate(query.products, query.species, field_selector, 1.0, "product")
    return product_sum + reactant_sum


def reaction_enthalpy(query: ReactionQuery) -> float:
    """ΔH of reaction in kJ/mol."""
    return _reaction_property(query, enthalpy_of_formation)


def reaction_entropy(query: ReactionQuery) -> float:
    """ΔS of reaction in J/(mol·K)."""
    return _reaction_property(query, entropy)


def reaction_gibbs_energy(query: ReactionQuery) -> float:
    """Standard ΔG of reaction in kJ/mol from Gibbs energies of formation."""
    return _reaction_property(query, gibbs_of_formation)


def gibbs_energy(enthalpy: float, entropy: float, temperature: float) -> float:
    """ΔG = ΔH - T·ΔS, with ΔH in kJ/mol and ΔS in J/(mol·K)."""
    with np.errstate(all="ignore"):
        delta_g = np.float64(enthalpy) - np.float64(temperature) * (np.float64(entropy) / 1000.0)
    return float(delta_g)


def equilibrium_constant(gibbs_energy: float, temperature: float) -> float:
    """K = exp(-ΔG / (R·T)) with ΔG in kJ/mol."""
    with np.errstate(all="ignore"):
        exponent = -np.float64(gibbs_energy) * 1000.0 / (R_GAS * np.float64(temperature))
        k = np.exp(exponent)
    return float(k)
