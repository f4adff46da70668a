"""thermokin core package."""

from thermokin.errors import (
    DecodeError,
    InvalidOrderError,
    ParseError,
    ThermokinError,
    UnknownSpeciesError,
)
from thermokin.formatting import format_number
from thermokin.kinetics import ArrheniusKinetics, EyringKinetics, activation_energy, half_life
from thermokin.models import (
    CalculationResult,
    ReactionQuery,
    StoichiometricTerm,
    ThermodynamicRecord,
)
from thermokin.thermo import (
    SpeciesTable,
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_energy,
)

__all__ = [
    "ArrheniusKinetics",
    "CalculationResult",
    "DecodeError",
    "EyringKinetics",
    "InvalidOrderError",
    "ParseError",
    "ReactionQuery",
    "SpeciesTable",
    "StoichiometricTerm",
    "ThermodynamicRecord",
    "ThermokinError",
    "UnknownSpeciesError",
    "activation_energy",
    "equilibrium_constant",
    "format_number",
    "gibbs_energy",
    "half_life",
    "reaction_enthalpy",
    "reaction_entropy",
    "reaction_gibbs_energy",
]
