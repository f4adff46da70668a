from .species import SpeciesTable
from .reaction import (
    aggregate,
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_energy,
)

__all__ = [
    "SpeciesTable",
    "aggregate",
    "equilibrium_constant",
    "gibbs_energy",
    "reaction_enthalpy",
    "reaction_entropy",
    "reaction_gibbs_energy",
]
