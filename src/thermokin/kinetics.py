"""Rate constants, activation energies and half-lives."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from thermokin.constants import AVOGADRO, BOLTZMANN, PLANCK, R_GAS
from thermokin.errors import InvalidOrderError


@dataclass(frozen=True)
class ArrheniusKinetics:
    """k = A·exp(-Ea/(R·T)).

    Attributes:
        pre_exponential: Frequency factor A; k carries the same units.
        activation_energy: Ea (kJ/mol).
    """

    pre_exponential: float
    activation_energy: float

    def rate_constant(self, temperature: float) -> float:
        with np.errstate(all="ignore"):
            exponent = -np.float64(self.activation_energy) * 1000.0 / (R_GAS * np.float64(temperature))
            k = self.pre_exponential * np.exp(exponent)
        return float(k)


@dataclass(frozen=True)
class EyringKinetics:
    """Transition state theory rate constant.

    Attributes:
        activation_enthalpy: ΔH‡ (kJ/mol).
        activation_entropy: ΔS‡ (J/(mol·K)).
    """

    activation_enthalpy: float
    activation_entropy: float

    def activation_gibbs_energy(self, temperature: float) -> float:
        """ΔG‡ = ΔH‡ - T·ΔS‡ in J/mol."""
        return self.activation_enthalpy * 1000.0 - temperature * self.activation_entropy

    def rate_constant(self, temperature: float) -> float:
        """k in s⁻¹."""
        t = np.float64(temperature)
        with np.errstate(all="ignore"):
            delta_g = np.float64(self.activation_gibbs_energy(temperature))
            prefactor = (BOLTZMANN / PLANCK) * t / AVOGADRO
            k = prefactor * np.exp(-delta_g / (R_GAS * t))
        return float(k)


def activation_energy(k1: float, t1: float, k2: float, t2: float) -> float:
    """Ea (kJ/mol) from rate constants measured at two temperatures.

    ln(k2/k1) = (Ea/R)·(1/T1 - 1/T2)
    """
    k1, t1, k2, t2 = (np.float64(v) for v in (k1, t1, k2, t2))
    with np.errstate(all="ignore"):
        ea = R_GAS * np.log(k2 / k1) / (1.0 / t1 - 1.0 / t2) / 1000.0
    return float(ea)


def half_life(rate_constant: float, order: int, initial_concentration: float = 1.0) -> float:
    """Half-life (s) for a reaction of order 0, 1 or 2.

    ``initial_concentration`` is ignored for first order.
    """
    k = np.float64(rate_constant)
    a0 = np.float64(initial_concentration)
    with np.errstate(all="ignore"):
        if order == 0:
            t_half = a0 / (2.0 * k)
        elif order == 1:
            t_half = np.log(2.0) / k
        elif order == 2:
            t_half = 1.0 / (k * a0)
        else:
            raise InvalidOrderError(order)
    return float(t_half)
