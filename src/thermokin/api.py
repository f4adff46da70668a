"""Byte-buffer entry points.

Every operation takes UTF-8 encoded buffers and returns the encoded result.
Scalars are textual literals (``b"298.15"``); reactant and product lists are
JSON ``[["H2", 2], ["O2", 1]]``; species data is a JSON object of
``{"delta_Hf": .., "S": .., "delta_Gf": ..}`` records keyed by formula.

Result-producing operations accept optional ``precision`` and ``scientific``
buffers. When ``precision`` is given, the encoded result carries a
``formatted`` display string as well.
"""

from __future__ import annotations

import inspect
import logging
from typing import Callable, Mapping

from thermokin.constants import (
    DEFAULT_INITIAL_CONCENTRATION,
    DEFAULT_PRECISION,
    DEFAULT_SCIENTIFIC,
)
from thermokin.decoding import (
    decode_species,
    decode_terms,
    decode_text,
    parse_bool,
    parse_float,
    parse_int,
    parse_or_default,
    parse_precision,
)
from thermokin.encoding import encode_record, encode_result, make_result
from thermokin.errors import ThermokinError, UnknownOperationError
from thermokin.formatting import format_number as _format_number
from thermokin.kinetics import ArrheniusKinetics, EyringKinetics, activation_energy, half_life
from thermokin.models import ReactionQuery
from thermokin.thermo import (
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_energy,
)

logger = logging.getLogger(__name__)

Operation = Callable[..., bytes]


def _encode(
    value: float,
    unit: str,
    precision: bytes | None,
    scientific: bytes | None,
) -> bytes:
    digits = None
    if precision is not None:
        digits = parse_or_default(parse_precision, precision, "precision", DEFAULT_PRECISION)
    flag = parse_or_default(parse_bool, scientific, "scientific flag", DEFAULT_SCIENTIFIC)
    return encode_result(make_result(value, unit, precision=digits, scientific=flag))


def _reaction_query(reactants: bytes, products: bytes, data: bytes) -> ReactionQuery:
    return ReactionQuery(
        reactants=decode_terms(reactants, "reactants"),
        products=decode_terms(products, "products"),
        species=decode_species(data, "thermodynamic data"),
    )


def calculate_reaction_enthalpy(
    reactants: bytes,
    products: bytes,
    data: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """ΔH of reaction (kJ/mol) by Hess's law."""
    query = _reaction_query(reactants, products, data)
    delta_h = reaction_enthalpy(query)
    logger.debug("Reaction enthalpy: %s kJ/mol", delta_h)
    return _encode(delta_h, "kJ/mol", precision, scientific)


def calculate_reaction_entropy(
    reactants: bytes,
    products: bytes,
    data: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """ΔS of reaction (J/(mol·K))."""
    query = _reaction_query(reactants, products, data)
    delta_s = reaction_entropy(query)
    logger.debug("Reaction entropy: %s J/(mol·K)", delta_s)
    return _encode(delta_s, "J/(mol·K)", precision, scientific)


def calculate_reaction_gibbs_energy(
    reactants: bytes,
    products: bytes,
    data: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """Standard ΔG of reaction (kJ/mol) from Gibbs energies of formation."""
    query = _reaction_query(reactants, products, data)
    delta_g = reaction_gibbs_energy(query)
    logger.debug("Reaction Gibbs energy: %s kJ/mol", delta_g)
    return _encode(delta_g, "kJ/mol", precision, scientific)


def calculate_gibbs_energy(
    enthalpy: bytes,
    entropy: bytes,
    temperature: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """ΔG = ΔH - T·ΔS (kJ/mol)."""
    delta_g = gibbs_energy(
        parse_float(enthalpy, "enthalpy"),
        parse_float(entropy, "entropy"),
        parse_float(temperature, "temperature"),
    )
    logger.debug("Gibbs energy: %s kJ/mol", delta_g)
    return _encode(delta_g, "kJ/mol", precision, scientific)


def calculate_equilibrium_constant(
    gibbs: bytes,
    temperature: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """K = exp(-ΔG/(R·T)), dimensionless."""
    k = equilibrium_constant(
        parse_float(gibbs, "Gibbs energy"),
        parse_float(temperature, "temperature"),
    )
    logger.debug("Equilibrium constant: %s", k)
    return _encode(k, "", precision, scientific)


def calculate_rate_constant_arrhenius(
    pre_exponential: bytes,
    activation: bytes,
    temperature: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """Arrhenius k; carries the units of the pre-exponential factor."""
    kinetics = ArrheniusKinetics(
        pre_exponential=parse_float(pre_exponential, "A"),
        activation_energy=parse_float(activation, "Ea"),
    )
    k = kinetics.rate_constant(parse_float(temperature, "temperature"))
    logger.debug("Arrhenius rate constant: %s", k)
    return _encode(k, "", precision, scientific)


def calculate_rate_constant_eyring(
    activation_enthalpy: bytes,
    activation_entropy: bytes,
    temperature: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """Eyring k (s⁻¹) from ΔH‡ (kJ/mol) and ΔS‡ (J/(mol·K))."""
    kinetics = EyringKinetics(
        activation_enthalpy=parse_float(activation_enthalpy, "ΔH‡"),
        activation_entropy=parse_float(activation_entropy, "ΔS‡"),
    )
    k = kinetics.rate_constant(parse_float(temperature, "temperature"))
    logger.debug("Eyring rate constant: %s s⁻¹", k)
    return _encode(k, "s⁻¹", precision, scientific)


def calculate_activation_energy(
    k1: bytes,
    t1: bytes,
    k2: bytes,
    t2: bytes,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """Ea (kJ/mol) from two (k, T) measurements."""
    ea = activation_energy(
        parse_float(k1, "k1"),
        parse_float(t1, "T1"),
        parse_float(k2, "k2"),
        parse_float(t2, "T2"),
    )
    logger.debug("Activation energy: %s kJ/mol", ea)
    return _encode(ea, "kJ/mol", precision, scientific)


def calculate_half_life(
    rate_constant: bytes,
    order: bytes,
    initial_concentration: bytes | None = None,
    precision: bytes | None = None,
    scientific: bytes | None = None,
) -> bytes:
    """Half-life (s); an unparsable initial concentration counts as 1.0."""
    k = parse_float(rate_constant, "k")
    reaction_order = parse_int(order, "order")
    a0 = parse_or_default(
        parse_float,
        initial_concentration,
        "initial concentration",
        DEFAULT_INITIAL_CONCENTRATION,
    )
    t_half = half_life(k, reaction_order, a0)
    logger.debug("Half-life (order %d): %s s", reaction_order, t_half)
    return _encode(t_half, "s", precision, scientific)


def format_number(value: bytes, precision: bytes | None = None, scientific: bytes | None = None) -> bytes:
    """Return the formatted string itself, not a JSON record."""
    number = parse_float(value, "value")
    digits = parse_or_default(parse_precision, precision, "precision", DEFAULT_PRECISION)
    flag = parse_or_default(parse_bool, scientific, "scientific flag", DEFAULT_SCIENTIFIC)
    return _format_number(number, digits, flag).encode("utf-8")


def get_substance_data(formula: bytes, data: bytes) -> bytes:
    """Return the formation record of one substance as JSON."""
    name = decode_text(formula, "formula")
    table = decode_species(data, "thermodynamic data")
    return encode_record(table.lookup(name, "substance"))


OPERATIONS: Mapping[str, Operation] = {
    "calculate_reaction_enthalpy": calculate_reaction_enthalpy,
    "calculate_reaction_entropy": calculate_reaction_entropy,
    "calculate_reaction_gibbs_energy": calculate_reaction_gibbs_energy,
    "calculate_gibbs_energy": calculate_gibbs_energy,
    "calculate_equilibrium_constant": calculate_equilibrium_constant,
    "calculate_rate_constant_arrhenius": calculate_rate_constant_arrhenius,
    "calculate_rate_constant_eyring": calculate_rate_constant_eyring,
    "calculate_activation_energy": calculate_activation_energy,
    "calculate_half_life": calculate_half_life,
    "format_number": format_number,
    "get_substance_data": get_substance_data,
}


def invoke(name: str, *buffers: bytes) -> tuple[bool, bytes | str]:
    """Dispatch a named call from a host.

    Buffers are passed positionally, so trailing ``precision`` and
    ``scientific`` buffers request a ``formatted`` field. Returns
    ``(True, payload)`` on success and ``(False, message)`` when the input is
    rejected, including a wrong number of buffers.
    """
    try:
        operation = OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None

    try:
        inspect.signature(operation).bind(*buffers)
    except TypeError as exc:
        logger.warning("%s called with %d buffers: %s", name, len(buffers), exc)
        return False, f"Invalid arguments for {name}: {exc}"

    try:
        return True, operation(*buffers)
    except ThermokinError as exc:
        logger.warning("%s failed: %s", name, exc)
        return False, str(exc)
