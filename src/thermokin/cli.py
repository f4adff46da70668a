"""Command-line entrypoints for thermokin."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Callable

import typer

from thermokin import api
from thermokin.constants import DEFAULT_PRECISION, DEFAULT_SCIENTIFIC
from thermokin.decoding import (
    flag_from_payload,
    float_from_payload,
    precision_from_payload,
    species_from_payload,
    terms_from_payload,
)
from thermokin.encoding import json_number, make_result, result_payload
from thermokin.errors import ThermokinError
from thermokin.models import ReactionQuery
from thermokin.thermo import (
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_energy,
)

app = typer.Typer(add_completion=False)

Precision = Annotated[
    int | None, typer.Option(help="Digits after the decimal point for a formatted value.")
]
Scientific = Annotated[
    bool, typer.Option("--scientific", help="Use ×10^n notation outside 0.001..1000.")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """Physical-chemistry calculations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _run(operation: Callable[..., bytes], *args: str, precision: int | None = None, scientific: bool = False) -> None:
    kwargs = {}
    if precision is not None:
        kwargs["precision"] = str(precision).encode("utf-8")
        kwargs["scientific"] = b"true" if scientific else b"false"
    try:
        output = operation(*(arg.encode("utf-8") for arg in args), **kwargs)
    except ThermokinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(output.decode("utf-8"))


def _read_text(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


@app.command()
def enthalpy(
    reactants: Annotated[str, typer.Argument(help='JSON pairs, e.g. [["H2", 2], ["O2", 1]].')],
    products: Annotated[str, typer.Argument(help="JSON pairs for the products.")],
    data_file: Annotated[Path, typer.Argument(help="JSON file of species data.")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Reaction enthalpy (kJ/mol)."""
    _run(
        api.calculate_reaction_enthalpy,
        reactants,
        products,
        _read_text(data_file),
        precision=precision,
        scientific=scientific,
    )


@app.command()
def entropy(
    reactants: Annotated[str, typer.Argument(help="JSON pairs for the reactants.")],
    products: Annotated[str, typer.Argument(help="JSON pairs for the products.")],
    data_file: Annotated[Path, typer.Argument(help="JSON file of species data.")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Reaction entropy (J/(mol·K))."""
    _run(
        api.calculate_reaction_entropy,
        reactants,
        products,
        _read_text(data_file),
        precision=precision,
        scientific=scientific,
    )


@app.command()
def gibbs(
    enthalpy: Annotated[str, typer.Argument(help="ΔH (kJ/mol).")],
    entropy: Annotated[str, typer.Argument(help="ΔS (J/(mol·K)).")],
    temperature: Annotated[str, typer.Argument(help="Temperature (K).")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Gibbs free energy change (kJ/mol)."""
    _run(api.calculate_gibbs_energy, enthalpy, entropy, temperature, precision=precision, scientific=scientific)


@app.command()
def equilibrium(
    gibbs_energy: Annotated[str, typer.Argument(help="ΔG (kJ/mol).")],
    temperature: Annotated[str, typer.Argument(help="Temperature (K).")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Equilibrium constant from ΔG."""
    _run(api.calculate_equilibrium_constant, gibbs_energy, temperature, precision=precision, scientific=scientific)


@app.command()
def arrhenius(
    pre_exponential: Annotated[str, typer.Argument(help="Pre-exponential factor A.")],
    activation_energy: Annotated[str, typer.Argument(help="Ea (kJ/mol).")],
    temperature: Annotated[str, typer.Argument(help="Temperature (K).")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Arrhenius rate constant."""
    _run(
        api.calculate_rate_constant_arrhenius,
        pre_exponential,
        activation_energy,
        temperature,
        precision=precision,
        scientific=scientific,
    )


@app.command()
def eyring(
    activation_enthalpy: Annotated[str, typer.Argument(help="ΔH‡ (kJ/mol).")],
    activation_entropy: Annotated[str, typer.Argument(help="ΔS‡ (J/(mol·K)).")],
    temperature: Annotated[str, typer.Argument(help="Temperature (K).")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Eyring rate constant (s⁻¹)."""
    _run(
        api.calculate_rate_constant_eyring,
        activation_enthalpy,
        activation_entropy,
        temperature,
        precision=precision,
        scientific=scientific,
    )


@app.command("activation-energy")
def activation_energy(
    k1: Annotated[str, typer.Argument(help="Rate constant at T1.")],
    t1: Annotated[str, typer.Argument(help="T1 (K).")],
    k2: Annotated[str, typer.Argument(help="Rate constant at T2.")],
    t2: Annotated[str, typer.Argument(help="T2 (K).")],
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Activation energy (kJ/mol) from two measurements."""
    _run(api.calculate_activation_energy, k1, t1, k2, t2, precision=precision, scientific=scientific)


@app.command("half-life")
def half_life(
    rate_constant: Annotated[str, typer.Argument(help="Rate constant k.")],
    order: Annotated[str, typer.Argument(help="Reaction order (0, 1 or 2).")],
    initial_concentration: Annotated[
        str, typer.Option(help="[A]0; unparsable values count as 1.0.")
    ] = "1.0",
    precision: Precision = None,
    scientific: Scientific = False,
) -> None:
    """Reaction half-life (s)."""
    _run(
        api.calculate_half_life,
        rate_constant,
        order,
        initial_concentration,
        precision=precision,
        scientific=scientific,
    )


@app.command("format")
def format_value(
    value: Annotated[str, typer.Argument(help="Number to format.")],
    precision: Annotated[str, typer.Option(help="Digits after the decimal point.")] = str(DEFAULT_PRECISION),
    scientific: Scientific = False,
) -> None:
    """Format a number for display."""
    _run(api.format_number, value, precision, "true" if scientific else "false")


@app.command()
def substance(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. H2O.")],
    data_file: Annotated[Path, typer.Argument(help="JSON file of species data.")],
) -> None:
    """Show the formation data of one substance."""
    _run(api.get_substance_data, formula, _read_text(data_file))


@app.command()
def reaction(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON reaction file.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Evaluate ΔH, ΔS, ΔG and K for a reaction described in a JSON file."""
    with open(config_file, "r", encoding="utf-8") as f:
        config = json.load(f)

    precision = None
    if config.get("precision") is not None:
        precision = precision_from_payload(config["precision"], "precision", DEFAULT_PRECISION)
    scientific = flag_from_payload(config.get("scientific"), "scientific", DEFAULT_SCIENTIFIC)

    try:
        temperature = float_from_payload(config.get("temperature", 298.15), "temperature")
        query = ReactionQuery(
            reactants=terms_from_payload(config.get("reactants", []), "reactants"),
            products=terms_from_payload(config.get("products", []), "products"),
            species=species_from_payload(config.get("species", {}), "species"),
        )
        delta_h = reaction_enthalpy(query)
        delta_s = reaction_entropy(query)
        standard_delta_g = reaction_gibbs_energy(query)
    except ThermokinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    delta_g = gibbs_energy(delta_h, delta_s, temperature)
    results = {
        "enthalpy": make_result(delta_h, "kJ/mol", precision=precision, scientific=scientific),
        "entropy": make_result(delta_s, "J/(mol·K)", precision=precision, scientific=scientific),
        "standard_gibbs_energy": make_result(
            standard_delta_g, "kJ/mol", precision=precision, scientific=scientific
        ),
        "gibbs_energy": make_result(delta_g, "kJ/mol", precision=precision, scientific=scientific),
        "equilibrium_constant": make_result(
            equilibrium_constant(delta_g, temperature), "", precision=precision, scientific=scientific
        ),
    }

    data = {"temperature": json_number(temperature)}
    for key, result in results.items():
        data[key] = result_payload(result)

    json_output = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    typer.echo(json_output)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(json_output)
