"""Command-line entrypoints for chemkit."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Dict, NoReturn

import typer

from chemkit.balance import atom_totals
from chemkit.constants import DEFAULT_MAX_RESULTS, LOGGING_LEVEL, PERIODIC_OVERVIEW_LIMIT
from chemkit.database import ReactionDatabase, default_database
from chemkit.elements import PERIODIC_TABLE, Element
from chemkit.errors import ChemkitError, ParseError
from chemkit.formatting import (
    describe_element,
    describe_formula,
    describe_molecule,
    describe_reaction,
    format_reaction,
)
from chemkit.formula import format_formula, formula_mass, parse_formula, reaction_masses
from chemkit.models import Formula, Reaction
from chemkit.molecules import create_co2, create_methane, create_water
from chemkit.seeds import load_seeds

app = typer.Typer(add_completion=False)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _database(ctx: typer.Context) -> ReactionDatabase:
    seeds_file = ctx.obj
    if seeds_file is None:
        return default_database()
    try:
        return ReactionDatabase.from_seeds(load_seeds(seeds_file))
    except ChemkitError as exc:
        _fail(str(exc))


def _element_payload(element: Element) -> Dict[str, Any]:
    return {
        "atomic_number": element.atomic_number,
        "symbol": element.symbol,
        "name": element.name,
        "atomic_mass": element.atomic_mass,
        "valence_electrons": element.valence_electrons,
        "electronegativity": element.electronegativity,
        "state": element.state.value,
        "category": element.category.value,
        "common_charges": list(element.common_charges),
        "max_bonds": element.max_bonds,
    }


def _formula_payload(formula: Formula) -> Dict[str, Any]:
    return {
        "formula": format_formula(formula),
        "coefficient": formula.coefficient,
        "elements": {entry.element.symbol: entry.count for entry in formula.entries},
        "mass": formula_mass(formula),
    }


def _reaction_payload(reaction: Reaction) -> Dict[str, Any]:
    reactant_mass, product_mass = reaction_masses(reaction)
    return {
        "equation": format_reaction(reaction),
        "description": reaction.description,
        "type": reaction.reaction_type.value,
        "condition": reaction.condition.value,
        "balanced": reaction.is_balanced,
        "reversible": reaction.is_reversible,
        "reactant_atoms": atom_totals(reaction.reactants),
        "product_atoms": atom_totals(reaction.products),
        "reactant_mass": reactant_mass,
        "product_mass": product_mass,
    }


def _echo_lines(lines: list[str]) -> None:
    typer.echo("\n".join(lines))


@app.callback()
def main(
    ctx: typer.Context,
    seeds: Annotated[
        Path | None,
        typer.Option(help="JSON file of seed reactions to use instead of the built-in list."),
    ] = None,
    log_level: Annotated[
        LogLevel, typer.Option(case_sensitive=False, help="Logging level.")
    ] = LogLevel(LOGGING_LEVEL),
) -> None:
    """Look up elements, parse formulas and query known reactions."""
    logging.basicConfig(level=log_level.value, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = seeds


@app.command()
def element(
    query: Annotated[str, typer.Argument(help="Element symbol, name, or atomic number.")],
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
) -> None:
    """Look up an element."""
    found = PERIODIC_TABLE.lookup(query)
    if found is None:
        _fail(f"Element not found: {query}")
    if json_output:
        typer.echo(json.dumps(_element_payload(found), indent=2))
    else:
        _echo_lines(describe_element(found))


@app.command()
def parse(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. H2O or 2CO2.")],
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
) -> None:
    """Parse a chemical formula and show its composition."""
    try:
        parsed = parse_formula(formula)
    except ParseError as exc:
        _fail(f"Failed to parse formula {formula!r}: {exc}")
    if json_output:
        typer.echo(json.dumps(_formula_payload(parsed), indent=2))
    else:
        _echo_lines(describe_formula(parsed))


@app.command()
def molecules() -> None:
    """Show a few common molecules."""
    for molecule in (create_water(), create_co2(), create_methane()):
        typer.echo(f"\n--- {molecule.name} ({molecule.formula}) ---")
        _echo_lines(describe_molecule(molecule))


@app.command()
def reaction(
    ctx: typer.Context,
    reactants: Annotated[str, typer.Argument(help="Reactants separated by '+', e.g. 'C + O2'.")],
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
) -> None:
    """Look up a known reaction from its reactants."""
    database = _database(ctx)
    try:
        found = database.find_by_string(reactants)
    except ChemkitError as exc:
        _fail(str(exc))

    if json_output:
        payload = _reaction_payload(found) if found is not None else None
        typer.echo(json.dumps({"query": reactants, "reaction": payload}, indent=2))
    elif found is None:
        typer.echo(f"No known reaction found for: {reactants}")
        typer.echo("Try: C + O2, H2 + O2, Na + Cl2, CH4 + O2")
    else:
        typer.echo("Found reaction:")
        _echo_lines(describe_reaction(found))


@app.command()
def reactions(
    ctx: typer.Context,
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
) -> None:
    """List every known reaction."""
    database = _database(ctx)
    if json_output:
        typer.echo(json.dumps([_reaction_payload(r) for r in database], indent=2))
        return

    typer.echo(f"Database contains {database.count()} reactions:\n")
    for index, rxn in enumerate(database, start=1):
        typer.echo(f"{index:2d}. {format_reaction(rxn)}")
        typer.echo(f"    Type: {rxn.reaction_type.value}, Condition: {rxn.condition.value}")
        if rxn.description:
            typer.echo(f"    {rxn.description}")


@app.command()
def table(
    limit: Annotated[int, typer.Option(help="Number of elements to show.")] = PERIODIC_OVERVIEW_LIMIT,
) -> None:
    """Show an overview of the first elements of the periodic table."""
    typer.echo(f"{'Z':<3} {'Sy':<2} {'Name':<12} {'Mass':>8} {'Val':>4} {'EN':>5}")
    typer.echo("-" * 40)
    for el in PERIODIC_TABLE:
        if el.atomic_number > limit:
            break
        typer.echo(
            f"{el.atomic_number:<3d} {el.symbol:<2} {el.name:<12} {el.atomic_mass:8.3f} "
            f"{el.valence_electrons:4d} {el.electronegativity:5.2f}"
        )
    typer.echo(f"\n(Total elements in database: {len(PERIODIC_TABLE)})")


@app.command()
def by_element(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Element symbol, e.g. O, C, Fe.")],
    max_results: Annotated[int, typer.Option(help="Maximum number of reactions.")] = DEFAULT_MAX_RESULTS,
    json_output: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
) -> None:
    """Find reactions involving an element."""
    found = PERIODIC_TABLE.by_symbol(symbol)
    if found is None:
        _fail(f"Unknown element: {symbol}")

    results = _database(ctx).find_by_element(found, max_results)
    if json_output:
        typer.echo(json.dumps([_reaction_payload(r) for r in results], indent=2))
        return

    typer.echo(f"Reactions involving {found.name} ({found.symbol}):\n")
    if not results:
        typer.echo("No reactions found in database.")
    for index, rxn in enumerate(results, start=1):
        typer.echo(f"{index}. {format_reaction(rxn)}")
        if rxn.description:
            typer.echo(f"   {rxn.description}")
