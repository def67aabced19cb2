"""Human-readable rendering of elements, formulas, reactions and molecules.

The ``describe_*`` helpers return lists of lines so callers decide where the
text goes (terminal, log, GUI).
"""

from __future__ import annotations

from chemkit.balance import atom_totals
from chemkit.elements import Element
from chemkit.formula import format_formula, formula_mass, reaction_masses
from chemkit.models import Formula, Reaction
from chemkit.molecules import Molecule


def format_charges(charges: tuple[int, ...]) -> str:
    if not charges:
        return "0"
    return ", ".join(f"{charge:+d}" for charge in charges)


def format_reaction(reaction: Reaction) -> str:
    """Equation form, e.g. ``"2H2 + O2 -> 2H2O"``."""
    reactants = " + ".join(format_formula(f) for f in reaction.reactants)
    products = " + ".join(format_formula(f) for f in reaction.products)
    return f"{reactants} -> {products}"


def describe_element(element: Element) -> list[str]:
    return [
        f"{element.symbol:<2} {element.name:<12} (Z={element.atomic_number:3d})",
        f"   Mass: {element.atomic_mass:.3f} amu",
        f"   Valence electrons: {element.valence_electrons}",
        f"   Electronegativity: {element.electronegativity:.2f}",
        f"   State (room temp): {element.state.value}",
        f"   Category: {element.category.value}",
        f"   Common charges: {format_charges(element.common_charges)}",
        f"Max typical bonds: {element.max_bonds}",
    ]


def describe_formula(formula: Formula) -> list[str]:
    lines = [f"Parsed formula: {format_formula(formula)}", "", "Composition:"]
    for entry in formula.entries:
        lines.append(f"  {entry.element.name} ({entry.element.symbol}): {entry.count} atom(s)")
    lines.extend(["", f"Molecular mass: {formula_mass(formula):.3f} g/mol"])
    return lines


def describe_reaction(reaction: Reaction) -> list[str]:
    reactant_mass, product_mass = reaction_masses(reaction)
    lines = ["=== Chemical Reaction ===", f"Equation: {format_reaction(reaction)}"]
    if reaction.description:
        lines.append(f"Description: {reaction.description}")
    lines.extend(
        [
            f"Type: {reaction.reaction_type.value}",
            f"Condition: {reaction.condition.value}",
            f"Balanced: {'Yes' if reaction.is_balanced else 'No'}",
            f"Reversible: {'Yes' if reaction.is_reversible else 'No'}",
            f"Reactant atoms: {_format_totals(reaction.reactants)}",
            f"Product atoms: {_format_totals(reaction.products)}",
            f"Reactant mass: {reactant_mass:.3f} g/mol",
            f"Product mass: {product_mass:.3f} g/mol",
        ]
    )
    return lines


def describe_molecule(molecule: Molecule) -> list[str]:
    lines = [
        f"Molecule: {molecule.name or '(unnamed)'}",
        f"Formula: {molecule.formula or '(none)'}",
        f"Atoms: {len(molecule.atoms)}",
        f"Bonds: {len(molecule.bonds)}",
        f"Molecular mass: {molecule.molecular_mass:.3f} g/mol",
        f"Composition of {molecule.name or molecule.formula}:",
    ]
    for element, count, percent in molecule.composition():
        lines.append(f"  {element.name}: {count} atom(s), {percent:.2f}% by mass")
    return lines


def _format_totals(formulas: tuple[Formula, ...]) -> str:
    symbols = {e.element.atomic_number: e.element.symbol for f in formulas for e in f.entries}
    return ", ".join(f"{symbols[z]}={n}" for z, n in atom_totals(formulas).items())
