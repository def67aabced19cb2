"""Atom bookkeeping and mass-conservation checks.

Each side of a reaction is reduced to a vector of atom totals indexed by atomic
number. A reaction is balanced when both vectors are identical. Coefficients are
never solved for: :func:`balance_reaction` only reports whether the given
coefficients already conserve every element.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np

from chemkit.constants import NUM_ELEMENTS

if TYPE_CHECKING:
    from chemkit.models import Formula, Reaction


def count_atoms(formulas: Iterable["Formula"]) -> np.ndarray:
    """Total atoms per element across ``formulas``, indexed by atomic number.

    Index 0 is unused. Each entry contributes ``count * coefficient``; a
    non-positive coefficient counts as 1.
    """
    totals = np.zeros(NUM_ELEMENTS + 1, dtype=np.int64)
    for formula in formulas:
        coefficient = formula.coefficient if formula.coefficient > 0 else 1
        for entry in formula.entries:
            totals[entry.element.atomic_number] += entry.count * coefficient
    return totals


def atom_totals(formulas: Iterable["Formula"]) -> dict[int, int]:
    """Non-zero atom totals keyed by atomic number."""
    totals = count_atoms(formulas)
    return {int(z): int(totals[z]) for z in np.flatnonzero(totals)}


def sides_balanced(reactants: Iterable["Formula"], products: Iterable["Formula"]) -> bool:
    return bool(np.array_equal(count_atoms(reactants), count_atoms(products)))


def check_balanced(reaction: "Reaction") -> bool:
    """Whether every element has the same atom total on both sides."""
    return sides_balanced(reaction.reactants, reaction.products)


def balance_reaction(reaction: "Reaction") -> bool:
    # Check only; no coefficient solving.
    return check_balanced(reaction)

