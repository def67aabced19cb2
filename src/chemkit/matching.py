"""Formula comparison and reactant-set matching."""

from __future__ import annotations

from typing import Sequence

from chemkit.elements import Element
from chemkit.models import Formula, Reaction


def formulas_equal(f1: Formula, f2: Formula) -> bool:
    """Same elements with the same counts, ignoring coefficient and order.

    Every entry of ``f1`` must be matched by a distinct entry of ``f2``.
    """
    if f1.element_count != f2.element_count:
        return False

    used = [False] * f2.element_count
    for entry in f1.entries:
        for j, candidate in enumerate(f2.entries):
            if used[j] or candidate.element.atomic_number != entry.element.atomic_number:
                continue
            if candidate.count != entry.count:
                return False
            used[j] = True
            break
        else:
            return False
    return True


def same_element_set(f1: Formula, f2: Formula) -> bool:
    """Both formulas are built from the same elements, counts ignored."""
    if f1.element_count != f2.element_count:
        return False
    other = f2.element_numbers
    return all(entry.element.atomic_number in other for entry in f1.entries)


def formulas_match_set(set_a: Sequence[Formula], set_b: Sequence[Formula]) -> bool:
    """Pair every formula of ``set_a`` with a distinct formula of ``set_b``.

    Two formulas pair up when they contain the same elements; counts and
    coefficients are ignored. Each formula of ``set_a`` takes the first unused
    match in ``set_b``, so ``[C, O2]`` matches ``[O2, C]``.
    """
    if len(set_a) != len(set_b):
        return False

    used = [False] * len(set_b)
    for formula in set_a:
        for j, candidate in enumerate(set_b):
            if not used[j] and same_element_set(formula, candidate):
                used[j] = True
                break
        else:
            return False
    return True


def reaction_mentions(reaction: Reaction, element: Element) -> bool:
    """Whether ``element`` appears in any reactant or product."""
    return any(f.contains(element) for f in reaction.reactants) or any(
        f.contains(element) for f in reaction.products
    )
