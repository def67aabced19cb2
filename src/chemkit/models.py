"""Data structures for formulas and reactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from chemkit.balance import sides_balanced
from chemkit.constants import MAX_PRODUCTS, MAX_REACTANTS
from chemkit.elements import Element
from chemkit.errors import ReactionCapacityError


class ReactionCondition(Enum):
    NORMAL = "Normal (STP)"
    HEATED = "Heated"
    HIGH_PRESSURE = "High Pressure"
    CATALYST = "Catalyst Required"
    LIGHT = "Light Required"
    ELECTROLYSIS = "Electrolysis"


class ReactionType(Enum):
    SYNTHESIS = "Synthesis"  # A + B -> AB
    DECOMPOSITION = "Decomposition"  # AB -> A + B
    SINGLE_REPLACE = "Single Replacement"  # A + BC -> AC + B
    DOUBLE_REPLACE = "Double Replacement"  # AB + CD -> AD + CB
    COMBUSTION = "Combustion"  # fuel + O2 -> CO2 + H2O
    ACID_BASE = "Acid-Base"  # acid + base -> salt + water
    REDOX = "Redox"
    OTHER = "Other"


@dataclass(frozen=True)
class ElementCount:
    element: Element
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Element count must be positive, got {self.count}")


@dataclass(frozen=True, eq=False)
class Formula:
    """A parsed chemical formula: element counts plus a leading coefficient.

    Entries keep first-seen order and never repeat an element. Two formulas are
    equal when they hold the same (element, count) pairs; the coefficient and
    the entry order do not take part in the comparison.
    """

    entries: tuple[ElementCount, ...]
    coefficient: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        if self.coefficient < 1:
            raise ValueError(f"Coefficient must be positive, got {self.coefficient}")
        numbers = [entry.element.atomic_number for entry in self.entries]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Formula entries must not repeat an element")

    def _pairs(self) -> frozenset[tuple[int, int]]:
        return frozenset((entry.element.atomic_number, entry.count) for entry in self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self._pairs() == other._pairs()

    def __hash__(self) -> int:
        return hash(self._pairs())

    @property
    def element_count(self) -> int:
        """Number of distinct elements."""
        return len(self.entries)

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(entry.element for entry in self.entries)

    @property
    def element_numbers(self) -> frozenset[int]:
        return frozenset(entry.element.atomic_number for entry in self.entries)

    def count_of(self, element: Element) -> int:
        """Atoms of ``element`` in one unit of the formula (0 when absent)."""
        for entry in self.entries:
            if entry.element.atomic_number == element.atomic_number:
                return entry.count
        return 0

    def contains(self, element: Element) -> bool:
        return element.atomic_number in self.element_numbers


@dataclass(frozen=True)
class Reaction:
    """A chemical reaction between formulas.

    ``is_balanced`` is derived from the formulas when the reaction is built.
    """

    reactants: tuple[Formula, ...]
    products: tuple[Formula, ...]
    condition: ReactionCondition = ReactionCondition.NORMAL
    reaction_type: ReactionType = ReactionType.OTHER
    description: str = ""
    is_reversible: bool = False
    is_balanced: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", _bounded(self.reactants, MAX_REACTANTS, "reactants"))
        object.__setattr__(self, "products", _bounded(self.products, MAX_PRODUCTS, "products"))
        object.__setattr__(self, "is_balanced", sides_balanced(self.reactants, self.products))


def _bounded(formulas: Sequence[Formula], limit: int, side: str) -> tuple[Formula, ...]:
    formulas = tuple(formulas)
    if len(formulas) > limit:
        raise ReactionCapacityError(f"A reaction holds at most {limit} {side}, got {len(formulas)}")
    return formulas
