"""Chemical formula parsing and rendering.

Grammar::

    formula     := [coefficient] (symbol [count] | "(" | ")")+
    symbol      := uppercase letter, optionally followed by one lowercase letter
    coefficient := count := unsigned decimal integer

Parentheses are accepted but carry no meaning: they are skipped and never
multiply the group they enclose.
"""

from __future__ import annotations

import logging
import re

from chemkit.elements import PERIODIC_TABLE, PeriodicTable
from chemkit.constants import MAX_COUNT_DIGITS
from chemkit.errors import CountTooLarge, EmptyFormula, InvalidSymbolStart, ParseError, UnknownElement
from chemkit.models import ElementCount, Formula, Reaction

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*")
_DIGITS = re.compile(r"[0-9]*")
_TOKEN = re.compile(r"(?P<paren>[()])|(?P<symbol>[A-Z][a-z]?)(?P<count>[0-9]*)")


def parse_formula(text: str, catalog: PeriodicTable = PERIODIC_TABLE) -> Formula:
    """Parse a formula string such as ``"2H2O"`` into a :class:`Formula`.

    Repeated symbols are merged into a single entry, so ``"O2O3"`` yields one
    oxygen entry with count 5.

    Raises:
        InvalidSymbolStart: A token starts with something other than an
            uppercase letter or a parenthesis.
        UnknownElement: A symbol is not in ``catalog``.
        CountTooLarge: A coefficient or count is longer than
            ``MAX_COUNT_DIGITS`` digits.
        EmptyFormula: No element was found.
    """
    pos = _WHITESPACE.match(text).end()

    digits = _DIGITS.match(text, pos)
    coefficient = _as_positive(digits.group(), text)
    pos = digits.end()

    counts: dict[int, int] = {}
    elements = {}
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos >= len(text):
            break

        token = _TOKEN.match(text, pos)
        if token is None:
            raise InvalidSymbolStart(text, pos)
        pos = token.end()
        if token.group("paren"):
            continue

        symbol = token.group("symbol")
        element = catalog.by_symbol(symbol)
        if element is None:
            raise UnknownElement(symbol)

        z = element.atomic_number
        elements[z] = element
        counts[z] = counts.get(z, 0) + _as_positive(token.group("count"), text)

    if not counts:
        raise EmptyFormula(text)

    entries = tuple(ElementCount(elements[z], count) for z, count in counts.items())
    return Formula(entries=entries, coefficient=coefficient)


def parse_reactant_list(text: str, catalog: PeriodicTable = PERIODIC_TABLE) -> list[Formula]:
    """Parse ``"A + B + ..."`` into formulas.

    Tokens that fail to parse are dropped rather than failing the whole list.
    """
    formulas = []
    for token in text.split("+"):
        token = token.strip()
        if not token:
            continue
        try:
            formulas.append(parse_formula(token, catalog))
        except ParseError as exc:
            logger.debug("Dropping reactant %r: %s", token, exc)
    return formulas


def formula_mass(formula: Formula) -> float:
    """Molar mass (g/mol) of the formula, multiplied by its coefficient."""
    mass = sum(entry.element.atomic_mass * entry.count for entry in formula.entries)
    return mass * formula.coefficient


def reaction_masses(reaction: Reaction) -> tuple[float, float]:
    """Reactant-side and product-side mass totals (g/mol)."""
    reactant_mass = sum(formula_mass(f) for f in reaction.reactants)
    product_mass = sum(formula_mass(f) for f in reaction.products)
    return reactant_mass, product_mass


def format_formula(formula: Formula) -> str:
    """Render a formula back to text, e.g. ``"2H2O"``."""
    parts = [str(formula.coefficient)] if formula.coefficient > 1 else []
    for entry in formula.entries:
        parts.append(entry.element.symbol)
        if entry.count > 1:
            parts.append(str(entry.count))
    return "".join(parts)


def _as_positive(digits: str, text: str) -> int:
    # Absent or zero reads as 1.
    if len(digits.lstrip("0")) > MAX_COUNT_DIGITS:
        raise CountTooLarge(text, digits)
    value = int(digits) if digits else 0
    return value if value > 0 else 1
