"""Exception hierarchy for chemkit."""

from __future__ import annotations

from chemkit.constants import MAX_COUNT_DIGITS


class ChemkitError(Exception):
    """Base class for every error raised by chemkit."""


class ParseError(ChemkitError, ValueError):
    """A formula string could not be parsed."""


class InvalidSymbolStart(ParseError):
    """A formula token does not start with an uppercase letter or a parenthesis."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        self.character = text[position]
        super().__init__(
            f"Invalid character {self.character!r} at position {position} in formula {text!r}"
        )


class UnknownElement(ParseError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown element: {symbol}")


class EmptyFormula(ParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Formula {text!r} contains no elements")


class CountTooLarge(ParseError):
    def __init__(self, text: str, digits: str) -> None:
        self.text = text
        self.digits = digits
        super().__init__(f"A count in formula {text[:40]!r} is longer than {MAX_COUNT_DIGITS} digits")


class CapacityError(ChemkitError, ValueError):
    """A bounded container was asked to hold more than its configured limit."""


class ReactionCapacityError(CapacityError):
    pass


class MoleculeCapacityError(CapacityError):
    pass


class SeedDataError(ChemkitError):
    """Seed reaction data is malformed."""
