"""chemkit core package."""

from chemkit.balance import balance_reaction, check_balanced
from chemkit.database import ReactionDatabase, default_database
from chemkit.elements import PERIODIC_TABLE, Element, PeriodicTable
from chemkit.formula import format_formula, parse_formula
from chemkit.matching import formulas_equal, formulas_match_set
from chemkit.models import ElementCount, Formula, Reaction, ReactionCondition, ReactionType

__all__ = [
    "balance_reaction",
    "check_balanced",
    "ReactionDatabase",
    "default_database",
    "PERIODIC_TABLE",
    "Element",
    "PeriodicTable",
    "format_formula",
    "parse_formula",
    "formulas_equal",
    "formulas_match_set",
    "ElementCount",
    "Formula",
    "Reaction",
    "ReactionCondition",
    "ReactionType",
]
