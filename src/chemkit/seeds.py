"""Seed reactions for the reaction database."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from chemkit.elements import PERIODIC_TABLE, PeriodicTable
from chemkit.errors import ParseError, SeedDataError
from chemkit.formula import parse_formula
from chemkit.models import Reaction, ReactionCondition, ReactionType


@dataclass(frozen=True)
class ReactionSeed:
    reactants: tuple[str, ...]
    products: tuple[str, ...]
    reaction_type: ReactionType
    condition: ReactionCondition
    description: str
    reversible: bool = False


def _seed(reactants, products, reaction_type, condition, description) -> ReactionSeed:
    return ReactionSeed(tuple(reactants), tuple(products), reaction_type, condition, description)


SEED_REACTIONS: tuple[ReactionSeed, ...] = (
    # Combustion
    _seed(["C", "O2"], ["CO2"], ReactionType.COMBUSTION, ReactionCondition.HEATED,
          "Combustion of carbon"),
    _seed(["2H2", "O2"], ["2H2O"], ReactionType.COMBUSTION, ReactionCondition.HEATED,
          "Combustion of hydrogen"),
    _seed(["CH4", "2O2"], ["CO2", "2H2O"], ReactionType.COMBUSTION, ReactionCondition.HEATED,
          "Combustion of methane"),
    # Synthesis
    _seed(["2Na", "Cl2"], ["2NaCl"], ReactionType.SYNTHESIS, ReactionCondition.NORMAL,
          "Formation of table salt"),
    _seed(["4Fe", "3O2"], ["2Fe2O3"], ReactionType.SYNTHESIS, ReactionCondition.NORMAL,
          "Rusting of iron"),
    _seed(["N2", "3H2"], ["2NH3"], ReactionType.SYNTHESIS, ReactionCondition.CATALYST,
          "Haber process for ammonia synthesis"),
    _seed(["S", "O2"], ["SO2"], ReactionType.COMBUSTION, ReactionCondition.HEATED,
          "Combustion of sulfur"),
    # Decomposition
    _seed(["2H2O"], ["2H2", "O2"], ReactionType.DECOMPOSITION, ReactionCondition.ELECTROLYSIS,
          "Electrolysis of water"),
    _seed(["2H2O2"], ["2H2O", "O2"], ReactionType.DECOMPOSITION, ReactionCondition.CATALYST,
          "Decomposition of hydrogen peroxide"),
    _seed(["CaCO3"], ["CaO", "CO2"], ReactionType.DECOMPOSITION, ReactionCondition.HEATED,
          "Thermal decomposition of limestone"),
    # Acid-base
    _seed(["HCl", "NaOH"], ["NaCl", "H2O"], ReactionType.ACID_BASE, ReactionCondition.NORMAL,
          "Neutralization reaction"),
    _seed(["H2SO4", "2NaOH"], ["Na2SO4", "2H2O"], ReactionType.ACID_BASE, ReactionCondition.NORMAL,
          "Neutralization with sulfuric acid"),
    # Single replacement
    _seed(["Zn", "2HCl"], ["ZnCl2", "H2"], ReactionType.SINGLE_REPLACE, ReactionCondition.NORMAL,
          "Zinc displaces hydrogen from acid"),
    _seed(["Fe", "CuSO4"], ["FeSO4", "Cu"], ReactionType.SINGLE_REPLACE, ReactionCondition.NORMAL,
          "Iron displaces copper"),
    # Double replacement
    _seed(["AgNO3", "NaCl"], ["AgCl", "NaNO3"], ReactionType.DOUBLE_REPLACE, ReactionCondition.NORMAL,
          "Precipitation of silver chloride"),
    _seed(["BaCl2", "Na2SO4"], ["BaSO4", "2NaCl"], ReactionType.DOUBLE_REPLACE, ReactionCondition.NORMAL,
          "Precipitation of barium sulfate"),
    # Biological, simplified
    _seed(["6CO2", "6H2O"], ["C6H12O6", "6O2"], ReactionType.OTHER, ReactionCondition.LIGHT,
          "Photosynthesis (simplified)"),
    _seed(["C6H12O6", "6O2"], ["6CO2", "6H2O"], ReactionType.COMBUSTION, ReactionCondition.NORMAL,
          "Cellular respiration (simplified)"),
    _seed(["2Mg", "O2"], ["2MgO"], ReactionType.SYNTHESIS, ReactionCondition.HEATED,
          "Burning magnesium"),
)


def build_reaction(seed: ReactionSeed, catalog: PeriodicTable = PERIODIC_TABLE) -> Reaction:
    """Parse a seed into a :class:`Reaction`.

    Raises:
        SeedDataError: One of the seed formulas does not parse.
    """
    try:
        reactants = [parse_formula(text, catalog) for text in seed.reactants]
        products = [parse_formula(text, catalog) for text in seed.products]
    except ParseError as exc:
        raise SeedDataError(f"Seed reaction {seed.description!r}: {exc}") from exc

    return Reaction(
        reactants=reactants,
        products=products,
        condition=seed.condition,
        reaction_type=seed.reaction_type,
        description=seed.description,
        is_reversible=seed.reversible,
    )


def load_seeds(path: str | Path) -> tuple[ReactionSeed, ...]:
    """Read seed reactions from a JSON file.

    The file holds a list of objects::

        {"reactants": ["C", "O2"], "products": ["CO2"], "type": "combustion",
         "condition": "heated", "description": "...", "reversible": false}

    ``type`` and ``condition`` name enum members (case-insensitive) and default
    to OTHER and NORMAL.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise SeedDataError(f"Cannot read seed file {path}: {exc}") from exc

    if not isinstance(data, list):
        raise SeedDataError(f"Seed file {path} must contain a list of reactions")
    return tuple(_parse_seed(item, index) for index, item in enumerate(data))


def _parse_seed(data: Any, index: int) -> ReactionSeed:
    if not isinstance(data, Mapping):
        raise SeedDataError(f"Seed #{index} is not an object")
    try:
        reactants = _string_list(data["reactants"], "reactants", index)
        products = _string_list(data["products"], "products", index)
        reaction_type = ReactionType[str(data.get("type", "other")).upper()]
        condition = ReactionCondition[str(data.get("condition", "normal")).upper()]
    except KeyError as exc:
        raise SeedDataError(f"Seed #{index}: missing or unknown value {exc}") from exc

    reversible = data.get("reversible", False)
    if not isinstance(reversible, bool):
        raise SeedDataError(f"Seed #{index}: reversible must be true or false")

    return ReactionSeed(
        reactants=reactants,
        products=products,
        reaction_type=reaction_type,
        condition=condition,
        description=str(data.get("description", "")),
        reversible=reversible,
    )


def _string_list(value: Any, field: str, index: int) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise SeedDataError(f"Seed #{index}: {field} must be a list of formulas")
    return tuple(str(item) for item in value)
