"""Periodic table data and element lookups.

The catalog holds one canonical :class:`Element` per atomic number. Formulas,
reactions and molecules reference these instances and never copy them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from chemkit.constants import NUM_ELEMENTS


class ElementState(Enum):
    """State at room temperature."""

    SOLID = "Solid"
    LIQUID = "Liquid"
    GAS = "Gas"
    UNKNOWN = "Unknown"


class ElementCategory(Enum):
    NONMETAL = "Nonmetal"
    NOBLE_GAS = "Noble Gas"
    ALKALI_METAL = "Alkali Metal"
    ALKALINE_EARTH = "Alkaline Earth Metal"
    METALLOID = "Metalloid"
    HALOGEN = "Halogen"
    TRANSITION_METAL = "Transition Metal"
    POST_TRANSITION = "Post-Transition Metal"
    LANTHANIDE = "Lanthanide"
    ACTINIDE = "Actinide"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Element:
    """A chemical element.

    Attributes:
        atomic_number: Z, number of protons.
        symbol: Element symbol (e.g. "H", "He", "Na").
        name: Full English name.
        atomic_mass: Atomic mass (amu).
        valence_electrons: Electrons in the outer shell.
        electronegativity: Pauling scale, 0.0 when unknown.
        state: State at room temperature.
        category: Periodic table category.
        common_charges: Common ionic charges, empty when none apply.
    """

    atomic_number: int
    symbol: str
    name: str
    atomic_mass: float
    valence_electrons: int
    electronegativity: float
    state: ElementState
    category: ElementCategory
    common_charges: tuple[int, ...] = ()

    @property
    def max_bonds(self) -> int:
        """Typical number of bonds the element forms to complete its octet."""
        if self.category is ElementCategory.NOBLE_GAS:
            return 0
        valence = self.valence_electrons
        if valence <= 4:
            return valence
        return 8 - valence


class PeriodicTable:
    """Read-only element catalog with O(1) lookups."""

    def __init__(self, elements: Sequence[Element]):
        self._elements = tuple(sorted(elements, key=lambda el: el.atomic_number))
        self._by_number = {el.atomic_number: el for el in self._elements}
        self._by_symbol = {el.symbol.lower(): el for el in self._elements}
        self._by_name = {el.name.lower(): el for el in self._elements}

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def by_number(self, atomic_number: int) -> Element | None:
        return self._by_number.get(atomic_number)

    def by_symbol(self, symbol: str) -> Element | None:
        """Case-insensitive symbol lookup."""
        return self._by_symbol.get(symbol.strip().lower())

    def by_name(self, name: str) -> Element | None:
        """Case-insensitive name lookup."""
        return self._by_name.get(name.strip().lower())

    def lookup(self, query: str) -> Element | None:
        """Resolve an atomic number, a symbol or a name, in that order."""
        query = query.strip()
        if query.isdecimal():
            element = self.by_number(int(query))
            if element is not None:
                return element
        return self.by_symbol(query) or self.by_name(query)


# (Z, symbol, name, mass, valence, electronegativity, state, category, charges)
_ELEMENT_ROWS = [
    (1, "H", "Hydrogen", 1.008, 1, 2.20, "GAS", "NONMETAL", (1, -1)),
    (2, "He", "Helium", 4.003, 2, 0.00, "GAS", "NOBLE_GAS", ()),
    (3, "Li", "Lithium", 6.941, 1, 0.98, "SOLID", "ALKALI_METAL", (1,)),
    (4, "Be", "Beryllium", 9.012, 2, 1.57, "SOLID", "ALKALINE_EARTH", (2,)),
    (5, "B", "Boron", 10.81, 3, 2.04, "SOLID", "METALLOID", (3,)),
    (6, "C", "Carbon", 12.011, 4, 2.55, "SOLID", "NONMETAL", (4, -4, 2)),
    (7, "N", "Nitrogen", 14.007, 5, 3.04, "GAS", "NONMETAL", (-3, 3, 5)),
    (8, "O", "Oxygen", 15.999, 6, 3.44, "GAS", "NONMETAL", (-2,)),
    (9, "F", "Fluorine", 18.998, 7, 3.98, "GAS", "HALOGEN", (-1,)),
    (10, "Ne", "Neon", 20.180, 8, 0.00, "GAS", "NOBLE_GAS", ()),
    (11, "Na", "Sodium", 22.990, 1, 0.93, "SOLID", "ALKALI_METAL", (1,)),
    (12, "Mg", "Magnesium", 24.305, 2, 1.31, "SOLID", "ALKALINE_EARTH", (2,)),
    (13, "Al", "Aluminum", 26.982, 3, 1.61, "SOLID", "POST_TRANSITION", (3,)),
    (14, "Si", "Silicon", 28.086, 4, 1.90, "SOLID", "METALLOID", (4, -4)),
    (15, "P", "Phosphorus", 30.974, 5, 2.19, "SOLID", "NONMETAL", (-3, 3, 5)),
    (16, "S", "Sulfur", 32.065, 6, 2.58, "SOLID", "NONMETAL", (-2, 2, 4, 6)),
    (17, "Cl", "Chlorine", 35.453, 7, 3.16, "GAS", "HALOGEN", (-1, 1, 3, 5)),
    (18, "Ar", "Argon", 39.948, 8, 0.00, "GAS", "NOBLE_GAS", ()),
    (19, "K", "Potassium", 39.098, 1, 0.82, "SOLID", "ALKALI_METAL", (1,)),
    (20, "Ca", "Calcium", 40.078, 2, 1.00, "SOLID", "ALKALINE_EARTH", (2,)),
    (21, "Sc", "Scandium", 44.956, 2, 1.36, "SOLID", "TRANSITION_METAL", (3,)),
    (22, "Ti", "Titanium", 47.867, 2, 1.54, "SOLID", "TRANSITION_METAL", (4, 3, 2)),
    (23, "V", "Vanadium", 50.942, 2, 1.63, "SOLID", "TRANSITION_METAL", (5, 4, 3, 2)),
    (24, "Cr", "Chromium", 51.996, 1, 1.66, "SOLID", "TRANSITION_METAL", (3, 6, 2)),
    (25, "Mn", "Manganese", 54.938, 2, 1.55, "SOLID", "TRANSITION_METAL", (2, 4, 7)),
    (26, "Fe", "Iron", 55.845, 2, 1.83, "SOLID", "TRANSITION_METAL", (2, 3)),
    (27, "Co", "Cobalt", 58.933, 2, 1.88, "SOLID", "TRANSITION_METAL", (2, 3)),
    (28, "Ni", "Nickel", 58.693, 2, 1.91, "SOLID", "TRANSITION_METAL", (2, 3)),
    (29, "Cu", "Copper", 63.546, 1, 1.90, "SOLID", "TRANSITION_METAL", (2, 1)),
    (30, "Zn", "Zinc", 65.38, 2, 1.65, "SOLID", "TRANSITION_METAL", (2,)),
    (31, "Ga", "Gallium", 69.723, 3, 1.81, "SOLID", "POST_TRANSITION", (3,)),
    (32, "Ge", "Germanium", 72.64, 4, 2.01, "SOLID", "METALLOID", (4, 2)),
    (33, "As", "Arsenic", 74.922, 5, 2.18, "SOLID", "METALLOID", (-3, 3, 5)),
    (34, "Se", "Selenium", 78.96, 6, 2.55, "SOLID", "NONMETAL", (-2, 4, 6)),
    (35, "Br", "Bromine", 79.904, 7, 2.96, "LIQUID", "HALOGEN", (-1, 1, 5)),
    (36, "Kr", "Krypton", 83.798, 8, 3.00, "GAS", "NOBLE_GAS", ()),
    (37, "Rb", "Rubidium", 85.468, 1, 0.82, "SOLID", "ALKALI_METAL", (1,)),
    (38, "Sr", "Strontium", 87.62, 2, 0.95, "SOLID", "ALKALINE_EARTH", (2,)),
    (39, "Y", "Yttrium", 88.906, 2, 1.22, "SOLID", "TRANSITION_METAL", (3,)),
    (40, "Zr", "Zirconium", 91.224, 2, 1.33, "SOLID", "TRANSITION_METAL", (4,)),
    (41, "Nb", "Niobium", 92.906, 1, 1.60, "SOLID", "TRANSITION_METAL", (5, 3)),
    (42, "Mo", "Molybdenum", 95.96, 1, 2.16, "SOLID", "TRANSITION_METAL", (6, 4)),
    (43, "Tc", "Technetium", 98.0, 2, 1.90, "SOLID", "TRANSITION_METAL", (7, 4)),
    (44, "Ru", "Ruthenium", 101.07, 1, 2.20, "SOLID", "TRANSITION_METAL", (3, 4)),
    (45, "Rh", "Rhodium", 102.906, 1, 2.28, "SOLID", "TRANSITION_METAL", (3,)),
    (46, "Pd", "Palladium", 106.42, 0, 2.20, "SOLID", "TRANSITION_METAL", (2, 4)),
    (47, "Ag", "Silver", 107.868, 1, 1.93, "SOLID", "TRANSITION_METAL", (1,)),
    (48, "Cd", "Cadmium", 112.411, 2, 1.69, "SOLID", "TRANSITION_METAL", (2,)),
    (49, "In", "Indium", 114.818, 3, 1.78, "SOLID", "POST_TRANSITION", (3,)),
    (50, "Sn", "Tin", 118.710, 4, 1.96, "SOLID", "POST_TRANSITION", (4, 2)),
    (51, "Sb", "Antimony", 121.760, 5, 2.05, "SOLID", "METALLOID", (-3, 3, 5)),
    (52, "Te", "Tellurium", 127.60, 6, 2.10, "SOLID", "METALLOID", (-2, 4, 6)),
    (53, "I", "Iodine", 126.904, 7, 2.66, "SOLID", "HALOGEN", (-1, 1, 5, 7)),
    (54, "Xe", "Xenon", 131.293, 8, 2.60, "GAS", "NOBLE_GAS", ()),
    (55, "Cs", "Cesium", 132.905, 1, 0.79, "SOLID", "ALKALI_METAL", (1,)),
    (56, "Ba", "Barium", 137.327, 2, 0.89, "SOLID", "ALKALINE_EARTH", (2,)),
    (57, "La", "Lanthanum", 138.905, 2, 1.10, "SOLID", "LANTHANIDE", (3,)),
    (58, "Ce", "Cerium", 140.116, 2, 1.12, "SOLID", "LANTHANIDE", (3, 4)),
    (59, "Pr", "Praseodymium", 140.908, 2, 1.13, "SOLID", "LANTHANIDE", (3,)),
    (60, "Nd", "Neodymium", 144.242, 2, 1.14, "SOLID", "LANTHANIDE", (3,)),
    (61, "Pm", "Promethium", 145.0, 2, 1.13, "SOLID", "LANTHANIDE", (3,)),
    (62, "Sm", "Samarium", 150.36, 2, 1.17, "SOLID", "LANTHANIDE", (3, 2)),
    (63, "Eu", "Europium", 151.964, 2, 1.20, "SOLID", "LANTHANIDE", (3, 2)),
    (64, "Gd", "Gadolinium", 157.25, 2, 1.20, "SOLID", "LANTHANIDE", (3,)),
    (65, "Tb", "Terbium", 158.925, 2, 1.20, "SOLID", "LANTHANIDE", (3,)),
    (66, "Dy", "Dysprosium", 162.500, 2, 1.22, "SOLID", "LANTHANIDE", (3,)),
    (67, "Ho", "Holmium", 164.930, 2, 1.23, "SOLID", "LANTHANIDE", (3,)),
    (68, "Er", "Erbium", 167.259, 2, 1.24, "SOLID", "LANTHANIDE", (3,)),
    (69, "Tm", "Thulium", 168.934, 2, 1.25, "SOLID", "LANTHANIDE", (3, 2)),
    (70, "Yb", "Ytterbium", 173.054, 2, 1.10, "SOLID", "LANTHANIDE", (3, 2)),
    (71, "Lu", "Lutetium", 174.967, 2, 1.27, "SOLID", "LANTHANIDE", (3,)),
    (72, "Hf", "Hafnium", 178.49, 2, 1.30, "SOLID", "TRANSITION_METAL", (4,)),
    (73, "Ta", "Tantalum", 180.948, 2, 1.50, "SOLID", "TRANSITION_METAL", (5,)),
    (74, "W", "Tungsten", 183.84, 2, 2.36, "SOLID", "TRANSITION_METAL", (6, 4)),
    (75, "Re", "Rhenium", 186.207, 2, 1.90, "SOLID", "TRANSITION_METAL", (7, 4)),
    (76, "Os", "Osmium", 190.23, 2, 2.20, "SOLID", "TRANSITION_METAL", (4, 3)),
    (77, "Ir", "Iridium", 192.217, 2, 2.20, "SOLID", "TRANSITION_METAL", (4, 3)),
    (78, "Pt", "Platinum", 195.084, 1, 2.28, "SOLID", "TRANSITION_METAL", (2, 4)),
    (79, "Au", "Gold", 196.967, 1, 2.54, "SOLID", "TRANSITION_METAL", (3, 1)),
    (80, "Hg", "Mercury", 200.59, 2, 2.00, "LIQUID", "TRANSITION_METAL", (2, 1)),
    (81, "Tl", "Thallium", 204.383, 3, 1.62, "SOLID", "POST_TRANSITION", (1, 3)),
    (82, "Pb", "Lead", 207.2, 4, 2.33, "SOLID", "POST_TRANSITION", (2, 4)),
    (83, "Bi", "Bismuth", 208.980, 5, 2.02, "SOLID", "POST_TRANSITION", (3, 5)),
    (84, "Po", "Polonium", 209.0, 6, 2.00, "SOLID", "METALLOID", (4, 2)),
    (85, "At", "Astatine", 210.0, 7, 2.20, "SOLID", "HALOGEN", (-1, 1)),
    (86, "Rn", "Radon", 222.0, 8, 0.00, "GAS", "NOBLE_GAS", ()),
    (87, "Fr", "Francium", 223.0, 1, 0.70, "SOLID", "ALKALI_METAL", (1,)),
    (88, "Ra", "Radium", 226.0, 2, 0.90, "SOLID", "ALKALINE_EARTH", (2,)),
    (89, "Ac", "Actinium", 227.0, 2, 1.10, "SOLID", "ACTINIDE", (3,)),
    (90, "Th", "Thorium", 232.038, 2, 1.30, "SOLID", "ACTINIDE", (4,)),
    (91, "Pa", "Protactinium", 231.036, 2, 1.50, "SOLID", "ACTINIDE", (5, 4)),
    (92, "U", "Uranium", 238.029, 2, 1.38, "SOLID", "ACTINIDE", (6, 4, 3)),
    (93, "Np", "Neptunium", 237.0, 2, 1.36, "SOLID", "ACTINIDE", (5, 4, 3)),
    (94, "Pu", "Plutonium", 244.0, 2, 1.28, "SOLID", "ACTINIDE", (4, 3, 5, 6)),
    (95, "Am", "Americium", 243.0, 2, 1.30, "SOLID", "ACTINIDE", (3, 4, 5, 6)),
    (96, "Cm", "Curium", 247.0, 2, 1.30, "SOLID", "ACTINIDE", (3,)),
    (97, "Bk", "Berkelium", 247.0, 2, 1.30, "SOLID", "ACTINIDE", (3, 4)),
    (98, "Cf", "Californium", 251.0, 2, 1.30, "SOLID", "ACTINIDE", (3,)),
    (99, "Es", "Einsteinium", 252.0, 2, 1.30, "SOLID", "ACTINIDE", (3,)),
    (100, "Fm", "Fermium", 257.0, 2, 1.30, "SOLID", "ACTINIDE", (3,)),
    (101, "Md", "Mendelevium", 258.0, 2, 1.30, "SOLID", "ACTINIDE", (3, 2)),
    (102, "No", "Nobelium", 259.0, 2, 1.30, "SOLID", "ACTINIDE", (2, 3)),
    (103, "Lr", "Lawrencium", 262.0, 3, 1.30, "SOLID", "ACTINIDE", (3,)),
    (104, "Rf", "Rutherfordium", 267.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (4,)),
    (105, "Db", "Dubnium", 268.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (5,)),
    (106, "Sg", "Seaborgium", 271.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (6,)),
    (107, "Bh", "Bohrium", 270.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (7,)),
    (108, "Hs", "Hassium", 277.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (8,)),
    (109, "Mt", "Meitnerium", 276.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", ()),
    (110, "Ds", "Darmstadtium", 281.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", ()),
    (111, "Rg", "Roentgenium", 280.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", ()),
    (112, "Cn", "Copernicium", 285.0, 2, 0.00, "UNKNOWN", "TRANSITION_METAL", (2,)),
    (113, "Nh", "Nihonium", 284.0, 3, 0.00, "UNKNOWN", "POST_TRANSITION", ()),
    (114, "Fl", "Flerovium", 289.0, 4, 0.00, "UNKNOWN", "POST_TRANSITION", ()),
    (115, "Mc", "Moscovium", 288.0, 5, 0.00, "UNKNOWN", "POST_TRANSITION", ()),
    (116, "Lv", "Livermorium", 293.0, 6, 0.00, "UNKNOWN", "POST_TRANSITION", ()),
    (117, "Ts", "Tennessine", 294.0, 7, 0.00, "UNKNOWN", "HALOGEN", ()),
    (118, "Og", "Oganesson", 294.0, 8, 0.00, "UNKNOWN", "NOBLE_GAS", ()),
]


def _build_table() -> PeriodicTable:
    elements = [
        Element(
            atomic_number=z,
            symbol=symbol,
            name=name,
            atomic_mass=mass,
            valence_electrons=valence,
            electronegativity=electronegativity,
            state=ElementState[state],
            category=ElementCategory[category],
            common_charges=charges,
        )
        for z, symbol, name, mass, valence, electronegativity, state, category, charges in _ELEMENT_ROWS
    ]
    if len(elements) != NUM_ELEMENTS:
        raise RuntimeError(f"Periodic table has {len(elements)} elements, expected {NUM_ELEMENTS}")
    return PeriodicTable(elements)


PERIODIC_TABLE = _build_table()
