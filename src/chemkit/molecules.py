"""Descriptive molecule containers.

A :class:`Molecule` records atoms and the bonds between them. The structure is
kept for display; no graph algorithms run over it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from chemkit.constants import MAX_ATOMS_PER_MOLECULE, MAX_BONDS_PER_MOLECULE
from chemkit.elements import PERIODIC_TABLE, Element
from chemkit.errors import MoleculeCapacityError


class BondType(Enum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3


@dataclass(frozen=True)
class Atom:
    element: Element
    charge: int
    id: int


@dataclass(frozen=True)
class Bond:
    atom1_id: int
    atom2_id: int
    bond_type: BondType = BondType.SINGLE


@dataclass
class Molecule:
    name: str
    formula: str = ""
    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)

    def add_atom(self, element: Element, charge: int = 0) -> int:
        """Append an atom and return its id."""
        if len(self.atoms) >= MAX_ATOMS_PER_MOLECULE:
            raise MoleculeCapacityError(f"A molecule holds at most {MAX_ATOMS_PER_MOLECULE} atoms")
        atom_id = len(self.atoms)
        self.atoms.append(Atom(element=element, charge=charge, id=atom_id))
        return atom_id

    def add_bond(self, atom1_id: int, atom2_id: int, bond_type: BondType = BondType.SINGLE) -> Bond:
        for atom_id in (atom1_id, atom2_id):
            if not 0 <= atom_id < len(self.atoms):
                raise ValueError(f"No atom with id {atom_id} in {self.name}")
        if atom1_id == atom2_id:
            raise ValueError("An atom cannot bond to itself")
        if len(self.bonds) >= MAX_BONDS_PER_MOLECULE:
            raise MoleculeCapacityError(f"A molecule holds at most {MAX_BONDS_PER_MOLECULE} bonds")
        bond = Bond(atom1_id, atom2_id, bond_type)
        self.bonds.append(bond)
        return bond

    @property
    def molecular_mass(self) -> float:
        return sum(atom.element.atomic_mass for atom in self.atoms)

    def composition(self) -> list[tuple[Element, int, float]]:
        """(element, atom count, percent by mass) in first-seen order."""
        counts: dict[int, int] = {}
        elements = {}
        for atom in self.atoms:
            z = atom.element.atomic_number
            elements[z] = atom.element
            counts[z] = counts.get(z, 0) + 1

        total = self.molecular_mass
        result = []
        for z, count in counts.items():
            element = elements[z]
            percent = element.atomic_mass * count / total * 100.0 if total > 0 else 0.0
            result.append((element, count, percent))
        return result


def _central_molecule(
    name: str, formula: str, center: str, ligand: str, ligands: int, bond_type: BondType
) -> Molecule:
    molecule = Molecule(name=name, formula=formula)
    center_id = molecule.add_atom(PERIODIC_TABLE.by_symbol(center))
    for _ in range(ligands):
        ligand_id = molecule.add_atom(PERIODIC_TABLE.by_symbol(ligand))
        molecule.add_bond(center_id, ligand_id, bond_type)
    return molecule


def create_water() -> Molecule:
    return _central_molecule("Water", "H2O", "O", "H", 2, BondType.SINGLE)


def create_co2() -> Molecule:
    return _central_molecule("Carbon Dioxide", "CO2", "C", "O", 2, BondType.DOUBLE)


def create_methane() -> Molecule:
    return _central_molecule("Methane", "CH4", "C", "H", 4, BondType.SINGLE)
