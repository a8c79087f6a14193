# src/dipolar/core/domain/molecule.py
"""Aggregate holding the three layered ledgers of one project."""

from typing import Optional

from .ledgers import AngleLedger, AtomRegistry, BondLedger, GroupCollection
from .models.electronegativity import ElectronegativityTable


class Molecule:
    """Atoms, bonds, angles, groups and the user radius of a fragment."""

    def __init__(self, table: ElectronegativityTable):
        """
        Initialize an empty molecule.

        Args:
            table: Electronegativities every atom type must come from
        """
        self.table = table
        self.atoms = AtomRegistry()
        self.bonds = BondLedger()
        self.angles = AngleLedger()
        self.groups = GroupCollection()
        self.radius: Optional[float] = None

    def clear(self) -> None:
        self.atoms.clear()
        self.bonds.clear()
        self.angles.clear()
        self.groups.clear()
        self.radius = None

    def is_empty(self) -> bool:
        return len(self.atoms) == 0
