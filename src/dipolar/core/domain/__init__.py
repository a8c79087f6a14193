"""Core domain models and ledgers."""

from .models.atom import Atom, AtomType
from .models.bond import Bond
from .models.angle import Angle
from .models.electronegativity import ElectronegativityTable
from .ledgers import AngleLedger, AtomRegistry, BondLedger, GroupCollection
from .molecule import Molecule

__all__ = [
    "Atom",
    "AtomType",
    "Bond",
    "Angle",
    "ElectronegativityTable",
    "AngleLedger",
    "AtomRegistry",
    "BondLedger",
    "GroupCollection",
    "Molecule",
]
