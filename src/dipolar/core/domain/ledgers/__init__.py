"""Ledgers holding the molecular fragment description."""

from .indexed_ledger import IndexedLedger
from .atom_registry import AtomRegistry
from .bond_ledger import BondLedger
from .angle_ledger import AngleLedger
from .group_collection import GroupCollection

__all__ = [
    "IndexedLedger",
    "AtomRegistry",
    "BondLedger",
    "AngleLedger",
    "GroupCollection",
]
