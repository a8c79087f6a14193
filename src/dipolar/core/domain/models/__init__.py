"""Domain model classes."""

from .atom import Atom, AtomType, AtomPair, AtomTriple, format_atoms
from .bond import Bond
from .angle import Angle, reverse_triple, same_angle
from .electronegativity import DEFAULT_ELECTRONEGATIVITY, ElectronegativityTable
from .results import (
    AddResult,
    AddStatus,
    DuplicatePolicy,
    MoleculeSummary,
    ProjectSnapshot,
    format_value,
)

__all__ = [
    "Atom",
    "AtomType",
    "AtomPair",
    "AtomTriple",
    "format_atoms",
    "Bond",
    "Angle",
    "reverse_triple",
    "same_angle",
    "DEFAULT_ELECTRONEGATIVITY",
    "ElectronegativityTable",
    "AddResult",
    "AddStatus",
    "DuplicatePolicy",
    "MoleculeSummary",
    "ProjectSnapshot",
    "format_value",
]
