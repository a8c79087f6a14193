#!/usr/bin/env python3
# src/dipolar/core/domain/models/atom.py

"""
Domain models identifying atoms by element symbol and free-form label.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AtomType:
    """Element symbol drawn from the configured electronegativity table."""

    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Atom:
    """An element plus the label telling same-element atoms apart (H1, H2)."""

    type: AtomType
    label: str = ""

    @property
    def symbol(self) -> str:
        return self.type.symbol

    def __str__(self) -> str:
        return f"{self.type.symbol}{self.label}"


AtomPair = Tuple[Atom, Atom]
AtomTriple = Tuple[Atom, Atom, Atom]

ATOM_SEPARATOR = " - "


def format_atoms(atoms) -> str:
    """Render atoms the way bond/angle rows show them, e.g. ``H1 - O - H2``."""
    return ATOM_SEPARATOR.join(str(atom) for atom in atoms)
