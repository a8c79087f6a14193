#!/usr/bin/env python3
# src/dipolar/core/domain/models/bond.py

"""
Domain model representing a polar bond between two atoms.
"""

from dataclasses import dataclass

from .atom import Atom, AtomPair, format_atoms


@dataclass(frozen=True)
class Bond:
    """A bond with its length (angstrom) and derived dipole (debye)."""

    atom1: Atom
    atom2: Atom
    length: float
    dipole: float

    @property
    def key(self) -> AtomPair:
        return (self.atom1, self.atom2)

    def __str__(self) -> str:
        return format_atoms(self.key)
