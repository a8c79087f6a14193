#!/usr/bin/env python3
# src/dipolar/core/domain/models/angle.py

"""
Domain model representing a bond angle a1-a2-a3 with a2 as the vertex.
"""

from dataclasses import dataclass

from .atom import Atom, AtomTriple, format_atoms


def reverse_triple(triple: AtomTriple) -> AtomTriple:
    return (triple[2], triple[1], triple[0])


def same_angle(first: AtomTriple, second: AtomTriple) -> bool:
    """Triples name the same angle if equal or mirrored about the vertex."""
    return first == second or first == reverse_triple(second)


@dataclass(frozen=True)
class Angle:
    """Planar angle (degrees) and the resultant dipole of its two bonds."""

    atom1: Atom
    vertex: Atom
    atom3: Atom
    angle: float
    dipole: float

    @property
    def key(self) -> AtomTriple:
        return (self.atom1, self.vertex, self.atom3)

    def uses_bond(self, a1: Atom, a2: Atom) -> bool:
        """
        True if ``a1``-``a2`` is one of the two bonds meeting at the vertex.

        Both adjacency slots are checked in both orientations.
        """
        pair = {a1, a2}
        return pair == {self.atom1, self.vertex} or pair == {self.vertex, self.atom3}

    def __str__(self) -> str:
        return format_atoms(self.key)
