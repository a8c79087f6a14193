"""Angle ledger deduplicating angles by atom triple or its mirror."""

from typing import List, Optional

from ..models.angle import Angle, reverse_triple
from ..models.atom import Atom, AtomTriple
from .indexed_ledger import IndexedLedger


class AngleLedger(IndexedLedger[AtomTriple, Angle]):
    """Angles keyed by (a1, vertex, a3) as added; (a3, vertex, a1) is the same angle."""

    def find(self, triple: AtomTriple) -> Optional[AtomTriple]:
        for key in (triple, reverse_triple(triple)):
            if key in self:
                return key
        return None

    def lookup(self, triple: AtomTriple) -> Optional[Angle]:
        key = self.find(triple)
        return None if key is None else self.get(key)

    def add(self, angle: Angle) -> int:
        return self.create(angle.key, angle)

    def indices_using_bond(self, a1: Atom, a2: Atom) -> List[int]:
        """Positions of every angle with ``a1``-``a2`` as an adjacent bond."""
        return [i for i, angle in enumerate(self._records) if angle.uses_bond(a1, a2)]
