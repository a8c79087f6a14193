"""Bond ledger deduplicating bonds by unordered atom pair."""

from typing import Optional, Set

from ..models.atom import Atom, AtomPair
from ..models.bond import Bond
from .indexed_ledger import IndexedLedger


class BondLedger(IndexedLedger[AtomPair, Bond]):
    """Bonds keyed by the atom pair in the orientation they were added."""

    def find(self, a1: Atom, a2: Atom) -> Optional[AtomPair]:
        """Return the stored key for the pair in either orientation."""
        for key in ((a1, a2), (a2, a1)):
            if key in self:
                return key
        return None

    def lookup(self, a1: Atom, a2: Atom) -> Optional[Bond]:
        key = self.find(a1, a2)
        return None if key is None else self.get(key)

    def add(self, bond: Bond) -> int:
        return self.create(bond.key, bond)

    def atoms_in_use(self) -> Set[Atom]:
        used: Set[Atom] = set()
        for bond in self._records:
            used.update(bond.key)
        return used
