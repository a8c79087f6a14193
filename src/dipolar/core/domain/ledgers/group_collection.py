"""Ordered list of angle triples forming the whole-molecule estimate."""

from typing import Iterable, Iterator, List

from ..models.angle import same_angle
from ..models.atom import AtomTriple


class GroupCollection:
    """
    Angle triples selected for the aggregate dipole.

    Entries are stored by value, so they survive angle renumbering.
    Duplicates are allowed and order is kept.
    """

    def __init__(self):
        self._entries: List[AtomTriple] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AtomTriple]:
        return iter(list(self._entries))

    def at(self, index: int) -> AtomTriple:
        return self._entries[self._check(index)]

    def list(self) -> List[AtomTriple]:
        return list(self._entries)

    def append(self, triple: AtomTriple) -> int:
        self._entries.append(tuple(triple))
        return len(self._entries) - 1

    def indices_matching(self, triple: AtomTriple) -> List[int]:
        """Positions of entries naming the same angle as ``triple``."""
        return [i for i, entry in enumerate(self._entries) if same_angle(entry, triple)]

    def delete(self, indices: Iterable[int]) -> List[AtomTriple]:
        doomed = {self._check(i) for i in indices}
        removed = [e for i, e in enumerate(self._entries) if i in doomed]
        self._entries = [e for i, e in enumerate(self._entries) if i not in doomed]
        return removed

    def clear(self) -> None:
        self._entries.clear()

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Group index must be an int, not {type(index).__name__}")
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Group index {index} out of range")
        return index
