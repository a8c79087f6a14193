"""Registry of the atoms currently referenced by at least one bond."""

from typing import Iterable, Iterator, List

from ..models.atom import Atom


class AtomRegistry:
    """Atoms in first-seen order; they come and go with their bonds."""

    def __init__(self):
        self._atoms: List[Atom] = []

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(list(self._atoms))

    def __contains__(self, atom: object) -> bool:
        return atom in self._atoms

    def register(self, atom: Atom) -> bool:
        """Add ``atom`` if absent; True if it was new."""
        if atom in self._atoms:
            return False
        self._atoms.append(atom)
        return True

    def prune(self, in_use: Iterable[Atom]) -> List[Atom]:
        """Drop atoms not in ``in_use`` and return them."""
        keep = set(in_use)
        removed = [a for a in self._atoms if a not in keep]
        self._atoms = [a for a in self._atoms if a in keep]
        return removed

    def list(self) -> List[Atom]:
        return list(self._atoms)

    def clear(self) -> None:
        self._atoms.clear()
