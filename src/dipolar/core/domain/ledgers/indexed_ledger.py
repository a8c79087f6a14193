"""Dense, insertion-ordered record array with a secondary key index."""

from typing import Dict, Iterable, Iterator, List, Optional, TypeVar

from ...interfaces.ledger import Ledger

K = TypeVar("K")
T = TypeVar("T")


class IndexedLedger(Ledger[K, T]):
    """
    Ledger storing records in a list and their positions in a dict.

    Deletions are applied as a batch and the key index is renumbered once
    afterwards, so positions never have gaps.
    """

    def __init__(self):
        self._keys: List[K] = []
        self._records: List[T] = []
        self._index: Dict[K, int] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records))

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def get(self, key: K) -> Optional[T]:
        index = self._index.get(key)
        return None if index is None else self._records[index]

    def index_of(self, key: K) -> Optional[int]:
        return self._index.get(key)

    def at(self, index: int) -> T:
        return self._records[self._check(index)]

    def keys(self) -> List[K]:
        return list(self._keys)

    def list(self) -> List[T]:
        return list(self._records)

    def create(self, key: K, record: T) -> int:
        if key in self._index:
            raise KeyError(f"{key!r} is already in the ledger")
        index = len(self._records)
        self._index[key] = index
        self._keys.append(key)
        self._records.append(record)
        return index

    def update(self, key: K, record: T) -> int:
        index = self._index[key]
        self._records[index] = record
        return index

    def delete(self, indices: Iterable[int]) -> List[T]:
        """
        Remove every record at ``indices`` and renumber the rest once.

        All indices are validated before anything is removed; duplicates
        and ordering of ``indices`` do not matter.

        Returns:
            Removed records in their former position order
        """
        doomed = sorted({self._check(i) for i in indices})
        if not doomed:
            return []
        removed = [self._records[i] for i in doomed]
        doomed_set = set(doomed)
        self._keys = [k for i, k in enumerate(self._keys) if i not in doomed_set]
        self._records = [
            r for i, r in enumerate(self._records) if i not in doomed_set
        ]
        self._index = {key: i for i, key in enumerate(self._keys)}
        return removed

    def clear(self) -> None:
        self._keys.clear()
        self._records.clear()
        self._index.clear()

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Ledger index must be an int, not {type(index).__name__}")
        if not 0 <= index < len(self._records):
            raise IndexError(f"Ledger index {index} out of range")
        return index
