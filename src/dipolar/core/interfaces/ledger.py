"""Abstract base class for ledgers: ordered records with a key-to-position index."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

K = TypeVar("K")
T = TypeVar("T")


class Ledger(ABC, Generic[K, T]):
    """
    Generic ledger interface defining the record operations.

    Positions are dense: records are numbered 0..n-1 in insertion order and
    renumbered without gaps when records are deleted.
    """

    @abstractmethod
    def get(self, key: K) -> Optional[T]:
        """Retrieve a record by key."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all records in position order."""
        pass

    @abstractmethod
    def create(self, key: K, record: T) -> int:
        """Append a new record and return its position."""
        pass

    @abstractmethod
    def update(self, key: K, record: T) -> int:
        """Replace an existing record in place and return its position."""
        pass

    @abstractmethod
    def delete(self, indices: Iterable[int]) -> List[T]:
        """Delete the records at the given positions as one batch."""
        pass
