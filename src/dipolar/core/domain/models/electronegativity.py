"""Immutable electronegativity table keyed by element symbol."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple, Union

from ...exceptions import UnknownElement
from .atom import Atom, AtomType

DEFAULT_ELECTRONEGATIVITY: Dict[str, float] = {
    "H": 2.2,
    "C": 2.55,
    "N": 3.04,
    "O": 3.44,
    "P": 2.19,
    "S": 2.58,
}


@dataclass(frozen=True, eq=False)
class ElectronegativityTable:
    """
    Closed set of element symbols and their electronegativities.

    Built once from configuration and handed to the services that need it.
    Symbol order follows the configuration order.
    """

    values: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_ELECTRONEGATIVITY)
    )

    def __post_init__(self):
        object.__setattr__(
            self,
            "values",
            MappingProxyType({str(k): float(v) for k, v in self.values.items()}),
        )

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (AtomType, Atom)):
            item = item.symbol
        return item in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElectronegativityTable):
            return NotImplemented
        return dict(self.values) == dict(other.values)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self.values)

    def atom_type(self, symbol: str) -> AtomType:
        """Return the AtomType for ``symbol`` or raise UnknownElement."""
        if symbol not in self.values:
            raise UnknownElement(symbol)
        return AtomType(symbol)

    def electronegativity(self, item: Union[str, AtomType, Atom]) -> float:
        symbol = item if isinstance(item, str) else item.symbol
        try:
            return self.values[symbol]
        except KeyError:
            raise UnknownElement(symbol) from None

    def parse_atom(self, token: str) -> Atom:
        """
        Split a token such as ``H1`` into element symbol and label.

        The longest configured symbol prefixing the token wins, so with
        single-letter symbols the first character is the element.

        Raises:
            UnknownElement: If no configured symbol prefixes the token
        """
        candidates = [s for s in self.values if s and token.startswith(s)]
        if not candidates:
            raise UnknownElement(token[:1] or token)
        symbol = max(candidates, key=len)
        return Atom(AtomType(symbol), token[len(symbol):])

    def make_atom(self, symbol: str, label: str = "") -> Atom:
        return Atom(self.atom_type(symbol), label)
