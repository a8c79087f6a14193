"""Result types handed back to callers for rendering."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .angle import Angle
from .atom import Atom, AtomTriple
from .bond import Bond

NO_VALUE = "-"


class AddStatus(Enum):
    """Outcome of adding a bond or an angle."""

    ADDED = auto()
    REPLACED = auto()
    KEPT = auto()


class DuplicatePolicy(Enum):
    """How a duplicate bond or angle is resolved without a per-call callback."""

    ASK = auto()
    OVERWRITE = auto()
    KEEP = auto()


@dataclass(frozen=True)
class AddResult:
    """Status, ledger position and dipole of the record after an add."""

    status: AddStatus
    index: int
    dipole: float


@dataclass(frozen=True)
class MoleculeSummary:
    """Aggregate dipole and polarization; None means no value."""

    aggregate_dipole: Optional[float] = None
    polarization: Optional[float] = None


@dataclass
class ProjectSnapshot:
    """Everything a table/list view needs to redraw the project."""

    atoms: List[Atom] = field(default_factory=list)
    bonds: List[Bond] = field(default_factory=list)
    angles: List[Angle] = field(default_factory=list)
    groups: List[AtomTriple] = field(default_factory=list)
    radius: Optional[float] = None
    summary: MoleculeSummary = field(default_factory=MoleculeSummary)

    def bond_rows(self) -> List[Tuple[int, str, float, float]]:
        return [(i, str(b), b.length, b.dipole) for i, b in enumerate(self.bonds)]

    def angle_rows(self) -> List[Tuple[int, str, float, float]]:
        return [(i, str(a), a.angle, a.dipole) for i, a in enumerate(self.angles)]


def format_value(value: Optional[float], digits: int = 3) -> str:
    """Render a derived value with fixed decimals, or ``-`` when undefined."""
    if value is None:
        return NO_VALUE
    return f"{value:.{digits}f}"
