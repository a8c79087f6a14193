# src/dipolar/core/services/project_service.py
"""Service exposing the project operations a user interface calls."""

import logging
import math
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..domain.models.angle import Angle
from ..domain.models.atom import Atom, AtomTriple, format_atoms
from ..domain.models.bond import Bond
from ..domain.models.electronegativity import ElectronegativityTable
from ..domain.models.results import (
    AddResult,
    AddStatus,
    DuplicatePolicy,
    MoleculeSummary,
    ProjectSnapshot,
)
from ..domain.molecule import Molecule
from ..exceptions import MissingAdjacentBond, UnknownAngle, UnknownElement
from .cascade_service import CascadeResult, CascadeService
from .dipole_calculator import DipoleCalculator

logger = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[object, object], bool]
PathLike = Union[str, Path]


class ProjectService:
    """
    Owns one molecule and keeps its ledgers and derived values consistent.

    Every mutator runs to completion and refreshes the aggregate dipole
    before returning. Validation happens before the first change, so a
    raised exception leaves the ledgers as they were.
    """

    def __init__(
        self,
        table: ElectronegativityTable,
        repository=None,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.KEEP,
        confirm_overwrite: Optional[ConfirmOverwrite] = None,
    ):
        """
        Initialize service with its configuration and collaborators.

        Args:
            table: Electronegativity table every atom must come from
            repository: File repository used by open/save; without one
                the project lives in memory only
            duplicate_policy: What to do with a duplicate bond or angle
                when the call itself passes no callback
            confirm_overwrite: Callback asked under DuplicatePolicy.ASK with
                the existing and proposed records; True overwrites
        """
        if duplicate_policy is DuplicatePolicy.ASK and confirm_overwrite is None:
            raise ValueError("DuplicatePolicy.ASK needs a confirm_overwrite callback")
        self._table = table
        self._repository = repository
        self._policy = duplicate_policy
        self._confirm = confirm_overwrite
        self._molecule = Molecule(table)
        self._calculator = DipoleCalculator(table)
        self._cascade = CascadeService()
        self._summary = MoleculeSummary()
        self.saved_path: Optional[Path] = None

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    @property
    def table(self) -> ElectronegativityTable:
        return self._table

    @property
    def molecule(self) -> Molecule:
        return self._molecule

    @property
    def atoms(self) -> List[Atom]:
        return self._molecule.atoms.list()

    @property
    def bonds(self) -> List[Bond]:
        return self._molecule.bonds.list()

    @property
    def angles(self) -> List[Angle]:
        return self._molecule.angles.list()

    @property
    def groups(self) -> List[AtomTriple]:
        return self._molecule.groups.list()

    @property
    def radius(self) -> Optional[float]:
        return self._molecule.radius

    @property
    def summary(self) -> MoleculeSummary:
        return self._summary

    def is_empty(self) -> bool:
        return self._molecule.is_empty()

    def angle_choices(self) -> List[str]:
        """Angles as ``A - B - C`` strings, in ledger order, for group selection."""
        return [format_atoms(key) for key in self._molecule.angles.keys()]

    def snapshot(self) -> ProjectSnapshot:
        return ProjectSnapshot(
            atoms=self.atoms,
            bonds=self.bonds,
            angles=self.angles,
            groups=self.groups,
            radius=self.radius,
            summary=self._summary,
        )

    # ------------------------------------------------------------------
    # project lifecycle
    # ------------------------------------------------------------------

    def new_project(self) -> ProjectSnapshot:
        """Reset to an empty project and forget the save path."""
        self._molecule.clear()
        self._summary = MoleculeSummary()
        self.saved_path = None
        logger.info("Started new project")
        return self.snapshot()

    def open_project(self, path: PathLike) -> ProjectSnapshot:
        """
        Replace the current project with the contents of ``path``.

        Raises:
            CorruptedFile: If the file cannot be parsed; the project is empty
            UnknownElement: If the file names an unconfigured element
        """
        self._require_repository().load(path, self)
        self.saved_path = Path(path)
        logger.info(
            f"Opened {path}: {len(self._molecule.bonds)} bonds, "
            f"{len(self._molecule.angles)} angles, {len(self._molecule.groups)} groups"
        )
        return self.snapshot()

    def save_project(self, path: Optional[PathLike] = None) -> Path:
        """Write the project to ``path``, or to the path it was last opened/saved as."""
        target = path if path is not None else self.saved_path
        if target is None:
            raise ValueError("No file name to save the project to")
        self._require_repository().save(target, self)
        self.saved_path = Path(target)
        logger.info(f"Saved project to {target}")
        return self.saved_path

    # ------------------------------------------------------------------
    # bonds
    # ------------------------------------------------------------------

    def preview_bond_dipole(self, a1: Atom, a2: Atom, length: float) -> float:
        self._check_atoms(a1, a2)
        return self._calculator.bond_dipole(a1, a2, length)

    def add_bond(
        self,
        a1: Atom,
        a2: Atom,
        length: float,
        confirm_overwrite: Optional[ConfirmOverwrite] = None,
    ) -> AddResult:
        """
        Add the bond a1-a2, or overwrite it if the pair is already bonded.

        Args:
            a1: First atom
            a2: Second atom
            length: Bond length in angstrom, finite and positive
            confirm_overwrite: Decides a duplicate for this call only

        Returns:
            AddResult with the bond position and dipole

        Raises:
            UnknownElement: If an atom type is not configured
            ValueError: If the atoms are equal or the length is not positive
        """
        self._check_atoms(a1, a2)
        if a1 == a2:
            raise ValueError(f"A bond needs two distinct atoms, got {a1} twice")
        length = self._check_positive(length, "bond length")
        dipole = self._calculator.bond_dipole(a1, a2, length)
        bonds = self._molecule.bonds

        key = bonds.find(a1, a2)
        if key is not None:
            existing = bonds.get(key)
            proposed = Bond(key[0], key[1], length, dipole)
            if not self._should_overwrite(existing, proposed, confirm_overwrite):
                logger.warning(f"Bond {existing} already exists; kept it")
                return AddResult(AddStatus.KEPT, bonds.index_of(key), existing.dipole)
            index = bonds.update(key, proposed)
            self._refresh_angles(proposed)
            logger.debug(f"Replaced bond {proposed} (d={length}, mu={dipole:.3f})")
            self.recalculate()
            return AddResult(AddStatus.REPLACED, index, dipole)

        self._molecule.atoms.register(a1)
        self._molecule.atoms.register(a2)
        index = bonds.add(Bond(a1, a2, length, dipole))
        logger.debug(f"Added bond {a1} - {a2} #{index} (d={length}, mu={dipole:.3f})")
        self.recalculate()
        return AddResult(AddStatus.ADDED, index, dipole)

    def delete_bond_at(self, index: int) -> CascadeResult:
        return self.delete_bonds_at([index])

    def delete_bonds_at(self, indices: Iterable[int]) -> CascadeResult:
        """Delete bonds, the angles built on them and those angles' groups."""
        plan = self._cascade.plan_bond_deletion(self._molecule, indices)
        result = self._cascade.apply(self._molecule, plan)
        self.recalculate()
        return result

    # ------------------------------------------------------------------
    # angles
    # ------------------------------------------------------------------

    def preview_angle_dipole(
        self, a1: Atom, a2: Atom, a3: Atom, angle_deg: float
    ) -> float:
        mu1, mu2 = self._adjacent_dipoles(a1, a2, a3)
        return self._calculator.angle_dipole(mu1, mu2, angle_deg)

    def add_angle(
        self,
        a1: Atom,
        a2: Atom,
        a3: Atom,
        angle_deg: float,
        confirm_overwrite: Optional[ConfirmOverwrite] = None,
    ) -> AddResult:
        """
        Add the angle a1-a2-a3 with ``a2`` as vertex.

        Raises:
            MissingAdjacentBond: If bond a1-a2 or a2-a3 does not exist
        """
        self._check_atoms(a1, a2, a3)
        angle_deg = self._check_finite(angle_deg, "angle")
        mu1, mu2 = self._adjacent_dipoles(a1, a2, a3)
        dipole = self._calculator.angle_dipole(mu1, mu2, angle_deg)
        angles = self._molecule.angles

        key = angles.find((a1, a2, a3))
        if key is not None:
            existing = angles.get(key)
            proposed = Angle(key[0], key[1], key[2], angle_deg, dipole)
            if not self._should_overwrite(existing, proposed, confirm_overwrite):
                logger.warning(f"Angle {existing} already exists; kept it")
                return AddResult(AddStatus.KEPT, angles.index_of(key), existing.dipole)
            index = angles.update(key, proposed)
            logger.debug(f"Replaced angle {proposed} (a={angle_deg}, mu={dipole:.3f})")
            self.recalculate()
            return AddResult(AddStatus.REPLACED, index, dipole)

        angle = Angle(a1, a2, a3, angle_deg, dipole)
        index = angles.add(angle)
        logger.debug(f"Added angle {angle} #{index} (a={angle_deg}, mu={dipole:.3f})")
        self.recalculate()
        return AddResult(AddStatus.ADDED, index, dipole)

    def delete_angle_at(self, index: int) -> CascadeResult:
        return self.delete_angles_at([index])

    def delete_angles_at(self, indices: Iterable[int]) -> CascadeResult:
        plan = self._cascade.plan_angle_deletion(self._molecule, indices)
        result = self._cascade.apply(self._molecule, plan)
        self.recalculate()
        return result

    # ------------------------------------------------------------------
    # groups
    # ------------------------------------------------------------------

    def add_group(self, a1: Atom, a2: Atom, a3: Atom) -> int:
        """
        Append an existing angle to the molecule group.

        Raises:
            UnknownAngle: If no angle a1-a2-a3 (or a3-a2-a1) exists
        """
        triple = (a1, a2, a3)
        if self._molecule.angles.find(triple) is None:
            raise UnknownAngle(triple)
        index = self._molecule.groups.append(triple)
        logger.debug(f"Added group {format_atoms(triple)} #{index}")
        self.recalculate()
        return index

    def delete_group_at(self, index: int) -> CascadeResult:
        return self.delete_groups_at([index])

    def delete_groups_at(self, indices: Iterable[int]) -> CascadeResult:
        plan = self._cascade.plan_group_deletion(self._molecule, indices)
        result = self._cascade.apply(self._molecule, plan)
        self.recalculate()
        return result

    # ------------------------------------------------------------------
    # derived values
    # ------------------------------------------------------------------

    def set_radius(self, radius: Optional[float]) -> MoleculeSummary:
        """Set the spherical radius (angstrom); None means no valid radius."""
        self._molecule.radius = None if radius is None else float(radius)
        return self.recalculate()

    def recalculate(self) -> MoleculeSummary:
        self._summary = self._calculator.summarize(self._molecule)
        return self._summary

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _require_repository(self):
        if self._repository is None:
            raise ValueError("No project repository configured for opening or saving")
        return self._repository

    def _check_atoms(self, *atoms: Atom) -> None:
        for atom in atoms:
            if atom.type not in self._table:
                raise UnknownElement(atom.symbol)

    def _adjacent_dipoles(self, a1: Atom, a2: Atom, a3: Atom) -> Tuple[float, float]:
        bonds = self._molecule.bonds
        first = bonds.lookup(a1, a2)
        if first is None:
            raise MissingAdjacentBond((a1, a2))
        second = bonds.lookup(a2, a3)
        if second is None:
            raise MissingAdjacentBond((a2, a3))
        return first.dipole, second.dipole

    def _refresh_angles(self, bond: Bond) -> None:
        angles = self._molecule.angles
        for index in angles.indices_using_bond(bond.atom1, bond.atom2):
            angle = angles.at(index)
            mu1, mu2 = self._adjacent_dipoles(*angle.key)
            dipole = self._calculator.angle_dipole(mu1, mu2, angle.angle)
            angles.update(angle.key, replace(angle, dipole=dipole))

    def _should_overwrite(
        self, existing, proposed, callback: Optional[ConfirmOverwrite]
    ) -> bool:
        if callback is not None:
            return bool(callback(existing, proposed))
        if self._policy is DuplicatePolicy.OVERWRITE:
            return True
        if self._policy is DuplicatePolicy.ASK:
            return bool(self._confirm(existing, proposed))
        return False

    @staticmethod
    def _check_finite(value: float, name: str) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"The {name} must be a finite number, got {value}")
        return value

    @classmethod
    def _check_positive(cls, value: float, name: str) -> float:
        value = cls._check_finite(value, name)
        if value <= 0:
            raise ValueError(f"The {name} must be positive, got {value}")
        return value
