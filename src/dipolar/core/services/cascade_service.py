# src/dipolar/core/services/cascade_service.py
"""Service removing bonds, angles and groups without leaving dangling references."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from ..domain.models.atom import Atom
from ..domain.molecule import Molecule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CascadePlan:
    """Positions to delete from each ledger in a single user action."""

    bond_indices: Tuple[int, ...] = ()
    angle_indices: Tuple[int, ...] = ()
    group_indices: Tuple[int, ...] = ()

    @property
    def empty(self) -> bool:
        return not (self.bond_indices or self.angle_indices or self.group_indices)


@dataclass(frozen=True)
class CascadeResult:
    """What a cascade removed, in former position order."""

    bonds: Tuple = ()
    angles: Tuple = ()
    groups: Tuple = ()
    atoms: Tuple[Atom, ...] = ()


class CascadeService:
    """
    Plans and applies cascading deletions.

    A plan is computed from the current ledgers before anything changes, so
    an invalid index leaves the molecule untouched. Dependents are removed
    before the primary entries and each ledger is renumbered once.
    """

    def plan_bond_deletion(self, molecule: Molecule, indices: Iterable[int]) -> CascadePlan:
        """
        Plan removal of bonds together with every angle built on them.

        Args:
            molecule: Molecule whose ledgers are inspected
            indices: Bond ledger positions selected for deletion

        Returns:
            CascadePlan covering bonds, dependent angles and their groups
        """
        bond_indices = self._normalize(indices)
        angle_indices: Set[int] = set()
        for index in bond_indices:
            bond = molecule.bonds.at(index)
            angle_indices.update(
                molecule.angles.indices_using_bond(bond.atom1, bond.atom2)
            )
        angle_plan = self.plan_angle_deletion(molecule, angle_indices)
        return CascadePlan(
            bond_indices=bond_indices,
            angle_indices=angle_plan.angle_indices,
            group_indices=angle_plan.group_indices,
        )

    def plan_angle_deletion(
        self, molecule: Molecule, indices: Iterable[int]
    ) -> CascadePlan:
        """Plan removal of angles and every group entry naming them."""
        angle_indices = self._normalize(indices)
        group_indices: Set[int] = set()
        for index in angle_indices:
            angle = molecule.angles.at(index)
            group_indices.update(molecule.groups.indices_matching(angle.key))
        return CascadePlan(
            angle_indices=angle_indices, group_indices=tuple(sorted(group_indices))
        )

    def plan_group_deletion(
        self, molecule: Molecule, indices: Iterable[int]
    ) -> CascadePlan:
        group_indices = self._normalize(indices)
        for index in group_indices:
            molecule.groups.at(index)
        return CascadePlan(group_indices=group_indices)

    def apply(self, molecule: Molecule, plan: CascadePlan) -> CascadeResult:
        """Delete downstream entries first, then the primary ones, then orphan atoms."""
        if plan.empty:
            return CascadeResult()
        groups = molecule.groups.delete(plan.group_indices)
        angles = molecule.angles.delete(plan.angle_indices)
        bonds = molecule.bonds.delete(plan.bond_indices)
        atoms: List[Atom] = []
        if bonds:
            atoms = molecule.atoms.prune(molecule.bonds.atoms_in_use())
        logger.debug(
            f"Cascade removed {len(bonds)} bonds, {len(angles)} angles, "
            f"{len(groups)} groups, {len(atoms)} atoms"
        )
        return CascadeResult(
            bonds=tuple(bonds),
            angles=tuple(angles),
            groups=tuple(groups),
            atoms=tuple(atoms),
        )

    @staticmethod
    def _normalize(indices: Iterable[int]) -> Tuple[int, ...]:
        return tuple(sorted(set(indices)))
