# src/dipolar/core/services/dipole_calculator.py
"""Service computing bond, angle and whole-molecule dipole estimates."""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from ..domain.models.atom import Atom
from ..domain.models.electronegativity import ElectronegativityTable
from ..domain.models.results import MoleculeSummary
from ..domain.molecule import Molecule

logger = logging.getLogger(__name__)

SPEED_OF_LIGHT = 299792458.0  # m/s
# debye per cubic angstrom -> coulomb per square metre
POLARIZATION_FACTOR = 1e9 / SPEED_OF_LIGHT


class DipoleCalculator:
    """Vector model of dipoles built from electronegativity differences."""

    def __init__(self, table: ElectronegativityTable):
        """Initialize calculator with the configured electronegativities."""
        self._table = table

    def bond_dipole(self, a1: Atom, a2: Atom, length: float) -> float:
        """
        Dipole of a bond: |EN(a1) - EN(a2)| * length.

        Raises:
            UnknownElement: If either atom type is not configured
        """
        difference = self._table.electronegativity(a1) - self._table.electronegativity(a2)
        return abs(difference) * length

    @staticmethod
    def angle_dipole(mu1: float, mu2: float, angle_deg: float) -> float:
        """Resultant of two bond dipoles meeting at ``angle_deg`` (law of cosines)."""
        cosine = np.cos(np.deg2rad(angle_deg))
        squared = mu1 * mu1 + mu2 * mu2 - 2.0 * mu1 * mu2 * cosine
        return float(np.sqrt(max(squared, 0.0)))

    @staticmethod
    def aggregate_dipole(dipoles: Sequence[float]) -> Optional[float]:
        """Geometric mean of the group dipoles, None for an empty group."""
        if not dipoles:
            return None
        values = np.asarray(dipoles, dtype=float)
        if np.any(values == 0):
            return 0.0
        return float(np.exp(np.mean(np.log(values))))

    @staticmethod
    def polarization(
        aggregate: Optional[float], radius: Optional[float]
    ) -> Optional[float]:
        """
        Aggregate dipole per spherical volume of ``radius``, in C/m^2.

        Returns:
            None if the aggregate is undefined or the radius is not a
            finite positive number
        """
        if aggregate is None or radius is None:
            return None
        if not math.isfinite(radius) or radius <= 0:
            return None
        volume = 4.0 / 3.0 * math.pi * radius ** 3
        return POLARIZATION_FACTOR * aggregate / volume

    def summarize(self, molecule: Molecule) -> MoleculeSummary:
        """Recompute aggregate dipole and polarization from the group list."""
        dipoles = []
        for triple in molecule.groups:
            angle = molecule.angles.lookup(triple)
            if angle is None:
                raise LookupError(f"Group entry {triple} has no angle")
            dipoles.append(angle.dipole)
        aggregate = self.aggregate_dipole(dipoles)
        summary = MoleculeSummary(
            aggregate_dipole=aggregate,
            polarization=self.polarization(aggregate, molecule.radius),
        )
        logger.debug(
            f"Recalculated {len(dipoles)} group dipoles: "
            f"mu={summary.aggregate_dipole}, P={summary.polarization}"
        )
        return summary
