"""Core domain models, interfaces and services for dipole estimation."""

from .domain.models.atom import Atom, AtomType
from .domain.models.bond import Bond
from .domain.models.angle import Angle
from .domain.models.electronegativity import (
    DEFAULT_ELECTRONEGATIVITY,
    ElectronegativityTable,
)
from .domain.models.results import (
    AddResult,
    AddStatus,
    DuplicatePolicy,
    MoleculeSummary,
    ProjectSnapshot,
    format_value,
)
from .exceptions import (
    ConfigurationError,
    CorruptedFile,
    DipolarError,
    InvalidNumeric,
    MissingAdjacentBond,
    UnknownAngle,
    UnknownElement,
)
from .services.dipole_calculator import DipoleCalculator
from .services.cascade_service import CascadeService
from .services.project_service import ProjectService
from .validation import parse_number

__all__ = [
    "Atom",
    "AtomType",
    "Bond",
    "Angle",
    "DEFAULT_ELECTRONEGATIVITY",
    "ElectronegativityTable",
    "AddResult",
    "AddStatus",
    "DuplicatePolicy",
    "MoleculeSummary",
    "ProjectSnapshot",
    "format_value",
    "ConfigurationError",
    "CorruptedFile",
    "DipolarError",
    "InvalidNumeric",
    "MissingAdjacentBond",
    "UnknownAngle",
    "UnknownElement",
    "DipoleCalculator",
    "CascadeService",
    "ProjectService",
    "parse_number",
]
