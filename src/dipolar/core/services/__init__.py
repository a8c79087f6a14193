"""Core business logic services."""

from .dipole_calculator import DipoleCalculator
from .cascade_service import CascadePlan, CascadeResult, CascadeService
from .project_service import ProjectService

__all__ = [
    "DipoleCalculator",
    "CascadePlan",
    "CascadeResult",
    "CascadeService",
    "ProjectService",
]
