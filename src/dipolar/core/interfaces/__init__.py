"""Abstract interfaces of the core."""

from .ledger import Ledger
from .project_codec import ProjectCodec

__all__ = ["Ledger", "ProjectCodec"]
