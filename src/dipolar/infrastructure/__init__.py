"""Infrastructure implementations of core interfaces and file resources."""

from .config.electronegativity_loader import load_electronegativity_table
from .codecs.text_codec import TextProjectCodec
from .codecs.cml_codec import CMLGeometryCodec
from .repositories.project_repository import ProjectRepository

__all__ = [
    "load_electronegativity_table",
    "TextProjectCodec",
    "CMLGeometryCodec",
    "ProjectRepository",
]
