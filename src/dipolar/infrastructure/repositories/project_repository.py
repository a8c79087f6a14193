# src/dipolar/infrastructure/repositories/project_repository.py
"""File-backed repository opening and saving projects."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ...core.exceptions import CorruptedFile, DipolarError, UnknownElement
from ...core.interfaces.project_codec import ProjectCodec
from ..codecs.cml_codec import CMLGeometryCodec
from ..codecs.text_codec import TextProjectCodec

logger = logging.getLogger(__name__)


class ProjectRepository:
    """Repository choosing a codec by file suffix."""

    def __init__(
        self,
        codecs: Optional[List[ProjectCodec]] = None,
        default_codec: Optional[ProjectCodec] = None,
    ):
        """
        Initialize repository with its codecs.

        Args:
            codecs: Codecs matched by suffix; CML and text when omitted
            default_codec: Codec for unmatched suffixes; text when omitted
        """
        self._default = default_codec or TextProjectCodec()
        self._codecs = codecs if codecs is not None else [CMLGeometryCodec(), self._default]

    def codec_for(self, path: Union[str, Path]) -> ProjectCodec:
        suffix = Path(path).suffix.lower()
        for codec in self._codecs:
            if suffix in codec.suffixes:
                return codec
        return self._default

    def load(self, path: Union[str, Path], project) -> None:
        """
        Reset ``project`` and replay the file into it.

        On any failure the project is reset again, so it is either fully
        loaded or empty.

        Raises:
            UnknownElement: If the file names an unconfigured element
            CorruptedFile: For any other parse or consistency failure
        """
        codec = self.codec_for(path)
        project.new_project()
        try:
            with open(path, "r", encoding="utf-8-sig") as handle:
                codec.read(handle, project)
        except (UnknownElement, CorruptedFile) as exc:
            project.new_project()
            if isinstance(exc, CorruptedFile) and exc.path is None:
                exc.path = str(path)
            logger.error(f"Failed to open {path}: {exc}")
            raise
        except (DipolarError, ValueError, LookupError) as exc:
            project.new_project()
            logger.error(f"Failed to open {path}: {exc}")
            raise CorruptedFile(str(exc), path=str(path)) from exc
        except OSError:
            project.new_project()
            raise

    def save(self, path: Union[str, Path], project) -> None:
        codec = self.codec_for(path)
        if not codec.writable:
            raise ValueError(f"Cannot save a project as {Path(path).suffix} file")
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            codec.write(handle, project)
