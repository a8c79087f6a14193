"""Interface for project file codecs."""

from abc import ABC, abstractmethod
from typing import TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.project_service import ProjectService


class ProjectCodec(ABC):
    """Abstract base class for reading and writing project files."""

    #: File suffixes handled by the codec, lower case with leading dot.
    suffixes = ()
    writable = True

    @abstractmethod
    def read(self, stream: TextIO, project: "ProjectService") -> None:
        """
        Replay a file into a project as a sequence of add operations.

        Args:
            stream: Open text stream positioned at the start of the file
            project: Freshly reset project receiving the records

        Raises:
            CorruptedFile: If the file is structurally invalid
            UnknownElement: If the file names an unconfigured element
        """
        pass

    @abstractmethod
    def write(self, stream: TextIO, project: "ProjectService") -> None:
        """Serialize the project ledgers to a text stream."""
        pass
