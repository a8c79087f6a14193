# src/dipolar/infrastructure/codecs/text_codec.py
"""Codec for the sectioned, tab-separated project text format.

Layout::

    Bonds
    O - H1<TAB>0.96
    <blank line>
    Angles
    H1 - O - H2<TAB>104.5
    <blank line>
    Molecule
    H1 - O - H2
    <blank line>
    Radius
    1.5

Numbers are written with ``.`` as decimal separator; ``,`` is accepted on
input for files written under a comma locale.
"""

import logging
from typing import Iterator, List, Optional, TextIO, Tuple

from ...core.domain.models.atom import ATOM_SEPARATOR, Atom, format_atoms
from ...core.exceptions import CorruptedFile, DipolarError, UnknownElement
from ...core.interfaces.project_codec import ProjectCodec
from ...core.validation import parse_number

logger = logging.getLogger(__name__)

BONDS_HEADER = "Bonds"
ANGLES_HEADER = "Angles"
MOLECULE_HEADER = "Molecule"
RADIUS_HEADER = "Radius"
FIELD_SEPARATOR = "\t"


def format_number(value: float) -> str:
    """Shortest round-trip text of ``value``; integral values lose the ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class _LineReader:
    """Cursor over file lines with 1-based line numbers for error messages."""

    def __init__(self, text: str):
        self._lines: List[str] = text.splitlines()
        self._position = 0

    @property
    def line_number(self) -> int:
        return self._position + 1

    def next_line(self) -> Optional[str]:
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def expect_header(self, header: str) -> None:
        number = self.line_number
        line = self.next_line()
        if line is None or line.strip() != header:
            found = "end of file" if line is None else repr(line)
            raise CorruptedFile(f"expected section {header!r}, found {found}", line=number)

    def section(self) -> Iterator[Tuple[int, str]]:
        """Yield (line number, line) up to and including a blank line or EOF."""
        while True:
            number = self.line_number
            line = self.next_line()
            if line is None or not line.strip():
                return
            yield number, line.rstrip()

    def remaining(self) -> Iterator[Tuple[int, str]]:
        while True:
            number = self.line_number
            line = self.next_line()
            if line is None:
                return
            yield number, line


class TextProjectCodec(ProjectCodec):
    """Reads and writes bonds, angles, molecule groups and radius."""

    suffixes = (".txt",)

    def read(self, stream: TextIO, project) -> None:
        reader = _LineReader(stream.read())
        table = project.table

        reader.expect_header(BONDS_HEADER)
        for number, line in reader.section():
            atoms_text, value = self._split(line, number, 2)
            a1, a2 = self._parse_atoms(table, atoms_text, 2, number)
            length = self._parse_number(value, "bond length", number)
            self._apply(number, project.add_bond, a1, a2, length)

        reader.expect_header(ANGLES_HEADER)
        for number, line in reader.section():
            atoms_text, value = self._split(line, number, 2)
            a1, a2, a3 = self._parse_atoms(table, atoms_text, 3, number)
            angle = self._parse_number(value, "angle", number)
            self._apply(number, project.add_angle, a1, a2, a3, angle)

        reader.expect_header(MOLECULE_HEADER)
        for number, line in reader.section():
            (atoms_text,) = self._split(line, number, 1)
            a1, a2, a3 = self._parse_atoms(table, atoms_text, 3, number)
            self._apply(number, project.add_group, a1, a2, a3)

        reader.expect_header(RADIUS_HEADER)
        radius = None
        number = reader.line_number
        line = reader.next_line()
        if line is not None and line.strip():
            radius = self._parse_number(line, "radius", number)
        for number, line in reader.remaining():
            if line.strip():
                raise CorruptedFile(f"unexpected content {line!r}", line=number)
        project.set_radius(radius)

    def write(self, stream: TextIO, project) -> None:
        stream.write(f"{BONDS_HEADER}\n")
        for bond in project.bonds:
            stream.write(
                f"{format_atoms(bond.key)}{FIELD_SEPARATOR}{format_number(bond.length)}\n"
            )
        stream.write(f"\n{ANGLES_HEADER}\n")
        for angle in project.angles:
            stream.write(
                f"{format_atoms(angle.key)}{FIELD_SEPARATOR}{format_number(angle.angle)}\n"
            )
        stream.write(f"\n{MOLECULE_HEADER}\n")
        for triple in project.groups:
            stream.write(f"{format_atoms(triple)}\n")
        stream.write(f"\n{RADIUS_HEADER}\n")
        radius = project.radius if project.radius is not None else 0
        stream.write(f"{format_number(radius)}\n")

    @staticmethod
    def _split(line: str, number: int, count: int) -> List[str]:
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != count:
            raise CorruptedFile(
                f"expected {count} tab-separated field(s) in {line!r}", line=number
            )
        return fields

    @staticmethod
    def _parse_atoms(table, text: str, count: int, number: int) -> List[Atom]:
        tokens = [token.strip() for token in text.split(ATOM_SEPARATOR)]
        if len(tokens) != count or not all(tokens):
            raise CorruptedFile(f"expected {count} atoms in {text!r}", line=number)
        try:
            return [table.parse_atom(token) for token in tokens]
        except UnknownElement as exc:
            raise CorruptedFile(str(exc), line=number) from exc

    @staticmethod
    def _parse_number(text: str, field: str, number: int) -> float:
        try:
            return parse_number(text, field)
        except DipolarError as exc:
            raise CorruptedFile(str(exc), line=number) from exc

    @staticmethod
    def _apply(number: int, action, *args):
        try:
            return action(*args)
        except (DipolarError, ValueError) as exc:
            raise CorruptedFile(str(exc), line=number) from exc
