"""Tests for the project text format."""

import io

import pytest

from dipolar.core import CorruptedFile
from dipolar.infrastructure.codecs import TextProjectCodec, format_number

WATER_TEXT = (
    "Bonds\n"
    "O - H1\t0.96\n"
    "O - H2\t0.96\n"
    "\n"
    "Angles\n"
    "H1 - O - H2\t104.5\n"
    "\n"
    "Molecule\n"
    "H1 - O - H2\n"
    "\n"
    "Radius\n"
    "1.5\n"
)

EMPTY_TEXT = "Bonds\n\nAngles\n\nMolecule\n\nRadius\n0\n"


def export(project) -> str:
    buffer = io.StringIO()
    TextProjectCodec().write(buffer, project)
    return buffer.getvalue()


def write(tmp_path, text, name="project.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestExport:
    def test_water(self, water):
        water.set_radius(1.5)
        assert export(water) == WATER_TEXT

    def test_empty_project(self, project):
        assert export(project) == EMPTY_TEXT

    @pytest.mark.parametrize(
        "value, text", [(0.96, "0.96"), (1.0, "1"), (104.5, "104.5"), (0, "0")]
    )
    def test_number_format(self, value, text):
        assert format_number(value) == text


class TestImport:
    def test_round_trip(self, project, tmp_path):
        project.open_project(write(tmp_path, WATER_TEXT))
        assert export(project) == WATER_TEXT

    def test_round_trip_of_empty_file(self, project, tmp_path):
        project.open_project(write(tmp_path, EMPTY_TEXT))
        assert export(project) == EMPTY_TEXT

    def test_replays_records(self, project, tmp_path, atom):
        snapshot = project.open_project(write(tmp_path, WATER_TEXT))

        assert [str(b) for b in snapshot.bonds] == ["O - H1", "O - H2"]
        assert snapshot.angles[0].angle == 104.5
        assert snapshot.groups == [(atom("H1"), atom("O"), atom("H2"))]
        assert snapshot.radius == 1.5
        assert snapshot.summary.aggregate_dipole == pytest.approx(
            snapshot.angles[0].dipole
        )
        assert project.saved_path == tmp_path / "project.txt"

    def test_comma_decimal_separator(self, project, tmp_path):
        text = WATER_TEXT.replace("0.96", "0,96").replace("1.5", "1,5")
        project.open_project(write(tmp_path, text))
        assert export(project) == WATER_TEXT

    def test_missing_radius_value(self, project, tmp_path):
        project.open_project(write(tmp_path, "Bonds\n\nAngles\n\nMolecule\n\nRadius\n"))
        assert project.radius is None

    def test_crlf_and_bom(self, project, tmp_path):
        path = tmp_path / "windows.txt"
        path.write_bytes(("\ufeff" + WATER_TEXT).replace("\n", "\r\n").encode("utf-8"))
        project.open_project(path)
        assert len(project.bonds) == 2

    def test_save_to_remembered_path(self, project, tmp_path):
        path = write(tmp_path, WATER_TEXT)
        project.open_project(path)
        project.set_radius(2.0)

        assert project.save_project() == path
        assert path.read_text(encoding="utf-8") == WATER_TEXT.replace("1.5\n", "2\n")

    def test_save_as(self, water, tmp_path):
        target = tmp_path / "out.txt"
        water.save_project(target)
        assert water.saved_path == target
        assert target.read_text(encoding="utf-8").startswith("Bonds\nO - H1\t0.96\n")


CORRUPTED = {
    "wrong header": WATER_TEXT.replace("Bonds", "Bond", 1),
    "missing angles section": "Bonds\nO - H1\t0.96\n",
    "non-numeric length": WATER_TEXT.replace("0.96", "short", 1),
    "missing tab": WATER_TEXT.replace("O - H1\t0.96", "O - H1 0.96"),
    "two atoms in angle": WATER_TEXT.replace("H1 - O - H2\t", "H1 - O\t"),
    "angle before bond": WATER_TEXT.replace("O - H2\t0.96\n", ""),
    "group without angle": WATER_TEXT.replace("Molecule\nH1 - O - H2", "Molecule\nO - H1 - H2"),
    "unknown element": WATER_TEXT.replace("O - H1", "X - H1", 1),
    "zero length": WATER_TEXT.replace("0.96", "0", 1),
    "non-numeric radius": WATER_TEXT.replace("1.5", "big"),
    "trailing content": WATER_TEXT + "\nextra\n",
}


@pytest.mark.parametrize("text", CORRUPTED.values(), ids=list(CORRUPTED))
def test_corrupted_file_resets_project(water, tmp_path, text):
    path = write(tmp_path, text)

    with pytest.raises(CorruptedFile) as info:
        water.open_project(path)

    assert info.value.path == str(path)
    assert water.is_empty()
    assert water.bonds == [] and water.angles == [] and water.groups == []
    assert water.summary.aggregate_dipole is None
    assert water.saved_path is None


def test_missing_file(water, tmp_path):
    with pytest.raises(FileNotFoundError):
        water.open_project(tmp_path / "absent.txt")
    assert water.is_empty()
