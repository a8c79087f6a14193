"""Tests for importing geometry from CML files."""

import math

import pytest

from dipolar.core import CorruptedFile, DipoleCalculator, UnknownElement


def cml(atoms, bonds, namespace=True):
    """Build a CML document from (id, element, x, y, z) and (id, id) tuples."""
    xmlns = ' xmlns="http://www.xml-cml.org/schema"' if namespace else ""
    atom_lines = "\n".join(
        f'    <atom id="{i}" elementType="{e}" x3="{x}" y3="{y}" z3="{z}"/>'
        for i, e, x, y, z in atoms
    )
    bond_lines = "\n".join(
        f'    <bond atomRefs2="{a} {b}" order="1"/>' for a, b in bonds
    )
    return (
        '<?xml version="1.0"?>\n'
        f"<molecule{xmlns}>\n"
        f"  <atomArray>\n{atom_lines}\n  </atomArray>\n"
        f"  <bondArray>\n{bond_lines}\n  </bondArray>\n"
        "</molecule>\n"
    )


WATER_ATOMS = [
    ("a1", "O", 0.0, 0.0, 0.0),
    ("a2", "H", 0.757, 0.586, 0.0),
    ("a3", "H", -0.757, 0.586, 0.0),
]
WATER_BONDS = [("a1", "a2"), ("a1", "a3")]


def load(project, tmp_path, text, name="geometry.cml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return project.open_project(path)


def test_single_bond_length(project, tmp_path, atom):
    snapshot = load(
        project,
        tmp_path,
        cml([("a1", "O", 0, 0, 0), ("a2", "H", 1, 0, 0)], [("a1", "a2")]),
    )

    assert len(snapshot.bonds) == 1
    bond = snapshot.bonds[0]
    assert bond.key == (atom("O0"), atom("H0"))
    assert bond.length == 1.0
    assert bond.dipole == pytest.approx(1.24)
    assert snapshot.angles == []
    assert snapshot.groups == []


def test_colinear_atoms_make_straight_angle(project, tmp_path, atom):
    atoms = [
        ("c", "C", 0, 0, 0),
        ("o1", "O", 1.16, 0, 0),
        ("o2", "O", -1.16, 0, 0),
    ]
    snapshot = load(project, tmp_path, cml(atoms, [("c", "o1"), ("c", "o2")]))

    assert len(snapshot.angles) == 1
    angle = snapshot.angles[0]
    assert angle.angle == 180.0
    assert angle.vertex == atom("C0")
    assert {angle.atom1, angle.atom3} == {atom("O0"), atom("O1")}


def test_water_geometry(project, tmp_path, atom):
    snapshot = load(project, tmp_path, cml(WATER_ATOMS, WATER_BONDS))

    expected_length = round(math.hypot(0.757, 0.586), 3)
    cosine = (-0.757 * 0.757 + 0.586 * 0.586) / (0.757 ** 2 + 0.586 ** 2)
    expected_angle = round(math.degrees(math.acos(cosine)), 3)

    assert [b.length for b in snapshot.bonds] == [expected_length, expected_length]
    assert [str(b) for b in snapshot.bonds] == ["O0 - H0", "O0 - H1"]
    assert len(snapshot.angles) == 1
    assert snapshot.angles[0].angle == expected_angle
    assert snapshot.angles[0].key == (atom("H0"), atom("O0"), atom("H1"))
    assert snapshot.groups == [(atom("H0"), atom("O0"), atom("H1"))]

    mu = DipoleCalculator(project.table).bond_dipole(atom("O"), atom("H"), expected_length)
    assert snapshot.angles[0].dipole == pytest.approx(
        DipoleCalculator.angle_dipole(mu, mu, expected_angle)
    )
    assert snapshot.summary.aggregate_dipole == pytest.approx(snapshot.angles[0].dipole)


def test_without_namespace(project, tmp_path):
    snapshot = load(project, tmp_path, cml(WATER_ATOMS, WATER_BONDS, namespace=False))
    assert len(snapshot.bonds) == 2
    assert len(snapshot.groups) == 1


def test_zero_dipole_angles_stay_out_of_group(project, tmp_path):
    atoms = [
        ("c1", "C", 0, 0, 0),
        ("c2", "C", 1.54, 0, 0),
        ("c3", "C", 2.05, 1.45, 0),
    ]
    snapshot = load(project, tmp_path, cml(atoms, [("c1", "c2"), ("c2", "c3")]))

    assert len(snapshot.angles) == 1
    assert snapshot.angles[0].dipole == 0
    assert snapshot.groups == []
    assert snapshot.summary.aggregate_dipole is None


def test_branched_center_forms_every_pair(project, tmp_path):
    atoms = [
        ("n", "N", 0, 0, 0),
        ("h1", "H", 1.0, 0, 0),
        ("h2", "H", -0.33, 0.94, 0),
        ("h3", "H", -0.33, -0.47, 0.82),
    ]
    bonds = [("n", "h1"), ("n", "h2"), ("n", "h3")]
    snapshot = load(project, tmp_path, cml(atoms, bonds))

    assert len(snapshot.bonds) == 3
    assert len(snapshot.angles) == 3
    assert len(snapshot.groups) == 3


def test_unknown_element_leaves_project_empty(water, tmp_path):
    atoms = WATER_ATOMS + [("a4", "Xe", 3, 0, 0)]

    with pytest.raises(UnknownElement) as info:
        load(water, tmp_path, cml(atoms, WATER_BONDS))

    assert info.value.symbol == "Xe"
    assert water.is_empty()
    assert water.saved_path is None


@pytest.mark.parametrize(
    "text",
    [
        cml(WATER_ATOMS, [("a1", "a9")]),
        cml(WATER_ATOMS, [("a1", "a1")]),
        cml(WATER_ATOMS, []).replace(
            "</bondArray>", '<bond atomRefs2="a1"/></bondArray>'
        ),
        cml(WATER_ATOMS + [("a1", "H", 0, 0, 1)], WATER_BONDS),
        cml(WATER_ATOMS, WATER_BONDS).replace(' z3="0.0"', "", 1),
        "<molecule><atomArray>",
    ],
    ids=[
        "undeclared atom",
        "self bond",
        "single atom ref",
        "duplicate id",
        "missing coordinate",
        "malformed xml",
    ],
)
def test_corrupted_geometry(water, tmp_path, text):
    with pytest.raises(CorruptedFile):
        load(water, tmp_path, text)
    assert water.is_empty()


def test_cml_is_read_only(water, tmp_path):
    with pytest.raises(ValueError):
        water.save_project(tmp_path / "out.cml")
    assert not (tmp_path / "out.cml").exists()
