import pytest

from dipolar.core import DuplicatePolicy, ElectronegativityTable, ProjectService
from dipolar.infrastructure import ProjectRepository


@pytest.fixture
def table():
    """Default electronegativities (H, C, N, O, P, S)."""
    return ElectronegativityTable()


@pytest.fixture
def project(table):
    return ProjectService(table, ProjectRepository())


@pytest.fixture
def overwriting_project(table):
    return ProjectService(
        table, ProjectRepository(), duplicate_policy=DuplicatePolicy.OVERWRITE
    )


@pytest.fixture
def atom(table):
    """Build atoms from tokens such as ``H1`` or ``O``."""
    return table.parse_atom


@pytest.fixture
def water(project, atom):
    """Project holding H1-O-H2 with both bonds, the angle and its group."""
    h1, o, h2 = atom("H1"), atom("O"), atom("H2")
    project.add_bond(o, h1, 0.96)
    project.add_bond(o, h2, 0.96)
    project.add_angle(h1, o, h2, 104.5)
    project.add_group(h1, o, h2)
    return project
