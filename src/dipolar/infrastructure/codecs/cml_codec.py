# src/dipolar/infrastructure/codecs/cml_codec.py
"""Read-only codec deriving bonds and angles from a CML geometry file."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterator, TextIO

import defusedxml.ElementTree as ET
import networkx as nx
import numpy as np
from defusedxml import DefusedXmlException

from ...core.domain.geometry import as_point, bond_angle, bond_length
from ...core.domain.models.atom import Atom
from ...core.exceptions import CorruptedFile
from ...core.interfaces.project_codec import ProjectCodec

logger = logging.getLogger(__name__)

CML_NAMESPACE = "http://www.xml-cml.org/schema"


@dataclass(frozen=True)
class LoadedAtom:
    """An atom declared in the geometry file with its coordinates."""

    atom_id: str
    atom: Atom
    coordinates: np.ndarray


def _iter_elements(root, name: str) -> Iterator:
    """Yield elements called ``name`` in the CML namespace or without one."""
    tags = {f"{{{CML_NAMESPACE}}}{name}", name}
    for element in root.iter():
        if element.tag in tags:
            yield element


class CMLGeometryCodec(ProjectCodec):
    """
    Imports atoms with Cartesian coordinates and their bond list.

    Bond lengths come from the coordinates. Every pair of bond partners of
    an atom forms an angle at that atom, and each angle with a non-zero
    dipole is also added to the molecule group.
    """

    suffixes = (".cml",)
    writable = False

    def read(self, stream: TextIO, project) -> None:
        try:
            root = ET.fromstring(stream.read())
        except (ET.ParseError, DefusedXmlException) as exc:
            raise CorruptedFile(f"invalid XML: {exc}") from exc

        atoms = self._read_atoms(root, project.table)
        graph = self._read_bonds(root, atoms, project)

        for center_id in graph.nodes:
            partners = list(graph.neighbors(center_id))
            if len(partners) < 2:
                continue
            center = atoms[center_id]
            for first_id, second_id in combinations(partners, 2):
                first, second = atoms[first_id], atoms[second_id]
                angle = bond_angle(
                    center.coordinates, first.coordinates, second.coordinates
                )
                result = project.add_angle(first.atom, center.atom, second.atom, angle)
                if result.dipole != 0:
                    project.add_group(first.atom, center.atom, second.atom)

        logger.info(
            f"Imported geometry with {graph.number_of_nodes()} atoms and "
            f"{graph.number_of_edges()} bonds"
        )

    def write(self, stream: TextIO, project) -> None:
        raise NotImplementedError("CML export not supported")

    @staticmethod
    def _read_atoms(root, table) -> Dict[str, LoadedAtom]:
        """
        Collect declared atoms, labelling each by a per-element counter.

        Raises:
            UnknownElement: If an elementType is not configured
        """
        counters: Dict[str, int] = defaultdict(int)
        atoms: Dict[str, LoadedAtom] = {}
        for element in _iter_elements(root, "atom"):
            atom_id = element.get("id")
            symbol = element.get("elementType")
            if not atom_id or not symbol:
                raise CorruptedFile("atom without id or elementType")
            if atom_id in atoms:
                raise CorruptedFile(f"duplicate atom id {atom_id!r}")
            atom = table.make_atom(symbol, str(counters[symbol]))
            try:
                coordinates = as_point(
                    float(element.get("x3")),
                    float(element.get("y3")),
                    float(element.get("z3")),
                )
            except (TypeError, ValueError) as exc:
                raise CorruptedFile(f"atom {atom_id!r} lacks 3D coordinates") from exc
            counters[symbol] += 1
            atoms[atom_id] = LoadedAtom(atom_id, atom, coordinates)
        return atoms

    @staticmethod
    def _read_bonds(root, atoms: Dict[str, LoadedAtom], project) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(atoms)
        for element in _iter_elements(root, "bond"):
            refs = (element.get("atomRefs2") or "").split()
            if len(refs) != 2:
                raise CorruptedFile(f"bond atomRefs2 {refs!r} must name two atoms")
            first_id, second_id = refs
            if first_id not in atoms or second_id not in atoms:
                raise CorruptedFile(f"bond references undeclared atom in {refs!r}")
            if first_id == second_id:
                raise CorruptedFile(f"atom {first_id!r} is bonded to itself")
            first, second = atoms[first_id], atoms[second_id]
            length = bond_length(first.coordinates, second.coordinates)
            project.add_bond(first.atom, second.atom, length)
            graph.add_edge(first_id, second_id)
        return graph
