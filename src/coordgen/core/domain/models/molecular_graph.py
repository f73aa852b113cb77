#!/usr/bin/env python3
# src/coordgen/core/domain/models/molecular_graph.py

"""
Domain model representing a molecule as an ordered atom/bond graph.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import networkx as nx

from .atom import Atom
from .bond import Bond

AtomLike = Union[Atom, int]
BondLike = Union[Bond, Sequence[int]]


@dataclass(frozen=True)
class MoleculeGraph:
    """
    Immutable graph of atoms and bonds.

    Atom order is meaningful: it fixes the order of generated coordinates.
    Bond order only matters for the indices reported in diagnostics.
    """

    atoms: Tuple[Atom, ...]
    bonds: Tuple[Bond, ...] = ()

    @classmethod
    def build(cls, atoms: Iterable[AtomLike], bonds: Iterable[BondLike] = ()) -> "MoleculeGraph":
        """
        Create a graph from models or raw values.

        Args:
            atoms: Atoms or integer atomic numbers
            bonds: Bonds or ``(first, second, multiplicity)`` triples

        Returns:
            MoleculeGraph instance
        """
        return cls(
            atoms=tuple(Atom.coerce(atom) for atom in atoms),
            bonds=tuple(Bond.coerce(bond) for bond in bonds),
        )

    @property
    def atomic_numbers(self) -> Tuple[int, ...]:
        return tuple(atom.atomic_number for atom in self.atoms)

    def __len__(self) -> int:
        return len(self.atoms)

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph keyed by atom position.

        Parallel bonds collapse onto a single edge, so only validated graphs
        round-trip exactly.
        """
        G = nx.Graph()
        for idx, atom in enumerate(self.atoms):
            G.add_node(idx, atomic_number=atom.atomic_number)
        for bond in self.bonds:
            G.add_edge(bond.first, bond.second, multiplicity=bond.multiplicity)
        return G

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "MoleculeGraph":
        """
        Create a MoleculeGraph from a NetworkX graph.

        Nodes are numbered in the graph's node iteration order. Every node
        needs an ``atomic_number`` attribute; edges may carry ``multiplicity``.

        Raises:
            ValueError: If a node has no atomic number
        """
        positions = {node: idx for idx, node in enumerate(graph.nodes)}
        atoms = []
        for node, data in graph.nodes(data=True):
            if "atomic_number" not in data:
                raise ValueError(f"Node {node!r} has no atomic_number attribute")
            atoms.append(data["atomic_number"])
        bonds = [
            (positions[u], positions[v], data.get("multiplicity", 1))
            for u, v, data in graph.edges(data=True)
        ]
        return cls.build(atoms, bonds)
