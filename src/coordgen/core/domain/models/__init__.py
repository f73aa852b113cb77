"""Domain model classes."""

from .atom import Atom, MAX_ATOMIC_NUMBER, MIN_ATOMIC_NUMBER
from .bond import Bond, BondOrder, MAX_ATOM_INDEX, VALID_MULTIPLICITIES
from .coordinate import Coordinate
from .molecular_graph import MoleculeGraph

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "Coordinate",
    "MoleculeGraph",
    "MAX_ATOMIC_NUMBER",
    "MIN_ATOMIC_NUMBER",
    "MAX_ATOM_INDEX",
    "VALID_MULTIPLICITIES",
]
