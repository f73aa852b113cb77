"""Core domain models, errors and interfaces."""

from .models.molecular_graph import MoleculeGraph
from .models.coordinate import Coordinate
from .interfaces.layout_engine import LayoutEngine
from .errors import ValidationError

__all__ = [
    "MoleculeGraph",
    "Coordinate",
    "LayoutEngine",
    "ValidationError",
]
