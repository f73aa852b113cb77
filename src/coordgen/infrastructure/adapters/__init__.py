"""Adapters for external layout engines and libraries."""

from .native_adapter import NativeCoordGenEngine
from .rdkit_adapter import RDKitCoordGenEngine, graph_from_smiles

__all__ = [
    "NativeCoordGenEngine",
    "RDKitCoordGenEngine",
    "graph_from_smiles",
]
