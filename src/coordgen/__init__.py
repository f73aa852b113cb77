"""Validated 2D coordinate generation for molecular graphs."""

from .config import CoordgenConfig, ValidationMode
from .core.domain.errors import (
    AtomIndexOutOfRange,
    BufferLayoutError,
    CoordgenError,
    EngineError,
    InvalidAtomicNumber,
    InvalidBondMultiplicity,
    ParallelBonds,
    PreconditionViolation,
    ValidationError,
)
from .core.domain.models import Atom, Bond, BondOrder, Coordinate, MoleculeGraph
from .core.services.coordinate_service import (
    CoordinateService,
    generate,
    generate_unchecked,
)

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "AtomIndexOutOfRange",
    "Bond",
    "BondOrder",
    "BufferLayoutError",
    "Coordinate",
    "CoordgenConfig",
    "CoordgenError",
    "CoordinateService",
    "EngineError",
    "InvalidAtomicNumber",
    "InvalidBondMultiplicity",
    "MoleculeGraph",
    "ParallelBonds",
    "PreconditionViolation",
    "ValidationError",
    "ValidationMode",
    "generate",
    "generate_unchecked",
]
