#!/usr/bin/env python3
# src/coordgen/core/services/coordinate_service.py

"""
Service for generating 2D coordinates through a layout engine.

``generate`` is the entry point integrators should use: it validates the graph
and only reaches the engine when every precondition holds.
``generate_unchecked`` skips that first pass for callers that have already
proven the graph valid.
"""

import logging
from typing import Iterable, List, Optional, Union

from ...config import CoordgenConfig, ValidationMode
from ..domain.errors import PreconditionViolation
from ..domain.implementations.precondition_validator import PreconditionValidator
from ..domain.interfaces.layout_engine import LayoutEngine
from ..domain.models.coordinate import Coordinate
from ..domain.models.molecular_graph import AtomLike, BondLike, MoleculeGraph
from ...infrastructure.marshalling.boundary_marshaller import (
    allocate_coordinates,
    from_flat,
    to_flat,
)

ModeLike = Union[ValidationMode, str]


def create_engine(config: Optional[CoordgenConfig] = None) -> LayoutEngine:
    """
    Build the layout engine named by configuration.

    A configured native library takes precedence over the RDKit engine.
    """
    config = config or CoordgenConfig.from_env()
    logger = logging.getLogger(__name__)

    if config.library_path:
        from ...infrastructure.adapters.native_adapter import NativeCoordGenEngine

        logger.info(f"Using native layout engine at {config.library_path}")
        return NativeCoordGenEngine(config.library_path)

    from ...infrastructure.adapters.rdkit_adapter import RDKitCoordGenEngine

    logger.info("Using RDKit CoordGen layout engine")
    return RDKitCoordGenEngine()


class CoordinateService:
    """Validates molecular graphs and lays them out with a layout engine."""

    def __init__(
        self,
        engine: Optional[LayoutEngine] = None,
        mode: Optional[ModeLike] = None,
        validator: Optional[PreconditionValidator] = None,
        config: Optional[CoordgenConfig] = None,
    ):
        """Initialize service.

        Args:
            engine: Layout engine; built from the environment when omitted
            mode: Default validation mode for the trusted path
            validator: Precondition checker
            config: Settings; read from the environment when omitted
        """
        config = config or CoordgenConfig.from_env()
        self._engine = engine
        self._config = config
        self.mode = ValidationMode.parse(mode) if mode else config.validation_mode
        self._validator = validator or PreconditionValidator()
        self.logger = logging.getLogger(__name__)

    @property
    def engine(self) -> LayoutEngine:
        if self._engine is None:
            self._engine = create_engine(self._config)
        return self._engine

    def generate(
        self,
        atoms: Iterable[AtomLike],
        bonds: Iterable[BondLike] = (),
        mode: Optional[ModeLike] = None,
    ) -> List[Coordinate]:
        """
        Validate a graph, then compute its 2D coordinates.

        Args:
            atoms: Atoms or atomic numbers, in output order
            bonds: Bonds or ``(first, second, multiplicity)`` triples
            mode: Override of the service's validation mode for the
                delegated trusted call

        Returns:
            One Coordinate per atom, in atom order

        Raises:
            ValidationError: The first precondition violation; the engine is
                not called
        """
        graph = MoleculeGraph.build(atoms, bonds)
        error = self._validator.find_violation(graph.atoms, graph.bonds)
        if error is not None:
            self.logger.warning(f"Rejected molecule: {error}")
            raise error
        return self._generate_graph(graph, mode)

    def generate_unchecked(
        self,
        atoms: Iterable[AtomLike],
        bonds: Iterable[BondLike] = (),
        mode: Optional[ModeLike] = None,
    ) -> List[Coordinate]:
        """
        Compute 2D coordinates for a graph the caller guarantees is valid.

        The caller must ensure every bond references existing atoms, no two
        bonds join the same pair, multiplicities are 1-3 and atomic numbers
        are 1-118. In TRUSTED mode nothing is checked and a violation hands
        the engine buffers it will misread. In STRICT mode the checks run
        again and a violation is fatal.

        Raises:
            PreconditionViolation: In STRICT mode, if the graph is invalid
        """
        return self._generate_graph(MoleculeGraph.build(atoms, bonds), mode)

    def _generate_graph(
        self, graph: MoleculeGraph, mode: Optional[ModeLike]
    ) -> List[Coordinate]:
        mode = ValidationMode.parse(mode) if mode else self.mode
        if mode is ValidationMode.STRICT:
            error = self._validator.find_violation(graph.atoms, graph.bonds)
            if error is not None:
                self.logger.critical(f"Precondition violated in trusted call: {error}")
                raise PreconditionViolation(error)

        buffers = to_flat(graph.atoms, graph.bonds)
        coords = allocate_coordinates(buffers.n_atoms)
        self.logger.debug(
            f"Calling layout engine with {buffers.n_atoms} atoms "
            f"and {buffers.n_bonds} bonds"
        )
        self.engine.get_coordinates(
            buffers.n_atoms, buffers.atoms, buffers.n_bonds, buffers.bonds, coords
        )
        return from_flat(coords, buffers.n_atoms)


_default_service: Optional[CoordinateService] = None


def get_default_service() -> CoordinateService:
    """Return the shared service configured from the environment."""
    global _default_service
    if _default_service is None:
        _default_service = CoordinateService()
    return _default_service


def generate(
    atoms: Iterable[AtomLike],
    bonds: Iterable[BondLike] = (),
    mode: Optional[ModeLike] = None,
) -> List[Coordinate]:
    """Validate and lay out a molecule with the default service."""
    return get_default_service().generate(atoms, bonds, mode=mode)


def generate_unchecked(
    atoms: Iterable[AtomLike],
    bonds: Iterable[BondLike] = (),
    mode: Optional[ModeLike] = None,
) -> List[Coordinate]:
    """Lay out a molecule the caller has proven valid, with the default service."""
    return get_default_service().generate_unchecked(atoms, bonds, mode=mode)
