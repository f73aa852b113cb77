"""Interface for external 2D coordinate-generation engines."""

from abc import ABC, abstractmethod

import numpy as np


class LayoutEngine(ABC):
    """
    Abstract base class for engines that lay out a molecular graph in 2D.

    The call mirrors the engine's foreign signature exactly. Engines trust
    the buffer sizes implied by ``n_atoms`` and ``n_bonds`` and perform no
    bounds checking of their own.
    """

    @abstractmethod
    def get_coordinates(
        self,
        n_atoms: int,
        atoms: np.ndarray,
        n_bonds: int,
        bonds: np.ndarray,
        coords: np.ndarray,
    ) -> None:
        """
        Write interleaved (x, y) coordinates for every atom.

        Args:
            n_atoms: Number of atoms
            atoms: ``uint8`` atomic numbers, length ``n_atoms``
            n_bonds: Number of bonds
            bonds: ``uint16`` (first, second, multiplicity) triples,
                length ``3 * n_bonds``
            coords: Caller-allocated ``float32`` output, length ``2 * n_atoms``
        """
        pass
