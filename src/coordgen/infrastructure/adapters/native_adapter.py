"""Adapter for a native CoordGen library exporting ``get_coordinates``."""

import ctypes
import ctypes.util
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ...core.domain.errors import EngineError
from ...core.domain.interfaces.layout_engine import LayoutEngine

SYMBOL_NAME = "get_coordinates"


class NativeCoordGenEngine(LayoutEngine):
    """
    Calls ``get_coordinates`` in a shared library through ctypes.

    The C signature is::

        void get_coordinates(size_t n_atoms, uint8_t* atoms,
                             size_t n_bonds, uint16_t* bonds, float* coords);
    """

    def __init__(self, library: Union[str, Path]):
        """Load the library.

        Args:
            library: Path to the shared library, or a bare library name to
                resolve with ``ctypes.util.find_library``

        Raises:
            EngineError: If the library or its symbol cannot be loaded
        """
        self.logger = logging.getLogger(__name__)
        self.library_path = self._resolve(library)
        try:
            self._lib = ctypes.CDLL(self.library_path)
            function = getattr(self._lib, SYMBOL_NAME)
        except (OSError, AttributeError) as e:
            raise EngineError(
                f"Failed to load {SYMBOL_NAME} from {self.library_path}: {str(e)}"
            ) from e

        function.argtypes = [
            ctypes.c_size_t,
            ctypes.POINTER(ctypes.c_uint8),
            ctypes.c_size_t,
            ctypes.POINTER(ctypes.c_uint16),
            ctypes.POINTER(ctypes.c_float),
        ]
        function.restype = None
        self._get_coordinates = function
        self.logger.info(f"Loaded native layout engine from {self.library_path}")

    @staticmethod
    def _resolve(library: Union[str, Path]) -> str:
        path = Path(library)
        if path.exists():
            return str(path)
        found: Optional[str] = ctypes.util.find_library(str(library))
        return found or str(library)

    def get_coordinates(
        self,
        n_atoms: int,
        atoms: np.ndarray,
        n_bonds: int,
        bonds: np.ndarray,
        coords: np.ndarray,
    ) -> None:
        self._get_coordinates(
            n_atoms,
            atoms.ctypes.data_as(ctypes.POINTER(ctypes.c_uint8)),
            n_bonds,
            bonds.ctypes.data_as(ctypes.POINTER(ctypes.c_uint16)),
            coords.ctypes.data_as(ctypes.POINTER(ctypes.c_float)),
        )
