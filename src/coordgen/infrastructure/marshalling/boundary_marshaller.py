#!/usr/bin/env python3
# src/coordgen/infrastructure/marshalling/boundary_marshaller.py

"""
Conversion between molecule models and the flat buffers a layout engine reads.

This module is the only code that builds or consumes engine buffers. It does
no validation of chemistry: values are cast with wrap-around, so only graphs
that passed the precondition checks produce meaningful buffers.
"""

from typing import List, NamedTuple, Sequence

import numpy as np

from ...core.domain.errors import BufferLayoutError
from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import ATOM_INDEX_DTYPE, Bond
from ...core.domain.models.coordinate import Coordinate

ATOM_DTYPE = np.uint8
BOND_DTYPE = ATOM_INDEX_DTYPE
COORD_DTYPE = np.float32

BOND_WIDTH = 3
COORD_WIDTH = 2


class FlatBuffers(NamedTuple):
    """Contiguous engine input: atomic numbers and bond triples."""

    atoms: np.ndarray
    bonds: np.ndarray

    @property
    def n_atoms(self) -> int:
        return int(self.atoms.shape[0])

    @property
    def n_bonds(self) -> int:
        return int(self.bonds.shape[0]) // BOND_WIDTH

    def check_layout(self) -> None:
        """
        Verify dtypes, contiguity and the ``3 * n_bonds`` bond length.

        Raises:
            BufferLayoutError: If any buffer breaks the engine's layout
        """
        for name, buffer, dtype in (
            ("atom", self.atoms, ATOM_DTYPE),
            ("bond", self.bonds, BOND_DTYPE),
        ):
            if buffer.dtype != dtype or buffer.ndim != 1:
                raise BufferLayoutError(
                    f"{name} buffer must be 1-D {np.dtype(dtype).name}, "
                    f"got {buffer.ndim}-D {buffer.dtype.name}"
                )
            if not buffer.flags["C_CONTIGUOUS"]:
                raise BufferLayoutError(f"{name} buffer must be contiguous")
        if self.bonds.shape[0] % BOND_WIDTH:
            raise BufferLayoutError(
                f"bond buffer length {self.bonds.shape[0]} is not a multiple of {BOND_WIDTH}"
            )


def to_flat(atoms: Sequence[Atom], bonds: Sequence[Bond]) -> FlatBuffers:
    """
    Flatten atoms and bonds into engine buffers.

    Args:
        atoms: Atoms in graph order
        bonds: Bonds in graph order

    Returns:
        FlatBuffers with ``len(atoms)`` atomic numbers and
        ``3 * len(bonds)`` bond values
    """
    atom_values = np.array(
        [atom.atomic_number for atom in atoms], dtype=np.int64
    ).reshape(-1)
    bond_values = np.array(
        [bond.as_triple() for bond in bonds], dtype=np.int64
    ).reshape(-1)

    buffers = FlatBuffers(
        atoms=np.ascontiguousarray(atom_values.astype(ATOM_DTYPE)),
        bonds=np.ascontiguousarray(bond_values.astype(BOND_DTYPE)),
    )
    buffers.check_layout()
    return buffers


def allocate_coordinates(atom_count: int) -> np.ndarray:
    """Allocate the caller-owned output buffer for ``atom_count`` atoms."""
    return np.zeros(COORD_WIDTH * atom_count, dtype=COORD_DTYPE)


def from_flat(raw_coords: np.ndarray, atom_count: int) -> List[Coordinate]:
    """
    Read interleaved ``(x0, y0, x1, y1, ...)`` engine output.

    Args:
        raw_coords: Buffer populated by the engine
        atom_count: Number of atoms in the graph

    Returns:
        One Coordinate per atom, in atom order

    Raises:
        BufferLayoutError: If the buffer does not hold exactly
            ``2 * atom_count`` values
    """
    raw = np.asarray(raw_coords)
    expected = COORD_WIDTH * atom_count
    if raw.ndim != 1 or raw.shape[0] != expected:
        raise BufferLayoutError(
            f"expected {expected} coordinate values for {atom_count} atoms, "
            f"got shape {raw.shape}"
        )
    pairs = raw.astype(COORD_DTYPE, copy=False).reshape(atom_count, COORD_WIDTH)
    return [Coordinate(float(x), float(y)) for x, y in pairs]
