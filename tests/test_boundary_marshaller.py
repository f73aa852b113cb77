import numpy as np
import pytest

from coordgen.core.domain.errors import BufferLayoutError
from coordgen.core.domain.models import Coordinate, MoleculeGraph
from coordgen.infrastructure.marshalling.boundary_marshaller import (
    FlatBuffers,
    allocate_coordinates,
    from_flat,
    to_flat,
)


def test_to_flat_layout():
    graph = MoleculeGraph.build([7, 6, 8], [[0, 1, 1], [1, 2, 2]])
    buffers = to_flat(graph.atoms, graph.bonds)

    assert buffers.atoms.dtype == np.uint8
    assert buffers.bonds.dtype == np.uint16
    assert buffers.atoms.tolist() == [7, 6, 8]
    assert buffers.bonds.tolist() == [0, 1, 1, 1, 2, 2]
    assert buffers.n_atoms == 3
    assert buffers.n_bonds == 2
    assert buffers.atoms.flags["C_CONTIGUOUS"]
    assert buffers.bonds.flags["C_CONTIGUOUS"]


def test_to_flat_unpacks_as_pair():
    graph = MoleculeGraph.build([1], [])
    atom_buffer, bond_buffer = to_flat(graph.atoms, graph.bonds)
    assert atom_buffer.shape == (1,)
    assert bond_buffer.shape == (0,)


def test_to_flat_does_not_validate():
    graph = MoleculeGraph.build([0, 1], [[0, 1, 9], [0, 1, 9]])
    buffers = to_flat(graph.atoms, graph.bonds)
    assert buffers.atoms.tolist() == [0, 1]
    assert buffers.bonds.tolist() == [0, 1, 9, 0, 1, 9]


def test_allocate_coordinates():
    coords = allocate_coordinates(4)
    assert coords.dtype == np.float32
    assert coords.shape == (8,)


def test_from_flat_pairs_in_atom_order():
    raw = np.array([-50.0, 0.0, 0.0, 0.5], dtype=np.float32)
    assert from_flat(raw, 2) == [Coordinate(-50.0, 0.0), Coordinate(0.0, 0.5)]
    assert from_flat(allocate_coordinates(0), 0) == []


def test_from_flat_rejects_wrong_length():
    with pytest.raises(BufferLayoutError):
        from_flat(np.zeros(3, dtype=np.float32), 2)
    with pytest.raises(BufferLayoutError):
        from_flat(np.zeros((2, 2), dtype=np.float32), 2)


def test_check_layout():
    good = FlatBuffers(
        atoms=np.array([6, 6], dtype=np.uint8),
        bonds=np.array([0, 1, 1], dtype=np.uint16),
    )
    good.check_layout()

    with pytest.raises(BufferLayoutError):
        FlatBuffers(
            atoms=np.array([6, 6], dtype=np.uint8),
            bonds=np.array([0, 1], dtype=np.uint16),
        ).check_layout()
    with pytest.raises(BufferLayoutError):
        FlatBuffers(
            atoms=np.array([6, 6], dtype=np.int32),
            bonds=np.array([0, 1, 1], dtype=np.uint16),
        ).check_layout()
    with pytest.raises(BufferLayoutError):
        FlatBuffers(
            atoms=np.array([6, 0, 6, 0], dtype=np.uint8)[::2],
            bonds=np.array([0, 1, 1], dtype=np.uint16),
        ).check_layout()


def test_bond_buffer_width_matches_atom_index_limit():
    from coordgen.core.domain.models import MAX_ATOM_INDEX
    from coordgen.infrastructure.marshalling.boundary_marshaller import BOND_DTYPE

    assert MAX_ATOM_INDEX == 65535
    assert np.iinfo(BOND_DTYPE).max == MAX_ATOM_INDEX

    graph = MoleculeGraph.build([6] * 3, [[0, MAX_ATOM_INDEX, 1]])
    assert to_flat(graph.atoms, graph.bonds).bonds.tolist() == [0, 65535, 1]
