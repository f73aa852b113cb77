import pytest

from coordgen.core.domain.errors import (
    AtomIndexOutOfRange,
    InvalidAtomicNumber,
    InvalidBondMultiplicity,
    ParallelBonds,
)
from coordgen.core.domain.implementations.precondition_validator import (
    PreconditionValidator,
    addressable_atom_count,
    find_violation,
    validate,
)
from coordgen.core.domain.models import MoleculeGraph


def check(atoms, bonds):
    graph = MoleculeGraph.build(atoms, bonds)
    return find_violation(graph.atoms, graph.bonds)


def test_valid_graph_has_no_violation():
    assert check([1, 1, 1, 1], [[0, 1, 1], [1, 2, 2], [2, 3, 3]]) is None
    assert check([6], []) is None
    assert check([], []) is None


def test_atomic_number_errors():
    # 0 isn't a valid atomic number, and neither is 200
    assert check([0, 1], [[0, 1, 1]]) == InvalidAtomicNumber(provided=0, atom_index=0)
    assert check([200, 100], [[0, 1, 1]]) == InvalidAtomicNumber(provided=200, atom_index=0)
    assert check([1, 1, 200], [[0, 1, 1]]) == InvalidAtomicNumber(provided=200, atom_index=2)


def test_first_invalid_atom_wins():
    assert check([1, 150, 200], [[0, 1, 1]]) == InvalidAtomicNumber(
        provided=150, atom_index=1
    )


def test_atomic_number_bounds_are_inclusive():
    assert check([1, 118], [[0, 1, 1]]) is None
    assert check([1, 119], [[0, 1, 1]]) == InvalidAtomicNumber(provided=119, atom_index=1)


@pytest.mark.parametrize(
    "bond, provided, side",
    [
        ([10, 0, 1], 10, 0),
        ([0, 10, 1], 10, 1),
        ([1, 0, 1], 1, 0),
        ([0, 1, 1], 1, 1),
    ],
)
def test_atom_index_side(bond, provided, side):
    assert check([1], [bond]) == AtomIndexOutOfRange(
        provided=provided, bond_index=0, which_side=side, max=1
    )


def test_atom_index_errors_report_bond_index():
    assert check([1, 2], [[1, 0, 1], [3, 0, 1]]) == AtomIndexOutOfRange(
        provided=3, bond_index=1, which_side=0, max=2
    )
    assert check([1, 2], [[1, 0, 1], [0, 3, 1]]) == AtomIndexOutOfRange(
        provided=3, bond_index=1, which_side=1, max=2
    )
    # the first invalid bond is reported
    assert check([1, 2], [[1, 3, 1], [0, 3, 1]]) == AtomIndexOutOfRange(
        provided=3, bond_index=0, which_side=1, max=2
    )


def test_negative_atom_index_is_out_of_range():
    assert check([1, 1], [[-1, 0, 1]]) == AtomIndexOutOfRange(
        provided=-1, bond_index=0, which_side=0, max=2
    )


def test_bond_multiplicity_errors():
    assert check([1, 1], [[1, 0, 0]]) == InvalidBondMultiplicity(provided=0, bond_index=0)
    assert check([1, 1, 2], [[0, 1, 1], [1, 2, 0]]) == InvalidBondMultiplicity(
        provided=0, bond_index=1
    )
    assert check([1, 1, 2], [[0, 1, 4], [1, 2, 0]]) == InvalidBondMultiplicity(
        provided=4, bond_index=0
    )


@pytest.mark.parametrize(
    "bonds",
    [
        [[1, 0, 1], [1, 0, 1]],
        [[1, 0, 1], [1, 0, 2]],
        [[1, 0, 1], [0, 1, 1]],
        [[1, 0, 1], [0, 1, 2]],
        [[0, 1, 1], [1, 0, 1]],
        [[0, 1, 1], [1, 0, 2]],
    ],
)
def test_parallel_bonds_ignore_orientation_and_multiplicity(bonds):
    assert check([1, 1], bonds) == ParallelBonds(first_bond_index=0, second_bond_index=1)


def test_parallel_bond_indices():
    assert check(
        [1, 1, 1, 1], [[0, 1, 1], [1, 2, 2], [2, 3, 1], [1, 0, 2]]
    ) == ParallelBonds(first_bond_index=0, second_bond_index=3)
    assert check(
        [1, 1, 1, 1], [[0, 1, 1], [1, 2, 2], [2, 3, 1], [2, 1, 2]]
    ) == ParallelBonds(first_bond_index=1, second_bond_index=3)


def test_parallel_bond_takes_priority_on_same_bond():
    # bond 1 duplicates bond 0 and also has a bad multiplicity
    assert check([1, 1], [[0, 1, 1], [1, 0, 9]]) == ParallelBonds(
        first_bond_index=0, second_bond_index=1
    )


def test_earlier_bond_fault_wins_over_later_parallel_bond():
    assert check([1], [[0, 5, 1], [5, 0, 1]]) == AtomIndexOutOfRange(
        provided=5, bond_index=0, which_side=1, max=1
    )


def test_error_precedence():
    atoms = [1, 1, 1, 1]
    bonds = [[0, 1, 1], [1, 2, 2], [2, 3, 3]]
    assert check(atoms, bonds) is None

    bonds[1][1] = 0  # bonds 0 and 1 are parallel
    bonds[2] = [100, 150, 500]  # two bad atom indices and a bad multiplicity
    atoms[1] = 150  # bad atomic number

    assert check(atoms, bonds) == ParallelBonds(first_bond_index=0, second_bond_index=1)

    bonds[1][1] = 2
    assert check(atoms, bonds) == AtomIndexOutOfRange(
        provided=100, bond_index=2, which_side=0, max=4
    )

    bonds[2][0] = 2
    assert check(atoms, bonds) == AtomIndexOutOfRange(
        provided=150, bond_index=2, which_side=1, max=4
    )

    bonds[2][1] = 3
    assert check(atoms, bonds) == InvalidBondMultiplicity(provided=500, bond_index=2)

    bonds[2][2] = 2
    assert check(atoms, bonds) == InvalidAtomicNumber(provided=150, atom_index=1)

    atoms[1] = 10
    assert check(atoms, bonds) is None


def test_self_loop_is_accepted():
    assert check([6, 8], [[0, 0, 1], [0, 1, 2]]) is None


def test_atom_indices_are_capped_by_encoding_width():
    assert addressable_atom_count(4) == 4
    assert addressable_atom_count(70000) == 65536

    atoms = [6] * 70000
    error = check(atoms, [[0, 65536, 1]])
    assert error == AtomIndexOutOfRange(
        provided=65536, bond_index=0, which_side=1, max=65536
    )
    assert check(atoms, [[0, 65535, 1]]) is None


def test_validate_raises_first_violation():
    graph = MoleculeGraph.build([1, 1], [[0, 1, 1], [1, 0, 1]])
    with pytest.raises(ParallelBonds) as exc_info:
        validate(graph.atoms, graph.bonds)
    assert exc_info.value == ParallelBonds(first_bond_index=0, second_bond_index=1)


def test_validator_does_not_mutate_input():
    graph = MoleculeGraph.build([0, 1], [[0, 1, 1]])
    validator = PreconditionValidator()
    first = validator.find_violation(graph.atoms, graph.bonds)
    second = validator.find_violation(graph.atoms, graph.bonds)
    assert first == second
    assert graph == MoleculeGraph.build([0, 1], [[0, 1, 1]])
    assert not validator.is_valid(graph.atoms, graph.bonds)


def test_atomic_number_check_uses_atom_model():
    from coordgen.core.domain.models import Atom

    graph = MoleculeGraph.build([6, 0], [])
    assert [atom.is_known_element for atom in graph.atoms] == [True, False]
    assert find_violation(graph.atoms, graph.bonds) == InvalidAtomicNumber(
        provided=0, atom_index=1
    )
    assert find_violation((Atom(118), Atom(119)), ()) == InvalidAtomicNumber(
        provided=119, atom_index=1
    )
