#!/usr/bin/env python3
# src/coordgen/core/domain/implementations/precondition_validator.py

"""
Precondition checks for graphs handed to a layout engine.

Violations are reported in a fixed precedence:

1. parallel bonds, as soon as the second bond of a pair is reached
2. atom positions, the first side of a bond before the second
3. bond multiplicity
4. atomic numbers, only once every bond is structurally sound

Bonds are scanned once, in order, so the reported bond is the lowest-indexed
one breaking any bond rule.
"""

from typing import Dict, Optional, Sequence, Tuple

from ..errors import (
    AtomIndexOutOfRange,
    InvalidAtomicNumber,
    InvalidBondMultiplicity,
    ParallelBonds,
    ValidationError,
)
from ..models.atom import Atom
from ..models.bond import Bond, MAX_ATOM_INDEX, VALID_MULTIPLICITIES


def addressable_atom_count(n_atoms: int) -> int:
    """Number of atom positions a bond can refer to."""
    return min(n_atoms, MAX_ATOM_INDEX + 1)


class PreconditionValidator:
    """Stateless checker for the invariants the layout engine assumes."""

    def find_violation(
        self, atoms: Sequence[Atom], bonds: Sequence[Bond]
    ) -> Optional[ValidationError]:
        """
        Find the first precondition violation.

        Args:
            atoms: Atoms in graph order
            bonds: Bonds in graph order

        Returns:
            The violation to report, or None if the graph is valid
        """
        limit = addressable_atom_count(len(atoms))

        seen: Dict[Tuple[int, int], int] = {}
        for bond_index, bond in enumerate(bonds):
            key = bond.pair_key
            previous = seen.setdefault(key, bond_index)
            if previous != bond_index:
                return ParallelBonds(
                    first_bond_index=previous, second_bond_index=bond_index
                )

            for which_side, position in enumerate((bond.first, bond.second)):
                if not 0 <= position < limit:
                    return AtomIndexOutOfRange(
                        provided=position,
                        bond_index=bond_index,
                        which_side=which_side,
                        max=limit,
                    )

            if bond.multiplicity not in VALID_MULTIPLICITIES:
                return InvalidBondMultiplicity(
                    provided=bond.multiplicity, bond_index=bond_index
                )

        for atom_index, atom in enumerate(atoms):
            if not atom.is_known_element:
                return InvalidAtomicNumber(
                    provided=atom.atomic_number, atom_index=atom_index
                )

        return None

    def validate(self, atoms: Sequence[Atom], bonds: Sequence[Bond]) -> None:
        """
        Check every precondition.

        Raises:
            ValidationError: The first violation found
        """
        error = self.find_violation(atoms, bonds)
        if error is not None:
            raise error

    def is_valid(self, atoms: Sequence[Atom], bonds: Sequence[Bond]) -> bool:
        return self.find_violation(atoms, bonds) is None


_default_validator = PreconditionValidator()


def find_violation(
    atoms: Sequence[Atom], bonds: Sequence[Bond]
) -> Optional[ValidationError]:
    """Module-level shortcut for :meth:`PreconditionValidator.find_violation`."""
    return _default_validator.find_violation(atoms, bonds)


def validate(atoms: Sequence[Atom], bonds: Sequence[Bond]) -> None:
    """Module-level shortcut for :meth:`PreconditionValidator.validate`."""
    _default_validator.validate(atoms, bonds)
