#!/usr/bin/env python3
# src/coordgen/core/domain/models/bond.py

"""
Domain model representing a chemical bond between two atoms.
"""

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Tuple, Union

import numpy as np

# Atom positions travel to the engine as 16-bit unsigned integers.
ATOM_INDEX_DTYPE = np.uint16
MAX_ATOM_INDEX = int(np.iinfo(ATOM_INDEX_DTYPE).max)


class BondOrder(IntEnum):
    """Bond multiplicities the layout engine understands."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3


VALID_MULTIPLICITIES = frozenset(int(order) for order in BondOrder)


@dataclass(frozen=True)
class Bond:
    """Represents an undirected bond between two atom positions."""

    first: int
    second: int
    multiplicity: int = BondOrder.SINGLE

    @property
    def pair_key(self) -> Tuple[int, int]:
        """Canonical, order-independent key for the bonded atom pair."""
        if self.first <= self.second:
            return (self.first, self.second)
        return (self.second, self.first)

    @property
    def is_self_loop(self) -> bool:
        return self.first == self.second

    def as_triple(self) -> Tuple[int, int, int]:
        return (self.first, self.second, self.multiplicity)

    @classmethod
    def coerce(cls, value: Union["Bond", Sequence[int]]) -> "Bond":
        """
        Build a Bond from a Bond or a ``(first, second, multiplicity)`` triple.

        Raises:
            ValueError: If a sequence does not have exactly three members
        """
        if isinstance(value, cls):
            return value
        members = tuple(value)
        if len(members) != 3:
            raise ValueError(
                f"Bond must be (first, second, multiplicity), got {len(members)} values"
            )
        first, second, multiplicity = (operator.index(m) for m in members)
        return cls(first, second, multiplicity)
