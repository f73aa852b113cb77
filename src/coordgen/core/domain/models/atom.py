#!/usr/bin/env python3
# src/coordgen/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular graph.
"""

import operator
from dataclasses import dataclass
from typing import Union

MIN_ATOMIC_NUMBER = 1
MAX_ATOMIC_NUMBER = 118


@dataclass(frozen=True)
class Atom:
    """An atom, identified by its position in the graph's atom sequence."""

    atomic_number: int

    @property
    def is_known_element(self) -> bool:
        return MIN_ATOMIC_NUMBER <= self.atomic_number <= MAX_ATOMIC_NUMBER

    @classmethod
    def coerce(cls, value: Union["Atom", int]) -> "Atom":
        """Build an Atom from an Atom or an integer atomic number."""
        if isinstance(value, cls):
            return value
        return cls(operator.index(value))
