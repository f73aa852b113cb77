"""Domain model for a generated 2D atom position."""

from typing import NamedTuple


class Coordinate(NamedTuple):
    """Planar (x, y) position of one atom, co-indexed with the atom sequence."""

    x: float
    y: float
