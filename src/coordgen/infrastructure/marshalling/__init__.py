"""Buffer layout for the layout engine boundary."""

from .boundary_marshaller import (
    FlatBuffers,
    allocate_coordinates,
    from_flat,
    to_flat,
)

__all__ = ["FlatBuffers", "allocate_coordinates", "from_flat", "to_flat"]
