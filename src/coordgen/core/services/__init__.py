"""Core business logic services."""

from .coordinate_service import (
    CoordinateService,
    create_engine,
    generate,
    generate_unchecked,
    get_default_service,
)

__all__ = [
    "CoordinateService",
    "create_engine",
    "generate",
    "generate_unchecked",
    "get_default_service",
]
