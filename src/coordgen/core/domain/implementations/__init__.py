"""Domain logic implementations."""

from .precondition_validator import PreconditionValidator, find_violation, validate

__all__ = ["PreconditionValidator", "find_violation", "validate"]
