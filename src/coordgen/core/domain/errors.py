"""Error taxonomy for coordinate generation."""

from typing import Any, Dict, Optional, Tuple


class CoordgenError(Exception):
    """Base class for errors raised by coordgen."""


class ValidationError(CoordgenError, ValueError):
    """
    A precondition violation that would corrupt the layout engine's input.

    Every variant carries the exact diagnostic fields that locate the fault.
    Two errors are equal when they are the same variant with the same fields.
    """

    fields: Tuple[str, ...] = ()

    def __init__(self, **values: Any):
        missing = set(self.fields) - set(values)
        unexpected = set(values) - set(self.fields)
        if missing or unexpected:
            raise TypeError(
                f"{type(self).__name__} expects fields {self.fields}, "
                f"got {tuple(values)}"
            )
        for name in self.fields:
            setattr(self, name, values[name])
        super().__init__(self.describe())

    def describe(self) -> str:
        return "molecule violates a layout engine precondition"

    def as_dict(self) -> Dict[str, Any]:
        """Field values keyed by name, for structured output."""
        return {name: getattr(self, name) for name in self.fields}

    def _key(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.fields)
        return f"{type(self).__name__}({args})"

    def __reduce__(self):
        return (_rebuild_validation_error, (type(self), self.as_dict()))


def _rebuild_validation_error(cls, values):
    return cls(**values)


class AtomIndexOutOfRange(ValidationError):
    """A bond references an atom position that does not exist."""

    fields = ("provided", "bond_index", "which_side", "max")

    def __init__(self, provided: int, bond_index: int, which_side: int, max: int):
        super().__init__(
            provided=provided, bond_index=bond_index, which_side=which_side, max=max
        )

    def describe(self) -> str:
        return (
            f"bond {self.bond_index} contained atom index {self.provided} for "
            f"coincident atom {self.which_side}, but only {self.max} atoms exist"
        )


class InvalidBondMultiplicity(ValidationError):
    """A bond multiplicity is not single, double or triple."""

    fields = ("provided", "bond_index")

    def __init__(self, provided: int, bond_index: int):
        super().__init__(provided=provided, bond_index=bond_index)

    def describe(self) -> str:
        return (
            f"bond {self.bond_index} contained multiplicity {self.provided}, "
            "but it must be 1, 2, or 3"
        )


class InvalidAtomicNumber(ValidationError):
    """An atom carries an atomic number for an element that doesn't exist."""

    fields = ("provided", "atom_index")

    def __init__(self, provided: int, atom_index: int):
        super().__init__(provided=provided, atom_index=atom_index)

    def describe(self) -> str:
        return (
            f"atom {self.atom_index} had atomic number {self.provided}, "
            "no such element exists"
        )


class ParallelBonds(ValidationError):
    """Two bonds connect the same unordered pair of atoms."""

    fields = ("first_bond_index", "second_bond_index")

    def __init__(self, first_bond_index: int, second_bond_index: int):
        super().__init__(
            first_bond_index=first_bond_index, second_bond_index=second_bond_index
        )

    def describe(self) -> str:
        return (
            f"bond {self.first_bond_index} and bond {self.second_bond_index} "
            "connect the same two atoms"
        )


class BufferLayoutError(CoordgenError, ValueError):
    """A flat engine buffer does not have the length its counts require."""


class EngineError(CoordgenError, RuntimeError):
    """The layout engine could not be loaded or failed to produce coordinates."""


class PreconditionViolation(AssertionError):
    """
    Raised by strict-mode checks in the trusted call path.

    This marks an integration bug at the call site: the caller promised the
    graph was valid and it was not. It is deliberately not a ValidationError.
    """

    def __init__(self, error: ValidationError, message: Optional[str] = None):
        self.error = error
        super().__init__(message or f"precondition violated: {error}")

    def __reduce__(self):
        return (type(self), (self.error, self.args[0]))
