"""Runtime configuration for coordinate generation."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

ENV_VALIDATION_MODE = "COORDGEN_VALIDATION_MODE"
ENV_LIBRARY = "COORDGEN_LIBRARY"


class ValidationMode(str, Enum):
    """How the trusted call path treats its precondition.

    STRICT re-checks every invariant and fails fatally on a violation.
    TRUSTED assumes the caller already proved the invariants.
    """

    STRICT = "strict"
    TRUSTED = "trusted"

    @classmethod
    def parse(cls, value: Union["ValidationMode", str]) -> "ValidationMode":
        """
        Parse a mode name, case-insensitively.

        Raises:
            ValueError: If the name is not a known mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown validation mode {value!r}, expected one of: {choices}"
            ) from None


def default_validation_mode(environ: Optional[Mapping[str, str]] = None) -> ValidationMode:
    """
    Resolve the process-wide default mode.

    The environment variable wins; otherwise checks follow the interpreter's
    assertion setting, so ``python -O`` selects TRUSTED.
    """
    environ = os.environ if environ is None else environ
    value = environ.get(ENV_VALIDATION_MODE)
    if value:
        return ValidationMode.parse(value)
    return ValidationMode.STRICT if __debug__ else ValidationMode.TRUSTED


@dataclass(frozen=True)
class CoordgenConfig:
    """Settings for building a coordinate service."""

    validation_mode: ValidationMode = ValidationMode.STRICT
    library_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CoordgenConfig":
        """Load settings from environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            validation_mode=default_validation_mode(environ),
            library_path=environ.get(ENV_LIBRARY) or None,
        )
