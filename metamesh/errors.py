# metamesh/errors.py
import numbers
from typing import Any


class MetameshError(Exception):
    """Base class for all errors raised by metamesh."""


class InvalidParameter(MetameshError, ValueError):
    """A shape descriptor or parameter file holds an out-of-range value."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class MeshAssemblyError(MetameshError, ValueError):
    """Raw geometry handed to the assembler is inconsistent."""


def require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidParameter(name, value, "must be greater than zero")


def require_at_least(name: str, value: int, minimum: int) -> None:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidParameter(name, value, "must be an integer")
    if value < minimum:
        raise InvalidParameter(name, value, f"must be at least {minimum}")


def require_angle(name: str, degrees: float) -> None:
    if not 0 < degrees <= 360:
        raise InvalidParameter(name, degrees, "must be in (0, 360] degrees")
