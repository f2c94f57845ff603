"""Contract violations raised by the Result algebra.

Domain failures never raise: they travel as Failure payloads. The exceptions
here are programmer errors, raised synchronously at the violating call:
- NoValuePresentError: reading the payload of the wrong variant
- NullArgumentError: a required callable argument is None (or not callable)
"""

from __future__ import annotations

from typing import Callable, TypeVar

C = TypeVar("C", bound=Callable[..., object])

NO_VALUE_PRESENT = "No value present"


class ResultError(Exception):
    """Base class for every contract violation raised by resultkit."""


class NoValuePresentError(ResultError, LookupError):
    """Payload requested from the variant that does not hold it."""

    def __init__(self, message: str = NO_VALUE_PRESENT) -> None:
        super().__init__(message)


class NullArgumentError(ResultError, TypeError):
    """Required callable argument missing. `param` names the offending argument."""

    def __init__(self, param: str, message: str | None = None) -> None:
        self.param = param
        super().__init__(message or f"{param} must not be None")


def require(fn: C | None, name: str) -> C:
    """Eager argument check shared by every combinator.

    Runs before any branching on the variant, so a Failure receiver rejects
    a None mapper exactly like a Success receiver does.

    Raises:
        NullArgumentError: If fn is None or not callable
    """
    if fn is None:
        raise NullArgumentError(name)
    if not callable(fn):
        raise NullArgumentError(name, f"{name} must be callable, got {type(fn).__name__}")
    return fn
