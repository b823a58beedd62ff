"""Result type for explicit error handling.

``Ok`` wraps a successful value, ``Err`` wraps the failure. Functions that
return a ``Result`` never raise for the failure they describe, so the caller
has to look at the outcome before using the value.

Example:
    >>> from fastscan.convert import parse_int32
    >>> parse_int32("42")
    Ok(value=42)
    >>> parse_int32("abc").is_err()
    True

Thread Safety:
Both classes are frozen and safe to share.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The successful value
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, func: Callable[[T], R]) -> Ok[R]:
        """Apply func to the value and wrap the result."""
        return Ok(func(self.value))


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The exception describing the failure
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error."""
        raise self.error

    def unwrap_or(self, default: R) -> R:
        return default

    def map(self, func: Callable[[object], object]) -> Err[E]:
        """Errors pass through unchanged."""
        return self


Result = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
