"""
Result values for fallible codec operations.

Decoders return ``Ok(value)`` or ``Err(error)`` instead of raising, so a
malformed input is ordinary data the caller inspects:

    match decode(token):
        case Ok(raw):
            ...
        case Err(InvalidPaddingError()):
            ...

``unwrap()`` converts back to exception style when that reads better.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from typing_extensions import TypeAlias

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)
F = TypeVar("F", bound=Exception)

__all__ = [
    "Err",
    "Ok",
    "Result",
]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply ``fn`` to the carried value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Chain another fallible step on the carried value."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: U) -> T | U:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying the error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        """Apply ``fn`` to the carried error."""
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Err[E]:
        return self

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        Raises:
            E: Always
        """
        raise self.error

    def unwrap_or(self, default: U) -> U:
        return default


Result: TypeAlias = Union[Ok[T], Err[E]]
