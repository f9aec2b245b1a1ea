"""Explicit success/failure results.

Expected failures (invalid input, ownership violations, missing entities,
third-party errors) are returned as ``Err`` instead of being raised, so a
caller always sees the failure in the return type. Only the transport layer
turns an ``Err`` back into an exception via ``unwrap()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying the error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def map(self, fn: Callable[[object], object]) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def ok(value: T = None) -> Ok[T]:  # type: ignore[assignment]
    """Shorthand for ``Ok(value)``; ``ok()`` is the unit success."""
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)
