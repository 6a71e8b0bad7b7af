# -*- coding: utf-8 -*-
"""
RU: Двухвариантный контейнер результата (Ok/Err) для всех операций,
которые могут завершиться ошибкой.

EN: Two-variant outcome container used by every fallible operation instead of
raising across the public boundary.

Example:
    >>> from symcrypt.core.result import Ok, Err
    >>> res = SymmetricKey.from_encoded(key_hex).and_then(
    ...     lambda key: decrypt(token, key)
    ... )
    >>> match res:
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         logger.warning("decrypt failed: %s", error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

__all__ = [
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "ok",
    "err",
]

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class UnwrapError(RuntimeError):
    """Raised when a value is unwrapped from the wrong variant."""


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[object], F]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError("Cannot call unwrap_err on an Ok value")


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome holding ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[object], U]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[object], object]) -> Err[E]:
        return self

    def unwrap(self) -> NoReturn:
        # The error is attached as the cause so tracebacks stay useful.
        if isinstance(self.error, BaseException):
            raise UnwrapError("Cannot call unwrap on an Err value") from self.error
        raise UnwrapError("Cannot call unwrap on an Err value")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Wrap ``value`` in :class:`Ok`."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Wrap ``error`` in :class:`Err`."""
    return Err(error)
