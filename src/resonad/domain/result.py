"""Result pattern for explicit error handling.

Provides Success and Failure types to replace exception-based control flow.
A Result holds exactly one value (Success) or one error (Failure) and offers
the same set of combinators on both variants, so callers never branch on
the variant themselves.

Example:
    >>> success("hello").chain(lambda s: success(s + " moto")).value
    'hello moto'
    >>> failure("boom").map(str.upper).error
    'boom'
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from resonad.domain.exceptions import NonExistentError, NonExistentValue

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Failure error type
U = TypeVar("U")  # Mapped value type
F = TypeVar("F")  # Mapped error type

SUCCESS = "success"
FAILURE = "failure"


class Result(ABC, Generic[T, E]):
    """Abstract base for the two Result variants.

    The set of variants is closed: only Success and Failure, both defined in
    this module, may derive from Result.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Cannot subclass Result with {cls.__qualname__}: "
                "use Success or Failure instead"
            )

    @abstractmethod
    def is_success(self) -> bool:
        """Check if result is success."""

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return not self.is_success()

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Get the value, or default for a failure."""

    @abstractmethod
    def deconstruct(self) -> tuple[str, Any]:
        """Return a ``(kind, payload)`` pair."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value."""

    @abstractmethod
    def map_error(self, func: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure error."""

    @abstractmethod
    def chain(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Feed the success value into a function returning a Result."""

    @abstractmethod
    def chain_error(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Feed the failure error into a function returning a Result."""

    @abstractmethod
    def on_success(self, func: Callable[[T], Any]) -> Result[T, E]:
        """Call func with the success value for its side effect."""

    @abstractmethod
    def on_failure(self, func: Callable[[E], Any]) -> Result[T, E]:
        """Call func with the failure error for its side effect."""


@dataclass(frozen=True, slots=True)
class Success(Result[T, Any]):
    """Successful result."""

    value: T

    @property
    def error(self) -> Any:
        """Successes have no error.

        Raises:
            NonExistentError: Always
        """
        raise NonExistentError(self.value)

    def is_success(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return self.value

    def deconstruct(self) -> tuple[str, T]:
        return (SUCCESS, self.value)

    def map(self, func: Callable[[T], U]) -> Success[U]:
        """Transform the value.

        Returns self when func hands back the very same object.
        """
        new_value = func(self.value)
        if new_value is self.value:
            return self  # type: ignore[return-value]
        return Success(new_value)

    def map_error(self, func: Callable[[Any], Any]) -> Success[T]:
        return self

    def chain(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return func(self.value)

    def chain_error(self, func: Callable[[Any], Result[T, Any]]) -> Success[T]:
        return self

    def on_success(self, func: Callable[[T], Any]) -> Success[T]:
        func(self.value)
        return self

    def on_failure(self, func: Callable[[Any], Any]) -> Success[T]:
        return self

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[Any, E]):
    """Failed result."""

    error: E

    @property
    def value(self) -> Any:
        """Failures have no value.

        Raises:
            NonExistentValue: Always
        """
        raise NonExistentValue(self.error)

    def is_success(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default

    def deconstruct(self) -> tuple[str, E]:
        return (FAILURE, self.error)

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_error(self, func: Callable[[E], F]) -> Failure[F]:
        """Transform the error.

        Returns self when func hands back the very same object.
        """
        new_error = func(self.error)
        if new_error is self.error:
            return self  # type: ignore[return-value]
        return Failure(new_error)

    def chain(self, func: Callable[[Any], Result[Any, E]]) -> Failure[E]:
        return self

    def chain_error(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return func(self.error)

    def on_success(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def on_failure(self, func: Callable[[E], Any]) -> Failure[E]:
        func(self.error)
        return self

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Shared instances for payload-less results
NIL_SUCCESS: Success[None] = Success(None)
NIL_FAILURE: Failure[None] = Failure(None)


def success(value: T | None = None) -> Success[T]:
    """Create a Success result.

    Args:
        value: The success value; omit it for an empty success

    Returns:
        Success wrapping the value, or the shared NIL_SUCCESS when value is None
    """
    if value is None:
        return NIL_SUCCESS  # type: ignore[return-value]
    return Success(value)


def failure(error: E | None = None) -> Failure[E]:
    """Create a Failure result.

    Args:
        error: The error value; omit it for an empty failure

    Returns:
        Failure wrapping the error, or the shared NIL_FAILURE when error is None
    """
    if error is None:
        return NIL_FAILURE  # type: ignore[return-value]
    return Failure(error)
