"""Bridge from exception-raising code to Results.

rescuing_from() runs a callable and turns what it raises into a Failure,
restricted to the given exception types. Anything outside that set is
re-raised untouched.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from resonad.domain.result import Result, failure, success
from resonad.shared.config import get_settings
from resonad.shared.logging import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _should_log() -> bool:
    # Settings are only read once the event would actually be emitted
    return logger.isEnabledFor(logging.DEBUG) and get_settings().log_rescues


def _validate_exception_types(exception_types: tuple[type[BaseException], ...]) -> None:
    for exc_type in exception_types:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(f"Expected an exception class, got {exc_type!r}")


def rescuing_from(
    body: Callable[[], T],
    *exception_types: type[BaseException],
) -> Result[T, BaseException]:
    """Run body and capture raised exceptions as a Failure.

    Args:
        body: Zero-argument callable to run
        *exception_types: Exception classes to capture. Subclasses match too.
            With none given, every exception is captured.

    Returns:
        Success with the return value of body, or Failure with the
        captured exception

    Raises:
        TypeError: If an entry of exception_types is not an exception class
        BaseException: Whatever body raised, if it is not one of exception_types

    Example:
        >>> rescuing_from(lambda: int("42"), ValueError).value
        42
        >>> rescuing_from(lambda: int("x"), ValueError).is_failure()
        True
    """
    _validate_exception_types(exception_types)

    try:
        value = body()
    except BaseException as exc:
        if exception_types and not isinstance(exc, exception_types):
            if _should_log():
                logger.debug(
                    "Re-raising unhandled exception",
                    exception_type=type(exc).__name__,
                )
            raise
        if _should_log():
            logger.debug(
                "Rescued exception",
                exception_type=type(exc).__name__,
                rescued_from=[t.__name__ for t in exception_types] or "any",
            )
        return failure(exc)

    return success(value)


def rescuing(
    *exception_types: type[BaseException],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]:
    """Decorator form of rescuing_from.

    Args:
        *exception_types: Exception classes to capture (all when empty)

    Returns:
        Decorator turning a raising function into one returning a Result

    Example:
        >>> @rescuing(ZeroDivisionError)
        ... def divide(a: int, b: int) -> float:
        ...     return a / b
        >>> divide(1, 0).is_failure()
        True
    """
    _validate_exception_types(exception_types)

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, BaseException]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, BaseException]:
            return rescuing_from(lambda: func(*args, **kwargs), *exception_types)

        return wrapper

    return decorator
