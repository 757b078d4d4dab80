"""resonad.

Success/Failure result type with chainable combinators and an adapter that
turns raised exceptions into Failures.
"""
from __future__ import annotations

__version__ = "0.1.0"

from resonad.domain import (
    NIL_FAILURE,
    NIL_SUCCESS,
    Failure,
    NonExistentError,
    NonExistentValue,
    ResonadError,
    Result,
    Success,
    failure,
    rescuing,
    rescuing_from,
    success,
)
from resonad.shared.logging import configure_logging

__all__ = [
    "__version__",
    # Result
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "NIL_SUCCESS",
    "NIL_FAILURE",
    # Rescue
    "rescuing_from",
    "rescuing",
    # Exceptions
    "ResonadError",
    "NonExistentError",
    "NonExistentValue",
    # Logging
    "configure_logging",
]
