"""Domain Layer.

Contains the Result variants, their exceptions and the exception adapter.
"""
from __future__ import annotations

from resonad.domain.exceptions import (
    NonExistentError,
    NonExistentValue,
    ResonadError,
)
from resonad.domain.rescue import rescuing, rescuing_from
from resonad.domain.result import (
    NIL_FAILURE,
    NIL_SUCCESS,
    Failure,
    Result,
    Success,
    failure,
    success,
)

__all__ = [
    # Exceptions
    "ResonadError",
    "NonExistentError",
    "NonExistentValue",
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
]
