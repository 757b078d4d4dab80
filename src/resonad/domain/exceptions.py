"""Domain layer exceptions.

All resonad-specific exceptions inherit from ResonadError.
"""
from __future__ import annotations

from typing import Any


class ResonadError(Exception):
    """Base exception for resonad errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class NonExistentError(ResonadError):
    def __init__(self, value: Any = None) -> None:
        super().__init__("Success results do not have errors", {"value": value})
        self.value = value


class NonExistentValue(ResonadError):
    def __init__(self, error: Any = None) -> None:
        super().__init__("Failure results do not have values", {"error": error})
        self.error = error
