"""Pytest configuration and fixtures."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from resonad.shared.config import Settings


class Spy:
    """Callable that records its arguments and returns a fixed value."""

    def __init__(self, returns: Any = None) -> None:
        self.returns = returns
        self.calls: list[Any] = []

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with verbose logging."""
    return Settings(
        log_level="DEBUG",
        log_format="json",
        log_rescues=True,
    )


@pytest.fixture
def spy() -> Callable[..., Spy]:
    """Factory for call-recording callables."""
    return Spy
