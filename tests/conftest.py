"""Pytest configuration and shared fixtures for klaw-option tests."""

from collections.abc import Callable
from typing import Any

import pytest


class CallCounter:
    """Callable recording how many times, and with what, it was called."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> Callable[..., CallCounter]:
    """Factory for CallCounter instances returning a fixed result."""
    return CallCounter


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_option import Nothing

    return Nothing

