"""Error types raised by Option access."""

from __future__ import annotations

__all__ = ['NothingError']


class NothingError(RuntimeError):
    """Raised by get() when the option is Nothing."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Called get on Nothing')
