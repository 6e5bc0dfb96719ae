"""Decorators: optional, optional_async."""

from klaw_option.decorators.optional import optional, optional_async

__all__ = [
    'optional',
    'optional_async',
]
