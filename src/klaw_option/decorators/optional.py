"""@optional and @optional_async decorators for None-returning functions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from klaw_option.option import Option, of_obj

__all__ = ['optional', 'optional_async']


def optional[**P, T](func: Callable[P, T | None]) -> Callable[P, Option[T]]:
    """Decorator that turns a None-returning function into an Option-returning one.

    The wrapped function returns Nothing when the original returns None,
    and Some(value) otherwise. Exceptions are not caught.

    Example:
        ```python
        @optional
        def find(users: dict[int, str], id: int) -> str | None:
            return users.get(id)

        find({1: 'ada'}, 1)
        # Some(value='ada')
        find({1: 'ada'}, 2)
        # NothingType()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        return of_obj(wrapped(*args, **kwargs))

    return wrapper(func)


def optional_async[**P, T](
    func: Callable[P, Awaitable[T | None]],
) -> Callable[P, Awaitable[Option[T]]]:
    """Async decorator that turns a None-returning coroutine function into an Option-returning one.

    Example:
        ```python
        @optional_async
        async def fetch_profile(id: int) -> Profile | None:
            return await db.get(id)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T | None]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        return of_obj(await wrapped(*args, **kwargs))

    return wrapper(func)
