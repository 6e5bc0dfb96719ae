"""Async iteration utilities for Option types.

Example:
    ```python
    async def lookup(key: str) -> Option[str]:
        ...

    # Some([...]) only if every lookup finds a value
    values = await async_sequence([lookup(k) for k in keys], limit=8)
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable

import aiologic
import anyio

from klaw_option._config import get_config
from klaw_option._logging import get_logger
from klaw_option.async_.ops import MaybeAwaitable, resolve
from klaw_option.option import Nothing, Option, Some

__all__ = [
    'async_choose',
    'async_first_or_nothing',
    'async_sequence',
]

logger = get_logger(__name__)


async def _iterate[T](items: AsyncIterable[T] | Iterable[T]) -> AsyncIterator[T]:
    if isinstance(items, AsyncIterable):
        async for item in items:
            yield item
    else:
        for item in items:
            yield item


async def async_first_or_nothing[T](
    items: AsyncIterable[T] | Iterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> Option[T]:
    """Return the first item matching a sync or async predicate, or Nothing.

    Items are checked one at a time; iteration stops at the first match.

    Example:
        ```python
        async def is_online(host: str) -> bool:
            ...

        host = await async_first_or_nothing(hosts, is_online)
        ```
    """
    async for item in _iterate(items):
        if await resolve(predicate(item)):
            return Some(item)
    return Nothing


async def async_choose[T, U](
    items: AsyncIterable[T] | Iterable[T],
    chooser: Callable[[T], MaybeAwaitable[Option[U]]],
) -> AsyncIterator[U]:
    """Yield the Some values produced by a sync or async chooser, dropping Nothing.

    Example:
        ```python
        async for user in async_choose(ids, find_user):
            ...
        ```
    """
    async for item in _iterate(items):
        chosen = await resolve(chooser(item))
        if isinstance(chosen, Some):
            yield chosen.value


async def async_sequence[T](
    awaitables: Iterable[Awaitable[Option[T]]],
    *,
    limit: int | None = None,
) -> Option[list[T]]:
    """Await options concurrently and collect them into an Option of list.

    All awaitables run to completion; the result is Some(list) (in input
    order) only if every option is Some, otherwise Nothing.

    Note:
        The awaitables iterable is eagerly materialized into a list before
        processing. If one awaitable raises, the others are cancelled and
        the exception propagates.

    Args:
        awaitables: An iterable of awaitables that produce Options.
        limit: Maximum number of concurrent awaits. None uses the configured
            concurrency; 0 means unbounded.

    Returns:
        Some(list[T]) if all options are Some, otherwise Nothing.

    Example:
        ```python
        async def get_value(n: int) -> Option[int]:
            return Some(n * 2)

        async def example():
            values = await async_sequence([get_value(1), get_value(2)])
            assert values == Some([2, 4])
        ```
    """
    if limit is None:
        limit = get_config().concurrency

    awaitable_list = list(awaitables)
    results: list[Option[T]] = [Nothing] * len(awaitable_list)
    limiter = aiologic.CapacityLimiter(limit) if limit > 0 else None

    async def run_one(i: int, aw: Awaitable[Option[T]]) -> None:
        if limiter is None:
            results[i] = await aw
            return
        async with limiter:
            results[i] = await aw

    try:
        async with anyio.create_task_group() as tg:
            for i, aw in enumerate(awaitable_list):
                tg.start_soon(run_one, i, aw)
    except BaseExceptionGroup as group:
        if len(group.exceptions) == 1:
            raise group.exceptions[0] from None
        raise

    values: list[T] = []
    for i, result in enumerate(results):
        if not isinstance(result, Some):
            logger.debug('option.sequence.nothing', index=i, total=len(results))
            return Nothing
        values.append(result.value)
    return Some(values)
