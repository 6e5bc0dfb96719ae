"""Async Option combinators.

Each function mirrors its synchronous namesake in `klaw_option.ops`, but any
option argument may be an awaitable of an option and any callback may be a
coroutine function. Inputs are resolved in argument order, then the
synchronous semantics apply:

    await omap(fetch_user(1), format_user)          # pending option, sync fn
    await omap(Some(1), fetch_profile)              # plain option, async fn
    await bind(fetch_user(1), fetch_primary_email)  # both pending

Callbacks run only on the path that needs them. An unneeded alternative
passed to `or_else` as a bare coroutine is closed without being started;
tasks and futures are left alone and their results are not read.

Exceptions raised by awaited inputs or callbacks propagate unchanged. When an
input fails, bare coroutines passed after it are closed unstarted.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from klaw_option.option import Nothing, NothingType, Option, Some
from klaw_option.option import of_obj as _of_obj

__all__ = [
    'MaybeAwaitable',
    'bind',
    'contains',
    'count',
    'default_value',
    'default_with',
    'exists',
    'flatten',
    'fold',
    'fold_back',
    'for_all',
    'get',
    'is_none',
    'is_some',
    'map2',
    'map3',
    'of_nullable',
    'of_obj',
    'ofilter',
    'oiter',
    'omap',
    'or_else',
    'or_else_with',
    'resolve',
    'to_iter',
    'to_list',
    'to_nullable',
    'to_obj',
    'to_tuple',
]

type MaybeAwaitable[T] = T | Awaitable[T]


async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """Await `value` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


def _discard(value: object) -> None:
    # A coroutine that is never awaited would warn on collection.
    if inspect.iscoroutine(value):
        value.close()


async def _resolve_in_order(*values: MaybeAwaitable[Any]) -> list[Any]:
    """Resolve values one after another.

    If one fails, the bare coroutines after it are closed before the
    exception propagates.
    """
    resolved: list[Any] = []
    for i, value in enumerate(values):
        try:
            resolved.append(await resolve(value))
        except BaseException:
            for rest in values[i + 1 :]:
                _discard(rest)
            raise
    return resolved


async def is_some[T](option: MaybeAwaitable[Option[T]]) -> bool:
    return isinstance(await resolve(option), Some)


async def is_none[T](option: MaybeAwaitable[Option[T]]) -> bool:
    return isinstance(await resolve(option), NothingType)


async def bind[T, U](
    option: MaybeAwaitable[Option[T]],
    binder: Callable[[T], MaybeAwaitable[Option[U]]],
) -> Option[U]:
    """Chain a sync or async Option-returning function.

    Args:
        option: An Option or an awaitable producing one.
        binder: Function from T to Option[U], or to an awaitable of it.

    Returns:
        The binder's Option if the source is Some, otherwise Nothing.
    """
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return await resolve(binder(resolved.value))
    return Nothing


async def contains[T](option: MaybeAwaitable[Option[T]], value: T) -> bool:
    return (await resolve(option)).contains(value)


async def count[T](option: MaybeAwaitable[Option[T]]) -> int:
    return (await resolve(option)).count()


async def default_value[T](option: MaybeAwaitable[Option[T]], default: T) -> T:
    return (await resolve(option)).default_value(default)


async def default_with[T](
    option: MaybeAwaitable[Option[T]],
    thunk: Callable[[], MaybeAwaitable[T]],
) -> T:
    """Return the value if Some, otherwise the (possibly awaited) thunk result."""
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return resolved.value
    return await resolve(thunk())


async def exists[T](
    option: MaybeAwaitable[Option[T]],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> bool:
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return await resolve(predicate(resolved.value))
    return False


async def for_all[T](
    option: MaybeAwaitable[Option[T]],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> bool:
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return await resolve(predicate(resolved.value))
    return True


async def ofilter[T](
    option: MaybeAwaitable[Option[T]],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> Option[T]:
    """Keep the value only if the sync or async predicate holds."""
    resolved = await resolve(option)
    if isinstance(resolved, Some) and await resolve(predicate(resolved.value)):
        return resolved
    return Nothing


async def flatten[T](option: MaybeAwaitable[Option[Option[T]]]) -> Option[T]:
    return (await resolve(option)).flatten()


async def fold[T, S](
    option: MaybeAwaitable[Option[T]],
    folder: Callable[[S, T], MaybeAwaitable[S]],
    state: S,
) -> S:
    """Return `state` for Nothing, otherwise the (possibly awaited) folder result."""
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return await resolve(folder(state, resolved.value))
    return state


async def fold_back[T, S](
    option: MaybeAwaitable[Option[T]],
    folder: Callable[[S, T], MaybeAwaitable[S]],
    state: S,
) -> S:
    """Same as fold."""
    return await fold(option, folder, state)


async def get[T](
    option: MaybeAwaitable[Option[T]],
    error: Callable[[], BaseException] | None = None,
) -> T:
    """Return the value of a Some.

    Raises:
        NothingError: If the option is Nothing and no factory is given.
    """
    return (await resolve(option)).get(error)


async def oiter[T](
    option: MaybeAwaitable[Option[T]],
    action: Callable[[T], MaybeAwaitable[Any]],
) -> None:
    """Run a sync or async action with the value if Some."""
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        await resolve(action(resolved.value))


async def omap[T, U](
    option: MaybeAwaitable[Option[T]],
    mapping: Callable[[T], MaybeAwaitable[U]],
) -> Option[U]:
    """Apply a sync or async function to the value if Some.

    Args:
        option: An Option or an awaitable producing one.
        mapping: Function from T to U, or to an awaitable of U.

    Returns:
        Some of the mapped value, or Nothing.
    """
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return Some(await resolve(mapping(resolved.value)))
    return Nothing


async def map2[T1, T2, U](
    option1: MaybeAwaitable[Option[T1]],
    option2: MaybeAwaitable[Option[T2]],
    mapping: Callable[[T1, T2], MaybeAwaitable[U]],
) -> Option[U]:
    """Apply a binary function when both options are Some.

    Both options are awaited, first then second, before deciding.
    """
    first, second = await _resolve_in_order(option1, option2)
    if isinstance(first, Some) and isinstance(second, Some):
        return Some(await resolve(mapping(first.value, second.value)))
    return Nothing


async def map3[T1, T2, T3, U](
    option1: MaybeAwaitable[Option[T1]],
    option2: MaybeAwaitable[Option[T2]],
    option3: MaybeAwaitable[Option[T3]],
    mapping: Callable[[T1, T2, T3], MaybeAwaitable[U]],
) -> Option[U]:
    """Apply a ternary function when all three options are Some.

    The options are awaited in argument order before deciding.
    """
    first, second, third = await _resolve_in_order(option1, option2, option3)
    if isinstance(first, Some) and isinstance(second, Some) and isinstance(third, Some):
        return Some(await resolve(mapping(first.value, second.value, third.value)))
    return Nothing


async def of_obj[T](value: MaybeAwaitable[T | None]) -> Option[T]:
    return _of_obj(await resolve(value))


async def of_nullable[T](value: MaybeAwaitable[T | None]) -> Option[T]:
    return _of_obj(await resolve(value))


async def or_else[T](
    option: MaybeAwaitable[Option[T]],
    other: MaybeAwaitable[Option[T]],
) -> Option[T]:
    """Return the option if Some, otherwise the (possibly awaited) alternative."""
    try:
        resolved = await resolve(option)
    except BaseException:
        _discard(other)
        raise
    if isinstance(resolved, Some):
        _discard(other)
        return resolved
    return await resolve(other)


async def or_else_with[T](
    option: MaybeAwaitable[Option[T]],
    thunk: Callable[[], MaybeAwaitable[Option[T]]],
) -> Option[T]:
    """Return the option if Some, otherwise evaluate the sync or async thunk."""
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        return resolved
    return await resolve(thunk())


async def to_tuple[T](option: MaybeAwaitable[Option[T]]) -> tuple[T, ...]:
    return (await resolve(option)).to_tuple()


async def to_list[T](option: MaybeAwaitable[Option[T]]) -> list[T]:
    return (await resolve(option)).to_list()


async def to_iter[T](option: MaybeAwaitable[Option[T]]) -> AsyncIterator[T]:
    """Async iterator of zero or one element.

    The option is resolved once, when iteration starts.
    """
    resolved = await resolve(option)
    if isinstance(resolved, Some):
        yield resolved.value


async def to_nullable[T](option: MaybeAwaitable[Option[T]]) -> T | None:
    return (await resolve(option)).to_nullable()


async def to_obj[T](option: MaybeAwaitable[Option[T]]) -> T | None:
    return (await resolve(option)).to_obj()
