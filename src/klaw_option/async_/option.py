"""AsyncOption type for async-aware Option operations.

AsyncOption wraps an Awaitable[Option[T]] and provides chainable,
async-aware transformation methods. Callbacks may be plain functions or
coroutine functions.

Example:
    ```python
    async def find_user(id: int) -> Option[User]:
        ...

    email = await (
        AsyncOption(find_user(1))
        .abind(load_primary_email)
        .amap(str.lower)
        .adefault_value('unknown')
    )
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Coroutine, Generator
from typing import Any

import anyio

from klaw_option.async_ import ops as aops
from klaw_option.async_.ops import MaybeAwaitable
from klaw_option.option import Nothing, Option, Some

__all__ = ['AsyncOption']


class AsyncOption[T]:
    """Async-aware Option wrapper for composing async Option operations.

    Chaining methods (amap, abind, afilter, ...) return new AsyncOption
    instances and only run when the result is awaited. Terminal methods
    (acount, aget, adefault_value, ...) return coroutines.

    Note:
        AsyncOption is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncOption
        twice raises RuntimeError. Use from_some/from_nothing/from_option
        for fresh values, or wrap a Task/Future for multi-await scenarios.

    Note:
        azip() runs both sides concurrently in an anyio task group. Every
        other method awaits its inputs one after another, in argument order.

    Attributes:
        _awaitable: The underlying awaitable that produces an Option.

    Example:
        ```python
        async def get_data() -> Option[int]:
            return Some(42)

        async def main():
            result = await AsyncOption(get_data()).amap(lambda x: x * 2)
            assert result == Some(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        """Create an AsyncOption from an awaitable.

        Args:
            awaitable: An awaitable that produces an Option[T].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        """Support await syntax to get the underlying Option."""
        return self._awaitable.__await__()

    @classmethod
    def from_some(cls, value: T) -> AsyncOption[T]:
        """Create an AsyncOption containing Some(value)."""

        async def _some() -> Option[T]:
            return Some(value)

        return cls(_some())

    @classmethod
    def from_nothing(cls) -> AsyncOption[T]:
        """Create an AsyncOption containing Nothing."""

        async def _nothing() -> Option[T]:
            return Nothing

        return cls(_nothing())

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        """Create an AsyncOption from a synchronous Option."""

        async def _option() -> Option[T]:
            return option

        return cls(_option())

    @classmethod
    def from_obj(cls, value: MaybeAwaitable[T | None]) -> AsyncOption[T]:
        """Create an AsyncOption from a possibly-None value or an awaitable of one.

        Example:
            ```python
            async def lookup(key: str) -> str | None:
                return cache.get(key)

            option = await AsyncOption.from_obj(lookup('a'))
            ```
        """
        return cls(aops.of_obj(value))

    # --- chaining ---

    def abind[U](self, f: Callable[[T], MaybeAwaitable[Option[U]]]) -> AsyncOption[U]:
        """Chain with a function returning an Option (or an awaitable of one).

        If Some, calls f(value) and resolves its result.
        If Nothing, f is not called.

        Example:
            ```python
            async def parse(text: str) -> Option[int]:
                return Some(int(text)) if text.isdigit() else Nothing

            async def example():
                result = await AsyncOption.from_some('42').abind(parse)
                assert result == Some(42)
            ```
        """
        return AsyncOption(aops.bind(self._awaitable, f))

    def amap[U](self, f: Callable[[T], MaybeAwaitable[U]]) -> AsyncOption[U]:
        """Apply a sync or async function to the Some value.

        Example:
            ```python
            async def example():
                result = await AsyncOption.from_some(5).amap(lambda x: x * 2)
                assert result == Some(10)
            ```
        """
        return AsyncOption(aops.omap(self._awaitable, f))

    def afilter(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> AsyncOption[T]:
        """Keep the value only if the sync or async predicate holds."""
        return AsyncOption(aops.ofilter(self._awaitable, predicate))

    def aflatten[U](self: AsyncOption[Option[U]]) -> AsyncOption[U]:
        """Flatten AsyncOption[Option[U]] into AsyncOption[U]."""
        return AsyncOption(aops.flatten(self._awaitable))

    def aor_else(self, other: MaybeAwaitable[Option[T]]) -> AsyncOption[T]:
        """Fall back to another option (or awaitable of one) if Nothing.

        A bare coroutine passed as `other` is closed unstarted when the
        source turns out to be Some.
        """
        return AsyncOption(aops.or_else(self._awaitable, other))

    def aor_else_with(self, f: Callable[[], MaybeAwaitable[Option[T]]]) -> AsyncOption[T]:
        """Fall back to a sync or async thunk if Nothing."""
        return AsyncOption(aops.or_else_with(self._awaitable, f))

    def amap2[U, V](
        self,
        other: MaybeAwaitable[Option[U]],
        f: Callable[[T, U], MaybeAwaitable[V]],
    ) -> AsyncOption[V]:
        """Combine with another option; self is awaited first, then other."""
        return AsyncOption(aops.map2(self._awaitable, other, f))

    def amap3[U, V, W](
        self,
        other: MaybeAwaitable[Option[U]],
        third: MaybeAwaitable[Option[V]],
        f: Callable[[T, U, V], MaybeAwaitable[W]],
    ) -> AsyncOption[W]:
        """Combine with two other options, awaited in argument order."""
        return AsyncOption(aops.map3(self._awaitable, other, third, f))

    def azip[U](self, other: MaybeAwaitable[Option[U]]) -> AsyncOption[tuple[T, U]]:
        """Combine two pending options into a tuple.

        Runs both awaitables concurrently. If both are Some, returns
        Some((self.value, other.value)); otherwise Nothing. If one side
        raises, the other is cancelled and the exception propagates.

        Args:
            other: An Option, another AsyncOption, or an awaitable of an Option.

        Returns:
            AsyncOption containing the tuple or Nothing.
        """

        async def _zipped() -> Option[tuple[T, U]]:
            first: Option[T] = Nothing
            second: Option[U] = Nothing

            try:
                async with anyio.create_task_group() as tg:

                    async def run_self() -> None:
                        nonlocal first
                        first = await self._awaitable

                    async def run_other() -> None:
                        nonlocal second
                        second = await aops.resolve(other)

                    tg.start_soon(run_self)
                    tg.start_soon(run_other)
            except BaseExceptionGroup as group:
                if len(group.exceptions) == 1:
                    raise group.exceptions[0] from None
                raise

            return first.map2(second, lambda a, b: (a, b))

        return AsyncOption(_zipped())

    # --- terminal ---

    def ais_some(self) -> Coroutine[Any, Any, bool]:
        return aops.is_some(self._awaitable)

    def ais_none(self) -> Coroutine[Any, Any, bool]:
        return aops.is_none(self._awaitable)

    def acontains(self, value: T) -> Coroutine[Any, Any, bool]:
        return aops.contains(self._awaitable, value)

    def acount(self) -> Coroutine[Any, Any, int]:
        return aops.count(self._awaitable)

    def adefault_value(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Some value or the default.
        """
        return aops.default_value(self._awaitable, default)

    def adefault_with(self, f: Callable[[], MaybeAwaitable[T]]) -> Coroutine[Any, Any, T]:
        """Unwrap with a sync or async fallback, called only on Nothing."""
        return aops.default_with(self._awaitable, f)

    def aexists(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> Coroutine[Any, Any, bool]:
        return aops.exists(self._awaitable, predicate)

    def afor_all(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> Coroutine[Any, Any, bool]:
        return aops.for_all(self._awaitable, predicate)

    def afold[S](self, folder: Callable[[S, T], MaybeAwaitable[S]], state: S) -> Coroutine[Any, Any, S]:
        return aops.fold(self._awaitable, folder, state)

    def afold_back[S](self, folder: Callable[[S, T], MaybeAwaitable[S]], state: S) -> Coroutine[Any, Any, S]:
        return aops.fold_back(self._awaitable, folder, state)

    def aget(self, error: Callable[[], BaseException] | None = None) -> Coroutine[Any, Any, T]:
        """Unwrap the Some value.

        Returns:
            Coroutine that produces the value, or raises NothingError (or
            the factory's exception) for Nothing.
        """
        return aops.get(self._awaitable, error)

    def aiter(self, action: Callable[[T], MaybeAwaitable[Any]]) -> Coroutine[Any, Any, None]:
        return aops.oiter(self._awaitable, action)

    def ato_tuple(self) -> Coroutine[Any, Any, tuple[T, ...]]:
        return aops.to_tuple(self._awaitable)

    def ato_list(self) -> Coroutine[Any, Any, list[T]]:
        return aops.to_list(self._awaitable)

    def ato_iter(self) -> AsyncIterator[T]:
        """Async iterator over zero or one element, resolved once on first use."""
        return aops.to_iter(self._awaitable)

    def ato_nullable(self) -> Coroutine[Any, Any, T | None]:
        return aops.to_nullable(self._awaitable)

    def ato_obj(self) -> Coroutine[Any, Any, T | None]:
        return aops.to_obj(self._awaitable)

    def __repr__(self) -> str:
        return f'AsyncOption({self._awaitable!r})'
