"""Free-function parity for Option combinators.

Every function takes the option as its first argument and delegates to the
variant's method, so `ops.omap(opt, f)` and `opt.map(f)` are interchangeable.
`omap`, `ofilter` and `oiter` are prefixed because map, filter and iter are
builtins.

Example:
    ```python
    from klaw_option import Some, ops

    ops.omap(Some(2), str)                       # Some(value='2')
    ops.map2(Some(2), Some(3), lambda a, b: a * b)  # Some(value=6)
    ops.default_value(ops.ofilter(Some(2), lambda x: x > 5), 0)  # 0
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeIs

from klaw_option.option import NothingType, Option, Some, of_nullable, of_obj

__all__ = [
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
    'to_iter',
    'to_list',
    'to_nullable',
    'to_obj',
    'to_tuple',
]


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option is Some.

    Args:
        option: The Option to check.

    Returns:
        bool: True if the option holds a value.
    """
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeIs[NothingType]:
    """Check if an Option is Nothing.

    Args:
        option: The Option to check.

    Returns:
        bool: True if the option is Nothing.
    """
    return isinstance(option, NothingType)


def bind[T, U](option: Option[T], binder: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation that may produce Nothing.

    Args:
        option: The Option to chain from.
        binder: Function that takes the value and returns a new Option.

    Returns:
        Option[U]: The result of the binder if Some, otherwise Nothing.
    """
    return option.bind(binder)


def contains[T](option: Option[T], value: T) -> bool:
    """Return True if the option is Some and its value equals `value`."""
    return option.contains(value)


def count[T](option: Option[T]) -> int:
    """Return 1 for Some and 0 for Nothing."""
    return option.count()


def default_value[T](option: Option[T], default: T) -> T:
    """Return the value if Some, otherwise `default`."""
    return option.default_value(default)


def default_with[T](option: Option[T], thunk: Callable[[], T]) -> T:
    """Return the value if Some, otherwise evaluate `thunk`.

    The thunk is not called when the option is Some.
    """
    return option.default_with(thunk)


def exists[T](option: Option[T], predicate: Callable[[T], bool]) -> bool:
    """Return False for Nothing, otherwise predicate(value)."""
    return option.exists(predicate)


def for_all[T](option: Option[T], predicate: Callable[[T], bool]) -> bool:
    """Return True for Nothing, otherwise predicate(value)."""
    return option.for_all(predicate)


def ofilter[T](option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep the value only if the predicate holds. Alias for filter, since filter is a builtin.

    Args:
        option: The Option to filter.
        predicate: Function that returns True to keep the value.

    Returns:
        Option[T]: The input if Some and the predicate holds, otherwise Nothing.
    """
    return option.filter(predicate)


def flatten[T](option: Option[Option[T]]) -> Option[T]:
    """Collapse Option[Option[T]] into Option[T]."""
    return option.flatten()


def fold[T, S](option: Option[T], folder: Callable[[S, T], S], state: S) -> S:
    """Return `state` for Nothing, otherwise folder(state, value)."""
    return option.fold(folder, state)


def fold_back[T, S](option: Option[T], folder: Callable[[S, T], S], state: S) -> S:
    """Same as fold."""
    return option.fold_back(folder, state)


def get[T](option: Option[T], error: Callable[[], BaseException] | None = None) -> T:
    """Return the value of a Some.

    Args:
        option: The Option to read.
        error: Optional factory for the exception raised on Nothing.

    Returns:
        T: The contained value.

    Raises:
        NothingError: If the option is Nothing and no factory is given.
    """
    return option.get(error)


def oiter[T](option: Option[T], action: Callable[[T], Any]) -> None:
    """Call `action` with the value if Some. Alias for iter, since iter is a builtin."""
    option.iter(action)


def omap[T, U](option: Option[T], mapping: Callable[[T], U]) -> Option[U]:
    """Transform the value of an Option if Some. Alias for map, since map is a builtin.

    Args:
        option: The Option to transform.
        mapping: Function to apply to the value if Some.

    Returns:
        Option[U]: Some of the mapped value, or Nothing.
    """
    return option.map(mapping)


def map2[T1, T2, U](
    option1: Option[T1],
    option2: Option[T2],
    mapping: Callable[[T1, T2], U],
) -> Option[U]:
    """Apply a binary function when both options are Some.

    Returns:
        Option[U]: Some(mapping(v1, v2)) if both are Some, otherwise Nothing.
    """
    return option1.map2(option2, mapping)


def map3[T1, T2, T3, U](
    option1: Option[T1],
    option2: Option[T2],
    option3: Option[T3],
    mapping: Callable[[T1, T2, T3], U],
) -> Option[U]:
    """Apply a ternary function when all three options are Some."""
    return option1.map3(option2, option3, mapping)


def or_else[T](option: Option[T], other: Option[T]) -> Option[T]:
    """Return `option` if Some, otherwise `other`."""
    return option.or_else(other)


def or_else_with[T](option: Option[T], thunk: Callable[[], Option[T]]) -> Option[T]:
    """Return `option` if Some, otherwise evaluate `thunk`.

    The thunk is not called when the option is Some.
    """
    return option.or_else_with(thunk)


def to_tuple[T](option: Option[T]) -> tuple[T, ...]:
    return option.to_tuple()


def to_list[T](option: Option[T]) -> list[T]:
    return option.to_list()


def to_iter[T](option: Option[T]) -> Iterator[T]:
    return option.to_iter()


def to_nullable[T](option: Option[T]) -> T | None:
    """Return the value if Some, otherwise None."""
    return option.to_nullable()


def to_obj[T](option: Option[T]) -> T | None:
    """Return the value if Some, otherwise None."""
    return option.to_obj()
