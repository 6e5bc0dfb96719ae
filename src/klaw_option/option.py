"""Option type: Some[T] | Nothing for optional values.

Each variant implements every combinator itself, so branching on the two
cases happens through method dispatch rather than presence checks.

Example:
    ```python
    from klaw_option import Nothing, Some, of_obj

    Some(21).map(lambda x: x * 2)        # Some(value=42)
    of_obj(None).default_value(0)        # 0
    Some(3).filter(lambda x: x > 5)      # NothingType()
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_option.errors import NothingError

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'nothing',
    'of_nullable',
    'of_obj',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. `Some(None)` is a present
    value and is never equal to Nothing.

    Examples:
        >>> Some(42).get()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42) == Some(42)
        True
    """

    value: T

    def __bool__(self) -> NoReturn:
        raise TypeError('Option has no truth value; use is_some() or is_none()')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get(self, error: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error factory."""
        return self.value

    def default_value(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def default_with(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def contains(self, value: object) -> bool:
        """Return True if the contained value equals `value`."""
        return self.value == value

    def count(self) -> int:
        """Return 1, the number of values held by Some."""
        return 1

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of applying the predicate to the value."""
        return predicate(self.value)

    def for_all(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of applying the predicate to the value."""
        return predicate(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map2[T2, U](self, other: Option[T2], f: Callable[[T, T2], U]) -> Option[U]:
        """Combine with another option if it is also Some.

        Args:
            other: The second option.
            f: Function of both values.

        Returns:
            Some(f(self.value, other.value)) if other is Some, else Nothing.
        """
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return Nothing

    def map3[T2, T3, U](
        self,
        other: Option[T2],
        third: Option[T3],
        f: Callable[[T, T2, T3], U],
    ) -> Option[U]:
        """Combine with two other options if both are Some.

        Returns:
            Some(f(...)) if every option is Some, else Nothing.
        """
        if isinstance(other, Some) and isinstance(third, Some):
            return Some(f(self.value, other.value, third.value))
        return Nothing

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate holds for the value, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return self
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        inner = self.value
        if isinstance(inner, Some):
            return inner
        return Nothing

    def fold[S](self, folder: Callable[[S, T], S], state: S) -> S:
        """Return folder(state, value)."""
        return folder(state, self.value)

    def fold_back[S](self, folder: Callable[[S, T], S], state: S) -> S:
        """Same as fold; a single element has no order to reverse."""
        return self.fold(folder, state)

    def iter(self, action: Callable[[T], Any]) -> None:
        """Call action with the contained value."""
        action(self.value)

    def or_else(self, _other: Option[T]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def or_else_with(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged, never calling the fallback."""
        return self

    def to_tuple(self) -> tuple[T]:
        """Return a one-element tuple holding the value."""
        return (self.value,)

    def to_list(self) -> list[T]:
        """Return a one-element list holding the value."""
        return [self.value]

    def to_iter(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value

    def to_nullable(self) -> T:
        """Return the contained value."""
        return self.value

    def to_obj(self) -> T:
        """Return the contained value."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or a default value, and never call
    the function they are given (except the fallbacks of default_with and
    or_else_with).

    Use the `Nothing` constant rather than instantiating directly; all
    instances compare equal regardless.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.default_value(0)
        0
    """

    def __bool__(self) -> NoReturn:
        raise TypeError('Option has no truth value; use is_some() or is_none()')

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def get(self, error: Callable[[], BaseException] | None = None) -> NoReturn:
        """Raise since Nothing has no value.

        Args:
            error: Optional factory for the exception to raise. It is only
                called here, on the Nothing path.

        Raises:
            NothingError: If no factory is given.
            BaseException: Whatever the factory produces.
        """
        if error is None:
            raise NothingError
        raise error()

    def default_value[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def default_with[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def contains(self, _value: object) -> bool:
        """Return False since Nothing contains no value."""
        return False

    def count(self) -> int:
        """Return 0."""
        return 0

    def exists[T](self, _predicate: Callable[[T], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def for_all[T](self, _predicate: Callable[[T], bool]) -> bool:
        """Return True (vacuous truth) without calling the predicate."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map2[T, T2, U](self, _other: Option[T2], _f: Callable[[T, T2], U]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def map3[T, T2, T3, U](
        self,
        _other: Option[T2],
        _third: Option[T3],
        _f: Callable[[T, T2, T3], U],
    ) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def bind[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def fold[T, S](self, _folder: Callable[[S, T], S], state: S) -> S:
        """Return the initial state unchanged."""
        return state

    def fold_back[T, S](self, folder: Callable[[S, T], S], state: S) -> S:
        """Same as fold."""
        return self.fold(folder, state)

    def iter[T](self, _action: Callable[[T], Any]) -> None:
        """Do nothing."""

    def or_else[T](self, other: Option[T]) -> Option[T]:
        """Return other since self is Nothing."""
        return other

    def or_else_with[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def to_tuple(self) -> tuple[()]:
        """Return an empty tuple."""
        return ()

    def to_list(self) -> list[Any]:
        """Return an empty list."""
        return []

    def to_iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        yield from ()

    def to_nullable(self) -> None:
        """Return None."""
        return None

    def to_obj(self) -> None:
        """Return None."""
        return None


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Construct a Some holding `value`."""
    return Some(value)


def nothing() -> NothingType:
    """Return the Nothing option."""
    return Nothing


def of_obj[T](value: T | None) -> Option[T]:
    """Convert a possibly-None reference to an Option.

    Args:
        value: The value to wrap.

    Returns:
        Nothing if value is None, otherwise Some(value).
    """
    if value is None:
        return Nothing
    return Some(value)


def of_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable scalar to an Option.

    Python has a single absent sentinel, so this behaves like of_obj;
    `of_nullable(x).to_nullable()` reproduces `x` for every x.
    """
    return of_obj(value)
