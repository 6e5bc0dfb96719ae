"""Iteration helpers that produce or consume Options."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from klaw_option.option import Nothing, Option, Some

__all__ = ['choose', 'first_or_nothing', 'sequence']


def first_or_nothing[T](items: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Return the first item matching the predicate, or Nothing.

    Iteration stops at the first match.

    Example:
        ```python
        first_or_nothing([1, 4, 9], lambda x: x > 3)   # Some(value=4)
        first_or_nothing([1, 2], lambda x: x > 3)      # NothingType()
        ```
    """
    for item in items:
        if predicate(item):
            return Some(item)
    return Nothing


def choose[T, U](items: Iterable[T], chooser: Callable[[T], Option[U]]) -> Iterator[U]:
    """Map each item to an Option and yield the Some values, dropping Nothing.

    Lazy: items are consumed as the result is iterated.

    Example:
        ```python
        def parse(s: str) -> Option[int]:
            return Some(int(s)) if s.isdigit() else Nothing

        list(choose(['1', 'x', '3'], parse))  # [1, 3]
        ```
    """
    for item in items:
        chosen = chooser(item)
        if isinstance(chosen, Some):
            yield chosen.value


def sequence[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect values from an iterable of Options, short-circuiting on Nothing.

    Args:
        options: An iterable of Option instances.

    Returns:
        Option[list[T]]: Some with the list of values if all are Some,
        otherwise Nothing.
    """
    out: list[T] = []
    for option in options:
        if isinstance(option, Some):
            out.append(option.value)
        else:
            return Nothing
    return Some(out)
