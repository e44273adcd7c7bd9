"""Stateful transducers: windowed, dedupe, unique, sort.

Each keeps only the state it needs. ``windowed(n)`` holds at most ``n``
elements, ``dedupe`` the last emitted element, ``unique`` every element seen
so far, and ``sort`` the whole input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.errors import ConstructionError
from hebras.transducers.base import Transducer

_NOTHING: Any = object()


@dataclass(frozen=True, slots=True, repr=False)
class Windowed(Transducer):
    """Sliding windows of ``size`` elements advancing by ``step``.

    A trailing window shorter than ``size`` is emitted once when
    ``remainder`` is set, dropped otherwise. When ``step > size`` the
    elements between windows are skipped.

    Example:
        >>> list(windowed(3)([1, 2, 3, 4]))
        [[1, 2, 3], [2, 3, 4]]
        >>> list(windowed(3, remainder=True)([1, 2, 3, 4]))
        [[1, 2, 3], [2, 3, 4], [3, 4]]

    """

    size: int
    step: int = 1
    remainder: bool = False

    tag = "windowed"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        size, step = self.size, self.step
        buffer: list[Any] = []
        skip = 0
        for item in iterable:
            if skip > 0:
                skip -= 1
                continue
            buffer.append(item)
            if len(buffer) == size:
                yield list(buffer)
                del buffer[:step]
                if step > size:
                    skip = step - size
        if self.remainder and buffer:
            yield list(buffer)


@dataclass(frozen=True, slots=True, repr=False)
class Dedupe(Transducer):
    """Drop elements equal to the one emitted just before them."""

    tag = "dedupe"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        previous = _NOTHING
        for item in iterable:
            if previous is _NOTHING or item != previous:
                yield item
                previous = item


@dataclass(frozen=True, slots=True, repr=False)
class Unique(Transducer):
    """Drop every element already seen, keeping first-occurrence order.

    Hashable elements are tracked in a set. Unhashable ones (such as the
    lists ``windowed`` emits) fall back to an equality scan.
    """

    tag = "unique"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        seen: set[Any] = set()
        seen_unhashable: list[Any] = []
        for item in iterable:
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
            yield item


@dataclass(frozen=True, slots=True, repr=False)
class Sort(Transducer):
    """Buffer the whole input and emit it sorted (stable)."""

    key: Callable[[Any], Any] | None = None
    reverse: bool = False

    tag = "sort"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        yield from sorted(iterable, key=self.key, reverse=self.reverse)


def windowed(size: int, step: int = 1, remainder: bool = False) -> Windowed:
    """Create a sliding-window transducer.

    Raises:
        ConstructionError: If ``size`` or ``step`` is less than 1
    """
    if size < 1:
        raise ConstructionError("windowed", f"size must be at least 1, got {size}")
    if step < 1:
        raise ConstructionError("windowed", f"step must be at least 1, got {step}")
    return Windowed(size, step, remainder)


def dedupe() -> Dedupe:
    return Dedupe()


def unique() -> Unique:
    return Unique()


def sort(key: Callable[[Any], Any] | None = None, reverse: bool = False) -> Sort:
    """Create a sorting transducer (``key`` and ``reverse`` as for ``sorted``)."""
    return Sort(key, reverse)


__all__ = [
    "Dedupe",
    "Sort",
    "Unique",
    "Windowed",
    "dedupe",
    "sort",
    "unique",
    "windowed",
]
