"""Positional transducers: take, drop, take_while, drop_while, first, last, find.

``take``, ``first`` and ``find`` stop pulling from their source as soon as
they are done, so they are safe on unbounded iterators.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.transducers.base import Transducer

_NOTHING: Any = object()


@dataclass(frozen=True, slots=True, repr=False)
class Take(Transducer):
    """First ``count`` elements; nothing when ``count <= 0``."""

    count: int

    tag = "take"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        if self.count < 1:
            return
        taken = 0
        for item in iterable:
            yield item
            taken += 1
            if taken >= self.count:
                return


@dataclass(frozen=True, slots=True, repr=False)
class Drop(Transducer):
    """Skip the first ``count`` elements; passthrough when ``count <= 0``."""

    count: int

    tag = "drop"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        remaining = self.count
        for item in iterable:
            if remaining > 0:
                remaining -= 1
                continue
            yield item


@dataclass(frozen=True, slots=True, repr=False)
class TakeWhile(Transducer):
    """Elements up to, not including, the first that fails ``predicate``."""

    predicate: Callable[[Any], bool]

    tag = "take_while"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        for item in iterable:
            if not self.predicate(item):
                return
            yield item


@dataclass(frozen=True, slots=True, repr=False)
class DropWhile(Transducer):
    """Skip elements while ``predicate`` holds, then pass the rest."""

    predicate: Callable[[Any], bool]

    tag = "drop_while"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        dropping = True
        for item in iterable:
            if dropping and self.predicate(item):
                continue
            dropping = False
            yield item


@dataclass(frozen=True, slots=True, repr=False)
class First(Transducer):
    tag = "first"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        for item in iterable:
            yield item
            return


@dataclass(frozen=True, slots=True, repr=False)
class Last(Transducer):
    tag = "last"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        last = _NOTHING
        for item in iterable:
            last = item
        if last is not _NOTHING:
            yield last


@dataclass(frozen=True, slots=True, repr=False)
class Find(Transducer):
    """First element satisfying ``predicate``, if any."""

    predicate: Callable[[Any], bool]

    tag = "find"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        for item in iterable:
            if self.predicate(item):
                yield item
                return


def take(count: int) -> Take:
    """Create a transducer yielding at most ``count`` elements.

    Example:
        >>> list(take(2)([1, 2, 3]))
        [1, 2]

    """
    return Take(count)


def drop(count: int) -> Drop:
    """Create a transducer skipping the first ``count`` elements."""
    return Drop(count)


def take_while(predicate: Callable[[Any], bool]) -> TakeWhile:
    return TakeWhile(predicate)


def drop_while(predicate: Callable[[Any], bool]) -> DropWhile:
    return DropWhile(predicate)


def first() -> First:
    return First()


def last() -> Last:
    return Last()


def find(predicate: Callable[[Any], bool]) -> Find:
    return Find(predicate)


__all__ = [
    "Drop",
    "DropWhile",
    "Find",
    "First",
    "Last",
    "Take",
    "TakeWhile",
    "drop",
    "drop_while",
    "find",
    "first",
    "last",
    "take",
    "take_while",
]
