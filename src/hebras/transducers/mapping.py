"""Element-wise transducers: map, flat_map, filter, zip, zip_with_index.

These never buffer: each input element is fully handled before the next one
is pulled.

Note:
    ``map``, ``filter`` and ``zip`` shadow the builtins inside this module on
    purpose; the implementations below do not use the builtins.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.predicates import is_not
from hebras.transducers.base import Transducer

_DONE: Any = object()


@dataclass(frozen=True, slots=True, repr=False)
class Map(Transducer):
    """Apply ``mapper`` to every element.

    Inside a parser pipeline this is interpreted as ``Result.map``.
    """

    mapper: Callable[[Any], Any]

    tag = "map"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        mapper = self.mapper
        for item in iterable:
            yield mapper(item)


@dataclass(frozen=True, slots=True, repr=False)
class FlatMap(Transducer):
    """Apply ``mapper`` to every element and splice the iterables it returns.

    Inside a parser pipeline this is interpreted as ``Result.flat_map``; the
    mapper then returns a Result or a Parser instead of an iterable.
    """

    mapper: Callable[[Any], Any]

    tag = "flat_map"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        mapper = self.mapper
        for item in iterable:
            yield from mapper(item)


@dataclass(frozen=True, slots=True, repr=False)
class Filter(Transducer):
    """Keep elements for which ``predicate`` holds."""

    predicate: Callable[[Any], bool]

    tag = "filter"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        predicate = self.predicate
        for item in iterable:
            if predicate(item):
                yield item


@dataclass(frozen=True, slots=True, repr=False)
class Zip(Transducer):
    """Pair each element with the next element of ``other``.

    Stops as soon as either side runs out. Each application calls
    ``iter(other)`` afresh, so a re-iterable ``other`` (list, tuple, range)
    pairs from its start on every run. A one-shot iterator is shared by
    every run and is used up by the first. Unbounded iterators such as
    ``itertools.count()`` are accepted.
    """

    other: Iterable[Any]

    tag = "zip"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        other = iter(self.other)
        for item in iterable:
            paired = next(other, _DONE)
            if paired is _DONE:
                return
            yield item, paired


@dataclass(frozen=True, slots=True, repr=False)
class ZipWithIndex(Transducer):
    """Pair each element with its position, starting at 0."""

    tag = "zip_with_index"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        for index, item in enumerate(iterable):
            yield item, index


def map(mapper: Callable[[Any], Any]) -> Map:  # noqa: A001
    """Create a transducer applying ``mapper`` to each element.

    Example:
        >>> list(map(str)([1, 2]))
        ['1', '2']
        >>> str(map(str))
        'map(str)'

    """
    return Map(mapper)


def flat_map(mapper: Callable[[Any], Any]) -> FlatMap:
    """Create a transducer that maps then flattens one level."""
    return FlatMap(mapper)


def filter(predicate: Callable[[Any], bool]) -> Filter:  # noqa: A001
    """Create a transducer keeping elements that satisfy ``predicate``."""
    return Filter(predicate)


def reject(predicate: Callable[[Any], bool]) -> Filter:
    """Create a transducer dropping elements that satisfy ``predicate``."""
    return Filter(is_not(predicate))


def zip(other: Iterable[Any]) -> Zip:  # noqa: A001
    """Create a transducer pairing elements with those of ``other``.

    Pass a re-iterable ``other`` when the transducer is applied more than once.

    Example:
        >>> pairs = zip("xy")
        >>> list(pairs([1, 2])), list(pairs([3, 4]))
        ([(1, 'x'), (2, 'y')], [(3, 'x'), (4, 'y')])

    """
    return Zip(other)


def zip_with_index() -> ZipWithIndex:
    return ZipWithIndex()


__all__ = [
    "FlatMap",
    "Filter",
    "Map",
    "Zip",
    "ZipWithIndex",
    "filter",
    "flat_map",
    "map",
    "reject",
    "zip",
    "zip_with_index",
]
