"""Lazy sequences: an iterable plus a fused transducer pipeline.

A Sequence does no work until iterated, and every iteration restarts the
pipeline from the source (provided the source itself can be iterated again).

Example:
    >>> from hebras.transducers import filter, map
    >>> evens = sequence(range(10), filter(lambda n: n % 2 == 0), map(str))
    >>> list(evens)
    ['0', '2', '4', '6', '8']
    >>> single(evens)
    '0'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.errors import NoSuchElementError
from hebras.transducers.base import Transducer, flatten
from hebras.utils.describe import describe_call


@dataclass(frozen=True, slots=True, repr=False)
class Sequence:
    """Source iterable and the flat tuple of stages applied to it."""

    source: Iterable[Any]
    transducers: tuple[Transducer, ...] = ()

    __self_describing__ = True

    def __iter__(self) -> Iterator[Any]:
        iterable: Iterator[Any] = iter(self.source)
        for stage in self.transducers:
            iterable = stage.apply(iterable)
        return iterable

    def __str__(self) -> str:
        return describe_call("sequence", (self.source, *self.transducers))

    __repr__ = __str__


def sequence(iterable: Iterable[Any], *transducers: Transducer) -> Sequence:
    """Wrap ``iterable`` with a lazy pipeline.

    Wrapping a Sequence extends its pipeline instead of nesting it.
    """
    if isinstance(iterable, Sequence):
        return Sequence(iterable.source, flatten((*iterable.transducers, *transducers)))
    return Sequence(iterable, flatten(transducers))


def single(iterable: Iterable[Any], *transducers: Transducer) -> Any:
    """First value of ``iterable`` after applying ``transducers``.

    Raises:
        NoSuchElementError: If the pipeline produces nothing
    """
    for item in sequence(iterable, *transducers):
        return item
    raise NoSuchElementError("Expected a single value")


__all__ = ["Sequence", "sequence", "single"]
