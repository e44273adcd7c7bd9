"""Accumulating transducers: scan and reduce.

Both take a ``reducer(accumulator, element)`` and a ``seed``. ``scan``
emits the seed followed by every running value (input length + 1 outputs);
``reduce`` emits only the final value, which is the seed for empty input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.transducers.base import Transducer


@dataclass(frozen=True, slots=True, repr=False)
class Scan(Transducer):
    reducer: Callable[[Any, Any], Any]
    seed: Any

    tag = "scan"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        accumulator = self.seed
        yield accumulator
        for item in iterable:
            accumulator = self.reducer(accumulator, item)
            yield accumulator


@dataclass(frozen=True, slots=True, repr=False)
class Reduce(Transducer):
    reducer: Callable[[Any, Any], Any]
    seed: Any

    tag = "reduce"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        accumulator = self.seed
        for item in iterable:
            accumulator = self.reducer(accumulator, item)
        yield accumulator


def scan(reducer: Callable[[Any, Any], Any], seed: Any) -> Scan:
    """Create a running-accumulation transducer.

    Example:
        >>> import operator
        >>> list(scan(operator.add, 0)([1, 2, 3]))
        [0, 1, 3, 6]

    """
    return Scan(reducer, seed)


def reduce(reducer: Callable[[Any, Any], Any], seed: Any) -> Reduce:
    """Create a transducer emitting only the final accumulation.

    Example:
        >>> import operator
        >>> list(reduce(operator.add, 0)([]))
        [0]

    """
    return Reduce(reducer, seed)


__all__ = ["Reduce", "Scan", "reduce", "scan"]
