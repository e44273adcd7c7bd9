"""Transducer base class and composition.

A Transducer is a frozen dataclass that carries the parameters it was built
with. Its tag and parameters give both equality and the string form
``tag(args)``; the same parameters drive :meth:`Transducer.apply`.

Composition is always flat: composing a composite splices its stages in
place, so a pipeline is one ordered tuple no matter how it was assembled.

Thread Safety:
Transducers hold no mutable state. Each call to a transducer starts a fresh
generator, so one pipeline can be applied to many sequences concurrently.
A single running iteration must not be driven from two threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, fields
from typing import Any

from hebras.errors import ConstructionError
from hebras.utils.describe import describe_call


@dataclass(frozen=True, slots=True, repr=False)
class Transducer:
    """Base class for all transducers.

    Subclasses set ``tag`` and implement ``apply`` as a generator so that
    nothing is pulled from the source until the output is iterated.

    """

    tag = "transducer"
    __self_describing__ = True

    def __call__(self, iterable: Iterable[Any]) -> Iterator[Any]:
        return self.apply(iter(iterable))

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        raise NotImplementedError

    def arguments(self) -> tuple[Any, ...]:
        """Construction parameters in declaration order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def __str__(self) -> str:
        return describe_call(self.tag, self.arguments())

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class Composite(Transducer):
    """Stages applied left to right. Never contains another Composite."""

    transducers: tuple[Transducer, ...] = ()

    tag = "compose"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        for stage in self.transducers:
            iterable = stage.apply(iterable)
        return iterable

    def __str__(self) -> str:
        return describe_call(self.tag, self.transducers)

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class Identity(Transducer):
    """Pass every element through unchanged."""

    tag = "identity"

    def apply(self, iterable: Iterator[Any]) -> Iterator[Any]:
        yield from iterable


def decompose(transducer: Transducer) -> Iterator[Transducer]:
    """Yield the primitive stages of a transducer, recursing into composites."""
    if isinstance(transducer, Composite):
        for stage in transducer.transducers:
            yield from decompose(stage)
    else:
        yield transducer


def flatten(transducers: Iterable[Transducer]) -> tuple[Transducer, ...]:
    """Splice composites into one flat tuple of primitive stages.

    Raises:
        ConstructionError: If any item is not a Transducer
    """
    flat: list[Transducer] = []
    for transducer in transducers:
        if not isinstance(transducer, Transducer):
            raise ConstructionError("compose", f"expected a Transducer, got {transducer!r}")
        flat.extend(decompose(transducer))
    return tuple(flat)


def compose(*transducers: Transducer) -> Composite:
    """Fuse transducers into a single flat pipeline.

    ``compose()`` is the identity pipeline, and
    ``compose(compose(a, b), c) == compose(a, b, c)``.

    Example:
        >>> from hebras.transducers import filter, map
        >>> pipeline = compose(filter(lambda x: x % 2 == 0), map(str))
        >>> list(pipeline([1, 2, 3, 4]))
        ['2', '4']

    """
    return Composite(flatten(transducers))


def identity() -> Identity:
    """Create a pass-through transducer."""
    return Identity()


__all__ = [
    "Composite",
    "Identity",
    "Transducer",
    "compose",
    "decompose",
    "flatten",
    "identity",
]
