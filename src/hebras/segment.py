"""Immutable head/tail segments over ordered data.

A Segment is a restartable cursor: iterating from the same node always
reproduces the same elements, and taking ``tail`` never copies.

Segment (base)
├── EmptySegment   (the canonical ``empty``)
├── ASegment       (cons cell: head + tail)
└── ArraySegment   (index into a shared sequence or string)

Thread Safety:
All segments are immutable and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from hebras.errors import SegmentEmptyError
from hebras.utils.describe import describe

_MISSING: Any = object()


class Segment:
    """Base class for head/tail segments.

    Subclasses provide ``head``, ``tail`` and ``is_empty``.

    """

    __slots__ = ()
    __self_describing__ = True

    def is_empty(self) -> bool:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        node = self
        while not node.is_empty():
            yield node.head  # type: ignore[attr-defined]
            node = node.tail  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        sentinel = _MISSING
        left, right = iter(self), iter(other)
        while True:
            a, b = next(left, sentinel), next(right, sentinel)
            if a is sentinel or b is sentinel:
                return a is b
            if a != b:
                return False

    __hash__ = None  # type: ignore[assignment]

    def to_array(self) -> Sequence[Any]:
        """Materialize the remaining elements."""
        return list(self)

    def __str__(self) -> str:
        items = [describe(item) for item in self]
        text = "segment()"
        if items:
            text = f"segment({items[-1]})"
            for item in reversed(items[:-1]):
                text = f"segment({item}, {text})"
        return text

    __repr__ = __str__


class EmptySegment(Segment):
    """A segment with no elements. Use the module-level ``empty``."""

    __slots__ = ()

    def is_empty(self) -> bool:
        return True

    @property
    def head(self) -> Any:
        raise SegmentEmptyError()

    @property
    def tail(self) -> Segment:
        return self

    def __len__(self) -> int:
        return 0

    def to_array(self) -> Sequence[Any]:
        return []


empty: EmptySegment = EmptySegment()


class ASegment(Segment):
    """A non-empty cons cell."""

    __slots__ = ("_head", "_tail")

    def __init__(self, head: Any, tail: Segment = empty) -> None:
        object.__setattr__(self, "_head", head)
        object.__setattr__(self, "_tail", tail)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> Any:
        return self._head

    @property
    def tail(self) -> Segment:
        return self._tail


class ArraySegment(Segment):
    """A segment backed by an indexable sequence, addressed by index.

    ``tail`` advances the index; the backing sequence is shared, never copied.

    """

    __slots__ = ("_array", "_index")

    def __init__(self, array: Sequence[Any], index: int = 0) -> None:
        object.__setattr__(self, "_array", array)
        object.__setattr__(self, "_index", index)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def array(self) -> Sequence[Any]:
        return self._array

    @property
    def index(self) -> int:
        return self._index

    def is_empty(self) -> bool:
        return self._index >= len(self._array)

    @property
    def head(self) -> Any:
        if self.is_empty():
            raise SegmentEmptyError()
        return self._array[self._index]

    @property
    def tail(self) -> Segment:
        if self._index + 1 < len(self._array):
            return ArraySegment(self._array, self._index + 1)
        return empty

    def __iter__(self) -> Iterator[Any]:
        array = self._array
        for i in range(self._index, len(array)):
            yield array[i]

    def __len__(self) -> int:
        return max(len(self._array) - self._index, 0)

    def to_array(self) -> Sequence[Any]:
        """Return the backing sequence when spanning it exactly, else a slice."""
        if self._index == 0:
            return self._array
        return self._array[self._index :]


def segment(head: Any = _MISSING, tail: Segment | None = None) -> Segment:
    """Build a segment from an optional head and tail.

    Example:
        >>> str(segment(1, segment(2)))
        'segment(1, segment(2))'
        >>> segment() is empty
        True

    """
    if head is _MISSING:
        return empty if tail is None else tail
    return ASegment(head, empty if tail is None else tail)


def from_array(array: Sequence[Any]) -> Segment:
    """Create a Segment over an indexable sequence without copying it."""
    return ArraySegment(array)


def from_string(value: str) -> Segment:
    """Create a Segment over the characters of a string without copying it.

    Example:
        >>> list(from_string("HEY"))
        ['H', 'E', 'Y']

    """
    return ArraySegment(value)


__all__ = [
    "ASegment",
    "ArraySegment",
    "EmptySegment",
    "Segment",
    "empty",
    "from_array",
    "from_string",
    "segment",
]
