"""Zero-copy windows over ordered input.

A View is the triple (source, offset, length). Slicing a View produces a new
triple over the same source object; the backing data is never copied or
mutated. Parsers consume Views and hand back the unconsumed remainder as
another View over the same source.

Thread Safety:
View is frozen (immutable) and safe to share across threads. The source is
treated as read-only.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from hebras.errors import ConstructionError
from hebras.utils.describe import describe


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class View:
    """Immutable window ``source[offset : offset + length]``.

    Build with :func:`view`. Equality compares the logical elements inside
    the window, not the source object or the offset.

    Attributes:
        source: Backing string or indexable sequence (shared, read-only)
        offset: Index of the first visible element in ``source``
        length: Number of visible elements

    Examples:
        >>> v = view("hello world")
        >>> v.slice(6).to_source()
        'world'
        >>> v.slice(6).offset
        6

    """

    source: Sequence[Any]
    offset: int
    length: int

    __self_describing__ = True

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0 or self.offset + self.length > len(self.source):
            raise ConstructionError(
                "view",
                f"window offset={self.offset} length={self.length} "
                f"exceeds source of length {len(self.source)}",
            )

    @property
    def end(self) -> int:
        """Index in ``source`` one past the last visible element."""
        return self.offset + self.length

    def is_empty(self) -> bool:
        return self.length == 0

    def __len__(self) -> int:
        return self.length

    def at(self, index: int) -> Any | None:
        """Element at ``index`` within the window, or None outside it.

        The bound is the logical window, even when the source holds more data.
        """
        if index < 0 or index >= self.length:
            return None
        return self.source[self.offset + index]

    def slice(self, start: int = 0, end: int | None = None) -> View:
        """Narrow the window without copying.

        Both bounds are clamped to ``[0, length]``; ``end`` defaults to the
        current length and an ``end`` before ``start`` gives an empty view.
        """
        start = min(max(start, 0), self.length)
        stop = self.length if end is None else min(max(end, 0), self.length)
        return View(self.source, self.offset + start, max(stop - start, 0))

    def to_source(self) -> Sequence[Any]:
        """Copy of the visible elements, of the same type as the source."""
        if self.offset == 0 and self.length == len(self.source):
            return self.source
        return self.source[self.offset : self.end]

    def starts_with(self, prefix: Sequence[Any]) -> bool:
        """True when the window begins with ``prefix``.

        String sources are compared in place via ``str.startswith``.
        """
        if len(prefix) > self.length:
            return False
        if isinstance(self.source, str) and isinstance(prefix, str):
            return self.source.startswith(prefix, self.offset, self.end)
        return all(self.source[self.offset + i] == item for i, item in enumerate(prefix))

    def __iter__(self) -> Iterator[Any]:
        source = self.source
        return (source[i] for i in range(self.offset, self.end))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, View):
            return NotImplemented
        if self.length != other.length:
            return False
        if isinstance(self.source, str) and isinstance(other.source, str):
            return self.to_source() == other.to_source()
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return f"view({describe(self.to_source())})"

    __repr__ = __str__


def view(source: Sequence[Any]) -> View:
    """Create a View over the whole of ``source``.

    This is the entry point from raw input into the parsing core.

    Example:
        >>> v = view([1, 2, 3, 4, 5])
        >>> list(v.slice(1, 3))
        [2, 3]

    """
    if isinstance(source, View):
        return source
    return View(source, 0, len(source))


__all__ = ["View", "view"]
