"""Exception classes for Hebras.

Ordinary parse failure is never raised: it travels as a Failure result.
The exceptions here cover programmer errors (misconfigured combinators,
reading past the end of a Segment) and explicit unwrapping of a Failure.
"""

from __future__ import annotations


class HebrasError(Exception):
    """Base exception for all Hebras errors.

    Subclass this for specific error categories.
    """

    pass


class ConstructionError(HebrasError):
    """A parser or transducer was built with invalid parameters.

    Raised synchronously by the factory function (e.g. ``repeat`` with
    ``max_count < min_count``), never at parse time.
    """

    def __init__(self, combinator: str, message: str) -> None:
        """Initialize construction error.

        Args:
            combinator: Name of the factory that rejected its arguments
            message: Description of the misconfiguration
        """
        self.combinator = combinator
        super().__init__(f"{combinator}: {message}")


class NoSuchElementError(HebrasError):
    """An element was requested from an empty collection."""

    def __init__(self, message: str = "No such element") -> None:
        super().__init__(message)


class SegmentEmptyError(NoSuchElementError):
    """``head`` was requested on an empty Segment.

    Check ``is_empty()`` before reading ``head``.
    """

    def __init__(self) -> None:
        super().__init__("head of empty segment")


class ParseError(HebrasError):
    """A Failure was unwrapped as if it were a Success.

    Raised when reading ``value`` from a Failure, carrying the failure
    reason and the offset where matching stopped.
    """

    def __init__(self, reason: str, offset: int | None = None) -> None:
        """Initialize parse error with optional position.

        Args:
            reason: Why the parser failed
            offset: Offset into the source where matching stopped
        """
        self.reason = reason
        self.offset = offset

        location = f"at offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{reason}")
