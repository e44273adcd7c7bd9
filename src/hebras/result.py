"""Parse outcomes: Success and Failure.

A Result pairs an outcome with the View of input left unconsumed. Failures
are ordinary values that propagate up the combinator chain; nothing is raised
for a failed match.

Result (base)
├── Success(value, remainder)
└── Failure(reason, remainder)

Laws:
    ``r.map(lambda x: x) == r``
    ``r.flat_map(lambda x: success(f(x), r.remainder)) == r.map(f)``

Thread Safety:
Results are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from hebras.errors import ParseError
from hebras.utils.describe import describe
from hebras.view import View


class Result:
    """Base class for parse outcomes.

    Branch on :meth:`is_success` or with ``match``/``case`` over
    ``Success()`` and ``Failure()``.

    """

    __slots__ = ()
    __self_describing__ = True

    remainder: View

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def map(self, mapper: Callable[[Any], Any]) -> Result:
        raise NotImplementedError

    def flat_map(self, mapper: Callable[[Any], Result]) -> Result:
        raise NotImplementedError


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result):
    """A successful match.

    Attributes:
        value: Parsed value
        remainder: Input left after the match

    """

    value: Any
    remainder: View

    def map(self, mapper: Callable[[Any], Any]) -> Result:
        """Rewrite the value, keeping the remainder."""
        return Success(mapper(self.value), self.remainder)

    def flat_map(self, mapper: Callable[[Any], Result]) -> Result:
        """Replace this result with ``mapper(value)``.

        The new remainder is the one ``mapper`` returns, so a value-dependent
        sub-parse can consume further input.

        Raises:
            TypeError: If ``mapper`` does not return a Result
        """
        result = mapper(self.value)
        if not isinstance(result, Result):
            raise TypeError(
                f"flat_map expected {describe(mapper)} to return a Result, "
                f"got {type(result).__name__}"
            )
        return result

    def __iter__(self) -> Iterator[Any]:
        yield self.value

    def __str__(self) -> str:
        return f"Success({describe(self.value)}, {describe(self.remainder.to_source())})"

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result):
    """A failed match.

    Attributes:
        reason: Human-readable description of what was expected
        remainder: Input at the point where matching stopped

    """

    reason: str
    remainder: View

    @property
    def position(self) -> int:
        """Offset into the source where matching stopped."""
        return self.remainder.offset

    @property
    def value(self) -> Any:
        """Unwrapping a Failure is an error.

        Raises:
            ParseError: Always, with the reason and position
        """
        raise ParseError(self.reason, self.position)

    def map(self, mapper: Callable[[Any], Any]) -> Result:
        return self

    def flat_map(self, mapper: Callable[[Any], Result]) -> Result:
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __str__(self) -> str:
        return f"Failure({describe(self.reason)}, {describe(self.remainder.to_source())})"

    __repr__ = __str__


def success(value: Any, remainder: View) -> Success:
    """Create a successful parse result.

    Example:
        >>> from hebras.view import view
        >>> str(success("1", view("23")))
        "Success('1', '23')"

    """
    return Success(value, remainder)


def failure(reason: str, remainder: View) -> Failure:
    """Create a failed parse result."""
    return Failure(reason, remainder)


__all__ = ["Failure", "Result", "Success", "failure", "success"]
