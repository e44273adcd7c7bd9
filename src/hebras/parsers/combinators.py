"""Parser combinators.

Sequencing (``list_``, ``tuple_``, ``pair``, ``triple``), repetition
(``repeat`` and friends), lookahead (``optional``, ``not_``, ``peek``,
``until``) and the transformers used as ``parser()`` steps (``then``,
``between``, ``preceded_by``, ...).

Sequencing stops at the first Failure and returns it unchanged; no
combinator here backtracks into an earlier parser. Repetition tolerates the
Failure that ends the loop and reports it only when fewer than the minimum
number of matches occurred.

Most factories taking an optional parser return a transformer when called
without one, so both spellings work:

    >>> from hebras.parsers import parser, string
    >>> str(many(string("a"))) == str(parser(string("a"), many()))
    True

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from operator import itemgetter
from typing import Any

from hebras.errors import ConstructionError
from hebras.parsers.base import Parser, Transformer, parser
from hebras.parsers.primitives import matches, string
from hebras.predicates import Among
from hebras.predicates import whitespace as _whitespace
from hebras.result import Failure, Result, Success
from hebras.transducers.mapping import map
from hebras.utils.describe import describe_call
from hebras.utils.logger import get_logger
from hebras.view import View

logger = get_logger(__name__)

_first = itemgetter(0)
_second = itemgetter(1)


def _advanced(before: View, after: View) -> bool:
    return after.source is not before.source or after.offset != before.offset


def _run_all(parsers: Sequence[Parser], input: View) -> tuple[list[Any], View] | Failure:
    values: list[Any] = []
    for p in parsers:
        result = p.parse(input)
        if isinstance(result, Failure):
            return result
        values.append(result.value)
        input = result.remainder
    return values, input


# =============================================================================
# Sequencing
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class ListParser(Parser):
    """Run parsers one after another, collecting values into a list."""

    parsers: tuple[Parser, ...]

    name = "list"

    def parse(self, input: View) -> Result:
        outcome = _run_all(self.parsers, input)
        if isinstance(outcome, Failure):
            return outcome
        values, remainder = outcome
        return Success(values, remainder)

    def arguments(self) -> tuple[Any, ...]:
        return self.parsers


@dataclass(frozen=True, slots=True, repr=False)
class TupleParser(Parser):
    """Run parsers one after another, collecting values into a tuple."""

    parsers: tuple[Parser, ...]

    name = "tuple"

    def parse(self, input: View) -> Result:
        outcome = _run_all(self.parsers, input)
        if isinstance(outcome, Failure):
            return outcome
        values, remainder = outcome
        return Success(tuple(values), remainder)

    def arguments(self) -> tuple[Any, ...]:
        return self.parsers


def _check_parsers(combinator: str, parsers: Sequence[Any]) -> tuple[Parser, ...]:
    if not parsers:
        raise ConstructionError(combinator, "needs at least one parser")
    for p in parsers:
        if not isinstance(p, Parser):
            raise ConstructionError(combinator, f"expected a Parser, got {p!r}")
    return tuple(parsers)


def list_(*parsers: Parser) -> ListParser:
    """Sequence parsers into a list value.

    Raises:
        ConstructionError: If no parsers are given
    """
    return ListParser(_check_parsers("list", parsers))


def tuple_(*parsers: Parser) -> TupleParser:
    """Sequence parsers into a tuple value.

    Raises:
        ConstructionError: If no parsers are given
    """
    return TupleParser(_check_parsers("tuple", parsers))


def pair(first: Parser, second: Parser) -> TupleParser:
    return TupleParser(_check_parsers("pair", (first, second)))


def triple(first: Parser, second: Parser, third: Parser) -> TupleParser:
    return TupleParser(_check_parsers("triple", (first, second, third)))


# =============================================================================
# Repetition
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class RepeatParser(Parser):
    """Apply ``parser`` between ``min_count`` and ``max_count`` times.

    Stops at the first Failure or after ``max_count`` successes
    (``None`` means unbounded). A success that consumes nothing is kept
    and ends the loop, so zero-width parsers cannot spin forever.

    """

    parser: Parser
    min_count: int = 0
    max_count: int | None = None

    name = "repeat"

    def parse(self, input: View) -> Result:
        values: list[Any] = []
        remainder = input
        while self.max_count is None or len(values) < self.max_count:
            result = self.parser.parse(remainder)
            if isinstance(result, Failure):
                break
            values.append(result.value)
            advanced = _advanced(remainder, result.remainder)
            remainder = result.remainder
            if not advanced:
                break
        if len(values) < self.min_count:
            return Failure(
                f"Expected at least {self.min_count} of {self.parser} but got {len(values)}",
                remainder,
            )
        return Success(values, remainder)

    def __str__(self) -> str:
        if self.min_count == 0 and self.max_count is None:
            return describe_call("many", (self.parser,))
        return describe_call(self.name, self.arguments())

    __repr__ = __str__


def _check_counts(combinator: str, min_count: int, max_count: int | None) -> None:
    if min_count < 0:
        raise ConstructionError(combinator, f"minimum must not be negative, got {min_count}")
    if max_count is not None and max_count < min_count:
        raise ConstructionError(
            combinator, f"maximum {max_count} is less than minimum {min_count}"
        )


def repeat(
    parser: Parser | None = None,
    min_count: int = 0,
    max_count: int | None = None,
) -> Any:
    """Repeat a parser between ``min_count`` and ``max_count`` times.

    Without a parser, returns a transformer for use as a ``parser()`` step.

    Example:
        >>> from hebras.predicates import digit
        >>> from hebras.view import view
        >>> result = repeat(matches(digit), 2, 4).parse(view("123456"))
        >>> result.value, result.remainder.to_source()
        (['1', '2', '3', '4'], '56')

    Raises:
        ConstructionError: If ``min_count`` is negative or exceeds ``max_count``
    """
    _check_counts("repeat", min_count, max_count)
    if parser is None:
        return lambda p: RepeatParser(p, min_count, max_count)
    return RepeatParser(parser, min_count, max_count)


def many(parser: Parser | None = None) -> Any:
    """Zero or more matches; never fails."""
    return repeat(parser, 0)


def many1(parser: Parser | None = None) -> Any:
    """One or more matches."""
    return repeat(parser, 1)


def at_least(count: int) -> Transformer:
    return repeat(None, count)


def at_most(count: int) -> Transformer:
    return repeat(None, 0, count)


def times(count: int) -> Transformer:
    """Exactly ``count`` matches."""
    return repeat(None, count, count)


# =============================================================================
# Lookahead
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class OptionalParser(Parser):
    """Succeed with None, consuming nothing, when ``parser`` fails."""

    parser: Parser

    name = "optional"

    def parse(self, input: View) -> Result:
        result = self.parser.parse(input)
        if isinstance(result, Failure):
            return Success(None, input)
        return result


@dataclass(frozen=True, slots=True, repr=False)
class NotParser(Parser):
    """Negative lookahead: succeed with None when ``parser`` fails."""

    parser: Parser

    name = "not"

    def parse(self, input: View) -> Result:
        result = self.parser.parse(input)
        if isinstance(result, Success):
            return Failure(f"Expected not {self.parser} but was {result.value!r}", input)
        return Success(None, input)


@dataclass(frozen=True, slots=True, repr=False)
class PeekParser(Parser):
    """Positive lookahead: return the value without consuming input."""

    parser: Parser

    name = "peek"

    def parse(self, input: View) -> Result:
        result = self.parser.parse(input)
        if isinstance(result, Success):
            return Success(result.value, input)
        return result


@dataclass(frozen=True, slots=True, repr=False)
class UntilParser(Parser):
    """Collect ``step`` matches until ``stop`` would match (``stop`` not consumed)."""

    step: Parser
    stop: Parser

    name = "until"

    def parse(self, input: View) -> Result:
        values: list[Any] = []
        while not input.is_empty():
            if isinstance(self.stop.parse(input), Success):
                break
            result = self.step.parse(input)
            if isinstance(result, Failure) or not _advanced(input, result.remainder):
                break
            values.append(result.value)
            input = result.remainder
        return Success(values, input)


@dataclass(frozen=True, slots=True, repr=False)
class DebugParser(Parser):
    """Log every result of ``parser`` at DEBUG level under ``label``."""

    parser: Parser
    label: str

    name = "debug"

    def parse(self, input: View) -> Result:
        result = self.parser.parse(input)
        logger.debug("%s %s", self.label, result)
        return result


def optional(parser: Parser | None = None) -> Any:
    if parser is None:
        return OptionalParser
    return OptionalParser(parser)


def not_(parser: Parser | None = None) -> Any:
    if parser is None:
        return NotParser
    return NotParser(parser)


def peek(parser: Parser | None = None) -> Any:
    if parser is None:
        return PeekParser
    return PeekParser(parser)


def until(stop: Parser) -> Transformer:
    """Repeat the step parser until ``stop`` matches.

    Example:
        >>> from hebras.parsers import any_, parser
        >>> from hebras.view import view
        >>> parser(any_(), until(string("*/"))).parse(view("ab*/")).value
        ['a', 'b']

    """
    return lambda step: UntilParser(step, stop)


def debug(label: str) -> Transformer:
    return lambda p: DebugParser(p, label)


# =============================================================================
# Transformers
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class _Constant:
    value: Any

    __self_describing__ = True

    def __call__(self, _: Any) -> Any:
        return self.value

    def __str__(self) -> str:
        return describe_call("constant", (self.value,))


def then(second: Parser) -> Transformer:
    """Run ``second`` after the current parser, keeping both values as a pair."""
    return lambda first: pair(first, second)


def next_(second: Parser) -> Transformer:
    """Run ``second`` after the current parser, keeping only its value."""
    return lambda first: parser(pair(first, second), map(_second))


def followed_by(second: Parser) -> Transformer:
    """Require ``second`` after the current parser, keeping the first value."""
    return lambda first: parser(pair(first, second), map(_first))


def not_followed_by(second: Parser) -> Transformer:
    return followed_by(NotParser(second))


def preceded_by(prefix: Parser) -> Transformer:
    """Require ``prefix`` before the current parser and discard it."""
    return lambda first: parser(pair(prefix, first), map(_second))


def between(before: Parser, after: Parser | None = None) -> Transformer:
    """Require delimiters around the current parser and discard them.

    ``after`` defaults to ``before``.

    Example:
        >>> from hebras.parsers import regex
        >>> from hebras.view import view
        >>> parser(regex("[0-9]+"), between(string("("), string(")"))).parse(view("(12)")).value
        '12'

    """
    closing = before if after is None else after
    return lambda inner: parser(triple(before, inner, closing), map(_second))


def surrounded_by(delimiter: Parser) -> Transformer:
    return between(delimiter)


def separated_by(separator: Parser) -> Transformer:
    """Zero or more matches, each optionally followed by ``separator``."""
    return lambda item: parser(item, followed_by(OptionalParser(separator)), many())


def returns(value: Any) -> Transformer:
    """Replace the parsed value with ``value``."""
    return lambda p: parser(p, map(_Constant(value)))


def ignore(p: Parser | None = None) -> Any:
    """Replace the parsed value with None."""
    if p is None:
        return returns(None)
    return returns(None)(p)


def literal(value: Any) -> Parser:
    """Match ``str(value)`` and return ``value`` itself.

    Example:
        >>> from hebras.view import view
        >>> literal(42).parse(view("42")).value
        42

    """
    return parser(string(str(value)), returns(value))


def whitespace(p: Parser) -> Parser:
    """Allow optional whitespace on both sides of ``p``."""
    return parser(p, surrounded_by(many(matches(_whitespace))))


def among(characters: str) -> Parser:
    """Match one of ``characters``."""
    return matches(Among(characters))


__all__ = [
    "DebugParser",
    "ListParser",
    "NotParser",
    "OptionalParser",
    "PeekParser",
    "RepeatParser",
    "TupleParser",
    "UntilParser",
    "among",
    "at_least",
    "at_most",
    "between",
    "debug",
    "followed_by",
    "ignore",
    "list_",
    "literal",
    "many",
    "many1",
    "next_",
    "not_",
    "not_followed_by",
    "optional",
    "pair",
    "peek",
    "preceded_by",
    "repeat",
    "returns",
    "separated_by",
    "surrounded_by",
    "then",
    "times",
    "triple",
    "tuple_",
    "until",
    "whitespace",
]
