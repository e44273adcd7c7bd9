"""Primitive matchers: string, regex, matches, any, eof.

``string`` compares with ``str.startswith`` at the view offset, so it never
copies the input. ``regex`` matches in place when the view starts at the
beginning of its source and on a copy of the window otherwise, so patterns
never see characters outside the view.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hebras.errors import ConstructionError
from hebras.parsers.base import Parser
from hebras.result import Failure, Result, Success
from hebras.utils.describe import describe
from hebras.view import View


def _actual(input: View, size: int) -> str:
    if input.is_empty():
        return "end of input"
    return describe(input.slice(0, size).to_source())


@dataclass(frozen=True, slots=True, repr=False)
class StringParser(Parser):
    """Match ``expected`` exactly at the start of the view."""

    expected: str

    name = "string"

    def parse(self, input: View) -> Result:
        if input.starts_with(self.expected):
            return Success(self.expected, input.slice(len(self.expected)))
        return Failure(
            f"Expected {describe(self.expected)} but was {_actual(input, len(self.expected))}",
            input,
        )


@dataclass(frozen=True, slots=True, repr=False)
class RegexParser(Parser):
    """Match a compiled pattern anchored at the start of the view.

    The match never scans ahead and sees nothing outside the view: a view
    that starts at offset 0 is matched in place (bounded by ``endpos``),
    any other view is matched against a copy of its window so lookbehind
    and ``\\b`` cannot inspect the characters before it.
    """

    pattern: re.Pattern[str]

    name = "regex"

    def parse(self, input: View) -> Result:
        if not isinstance(input.source, str):
            return Failure(f"{self} requires text input", input)
        if input.offset == 0:
            match = self.pattern.match(input.source, 0, input.end)
        else:
            match = self.pattern.match(input.to_source())
        if match is None:
            return Failure(
                f"Expected {describe(self.pattern)} but was {_actual(input, 20)}",
                input,
            )
        return Success(match.group(), input.slice(match.end()))


@dataclass(frozen=True, slots=True, repr=False)
class PredicateParser(Parser):
    """Match one element satisfying ``predicate``."""

    predicate: Callable[[Any], bool]

    name = "matches"

    def parse(self, input: View) -> Result:
        if input.is_empty():
            return Failure(f"Expected {describe(self.predicate)} but was end of input", input)
        item = input.at(0)
        if not self.predicate(item):
            return Failure(f"Expected {describe(self.predicate)} but was {item!r}", input)
        return Success(item, input.slice(1))


@dataclass(frozen=True, slots=True, repr=False)
class AnyParser(Parser):
    """Match any single element."""

    name = "any"

    def parse(self, input: View) -> Result:
        if input.is_empty():
            return Failure("Expected any element but was end of input", input)
        return Success(input.at(0), input.slice(1))


@dataclass(frozen=True, slots=True, repr=False)
class EofParser(Parser):
    """Succeed with None only when nothing is left."""

    name = "eof"

    def parse(self, input: View) -> Result:
        if input.is_empty():
            return Success(None, input)
        return Failure(f"Expected end of input but was {_actual(input, 20)}", input)


def string(expected: str) -> StringParser:
    """Create a parser matching a literal string.

    Example:
        >>> from hebras.view import view
        >>> string("hello").parse(view("hello world")).remainder.to_source()
        ' world'

    """
    return StringParser(expected)


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> RegexParser:
    """Create a parser matching a regular expression at the current position.

    A leading ``^`` is dropped: the match is always anchored at the view
    offset, not at the start of the underlying source.

    Raises:
        ConstructionError: If the pattern does not compile
    """
    try:
        compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        if compiled.pattern.startswith("^"):
            compiled = re.compile(compiled.pattern[1:], compiled.flags)
    except re.error as e:
        raise ConstructionError("regex", f"invalid pattern {pattern!r}: {e}") from e
    return RegexParser(compiled)


pattern = regex


def matches(predicate: Callable[[Any], bool]) -> PredicateParser:
    """Create a parser matching one element that satisfies ``predicate``.

    Example:
        >>> from hebras.predicates import digit
        >>> from hebras.view import view
        >>> matches(digit).parse(view("5abc")).value
        '5'

    """
    return PredicateParser(predicate)


def any_() -> AnyParser:
    return AnyParser()


def eof() -> EofParser:
    return EofParser()


__all__ = [
    "AnyParser",
    "EofParser",
    "PredicateParser",
    "RegexParser",
    "StringParser",
    "any_",
    "eof",
    "matches",
    "pattern",
    "regex",
    "string",
]
