"""Parsers over Views and the combinators that build them.

Quick Start:
    >>> from hebras.parsers import between, parser, regex, string
    >>> from hebras.transducers import map
    >>> from hebras.view import view
    >>> amount = parser(regex("[0-9]+"), map(int), between(string("("), string(")")))
    >>> amount.parse(view("(123) USD")).value
    123

Names ending in ``_`` (``any_``, ``list_``, ``tuple_``, ``not_``, ``next_``)
avoid clashing with builtins and keywords.
"""

from hebras.parsers.base import Parser, Step, Transformer, TransducingParser, parser
from hebras.parsers.combinators import (
    DebugParser,
    ListParser,
    NotParser,
    OptionalParser,
    PeekParser,
    RepeatParser,
    TupleParser,
    UntilParser,
    among,
    at_least,
    at_most,
    between,
    debug,
    followed_by,
    ignore,
    list_,
    literal,
    many,
    many1,
    next_,
    not_,
    not_followed_by,
    optional,
    pair,
    peek,
    preceded_by,
    repeat,
    returns,
    separated_by,
    surrounded_by,
    then,
    times,
    triple,
    tuple_,
    until,
    whitespace,
)
from hebras.parsers.primitives import (
    AnyParser,
    EofParser,
    PredicateParser,
    RegexParser,
    StringParser,
    any_,
    eof,
    matches,
    pattern,
    regex,
    string,
)

__all__ = [  # noqa: RUF022 — grouped by category
    # Core
    "Parser",
    "Step",
    "Transformer",
    "TransducingParser",
    "parser",
    # Primitives
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
    # Sequencing
    "ListParser",
    "TupleParser",
    "list_",
    "tuple_",
    "pair",
    "triple",
    # Repetition
    "RepeatParser",
    "repeat",
    "many",
    "many1",
    "at_least",
    "at_most",
    "times",
    # Lookahead
    "OptionalParser",
    "NotParser",
    "PeekParser",
    "UntilParser",
    "optional",
    "not_",
    "peek",
    "until",
    # Transformers
    "then",
    "next_",
    "followed_by",
    "not_followed_by",
    "preceded_by",
    "between",
    "surrounded_by",
    "separated_by",
    "returns",
    "ignore",
    "literal",
    "whitespace",
    "among",
    # Debugging
    "DebugParser",
    "debug",
]
