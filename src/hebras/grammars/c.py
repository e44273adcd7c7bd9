"""C-style comment grammar.

Recognizes ``// ...`` up to (not including) the end of the line and
``/* ... */`` up to the first ``*/``. The opening marker decides which body
parser runs, via ``flat_map``, so no alternation or backtracking is needed.

Example:
    >>> from hebras.view import view
    >>> comment.parse(view("// hello\\n")).value
    Comment(value='hello')
    >>> comment.parse(view("/* hello */")).remainder.is_empty()
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from hebras.parsers import (
    Parser,
    any_,
    followed_by,
    parser,
    preceded_by,
    regex,
    string,
    until,
)
from hebras.transducers import flat_map, map


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment text with markers stripped and surrounding space trimmed."""

    value: str


def _to_comment(text: str) -> Comment:
    return Comment(text.strip())


line_body: Parser = regex(r"[^\n]*")

block_body: Parser = parser(any_(), until(string("*/")), followed_by(string("*/")), map("".join))

_BODIES: dict[str, Parser] = {"//": line_body, "/*": block_body}


def comment_body(marker: str) -> Parser:
    """Body parser for an opening marker (``//`` or ``/*``)."""
    return _BODIES[marker]


single_line_comment: Parser = parser(line_body, preceded_by(string("//")), map(_to_comment))

multi_line_comment: Parser = parser(block_body, preceded_by(string("/*")), map(_to_comment))

comment: Parser = parser(regex(r"//|/\*"), flat_map(comment_body), map(_to_comment))


__all__ = [
    "Comment",
    "block_body",
    "comment",
    "comment_body",
    "line_body",
    "multi_line_comment",
    "single_line_comment",
]
