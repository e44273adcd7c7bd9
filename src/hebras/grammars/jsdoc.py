"""JSDoc tag grammar.

Parses ``/** @tag {Type} ... */`` into a :class:`JsdocComment` whose
``tags`` map each tag name to its type expression.

Example:
    >>> from hebras.view import view
    >>> jsdoc.parse(view("/** @type {Map} */")).value
    JsdocComment(tags={'type': 'Map'})
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hebras.parsers import (
    Parser,
    between,
    many,
    next_,
    parser,
    regex,
    string,
    then,
    whitespace,
)
from hebras.transducers import map


@dataclass(frozen=True, slots=True)
class JsdocComment:
    """Tags extracted from a JSDoc comment."""

    tags: dict[str, str] = field(default_factory=dict)


type_expression: Parser = parser(regex(r"[^{}]+"), map(str.strip), between(string("{"), string("}")))

tag_name: Parser = parser(string("@"), next_(regex(r"[A-Za-z]+")))

tag: Parser = parser(whitespace(tag_name), then(whitespace(type_expression)))

tags: Parser = parser(tag, many(), map(dict))

jsdoc: Parser = parser(tags, between(string("/**"), whitespace(string("*/"))), map(JsdocComment))


__all__ = ["JsdocComment", "jsdoc", "tag", "tag_name", "tags", "type_expression"]
