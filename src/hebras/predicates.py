"""Self-describing element predicates.

Predicates feed ``matches()`` parsers and ``filter``/``reject`` transducers.
Each one keeps the parameters it was built with and renders them, so a
parser built from a predicate describes itself as e.g. ``matches(digit)``.

Thread Safety:
All predicates are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import string
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hebras.utils.describe import describe, describe_call


@dataclass(frozen=True, slots=True, repr=False)
class Predicate:
    """Base class for predicates."""

    __self_describing__ = True

    def __call__(self, value: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, slots=True, repr=False)
class Among(Predicate):
    """Single character contained in ``characters``."""

    characters: str

    def __call__(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) == 1 and value in self.characters

    def __str__(self) -> str:
        return describe_call("among", [self.characters])

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class CharacterClass(Predicate):
    """Named set of characters such as ``digit`` or ``whitespace``."""

    name: str
    members: frozenset[str]

    def __call__(self, value: Any) -> bool:
        return isinstance(value, str) and value in self.members

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class Equals(Predicate):
    """Equal to ``expected``."""

    expected: Any

    def __call__(self, value: Any) -> bool:
        return value == self.expected

    def __str__(self) -> str:
        return describe_call("equals", [self.expected])

    __repr__ = __str__


@dataclass(frozen=True, slots=True, repr=False)
class Not(Predicate):
    """Negation of another predicate or plain callable."""

    predicate: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return not self.predicate(value)

    def __str__(self) -> str:
        return f"not({describe(self.predicate)})"

    __repr__ = __str__


def among(characters: str) -> Among:
    """Match any one of ``characters``.

    Example:
        >>> among("abc")("b")
        True
        >>> str(among("abc"))
        "among('abc')"

    """
    return Among(characters)


def equals(expected: Any) -> Equals:
    return Equals(expected)


def is_not(predicate: Callable[[Any], bool]) -> Not:
    return Not(predicate)


digit = CharacterClass("digit", frozenset(string.digits))
letter = CharacterClass("letter", frozenset(string.ascii_letters))
alpha_numeric = CharacterClass("alpha_numeric", frozenset(string.ascii_letters + string.digits))
hex_digit = CharacterClass("hex_digit", frozenset(string.hexdigits))
whitespace = CharacterClass("whitespace", frozenset(string.whitespace))


__all__ = [
    "Among",
    "CharacterClass",
    "Equals",
    "Not",
    "Predicate",
    "alpha_numeric",
    "among",
    "digit",
    "equals",
    "hex_digit",
    "is_not",
    "letter",
    "whitespace",
]
