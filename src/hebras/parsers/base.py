"""Parser base class and the transducing pipeline.

A Parser maps a View to a Result. ``parser(base, *steps)`` builds bigger
parsers: a step is either a Transducer, appended to a flat stage list, or a
transformer (a ``Parser -> Parser`` callable such as ``then(...)`` or
``many()``), applied on the spot.

Stages are interpreted through the Result rather than as a sequence:

- ``map(f)`` becomes ``Result.map(f)``.
- ``flat_map(f)`` becomes ``Result.flat_map``; ``f(value)`` returns a Result,
  or a Parser that continues from the current remainder.
- Any other transducer sees the one-element sequence ``[value]``; its first
  output becomes the new value and no output becomes a Failure.

A Failure skips every remaining stage.

Thread Safety:
Parsers are frozen dataclasses with no per-parse state; share them freely.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields
from typing import Any, Union

from hebras.errors import ConstructionError
from hebras.result import Failure, Result, Success
from hebras.transducers.base import Transducer, flatten
from hebras.transducers.mapping import FlatMap, Map
from hebras.utils.describe import describe_call
from hebras.view import View


@dataclass(frozen=True, slots=True, repr=False)
class Parser:
    """Base class for all parsers.

    Subclasses set ``name`` and implement :meth:`parse`. The string form is
    ``name(args)`` built from the dataclass fields.

    """

    name = "parser"
    __self_describing__ = True

    def parse(self, input: View) -> Result:
        raise NotImplementedError

    def arguments(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __str__(self) -> str:
        return describe_call(self.name, self.arguments())

    __repr__ = __str__


Transformer = Callable[[Parser], Parser]
Step = Union[Transducer, Transformer]


@dataclass(frozen=True, slots=True, repr=False)
class TransducingParser(Parser):
    """A base parser followed by a flat tuple of transducer stages."""

    parser: Parser
    transducers: tuple[Transducer, ...]

    @classmethod
    def create(cls, parser: Parser, transducers: Iterable[Transducer]) -> TransducingParser:
        """Attach stages, merging into an existing pipeline instead of nesting."""
        if isinstance(parser, TransducingParser):
            return cls(parser.parser, flatten((*parser.transducers, *transducers)))
        return cls(parser, flatten(transducers))

    def parse(self, input: View) -> Result:
        result = self.parser.parse(input)
        for stage in self.transducers:
            if isinstance(result, Failure):
                return result
            result = _apply_stage(result, stage)
        return result

    def __str__(self) -> str:
        return describe_call("parser", (self.parser, *self.transducers))

    __repr__ = __str__


def _continue(outcome: Any, remainder: View) -> Any:
    if isinstance(outcome, Parser):
        return outcome.parse(remainder)
    return outcome


def _apply_stage(result: Success, stage: Transducer) -> Result:
    match stage:
        case Map(mapper=mapper):
            return result.map(mapper)
        case FlatMap(mapper=mapper):
            return result.flat_map(lambda value: _continue(mapper(value), result.remainder))
        case _:
            for value in stage((result.value,)):
                return Success(value, result.remainder)
            return Failure(f"{stage} rejected {result.value!r}", result.remainder)


def parser(base: Parser, *steps: Step) -> Parser:
    """Compose a parser with transducers and transformers, left to right.

    Example:
        >>> from hebras.parsers import regex
        >>> from hebras.transducers import map
        >>> from hebras.view import view
        >>> number = parser(regex("[0-9]+"), map(int))
        >>> number.parse(view("123 USD")).value
        123
        >>> str(number)
        "parser(regex('[0-9]+'), map(int))"

    Raises:
        ConstructionError: If ``base`` is not a Parser or a step is neither a
            Transducer nor a transformer returning a Parser
    """
    if not isinstance(base, Parser):
        raise ConstructionError("parser", f"expected a Parser, got {base!r}")
    current = base
    for step in steps:
        if isinstance(step, Transducer):
            current = TransducingParser.create(current, (step,))
        elif callable(step):
            current = step(current)
            if not isinstance(current, Parser):
                raise ConstructionError("parser", f"transformer {step!r} did not return a Parser")
        else:
            raise ConstructionError("parser", f"expected a Transducer or transformer, got {step!r}")
    return current


__all__ = ["Parser", "Step", "Transformer", "TransducingParser", "parser"]
