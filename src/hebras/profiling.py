"""Hebras ParseAccumulator — opt-in profiling for top-level parses.

Accumulates, across every :func:`hebras.parse` call made inside a
``profiled_parse()`` block:
- Total elapsed time
- Number of parse calls and how many failed
- Input length and how much of it was consumed

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from hebras import parse, regex
    from hebras.profiling import profiled_parse

    with profiled_parse() as metrics:
        parse(regex("[0-9]+"), "123abc")

    print(metrics.summary())
    # {"total_ms": 0.1, "parse_calls": 1, "failures": 0,
    #  "source_length": 6, "consumed": 3}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics for parse calls.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of parse() calls recorded.
        failures: Number of those calls that produced a Failure.
        source_length: Total length of all inputs.
        consumed: Total number of input elements consumed.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    failures: int = 0
    source_length: int = 0
    consumed: int = 0

    def record_parse(self, source_length: int, consumed: int, failed: bool) -> None:
        """Record one parse call.

        Args:
            source_length: Length of the input view.
            consumed: Input elements consumed (0 for failures that did not advance).
            failed: Whether the result was a Failure.

        """
        self.parse_calls += 1
        self.source_length += source_length
        self.consumed += consumed
        if failed:
            self.failures += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "failures": self.failures,
            "source_length": self.source_length,
            "consumed": self.consumed,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "hebras_parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Yields:
        ParseAccumulator populated by every parse() call in the block.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["ParseAccumulator", "get_parse_accumulator", "profiled_parse"]
