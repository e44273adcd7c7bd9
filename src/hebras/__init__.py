"""
Hebras — lazy parsing and transducer core for Python

Immutable segments and views over strings or arrays, success/failure
results, composable transducers that flatten on composition, and parser
combinators that thread results through transducer pipelines.

Quick Start:
    >>> from hebras import parse, parser, regex
    >>> from hebras.transducers import map
    >>> number = parser(regex("[0-9]+"), map(int))
    >>> parse(number, "123abc").value
    123

    >>> from hebras.transducers import compose, take, windowed
    >>> list(compose(windowed(2), take(2))([1, 2, 3, 4]))
    [[1, 2], [2, 3]]

Packages:
    hebras.transducers  Sequence-to-sequence transformations
    hebras.parsers      Parsers and combinators over Views
    hebras.grammars     C comment and JSDoc grammars
"""

from hebras.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from hebras.errors import (
    ConstructionError,
    HebrasError,
    NoSuchElementError,
    ParseError,
    SegmentEmptyError,
)
from hebras.parsers import Parser, parser, regex, string
from hebras.result import Failure, Result, Success, failure, success
from hebras.segment import Segment, empty, from_array, from_string, segment
from hebras.sequence import Sequence, sequence, single
from hebras.transducers import Transducer, compose
from hebras.utils.logger import get_logger
from hebras.view import View, view

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(parser: Parser, source: object) -> Result:
    """Run a parser over a string, array, or View.

    Honors the active :class:`ParseConfig` and records to the profiling
    accumulator when one is active.

    Args:
        parser: Parser to run
        source: String, list/tuple, or existing View

    Returns:
        Success or Failure. With ``require_full_match`` set, a Success that
        leaves input behind becomes a Failure at the first unconsumed offset.

    Example:
        >>> parse(string("ab"), "abc").remainder.to_source()
        'c'
        >>> with parse_config_context(ParseConfig(require_full_match=True)):
        ...     parse(string("ab"), "abc").is_failure()
        True
    """
    from hebras.profiling import get_parse_accumulator

    input = view(source)
    config = get_parse_config()
    result = parser.parse(input)

    if config.require_full_match and result.is_success() and not result.remainder.is_empty():
        rest = result.remainder.to_source()
        result = failure(f"Expected end of input but was {rest!r}", result.remainder)

    if config.trace:
        logger.debug("%s on %s -> %s", parser, input, result)

    acc = get_parse_accumulator()
    if acc is not None:
        consumed = max(len(input) - len(result.remainder), 0) if result.is_success() else 0
        acc.record_parse(len(input), consumed, result.is_failure())

    return result


__all__ = [  # noqa: RUF022 — grouped by category
    "__version__",
    "parse",
    # Data
    "Segment",
    "View",
    "empty",
    "from_array",
    "from_string",
    "segment",
    "view",
    # Results
    "Failure",
    "Result",
    "Success",
    "failure",
    "success",
    # Sequences and transducers
    "Sequence",
    "Transducer",
    "compose",
    "sequence",
    "single",
    # Parsers
    "Parser",
    "parser",
    "regex",
    "string",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ConstructionError",
    "HebrasError",
    "NoSuchElementError",
    "ParseError",
    "SegmentEmptyError",
]
