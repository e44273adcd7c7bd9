"""Deterministic string forms for construction parameters.

Parsers, transducers and predicates render themselves as ``name(args)``
from the parameters captured when they were built. This module renders a
single parameter.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any


def describe(value: Any) -> str:
    """Render one construction parameter.

    Args:
        value: Parameter captured at construction time

    Returns:
        ``str()`` for self-describing objects, ``repr()`` for strings and
        plain data, the function name for callables.

    Example:
        >>> describe("abc")
        "'abc'"
        >>> describe(int)
        'int'
        >>> describe(re.compile("a+"))
        "'a+'"
    """
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, re.Pattern):
        return repr(value.pattern)
    if getattr(type(value), "__self_describing__", False):
        return str(value)
    name = getattr(value, "__name__", None)
    if callable(value) and isinstance(name, str):
        return name
    return repr(value)


def describe_call(name: str, arguments: Iterable[Any]) -> str:
    """Render ``name(arg, arg, ...)``.

    Example:
        >>> describe_call("take", [3])
        'take(3)'
    """
    return f"{name}({', '.join(describe(argument) for argument in arguments)})"
