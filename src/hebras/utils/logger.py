"""Namespaced loggers for hebras modules.

Every logger lives under ``hebras.`` so one ``logging`` call configures the
whole library. Nothing here installs handlers; output only appears once the
application configures logging.

Loggers in use:
    hebras                        ``parse()`` outcomes when ``ParseConfig.trace`` is set
    hebras.parsers.combinators    results of ``debug(label)`` parsers

Example:
    >>> import logging
    >>> logging.getLogger("hebras").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "hebras"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, placed under the ``hebras`` namespace.

    Module names inside the package (``hebras.parsers.combinators``) are used
    as is; any other name is nested, so ``get_logger("grammars")`` gives
    ``hebras.grammars``.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
