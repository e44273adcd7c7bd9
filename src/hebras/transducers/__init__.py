"""Composable, lazy sequence transformations.

Every transducer is a frozen dataclass tagged by kind and carrying its
construction parameters, so pipelines are inspectable and compare by value:

    >>> from hebras.transducers import compose, filter, map, windowed
    >>> pipeline = compose(filter(lambda x: x > 1), map(str))
    >>> list(pipeline([1, 2, 3]))
    ['2', '3']
    >>> windowed(3) == windowed(3, 1, False)
    True
    >>> str(windowed(3))
    'windowed(3, 1, False)'

Kinds:
- base: Composite (compose), Identity
- mapping: Map, FlatMap, Filter, Zip, ZipWithIndex
- slicing: Take, Drop, TakeWhile, DropWhile, First, Last, Find
- windows: Windowed, Dedupe, Unique, Sort
- folding: Scan, Reduce
"""

from hebras.transducers.base import (
    Composite,
    Identity,
    Transducer,
    compose,
    decompose,
    flatten,
    identity,
)
from hebras.transducers.folding import Reduce, Scan, reduce, scan
from hebras.transducers.mapping import (
    Filter,
    FlatMap,
    Map,
    Zip,
    ZipWithIndex,
    filter,
    flat_map,
    map,
    reject,
    zip,
    zip_with_index,
)
from hebras.transducers.slicing import (
    Drop,
    DropWhile,
    Find,
    First,
    Last,
    Take,
    TakeWhile,
    drop,
    drop_while,
    find,
    first,
    last,
    take,
    take_while,
)
from hebras.transducers.windows import (
    Dedupe,
    Sort,
    Unique,
    Windowed,
    dedupe,
    sort,
    unique,
    windowed,
)

__all__ = [  # noqa: RUF022 — grouped by category
    # Base
    "Transducer",
    "Composite",
    "Identity",
    "compose",
    "decompose",
    "flatten",
    "identity",
    # Mapping
    "Map",
    "FlatMap",
    "Filter",
    "Zip",
    "ZipWithIndex",
    "map",
    "flat_map",
    "filter",
    "reject",
    "zip",
    "zip_with_index",
    # Slicing
    "Take",
    "Drop",
    "TakeWhile",
    "DropWhile",
    "First",
    "Last",
    "Find",
    "take",
    "drop",
    "take_while",
    "drop_while",
    "first",
    "last",
    "find",
    # Windows
    "Windowed",
    "Dedupe",
    "Unique",
    "Sort",
    "windowed",
    "dedupe",
    "unique",
    "sort",
    # Folding
    "Scan",
    "Reduce",
    "scan",
    "reduce",
]
