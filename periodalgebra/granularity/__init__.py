"""Granularity module: enumerations, date coercion and unit-aware comparison.

Public API:
    normalize_granularity(value) -> str
    normalize_boundaries(value) -> str
    get_boundaries(includes_start, includes_end) -> str
    create_date(value) -> datetime

    is_before / is_after / is_same / is_same_or_before / is_same_or_after
        (a, b, granularity=None) -> bool
    add / sub (date, amount, granularity) -> datetime
    diff (a, b, granularity=None) -> int
"""

from periodalgebra.granularity.granularitynormalize import (
    GRANULARITIES,
    BOUNDARIES,
    DEFAULT_GRANULARITY,
    DEFAULT_BOUNDARIES,
    normalize_granularity,
    normalize_boundaries,
    resolve_boundaries,
    get_boundaries,
    suggest_choice,
    create_date,
)
from periodalgebra.granularity.granularitycompare import (
    truncate,
    is_before,
    is_after,
    is_same,
    is_same_or_before,
    is_same_or_after,
    add,
    sub,
    diff,
)

__all__ = [
    # Enumerations
    "GRANULARITIES",
    "BOUNDARIES",
    "DEFAULT_GRANULARITY",
    "DEFAULT_BOUNDARIES",
    # Normalization
    "normalize_granularity",
    "normalize_boundaries",
    "resolve_boundaries",
    "get_boundaries",
    "suggest_choice",
    "create_date",
    # Comparison
    "truncate",
    "is_before",
    "is_after",
    "is_same",
    "is_same_or_before",
    "is_same_or_after",
    # Arithmetic
    "add",
    "sub",
    "diff",
]
