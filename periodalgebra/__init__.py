"""Period Algebra - interval algebra over granularity-quantized time ranges

Public API for single periods, ordered period collections, and the set
operations between them.

Usage:
    from periodalgebra import Period, PeriodCollection

    a = Period("2022-01-01", "2022-01-15")
    b = Period("2022-01-10", "2022-01-20")

    a.overlap(b)          # [2022-01-10, 2022-01-15]
    a.subtract(b)         # PeriodCollection([2022-01-01, 2022-01-10))
    a.diff_symmetric(b)   # [2022-01-01, 2022-01-10), (2022-01-15, 2022-01-20]

    # Granularity and excluded boundaries
    hours = Period("2022-01-01", "2022-01-02", granularity="hour", exclude_boundaries="end")
    len(hours)            # 24 hourly points

    # Collections
    PeriodCollection(a, b).boundaries()   # [2022-01-01, 2022-01-20]
    PeriodCollection(
        Period("2022-01-01", "2022-01-05"),
        Period("2022-01-10", "2022-01-15"),
    ).gaps()                              # (2022-01-05, 2022-01-10)
"""

__version__ = "0.0.1"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    PeriodError,             # Base class
    InvalidArgumentError,    # Bad granularity / boundary mode / date
    RuntimeConflictError,    # End before start / granularity mismatch
)

# ============================================================================
# Granularity
# ============================================================================

from .granularity import (
    GRANULARITIES,           # year, month, day, hour, minute, second
    BOUNDARIES,              # none, start, end, both
    get_boundaries,          # (includes_start, includes_end) -> boundary mode
    create_date,             # Coerce string/date/datetime to aware datetime
)

# ============================================================================
# Period
# ============================================================================

from .period import (
    Period,                  # Single interval
    PeriodOptions,           # Granularity + boundary configuration
    create_period,           # Build from an options mapping
    format_period_display,   # Interval notation for display
    period_to_dict,          # Plain dict export
)

# ============================================================================
# PeriodCollection
# ============================================================================

from .collection import (
    PeriodCollection,            # Ordered collection of periods
    create_collection,           # Build from an iterable
    collection_to_frame,         # pandas DataFrame export
    collection_from_records,     # Build from DataFrame / records
    format_collection_display,   # Interval notation for display
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY TYPES - Start here!
    # ========================================================================
    "Period",
    "PeriodCollection",
    "PeriodOptions",

    # ========================================================================
    # Errors
    # ========================================================================
    "PeriodError",
    "InvalidArgumentError",
    "RuntimeConflictError",

    # ========================================================================
    # Granularity
    # ========================================================================
    "GRANULARITIES",
    "BOUNDARIES",
    "get_boundaries",
    "create_date",

    # ========================================================================
    # Functional API
    # ========================================================================
    "create_period",
    "format_period_display",
    "period_to_dict",
    "create_collection",
    "collection_to_frame",
    "collection_from_records",
    "format_collection_display",
]
