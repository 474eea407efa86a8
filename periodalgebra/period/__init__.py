"""Period module: a single granularity-quantized time interval.

Public API:
    Period(start, end, granularity="day", exclude_boundaries="none")
        Bounded interval with comparison predicates and set operations

    PeriodOptions(granularity="day", exclude_boundaries="none")
        Configuration structure for Period construction

    create_period(start, end, options=None) -> Period
        Construct from an options mapping or PeriodOptions

    format_period_display(period) -> str
        Interval notation, e.g. "[2022-01-01, 2022-01-10)"

    period_to_dict(period) -> dict
        Plain dict export

Examples:
    >>> from periodalgebra.period import Period
    >>>
    >>> a = Period("2022-01-01", "2022-01-10")
    >>> b = Period("2022-01-15", "2022-01-20")
    >>> a.gap(b)
    Period('2022-01-10T00:00:00+00:00', '2022-01-15T00:00:00+00:00', granularity='day', exclude_boundaries='both')
    >>>
    >>> len(Period("2022-01-01", "2022-01-02", granularity="hour"))
    25
"""

from periodalgebra.period.periodcore import (
    Period,
    PeriodOptions,
    check_granularity,
)
from periodalgebra.period.periodapi import (
    resolve_options,
    create_period,
    format_period_display,
    period_to_dict,
)

__all__ = [
    "Period",
    "PeriodOptions",
    "check_granularity",
    "resolve_options",
    "create_period",
    "format_period_display",
    "period_to_dict",
]
