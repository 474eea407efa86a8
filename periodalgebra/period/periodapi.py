"""Period API.

Functional entry points around the Period type: construction from an
options mapping, human-readable display, and export to plain dicts.
"""

from __future__ import annotations
from typing import Mapping, Optional, Union

from periodalgebra.errors import InvalidArgumentError
from periodalgebra.granularity.granularitynormalize import DateLike
from periodalgebra.period.periodcore import Period, PeriodOptions


_OPTION_KEYS = ("granularity", "exclude_boundaries")

# strftime pattern used to render dates at each granularity
_DISPLAY_FORMATS = {
    "year": "%Y",
    "month": "%Y-%m",
    "day": "%Y-%m-%d",
    "hour": "%Y-%m-%d %H:00",
    "minute": "%Y-%m-%d %H:%M",
    "second": "%Y-%m-%d %H:%M:%S",
}


def resolve_options(
    options: Union[PeriodOptions, Mapping[str, str], None] = None,
) -> PeriodOptions:
    """
    Turn an options argument into a PeriodOptions.

    Args:
        options: None (defaults), a PeriodOptions, or a mapping with any of
            the keys "granularity" and "exclude_boundaries"

    Returns:
        Normalized PeriodOptions

    Raises:
        InvalidArgumentError: For unknown keys or invalid values

    Examples:
        >>> resolve_options({"granularity": "Hour"})
        PeriodOptions(granularity='hour', exclude_boundaries='none')
    """
    if options is None:
        return PeriodOptions()

    if isinstance(options, PeriodOptions):
        return options

    unknown = sorted(set(options) - set(_OPTION_KEYS))
    if unknown:
        raise InvalidArgumentError(f"Unknown period options: {', '.join(unknown)}")

    return PeriodOptions(**options)


def create_period(
    start: DateLike,
    end: DateLike,
    options: Union[PeriodOptions, Mapping[str, str], None] = None,
) -> Period:
    """
    Create a Period from start/end and an options mapping.

    Args:
        start: Start date (string, datetime or date)
        end: End date (string, datetime or date)
        options: See resolve_options()

    Returns:
        New Period

    Examples:
        >>> create_period("2022-01-01", "2022-01-02", {"granularity": "hour", "exclude_boundaries": "end"})
        Period('2022-01-01T00:00:00+00:00', '2022-01-02T00:00:00+00:00', granularity='hour', exclude_boundaries='end')
    """
    return Period.from_options(start, end, resolve_options(options))


def format_period_display(period: Optional[Period]) -> str:
    """
    Format a period in interval notation at its granularity.

    "[" / "]" mark an included raw endpoint, "(" / ")" an excluded one.

    Args:
        period: Period to format (None allowed)

    Returns:
        Display string, or "" for None

    Examples:
        >>> format_period_display(Period("2022-01-01", "2022-01-10", exclude_boundaries="end"))
        '[2022-01-01, 2022-01-10)'

        >>> format_period_display(Period("2022-01-01", "2022-03-01", granularity="month"))
        '[2022-01, 2022-03]'
    """
    if not period:
        return ""

    fmt = _DISPLAY_FORMATS[period.granularity]
    left = "[" if period.includes_start else "("
    right = "]" if period.includes_end else ")"

    return f"{left}{period.start.strftime(fmt)}, {period.end.strftime(fmt)}{right}"


def period_to_dict(period: Period) -> dict:
    """
    Export a period as a plain dict.

    Returns:
        {
            "start_ts": datetime,
            "end_ts": datetime,
            "included_start_ts": datetime,
            "included_end_ts": datetime,
            "granularity": str,
            "exclude_boundaries": str,
            "length": int,
            "count": int,
        }
    """
    return {
        "start_ts": period.start,
        "end_ts": period.end,
        "included_start_ts": period.included_start,
        "included_end_ts": period.included_end,
        "granularity": period.granularity,
        "exclude_boundaries": period.exclude_boundaries,
        "length": period.length(),
        "count": period.count(),
    }


__all__ = [
    "resolve_options",
    "create_period",
    "format_period_display",
    "period_to_dict",
]
