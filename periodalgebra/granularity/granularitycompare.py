"""Granularity-Aware Comparison and Arithmetic
--------------------------------------------

Every ordering question and every unit step in the package goes through
this module, so the meaning of a granularity lives in one place.

Two dates are compared at a granularity by truncating both to the start of
their unit: 2022-01-05 and 2022-01-05 14:00 are the same at "day" but not at
"hour". Passing granularity=None compares the raw datetimes.

Arithmetic uses dateutil's relativedelta, so month and year steps clamp at
month ends (2022-01-31 + 1 month = 2022-02-28).

Examples:
  >>> a = create_date("2022-01-05")
  >>> b = create_date("2022-01-05T14:00")
  >>> is_same(a, b, "day"), is_same(a, b, "hour")
  (True, False)

  >>> diff(create_date("2022-01-10"), create_date("2022-01-01"), "day")
  9
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional, Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from periodalgebra.errors import InvalidArgumentError


# ---- Truncation ----

def _start_of_year(dt: datetime) -> datetime:
    return dt.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


def _start_of_month(dt: datetime) -> datetime:
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _start_of_hour(dt: datetime) -> datetime:
    return dt.replace(minute=0, second=0, microsecond=0)


def _start_of_minute(dt: datetime) -> datetime:
    return dt.replace(second=0, microsecond=0)


def _start_of_second(dt: datetime) -> datetime:
    return dt.replace(microsecond=0)


_TRUNCATORS = {
    "year": _start_of_year,
    "month": _start_of_month,
    "day": _start_of_day,
    "hour": _start_of_hour,
    "minute": _start_of_minute,
    "second": _start_of_second,
}

# Fixed-length units; year and month are counted with relativedelta
_FIXED_UNITS = {
    "day": timedelta(days=1),
    "hour": timedelta(hours=1),
    "minute": timedelta(minutes=1),
    "second": timedelta(seconds=1),
}


def _lookup(table: dict, granularity: str):
    try:
        return table[granularity]
    except KeyError:
        raise InvalidArgumentError(f"Invalid granularity: {granularity}") from None


def truncate(date: datetime, granularity: Optional[str] = None) -> datetime:
    """
    Start of the granularity unit containing a date.

    Args:
        date: Date to truncate
        granularity: One of GRANULARITIES, or None to return the date unchanged

    Returns:
        Truncated datetime (tzinfo preserved)
    """
    if granularity is None:
        return date
    return _lookup(_TRUNCATORS, granularity)(date)


# ---- Comparison ----

def is_before(a: datetime, b: datetime, granularity: Optional[str] = None) -> bool:
    """True if a is before b at the granularity."""
    return truncate(a, granularity) < truncate(b, granularity)


def is_after(a: datetime, b: datetime, granularity: Optional[str] = None) -> bool:
    """True if a is after b at the granularity."""
    return truncate(a, granularity) > truncate(b, granularity)


def is_same(a: datetime, b: datetime, granularity: Optional[str] = None) -> bool:
    """True if a and b fall in the same granularity unit."""
    return truncate(a, granularity) == truncate(b, granularity)


def is_same_or_before(a: datetime, b: datetime, granularity: Optional[str] = None) -> bool:
    """True if a is the same as or before b at the granularity."""
    return truncate(a, granularity) <= truncate(b, granularity)


def is_same_or_after(a: datetime, b: datetime, granularity: Optional[str] = None) -> bool:
    """True if a is the same as or after b at the granularity."""
    return truncate(a, granularity) >= truncate(b, granularity)


# ---- Arithmetic ----

def add(date: datetime, amount: int, granularity: str) -> datetime:
    """
    Shift a date forward by a number of granularity units.

    Args:
        date: Date to shift
        amount: Number of units (negative shifts backwards)
        granularity: One of GRANULARITIES (required)

    Returns:
        Shifted datetime

    Examples:
        >>> add(create_date("2022-01-31"), 1, "month")
        datetime.datetime(2022, 2, 28, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if granularity not in _TRUNCATORS:
        raise InvalidArgumentError(f"Invalid granularity: {granularity}")
    return date + relativedelta(**{f"{granularity}s": amount})


def sub(date: datetime, amount: int, granularity: str) -> datetime:
    """Shift a date backward by a number of granularity units."""
    return add(date, -amount, granularity)


def diff(
    a: datetime,
    b: datetime,
    granularity: Optional[str] = None,
) -> Union[int, timedelta]:
    """
    Signed difference a - b in whole granularity units.

    Both dates are truncated to the granularity first, so the result counts
    unit boundaries rather than elapsed time: 2022-01-02 01:00 minus
    2022-01-01 23:00 is 1 day.

    Args:
        a: Later date (for a positive result)
        b: Earlier date
        granularity: One of GRANULARITIES, or None for the raw timedelta

    Returns:
        Integer number of units, or a timedelta when granularity is None
    """
    if granularity is None:
        return a - b

    a = truncate(a, granularity)
    b = truncate(b, granularity)

    if granularity in ("year", "month"):
        delta = relativedelta(a, b)
        if granularity == "year":
            return delta.years
        return delta.years * 12 + delta.months

    return (a - b) // _FIXED_UNITS[granularity]


__all__ = [
    "truncate",
    "is_before",
    "is_after",
    "is_same",
    "is_same_or_before",
    "is_same_or_after",
    "add",
    "sub",
    "diff",
]
