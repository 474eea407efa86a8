"""Granularity and Boundary Normalization
---------------------------------------

Validation of the two enumerations every Period is configured with, plus
coercion of raw inputs into date values.

Granularities:
  year, month, day, hour, minute, second

Boundary modes (which raw endpoints are EXCLUDED):
  none  -> [start, end]
  start -> (start, end]
  end   -> [start, end)
  both  -> (start, end)

Examples:
  >>> normalize_granularity(" Hour ")
  'hour'

  >>> resolve_boundaries("end")
  (True, False)

  >>> get_boundaries(True, False)
  'end'

  >>> create_date("2022-01-10")
  datetime.datetime(2022, 1, 10, 0, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

try:
    from dateutil import parser as dateutil_parser
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from periodalgebra.errors import InvalidArgumentError


# ---- Enumerations ----

GRANULARITIES = ("year", "month", "day", "hour", "minute", "second")

# boundary mode -> (includes_start, includes_end)
BOUNDARIES = {
    "both": (False, False),
    "start": (False, True),
    "end": (True, False),
    "none": (True, True),
}

DEFAULT_GRANULARITY = "day"
DEFAULT_BOUNDARIES = "none"

# Minimum RapidFuzz score for a "did you mean" hint
SUGGESTION_THRESHOLD = 60

DateLike = Union[str, date, datetime]


# ---- Helpers ----

def _norm(value: str) -> str:
    return value.strip().lower()


def suggest_choice(value: str, choices) -> Optional[str]:
    """
    Closest valid choice for a misspelled option, if any is close enough.

    Args:
        value: Rejected input (e.g., "hours", "mnth")
        choices: Valid names to match against

    Returns:
        Best matching choice, or None if nothing scores above the threshold

    Examples:
        >>> suggest_choice("mnth", GRANULARITIES)
        'month'

        >>> suggest_choice("zzz", GRANULARITIES) is None
        True
    """
    if not value:
        return None

    match = process.extractOne(value, list(choices), scorer=fuzz.WRatio)
    if match:
        best, score, _ = match
        if score >= SUGGESTION_THRESHOLD:
            return best
    return None


def _invalid(kind: str, value, choices) -> InvalidArgumentError:
    message = f"Invalid {kind}: {value}"
    if isinstance(value, str):
        hint = suggest_choice(_norm(value), choices)
        if hint:
            message += f" (did you mean '{hint}'?)"
    return InvalidArgumentError(message)


# ---- Granularity ----

def normalize_granularity(value: str) -> str:
    """
    Normalize and validate a granularity name.

    Args:
        value: Granularity name, any case (e.g., "Day", "HOUR")

    Returns:
        Lower-case granularity name

    Raises:
        InvalidArgumentError: If the value is not one of GRANULARITIES
    """
    if not isinstance(value, str):
        raise _invalid("granularity", value, GRANULARITIES)

    granularity = _norm(value)
    if granularity not in GRANULARITIES:
        raise _invalid("granularity", value, GRANULARITIES)

    return granularity


# ---- Boundaries ----

def normalize_boundaries(value: str) -> str:
    """
    Normalize and validate a boundary mode.

    Args:
        value: One of "none", "start", "end", "both" (any case)

    Returns:
        Lower-case boundary mode

    Raises:
        InvalidArgumentError: If the value is not a known boundary mode
    """
    if not isinstance(value, str):
        raise _invalid("boundaries", value, BOUNDARIES)

    boundaries = _norm(value)
    if boundaries not in BOUNDARIES:
        raise _invalid("boundaries", value, BOUNDARIES)

    return boundaries


def resolve_boundaries(value: str) -> Tuple[bool, bool]:
    """Boundary mode -> (includes_start, includes_end)."""
    return BOUNDARIES[normalize_boundaries(value)]


def get_boundaries(includes_start: bool, includes_end: bool) -> str:
    """
    Boundary mode for a pair of inclusion flags.

    Exact inverse of BOUNDARIES, used whenever an operation rebuilds a
    period from flags taken off other periods.

    Examples:
        >>> get_boundaries(False, False)
        'both'

        >>> get_boundaries(True, True)
        'none'
    """
    if not includes_start and not includes_end:
        return "both"

    if not includes_start:
        return "start"

    if not includes_end:
        return "end"

    return "none"


# ---- Dates ----

def create_date(value: DateLike) -> datetime:
    """
    Coerce a date-ish value into a datetime.

    Accepts:
      - Strings parsed with dateutil ("2022-01-10", "2022-01-10T14:30:00+02:00")
      - datetime instances (pandas.Timestamp included)
      - date instances (midnight)

    Naive values are taken to be UTC; aware values keep their tzinfo.

    Args:
        value: Date string, datetime, or date

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidArgumentError: If the value cannot be parsed or is not date-like
    """
    if isinstance(value, str):
        try:
            value = dateutil_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise InvalidArgumentError(f"Invalid date: {value}") from e
    elif hasattr(value, "to_pydatetime"):
        value = value.to_pydatetime()
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if not isinstance(value, datetime):
        raise InvalidArgumentError(f"Invalid date: {value!r}")

    if value.tzinfo is None:
        # Assume UTC if no timezone
        value = value.replace(tzinfo=timezone.utc)

    return value


__all__ = [
    "GRANULARITIES",
    "BOUNDARIES",
    "DEFAULT_GRANULARITY",
    "DEFAULT_BOUNDARIES",
    "normalize_granularity",
    "normalize_boundaries",
    "resolve_boundaries",
    "get_boundaries",
    "suggest_choice",
    "create_date",
]
