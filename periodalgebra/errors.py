"""Error taxonomy for period algebra.

Two kinds of failure exist, both raised up front before any work is done:

  - InvalidArgumentError: a granularity, boundary mode, options key or date
    value that cannot be understood.
  - RuntimeConflictError: inputs that are individually valid but conflict,
    i.e. an end before its start or periods of different granularities.

"No result" outcomes (no overlap, no gap) are not errors; operations return
None for those.
"""


class PeriodError(Exception):
    """Base class for all period algebra errors."""


class InvalidArgumentError(PeriodError, ValueError):
    """Unrecognized granularity, boundary mode, options key or date value."""


class RuntimeConflictError(PeriodError, RuntimeError):
    """End before start, or periods with mismatched granularities."""


__all__ = [
    "PeriodError",
    "InvalidArgumentError",
    "RuntimeConflictError",
]
