"""Period
------

A single bounded, granularity-quantized interval of time.

A Period is defined by raw start/end dates, a granularity and a boundary
mode saying which raw endpoints are excluded. From these it derives, once,
its included bounds: the first and last granularity points it actually
covers. Every predicate and operation works on the included bounds, so
exclusivity never has to be re-checked downstream.

Key Design Principles:
  1. Immutable value: operations always return new Periods/collections
  2. Two-period operations require matching granularities
  3. "No result" (no overlap, no gap) is None, not an exception
  4. Iteration is a pure function of index: restartable, no shared cursor

Examples:
  >>> a = Period("2022-01-01", "2022-01-15")
  >>> b = Period("2022-01-10", "2022-01-20")
  >>> a.overlap(b)
  Period('2022-01-10T00:00:00+00:00', '2022-01-15T00:00:00+00:00', granularity='day', exclude_boundaries='none')
  >>> a.subtract(b)
  PeriodCollection(Period('2022-01-01T00:00:00+00:00', '2022-01-10T00:00:00+00:00', granularity='day', exclude_boundaries='end'))
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Iterator, Optional

from periodalgebra.errors import RuntimeConflictError
from periodalgebra.granularity.granularitynormalize import (
    DEFAULT_BOUNDARIES,
    DEFAULT_GRANULARITY,
    DateLike,
    create_date,
    get_boundaries,
    normalize_boundaries,
    normalize_granularity,
    resolve_boundaries,
)
from periodalgebra.granularity.granularitycompare import (
    add,
    diff,
    is_after,
    is_before,
    is_same,
    is_same_or_after,
    is_same_or_before,
    sub,
    truncate,
)

if TYPE_CHECKING:
    from periodalgebra.collection.collectioncore import PeriodCollection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodOptions:
    """Granularity and boundary configuration for a Period."""

    granularity: str = DEFAULT_GRANULARITY
    exclude_boundaries: str = DEFAULT_BOUNDARIES

    def __post_init__(self):
        # Normalize on creation so equal configurations compare equal
        object.__setattr__(self, "granularity", normalize_granularity(self.granularity))
        object.__setattr__(self, "exclude_boundaries", normalize_boundaries(self.exclude_boundaries))


def _collection(*periods: "Period") -> "PeriodCollection":
    # Deferred: the collection module imports this one
    from periodalgebra.collection.collectioncore import PeriodCollection

    return PeriodCollection(*periods)


def check_granularity(a: "Period", b: "Period") -> None:
    """
    Require two periods to share a granularity.

    Raises:
        RuntimeConflictError: If the granularities differ
    """
    if a.granularity == b.granularity:
        return

    raise RuntimeConflictError(
        f"Period granularities do not match: {a.granularity} != {b.granularity}"
    )


class Period:
    """
    Bounded time interval at a fixed granularity.

    Args:
        start: Start date (string, datetime or date)
        end: End date (string, datetime or date)
        granularity: "year", "month", "day" (default), "hour", "minute", "second"
        exclude_boundaries: "none" (default), "start", "end", "both"

    Raises:
        InvalidArgumentError: Unknown granularity, boundary mode or date
        RuntimeConflictError: Included end before included start
    """

    __slots__ = (
        "_start",
        "_end",
        "_granularity",
        "_includes_start",
        "_includes_end",
        "_included_start",
        "_included_end",
    )

    def __init__(
        self,
        start: DateLike,
        end: DateLike,
        granularity: str = DEFAULT_GRANULARITY,
        exclude_boundaries: str = DEFAULT_BOUNDARIES,
    ):
        granularity = normalize_granularity(granularity)
        includes_start, includes_end = resolve_boundaries(exclude_boundaries)

        self._init_parts(
            create_date(start),
            create_date(end),
            granularity,
            includes_start,
            includes_end,
        )

    def _init_parts(
        self,
        start: datetime,
        end: datetime,
        granularity: str,
        includes_start: bool,
        includes_end: bool,
    ) -> None:
        self._start = start
        self._end = end
        self._granularity = granularity
        self._includes_start = includes_start
        self._includes_end = includes_end

        self._included_start = start if includes_start else add(start, 1, granularity)
        self._included_end = end if includes_end else sub(end, 1, granularity)

        if is_before(self._included_end, self._included_start, granularity):
            raise RuntimeConflictError("The end date must be after the start date")

    @classmethod
    def _from_parts(
        cls,
        start: datetime,
        end: datetime,
        granularity: str,
        includes_start: bool,
        includes_end: bool,
    ) -> "Period":
        """Build from already-validated dates, granularity and inclusion flags."""
        period = cls.__new__(cls)
        period._init_parts(start, end, granularity, includes_start, includes_end)
        return period

    @classmethod
    def from_options(
        cls,
        start: DateLike,
        end: DateLike,
        options: Optional[PeriodOptions] = None,
    ) -> "Period":
        """Build a Period from a PeriodOptions configuration."""
        options = options or PeriodOptions()
        return cls(start, end, options.granularity, options.exclude_boundaries)

    # ---- Accessors ----

    @property
    def start(self) -> datetime:
        """Raw start date."""
        return self._start

    @property
    def end(self) -> datetime:
        """Raw end date."""
        return self._end

    @property
    def granularity(self) -> str:
        return self._granularity

    @property
    def includes_start(self) -> bool:
        return self._includes_start

    @property
    def includes_end(self) -> bool:
        return self._includes_end

    @property
    def included_start(self) -> datetime:
        """First granularity point covered by the period."""
        return self._included_start

    @property
    def included_end(self) -> datetime:
        """Last granularity point covered by the period."""
        return self._included_end

    @property
    def exclude_boundaries(self) -> str:
        return get_boundaries(self._includes_start, self._includes_end)

    @property
    def options(self) -> PeriodOptions:
        return PeriodOptions(self._granularity, self.exclude_boundaries)

    def length(self) -> int:
        """
        Number of granularity steps from included start to included end.

        Examples:
            >>> Period("2022-01-01", "2022-01-10").length()
            9
            >>> Period("2022-01-01", "2022-01-02", granularity="hour").length()
            24
        """
        return diff(self._included_end, self._included_start, self._granularity)

    def count(self) -> int:
        """Number of granularity points covered (length() + 1)."""
        return self.length() + 1

    # ---- Date predicates ----

    def includes(self, date: DateLike) -> bool:
        """True if the date falls within the included bounds."""
        date = create_date(date)
        return (
            is_same_or_before(self._included_start, date, self._granularity)
            and is_same_or_after(self._included_end, date, self._granularity)
        )

    def start_equals(self, date: DateLike) -> bool:
        return is_same(self._included_start, create_date(date), self._granularity)

    def starts_before(self, date: DateLike) -> bool:
        return is_before(self._included_start, create_date(date), self._granularity)

    def starts_before_or_equals(self, date: DateLike) -> bool:
        return is_same_or_before(self._included_start, create_date(date), self._granularity)

    def starts_after(self, date: DateLike) -> bool:
        return is_after(self._included_start, create_date(date), self._granularity)

    def starts_after_or_equals(self, date: DateLike) -> bool:
        return is_same_or_after(self._included_start, create_date(date), self._granularity)

    def end_equals(self, date: DateLike) -> bool:
        return is_same(self._included_end, create_date(date), self._granularity)

    def ends_before(self, date: DateLike) -> bool:
        return is_before(self._included_end, create_date(date), self._granularity)

    def ends_before_or_equals(self, date: DateLike) -> bool:
        return is_same_or_before(self._included_end, create_date(date), self._granularity)

    def ends_after(self, date: DateLike) -> bool:
        return is_after(self._included_end, create_date(date), self._granularity)

    def ends_after_or_equals(self, date: DateLike) -> bool:
        return is_same_or_after(self._included_end, create_date(date), self._granularity)

    # ---- Period predicates ----

    def contains(self, other: "Period") -> bool:
        """True if the other period lies entirely within this one."""
        check_granularity(self, other)

        return (
            is_same_or_before(self._included_start, other.included_start, self._granularity)
            and is_same_or_after(self._included_end, other.included_end, self._granularity)
        )

    def equals(self, other: "Period") -> bool:
        """True if both periods cover exactly the same granularity points."""
        check_granularity(self, other)

        return (
            is_same(self._included_start, other.included_start, self._granularity)
            and is_same(self._included_end, other.included_end, self._granularity)
        )

    def overlaps_with(self, other: "Period") -> bool:
        """True if the periods share at least one granularity point."""
        check_granularity(self, other)

        return (
            is_same_or_before(self._included_start, other.included_end, self._granularity)
            and is_same_or_after(self._included_end, other.included_start, self._granularity)
        )

    def touches(self, other: "Period") -> bool:
        """True if one period's included start is the other's included end."""
        check_granularity(self, other)

        return (
            is_same(self._included_start, other.included_end, self._granularity)
            or is_same(self._included_end, other.included_start, self._granularity)
        )

    # ---- Operations ----

    def overlap(self, other: "Period") -> Optional["Period"]:
        """
        Intersection of two periods, or None if they do not overlap.

        Each endpoint keeps the inclusivity of the period it was taken from.

        Examples:
            >>> Period("2022-01-01", "2022-01-15").overlap(Period("2022-01-10", "2022-01-20"))
            Period('2022-01-10T00:00:00+00:00', '2022-01-15T00:00:00+00:00', granularity='day', exclude_boundaries='none')

            >>> Period("2022-01-01", "2022-01-05").overlap(Period("2022-01-10", "2022-01-20")) is None
            True
        """
        check_granularity(self, other)
        granularity = self._granularity

        start_period = self if is_after(self._included_start, other.included_start, granularity) else other
        end_period = self if is_before(self._included_end, other.included_end, granularity) else other

        if is_after(start_period.included_start, end_period.included_end, granularity):
            return None

        return Period._from_parts(
            start_period.start,
            end_period.end,
            granularity,
            start_period.includes_start,
            end_period.includes_end,
        )

    def overlap_all(self, *others: "Period") -> Optional["Period"]:
        """Intersection of this period with every other, or None."""
        overlap = Period._from_parts(
            self._start,
            self._end,
            self._granularity,
            self._includes_start,
            self._includes_end,
        )

        for other in others:
            overlap = overlap.overlap(other)

            if overlap is None:
                return None

        return overlap

    def overlap_any(self, *others: "Period") -> "PeriodCollection":
        """Overlaps of this period with each other period, skipping misses."""
        overlaps = []

        for other in others:
            overlap = self.overlap(other)

            if overlap is None:
                continue

            overlaps.append(overlap)

        return _collection(*overlaps)

    def subtract(self, other: "Period") -> "PeriodCollection":
        """
        Parts of this period not covered by the other: zero, one or two pieces.

        A piece's edge at the removed period takes the inverse of that
        period's inclusivity, so pieces and overlap tile this period exactly.

        Examples:
            >>> Period("2022-01-01", "2022-01-15").subtract(Period("2022-01-10", "2022-01-20"))
            PeriodCollection(Period('2022-01-01T00:00:00+00:00', '2022-01-10T00:00:00+00:00', granularity='day', exclude_boundaries='end'))
        """
        check_granularity(self, other)

        if not self.overlaps_with(other):
            return _collection(self)

        granularity = self._granularity
        subtractions = []

        if is_before(self._included_start, other.included_start, granularity):
            subtractions.append(Period._from_parts(
                self._start,
                other.start,
                granularity,
                self._includes_start,
                not other.includes_start,
            ))

        if is_after(self._included_end, other.included_end, granularity):
            subtractions.append(Period._from_parts(
                other.end,
                self._end,
                granularity,
                not other.includes_end,
                self._includes_end,
            ))

        return _collection(*subtractions)

    def subtract_all(self, *others: "Period") -> "PeriodCollection":
        """
        Parts of this period not covered by any of the others.

        Each other period is removed independently and the remainders are
        intersected, so a piece survives only if it survives every removal.
        """
        subtractions = [self.subtract(other) for other in others]

        return _collection(self).overlap_all(*subtractions)

    def gap(self, other: "Period") -> Optional["Period"]:
        """
        Period strictly between two disjoint periods, or None.

        None when the periods overlap, touch, or sit directly next to each
        other with no granularity point between them. The gap's edges take
        the inverse inclusivity of the neighbouring period edges.

        Examples:
            >>> Period("2022-01-01", "2022-01-10").gap(Period("2022-01-15", "2022-01-20"))
            Period('2022-01-10T00:00:00+00:00', '2022-01-15T00:00:00+00:00', granularity='day', exclude_boundaries='both')
        """
        check_granularity(self, other)

        if self.overlaps_with(other) or self.touches(other):
            return None

        granularity = self._granularity

        if is_after(self._included_start, other.included_end, granularity):
            earlier, later = other, self
        else:
            earlier, later = self, other

        if is_same(add(earlier.included_end, 1, granularity), later.included_start, granularity):
            logger.debug(f"No gap: {earlier!r} is directly followed by {later!r}")
            return None

        return Period._from_parts(
            earlier.end,
            later.start,
            granularity,
            not earlier.includes_end,
            not later.includes_start,
        )

    def diff_symmetric(self, other: "Period") -> "PeriodCollection":
        """Parts of either period not covered by their overlap."""
        collection = _collection(self, other)
        overlap = self.overlap(other)

        if overlap is None:
            return collection

        return collection.boundaries().subtract(overlap)

    def renew(self) -> "Period":
        """
        The period of identical length and boundary mode that follows this one.

        Examples:
            >>> Period("2022-01-01", "2022-01-15").renew()
            Period('2022-01-15T00:00:00+00:00', '2022-01-29T00:00:00+00:00', granularity='day', exclude_boundaries='none')
        """
        length = diff(self._end, self._start, self._granularity)

        return Period._from_parts(
            self._end,
            add(self._end, length, self._granularity),
            self._granularity,
            self._includes_start,
            self._includes_end,
        )

    # ---- Iteration ----

    def __iter__(self) -> Iterator[datetime]:
        for index in range(self.count()):
            yield add(self._included_start, index, self._granularity)

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> datetime:
        count = self.count()
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError("Period index out of range")
        return add(self._included_start, index, self._granularity)

    def __contains__(self, date: DateLike) -> bool:
        return self.includes(date)

    # ---- Value protocol ----

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        if self._granularity != other.granularity:
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((
            self._granularity,
            truncate(self._included_start, self._granularity),
            truncate(self._included_end, self._granularity),
        ))

    def __repr__(self) -> str:
        return (
            f"Period({self._start.isoformat()!r}, {self._end.isoformat()!r}, "
            f"granularity={self._granularity!r}, exclude_boundaries={self.exclude_boundaries!r})"
        )


__all__ = [
    "Period",
    "PeriodOptions",
    "check_granularity",
]
