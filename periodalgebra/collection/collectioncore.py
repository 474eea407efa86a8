"""PeriodCollection
----------------

Ordered sequence of Periods with collection-level set operations built by
folding the pairwise Period operations.

Order is insertion order. Nothing is sorted or de-duplicated implicitly;
sort() and unique() are explicit and return new collections, as do all the
set operations. Indexed writes (collection[i] = p, del collection[i]) are
the only in-place changes.

Examples:
  >>> c = PeriodCollection(Period("2022-01-01", "2022-01-05"), Period("2022-01-10", "2022-01-15"))
  >>> c.gaps()
  PeriodCollection(Period('2022-01-05T00:00:00+00:00', '2022-01-10T00:00:00+00:00', granularity='day', exclude_boundaries='both'))
  >>> c.boundaries()
  Period('2022-01-01T00:00:00+00:00', '2022-01-15T00:00:00+00:00', granularity='day', exclude_boundaries='none')
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from periodalgebra.granularity.granularitycompare import is_after, is_before
from periodalgebra.granularity.granularitynormalize import get_boundaries
from periodalgebra.period.periodcore import Period

logger = logging.getLogger(__name__)


def _check_period(value) -> Period:
    if not isinstance(value, Period):
        raise TypeError(f"PeriodCollection items must be Period, got {type(value).__name__}")
    return value


class PeriodCollection:
    """
    Ordered collection of Period values.

    Args:
        *periods: Periods in the order they should be kept

    Raises:
        TypeError: If any item is not a Period
    """

    __slots__ = ("_periods",)

    def __init__(self, *periods: Period):
        self._periods: List[Period] = [_check_period(period) for period in periods]

    # ---- Sequence protocol ----

    def __len__(self) -> int:
        return len(self._periods)

    def count(self) -> int:
        """Number of periods in the collection."""
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(list(self._periods))

    def __getitem__(self, index):
        """Period at an index, or None when the index is out of range.

        Negative indices count from the end. A slice returns a new
        PeriodCollection.
        """
        if isinstance(index, slice):
            return PeriodCollection(*self._periods[index])
        try:
            return self._periods[index]
        except IndexError:
            return None

    def __setitem__(self, index: Optional[int], value: Period) -> None:
        """Overwrite the period at an index; None (or len) appends."""
        value = _check_period(value)

        if index is None or index == len(self._periods):
            self._periods.append(value)
        else:
            self._periods[index] = value

    def __delitem__(self, index: int) -> None:
        del self._periods[index]

    def append(self, period: Period) -> None:
        self[None] = period

    def __eq__(self, other) -> bool:
        if not isinstance(other, PeriodCollection):
            return NotImplemented
        return self._periods == list(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PeriodCollection({', '.join(repr(period) for period in self._periods)})"

    # ---- Construction ----

    def add(self, *periods: Period) -> "PeriodCollection":
        """New collection with the periods appended."""
        return PeriodCollection(*self._periods, *periods)

    def boundaries(self) -> Optional[Period]:
        """
        Smallest period enclosing every period in the collection.

        Uses the earliest included start and latest included end (first seen
        wins ties) along with their inclusivity. None for an empty collection.
        """
        if not self._periods:
            return None

        first_period = self._periods[0]
        last_period = self._periods[0]

        for period in self._periods:
            if is_before(period.included_start, first_period.included_start):
                first_period = period

            if is_after(period.included_end, last_period.included_end):
                last_period = period

        return Period._from_parts(
            first_period.start,
            last_period.end,
            first_period.granularity,
            first_period.includes_start,
            last_period.includes_end,
        )

    def sort(self) -> "PeriodCollection":
        """New collection ordered by included start timestamp (stable)."""
        return PeriodCollection(
            *sorted(self._periods, key=lambda period: period.included_start.timestamp())
        )

    def unique(self) -> "PeriodCollection":
        """New collection keeping the first of each group of equal periods."""
        periods = []

        for period in self._periods:
            if any(period.equals(kept) for kept in periods):
                continue
            periods.append(period)

        return PeriodCollection(*periods)

    # ---- Operations ----

    def gaps(self) -> "PeriodCollection":
        """Gaps between the periods within their own boundaries."""
        if not self._periods:
            return PeriodCollection()

        logger.debug(f"Computing gaps across {len(self._periods)} periods")

        return self.boundaries().subtract_all(*self._periods)

    def intersect(self, other: Period) -> "PeriodCollection":
        """Overlap of a period with every period in the collection, in order."""
        intersected = PeriodCollection()

        for period in self._periods:
            overlap = other.overlap(period)

            if overlap is None:
                continue

            intersected.append(overlap)

        return intersected

    def overlap_all(self, *others: "PeriodCollection") -> "PeriodCollection":
        """
        Parts covered by this collection and by every other collection.

        Folds left: each stage overlaps every period so far against every
        period of the next collection. An empty collection empties the result.
        """
        overlap = PeriodCollection(*self._periods)

        for other in others:
            overlap = overlap._overlap(other)

        return overlap

    def subtract(self, others: "PeriodCollection") -> "PeriodCollection":
        """Parts of this collection's periods not covered by any other period."""
        if len(others) == 0:
            return PeriodCollection(*self._periods)

        logger.debug(f"Subtracting {len(others)} periods from {len(self._periods)} periods")

        collection = PeriodCollection()

        for period in self._periods:
            subtracted = period.subtract_all(*others)
            collection = collection.add(*subtracted)

        return collection

    def _overlap(self, others: "PeriodCollection") -> "PeriodCollection":
        if len(others) == 0:
            return PeriodCollection()

        collection = PeriodCollection()

        for period in self._periods:
            overlaps = period.overlap_any(*others)
            collection = collection.add(*overlaps)

        return collection


__all__ = [
    "PeriodCollection",
]
