"""PeriodCollection API.

Functional entry points around PeriodCollection: construction from
iterables and tabular records, export to a pandas DataFrame, and display.
"""

from __future__ import annotations
import logging
from typing import Iterable, Mapping, Optional, Union

import pandas as pd

from periodalgebra.collection.collectioncore import PeriodCollection
from periodalgebra.errors import InvalidArgumentError
from periodalgebra.period.periodapi import (
    format_period_display,
    period_to_dict,
    resolve_options,
)
from periodalgebra.period.periodcore import Period, PeriodOptions

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "start_ts",
    "end_ts",
    "included_start_ts",
    "included_end_ts",
    "granularity",
    "exclude_boundaries",
    "length",
    "count",
]


def create_collection(periods: Iterable[Period]) -> PeriodCollection:
    """Build a collection from any iterable of periods, keeping order."""
    return PeriodCollection(*periods)


def collection_to_frame(collection: PeriodCollection) -> pd.DataFrame:
    """
    Export a collection as a DataFrame, one row per period in order.

    Args:
        collection: PeriodCollection to export

    Returns:
        DataFrame with FRAME_COLUMNS (empty, with those columns, for an
        empty collection)

    Examples:
        >>> c = PeriodCollection(Period("2022-01-01", "2022-01-05"), Period("2022-01-10", "2022-01-15"))
        >>> collection_to_frame(c)[["granularity", "count"]]
          granularity  count
        0         day      5
        1         day      6
    """
    rows = [period_to_dict(period) for period in collection]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def _row_value(row: Mapping, key: str):
    value = row.get(key)
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return value


def collection_from_records(
    records: Union[pd.DataFrame, Iterable[Mapping]],
    options: Union[PeriodOptions, Mapping[str, str], None] = None,
) -> PeriodCollection:
    """
    Build a collection from tabular records.

    Each record needs "start_ts" and "end_ts". Optional "granularity" and
    "exclude_boundaries" values override the defaults from options.

    Args:
        records: DataFrame or iterable of mappings
        options: Defaults for records without their own settings

    Returns:
        PeriodCollection in record order

    Raises:
        InvalidArgumentError: If a record lacks start_ts or end_ts

    Examples:
        >>> df = pd.DataFrame({"start_ts": ["2022-01-01"], "end_ts": ["2022-01-10"]})
        >>> collection_from_records(df, {"exclude_boundaries": "end"})
        PeriodCollection(Period('2022-01-01T00:00:00+00:00', '2022-01-10T00:00:00+00:00', granularity='day', exclude_boundaries='end'))
    """
    defaults = resolve_options(options)

    if isinstance(records, pd.DataFrame):
        records = records.to_dict("records")

    periods = []
    for position, row in enumerate(records):
        start = _row_value(row, "start_ts")
        end = _row_value(row, "end_ts")
        if start is None or end is None:
            raise InvalidArgumentError(f"Record {position} needs both start_ts and end_ts")

        periods.append(Period(
            start,
            end,
            _row_value(row, "granularity") or defaults.granularity,
            _row_value(row, "exclude_boundaries") or defaults.exclude_boundaries,
        ))

    logger.debug(f"Loaded {len(periods)} periods from records")

    return PeriodCollection(*periods)


def format_collection_display(collection: Optional[PeriodCollection]) -> str:
    """
    Comma-joined interval notation for every period.

    Examples:
        >>> format_collection_display(PeriodCollection(Period("2022-01-01", "2022-01-05")))
        '[2022-01-01, 2022-01-05]'
    """
    if not collection:
        return ""

    return ", ".join(format_period_display(period) for period in collection)


__all__ = [
    "FRAME_COLUMNS",
    "create_collection",
    "collection_to_frame",
    "collection_from_records",
    "format_collection_display",
]
