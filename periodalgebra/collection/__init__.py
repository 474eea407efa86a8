"""Collection module: ordered sequences of Periods and their set operations.

Public API:
    PeriodCollection(*periods)
        Ordered collection with boundaries/sort/unique/gaps/intersect/
        overlap_all/subtract

    create_collection(periods) -> PeriodCollection
    collection_to_frame(collection) -> pandas.DataFrame
    collection_from_records(records, options=None) -> PeriodCollection
    format_collection_display(collection) -> str
"""

from periodalgebra.collection.collectioncore import PeriodCollection
from periodalgebra.collection.collectionapi import (
    FRAME_COLUMNS,
    create_collection,
    collection_to_frame,
    collection_from_records,
    format_collection_display,
)

__all__ = [
    "PeriodCollection",
    "FRAME_COLUMNS",
    "create_collection",
    "collection_to_frame",
    "collection_from_records",
    "format_collection_display",
]
