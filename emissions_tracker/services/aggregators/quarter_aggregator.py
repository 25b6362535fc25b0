"""
Calendar-quarter bucketing of emission records.

Records are bucketed by the UTC calendar quarter of their end timestamp
(to_utc). Each bucket is represented by its latest-ending record, which is
the quarter's closing snapshot; values are sampled, never averaged.
"""
import logging
import math
from datetime import datetime
from typing import Iterable, NamedTuple, Optional, Sequence

from emissions_tracker.pydantic_models.snapshot import EmissionRecord
from emissions_tracker.utils.constants import MONTHS_PER_QUARTER
from emissions_tracker.utils.datetime_utils import as_utc


class QuarterKey(NamedTuple):
    year: int
    quarter: int

    @property
    def label(self) -> str:
        return f"Q{self.quarter}"


def quarter_of(moment: datetime) -> QuarterKey:
    """Return the (year, quarter) of ``moment`` in the UTC calendar."""
    moment = as_utc(moment)
    return QuarterKey(moment.year, math.ceil(moment.month / MONTHS_PER_QUARTER))


class QuarterAggregator:
    """Groups a vessel's emission records into calendar-quarter buckets."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def group_by_quarter(
        self, records: Iterable[EmissionRecord]
    ) -> dict[QuarterKey, list[EmissionRecord]]:
        """
        Bucket records by the quarter of their to_utc.

        Records are ordered ascending by to_utc first. The sort is stable, so
        input that is already ordered keeps its order, including ties. Buckets
        are returned in chronological order.
        """
        ordered = sorted(records, key=lambda record: as_utc(record.to_utc))

        buckets: dict[QuarterKey, list[EmissionRecord]] = {}
        for record in ordered:
            buckets.setdefault(quarter_of(record.to_utc), []).append(record)

        self.logger.debug(
            f"Grouped {len(ordered)} records into {len(buckets)} quarters"
        )
        return buckets

    @staticmethod
    def representative(bucket: Sequence[EmissionRecord]) -> Optional[EmissionRecord]:
        """The last (latest-ending) record of a bucket, or None if it is empty."""
        if not bucket:
            return None
        return bucket[-1]
