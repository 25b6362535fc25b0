"""
In-memory lookup of reference coefficient rows.

Holds one reference dataset snapshot; lookups never touch the database.
"""
from dataclasses import dataclass
from typing import Iterable

from emissions_tracker.pydantic_models.snapshot import ReferenceCoefficientRow


@dataclass(frozen=True)
class ReferenceCurveQuery:
    """
    Exact-match query on reference rows.

    A row matches when both its vessel type id and its category are equal to
    the query's. Size bracket and trajectory are not filtered; every bracket
    and trajectory for the type is a candidate.
    """

    vessel_type_id: int
    category: str

    def matches(self, row: ReferenceCoefficientRow) -> bool:
        return (
            row.vessel_type_id == self.vessel_type_id
            and row.category == self.category
        )


class ReferenceCurveRepository:
    """Snapshot of the reference dataset with exact-match lookup."""

    def __init__(self, rows: Iterable[ReferenceCoefficientRow]):
        self._rows = tuple(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def find_matching(
        self, query: ReferenceCurveQuery
    ) -> frozenset[ReferenceCoefficientRow]:
        """
        Return every row matching ``query``.

        An empty result is normal and means no baseline can be derived.
        """
        return frozenset(row for row in self._rows if query.matches(row))
