"""
Repository for ReferenceLine database operations.
"""
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.database.repositories.base import BaseRepository
from emissions_tracker.database.schemas import ReferenceLineDBModel
from emissions_tracker.services.selectors.reference_curve_selector import (
    ReferenceCurveQuery,
)


class ReferenceLineRepository(BaseRepository[ReferenceLineDBModel]):
    """Repository for reference curve coefficient rows."""

    def __init__(self, session: AsyncSession):
        super().__init__(ReferenceLineDBModel, session)

    async def get_matching(self, query: ReferenceCurveQuery) -> List[ReferenceLineDBModel]:
        """
        Get rows matching a reference query exactly on vessel type and category.
        """
        stmt = (
            select(self.model)
            .where(
                self.model.vessel_type_id == query.vessel_type_id,
                self.model.category == query.category,
            )
            .order_by(self.model.row_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_dataset(self) -> List[ReferenceLineDBModel]:
        """Get the complete reference dataset ordered by row id."""
        stmt = select(self.model).order_by(self.model.row_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_all(self, rows: List[Dict[str, Any]]) -> List[ReferenceLineDBModel]:
        """
        Replace the reference dataset wholesale.

        Args:
            rows: Field dicts for the new dataset

        Returns:
            The newly created rows
        """
        await self.delete_all()
        return await self.bulk_create(rows)
