"""
Repository for Vessel database operations.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from emissions_tracker.database.repositories.base import BaseRepository
from emissions_tracker.database.schemas import VesselDBModel


class VesselRepository(BaseRepository[VesselDBModel]):
    """Repository for vessel operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(VesselDBModel, session)

    async def get_all_with_emissions(self) -> List[VesselDBModel]:
        """
        Get every vessel with its emission records loaded.

        Emission records are ordered ascending by to_utc; vessels by IMO number.
        Vessels already in the session are refreshed so the collection reflects
        records written through other repositories.
        """
        stmt = (
            select(self.model)
            .options(selectinload(self.model.emissions))
            .order_by(self.model.imo_no)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert_vessel(
        self,
        imo_no: str,
        name: str,
        vessel_type: int,
        dwt: Optional[float] = None,
        default_dwt: Optional[float] = None,
    ) -> VesselDBModel:
        """
        Create or update a vessel by IMO number.

        An existing vessel keeps its deadweight when the source carries none;
        a new vessel falls back to ``default_dwt``.
        """
        existing = await self.get_by_pk(imo_no)
        if existing is None:
            return await self.upsert(
                imo_no=imo_no,
                name=name,
                vessel_type=vessel_type,
                dwt=dwt or default_dwt,
            )

        existing.name = name
        existing.vessel_type = vessel_type
        if dwt:
            existing.dwt = dwt
        await self.session.flush()
        return existing
