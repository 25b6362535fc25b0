"""
Repository for DailyLogEmission database operations.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.database.repositories.base import BaseRepository
from emissions_tracker.database.schemas import DailyLogEmissionDBModel


class EmissionLogRepository(BaseRepository[DailyLogEmissionDBModel]):
    """
    Repository for per-log-interval emission records.

    Records are keyed by (eid, log_id); re-importing a record overwrites it.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(DailyLogEmissionDBModel, session)
