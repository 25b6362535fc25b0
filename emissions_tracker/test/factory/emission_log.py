"""
Factory for DailyLogEmission models.

``vessel_id`` has no default; pass the IMO number of a vessel created with
VesselFactory.
"""
from datetime import datetime, timedelta, timezone

import factory

from emissions_tracker.database.schemas import DailyLogEmissionDBModel
from emissions_tracker.test.factory.base_factory import AsyncSQLAlchemyFactory
from emissions_tracker.test.factory.create_async_session import async_session


class DailyLogEmissionFactory(AsyncSQLAlchemyFactory):
    """Factory for creating DailyLogEmission test instances."""

    class Meta:
        model = DailyLogEmissionDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    eid = factory.Sequence(lambda n: f"E{n}")
    log_id = factory.Sequence(lambda n: str(1000 + n))
    to_utc = datetime(2023, 3, 28, tzinfo=timezone.utc)
    from_utc = factory.LazyAttribute(lambda obj: obj.to_utc - timedelta(days=1))
    tot_co2 = 120.0
