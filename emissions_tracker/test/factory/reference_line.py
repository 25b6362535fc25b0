"""
Factory for ReferenceLine models.

Defaults describe a flat curve: a=b=c=e=0 and d=100, so the baseline is 100
for every year and deadweight under the cubic-year/power-dwt family.
"""
import factory

from emissions_tracker.database.schemas import ReferenceLineDBModel
from emissions_tracker.test.factory.base_factory import AsyncSQLAlchemyFactory
from emissions_tracker.test.factory.create_async_session import async_session
from emissions_tracker.utils.constants import ReferenceCategory


class ReferenceLineFactory(AsyncSQLAlchemyFactory):
    """Factory for creating ReferenceLine test instances."""

    class Meta:
        model = ReferenceLineDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    row_id = factory.Sequence(lambda n: n + 1)
    category = ReferenceCategory.POSEIDON_PRINCIPLES
    vessel_type_id = 7
    size = "0-99999"
    traj = "IMO2050"
    a = 0.0
    b = 0.0
    c = 0.0
    d = 100.0
    e = 0.0


class EEDIReferenceLineFactory(ReferenceLineFactory):
    """Reference line in the EEDI category, never used for PP baselines."""

    category = ReferenceCategory.EEDI
    traj = "EEDI"
