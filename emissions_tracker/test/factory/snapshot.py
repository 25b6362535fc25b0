"""
Factories for the immutable snapshot models used by the deviation engine.

These build plain pydantic objects; nothing is persisted.
"""
from datetime import datetime, timedelta, timezone

import factory

from emissions_tracker.pydantic_models.snapshot import (
    EmissionRecord,
    ReferenceCoefficientRow,
    VesselSnapshot,
)
from emissions_tracker.utils.constants import ReferenceCategory


class ReferenceCoefficientRowFactory(factory.Factory):
    """Flat PP curve with baseline 100 for type 7."""

    class Meta:
        model = ReferenceCoefficientRow

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


class EmissionRecordFactory(factory.Factory):
    """One-day log interval ending at ``to_utc``."""

    class Meta:
        model = EmissionRecord

    eid = factory.Sequence(lambda n: f"E{n}")
    log_id = factory.Sequence(lambda n: str(1000 + n))
    to_utc = datetime(2023, 3, 28, tzinfo=timezone.utc)
    from_utc = factory.LazyAttribute(lambda obj: obj.to_utc - timedelta(days=1))
    tot_co2 = 120.0


class VesselSnapshotFactory(factory.Factory):
    class Meta:
        model = VesselSnapshot

    imo_no = factory.Sequence(lambda n: str(9300000 + n))
    name = factory.Sequence(lambda n: f"Test Vessel {n}")
    vessel_type = 7
    dwt = 80000.0
    emissions = ()
