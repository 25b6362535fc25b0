"""
SQLAlchemy database models (schemas).
"""
from emissions_tracker.database.schemas.emission_log import DailyLogEmissionDBModel
from emissions_tracker.database.schemas.reference_line import ReferenceLineDBModel
from emissions_tracker.database.schemas.vessel import VesselDBModel

__all__ = [
    "DailyLogEmissionDBModel",
    "ReferenceLineDBModel",
    "VesselDBModel",
]
