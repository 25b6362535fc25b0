"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from emissions_tracker.database.repositories.base import BaseRepository
from emissions_tracker.database.repositories.emission_log import EmissionLogRepository
from emissions_tracker.database.repositories.reference_line import ReferenceLineRepository
from emissions_tracker.database.repositories.vessel import VesselRepository

__all__ = [
    "BaseRepository",
    "EmissionLogRepository",
    "ReferenceLineRepository",
    "VesselRepository",
]
