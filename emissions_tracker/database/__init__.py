"""
Database package.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

from emissions_tracker.database.session_manager.db_session import Database  # noqa: E402

__all__ = ["Base", "Database"]
