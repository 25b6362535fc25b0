"""
FastAPI dependencies.
"""
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.core.config import Config
from emissions_tracker.database.session_manager.db_session import Database


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session for one request.

    Commits when the request handler succeeds, rolls back otherwise.
    """
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    """Configuration the running app was created with."""
    return request.app.state.config
