"""
Async session manager.

``Database.init`` is called once at startup (or per test); every request then
opens its own session with ``async with Database() as session``.
"""
import logging
from typing import Any, Optional

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from emissions_tracker.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Async context manager around a single AsyncSession.

    Commits when the block exits cleanly and rolls back otherwise.
    """

    _engine: Optional[AsyncEngine] = None
    _async_session_maker: Optional[async_sessionmaker] = None

    def __init__(self):
        self.session: Optional[AsyncSession] = None

    @classmethod
    def init(cls, async_db_url: URL, engine_kw: Optional[dict[str, Any]] = None):
        """
        Create the engine and session maker.

        Args:
            async_db_url: SQLAlchemy URL with an async driver
            engine_kw: Extra keyword arguments for create_async_engine
        """
        cls._engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = async_sessionmaker(
            bind=cls._engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database initialized for {async_db_url.drivername}")

    @classmethod
    async def dispose(cls):
        if cls._engine is not None:
            await cls._engine.dispose()
        cls._engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized("Call Database.init() before opening a session")
        self.session = self._async_session_maker()
        return self.session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.session.commit()
            else:
                await self.session.rollback()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database transaction failed: {e}")
            raise DatabaseTransactionError(str(e)) from e
        finally:
            await self.session.close()
