"""
Database base configuration.

Builds the async engine URL from config and applies Alembic migrations.
"""
import asyncio
import functools
import logging
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy.engine.url import URL
from sqlalchemy.pool import NullPool

from emissions_tracker.core.config import Config

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "alembic_migrations"

engine_kw = {
    "pool_pre_ping": True,
    # feature will normally emit SQL equivalent to "SELECT 1" each time a connection is checked out from the pool
    "pool_size": 2,  # number of connections to keep open at a time
    "max_overflow": 4,  # number of connections to allow to be opened above pool_size
    "connect_args": {
        "prepared_statement_cache_size": 0,  # disable prepared statement cache
        "statement_cache_size": 0,  # disable statement cache
    },
}

# sqlite connections are not pooled; each session opens the file
sqlite_engine_kw = {"poolclass": NullPool}


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.
    """
    config_db = dict(config.data["db"])
    drivername = config_db.pop("drivername", "postgresql+asyncpg")
    return URL.create(drivername=drivername, **config_db)


def get_engine_kw(async_db_url: URL) -> dict[str, Any]:
    """Pick engine keyword arguments suited to the URL's dialect."""
    if async_db_url.drivername.startswith("sqlite"):
        return sqlite_engine_kw
    return engine_kw


async def apply_db_migration(config: Config):
    """
    Apply Alembic migrations up to head.

    Runs in a worker thread so the event loop is not blocked, but the caller
    waits for completion before serving requests.
    """
    alembic_cfg = alembic_config()
    alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))

    # Alembic runs with synchronous drivers
    async_url = get_db_url(config)
    sync_url = async_url.set(
        drivername=async_url.drivername.replace("+asyncpg", "").replace("+aiosqlite", "")
    )
    alembic_cfg.set_main_option(
        "sqlalchemy.url",
        sync_url.render_as_string(hide_password=False).replace("%", "%%"),
    )

    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
