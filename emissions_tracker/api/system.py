"""
Service metadata and health endpoints.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from emissions_tracker.core.config import Config
from emissions_tracker.core.dependencies import get_app_config
from emissions_tracker.database.session_manager.db_session import Database

router = APIRouter(tags=["System"])

logger = logging.getLogger(__name__)


@router.get("/")
async def root(config: Config = Depends(get_app_config)):
    """Service name, version and the deviation endpoints."""
    api_settings = config.section("api")
    return {
        "message": api_settings.get("title", "Vessel Emissions Deviation API"),
        "version": api_settings.get("version", "1.0.0"),
        "curve": config.section("baseline").get("curve", "cubic_year_power_dwt"),
        "endpoints": {
            "deviations": "/api/emissions/deviations",
            "vessels": "/api/emissions/vessels",
            "reference_lines": "/api/reference-lines/",
        },
    }


@router.get("/health")
async def health_check():
    """
    Report whether the database answers a trivial query.

    An uninitialized database surfaces through the 503 handler registered in
    ``create_app``; a failing query is reported here as unhealthy.
    """
    async with Database() as session:
        try:
            await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check query failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable"},
            )
    return {"status": "healthy", "database": "ok"}
