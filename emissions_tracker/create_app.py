"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from emissions_tracker.api import emissions_router, reference_lines_router, system_router
from emissions_tracker.core.config import get_config
from emissions_tracker.database.base import get_db_url, get_engine_kw
from emissions_tracker.database.session_manager.db_session import Database
from emissions_tracker.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)
from emissions_tracker.services.calculators.baseline_curves import UnknownCurveFamily

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(system_router)
    app.include_router(emissions_router)
    app.include_router(reference_lines_router)


def register_exception_handlers(app: FastAPI):
    """Map service errors to JSON responses."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.error(f"HTTPException on {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code, content={"detail": str(exc.detail)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors(), "message": "Validation error"},
        )

    @app.exception_handler(DatabaseNotInitialized)
    @app.exception_handler(DatabaseTransactionError)
    async def database_exception_handler(request: Request, exc: Exception):
        logger.error(f"Database unavailable on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database unavailable"},
        )

    @app.exception_handler(UnknownCurveFamily)
    async def curve_family_exception_handler(request: Request, exc: UnknownCurveFamily):
        # Misconfigured [baseline] curve; no deviation can be computed
        logger.error(f"Baseline configuration error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"Baseline configuration error: {exc.args[0]}"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Handles database initialization and cleanup.
    """
    logger.info("Application startup")
    async_db_url = get_db_url(app.state.config)

    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logger.info("Initialized database")

    try:
        yield
    finally:
        await Database.dispose()
        logger.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_settings = config.section("api")

    app = FastAPI(
        title=api_settings.get("title", "Vessel Emissions Deviation API"),
        description=api_settings.get(
            "description", "Quarterly deviation of vessel CO2 emissions from baselines"
        ),
        version=api_settings.get("version", "1.0.0"),
        debug=api_settings.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config

    # Register routers
    register_routers(app)
    register_exception_handlers(app)

    # Set up CORS middleware
    origins = [
        "http://localhost:3000",  # For local development
        "http://127.0.0.1:3000",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
