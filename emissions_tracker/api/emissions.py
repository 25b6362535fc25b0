"""
Emissions API router.

Quarterly baseline deviations, vessel summaries and snapshot import.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.core.config import Config
from emissions_tracker.core.dependencies import get_app_config, get_db_session
from emissions_tracker.pydantic_models.data_import import ImportResponse
from emissions_tracker.pydantic_models.deviation import QuarterlyDeviation, VesselSummary
from emissions_tracker.services.data_import import DataImportService
from emissions_tracker.services.deviation_service import DeviationService

router = APIRouter(
    prefix="/api/emissions",
    tags=["Emissions"],
)

logger = logging.getLogger(__name__)


@router.get("/deviations", response_model=list[QuarterlyDeviation])
async def get_quarterly_deviations(
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    Get the quarterly deviation of each vessel's CO2 from its baseline.

    One entry per vessel per calendar quarter with emission records, using
    the latest record in the quarter. Vessels whose type has no reference
    rows are omitted. Sorted ascending by date.

    Example:
        ```
        GET /api/emissions/deviations
        [
            {
                "vesselId": "9321483",
                "vesselName": "Nordic Star",
                "quarter": "Q1",
                "year": 2023,
                "actualEmissions": 120.0,
                "baseline": 100.0,
                "deviation": 20.0,
                "date": "2023-03-28T00:00:00.000Z"
            }
        ]
        ```
    """
    service = DeviationService(session, config=config)
    return await service.get_quarterly_deviations()


@router.get("/vessels", response_model=list[VesselSummary])
async def get_vessels(
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    List vessels with the number of emission records each one owns.
    """
    service = DeviationService(session, config=config)
    return await service.get_vessel_summaries()


@router.post("/import", response_model=ImportResponse)
async def import_data(
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    Import the vessel, reference and emission snapshot files.

    Files are read from the configured data directory. Malformed records are
    skipped and reported in ``stats.errors``.
    """
    try:
        importer = DataImportService.from_config(
            config.section("data_import"), session=session
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    stats = await importer.import_all()
    return ImportResponse(message="Data imported successfully", stats=stats)
