"""
Reference Lines API router.

Read-only operations for reference curve coefficients.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.core.dependencies import get_db_session
from emissions_tracker.database.repositories import ReferenceLineRepository
from emissions_tracker.pydantic_models.data_import import ReferenceLinePydModel
from emissions_tracker.services.selectors.reference_curve_selector import (
    ReferenceCurveQuery,
)
from emissions_tracker.utils.constants import ReferenceCategoryEnum

router = APIRouter(
    prefix="/api/reference-lines",
    tags=["Reference Lines"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=list[ReferenceLinePydModel])
async def list_reference_lines(
    skip: int = 0,
    limit: int = 100,
    vessel_type_id: int | None = None,
    category: ReferenceCategoryEnum | None = None,
    session: AsyncSession = Depends(get_db_session),
):
    """
    List reference lines with pagination and optional filtering.

    When both vessel_type_id and category are given the exact-match lookup
    used for baselines is applied and pagination is ignored.

    Args:
        skip: Number of records to skip
        limit: Maximum number of records to return
        vessel_type_id: Filter by vessel type code (optional)
        category: Filter by curve category (optional)
    """
    repo = ReferenceLineRepository(session)

    if vessel_type_id is not None and category is not None:
        query = ReferenceCurveQuery(vessel_type_id=vessel_type_id, category=category.value)
        return await repo.get_matching(query)

    filters = {}
    if vessel_type_id is not None:
        filters["vessel_type_id"] = vessel_type_id
    if category is not None:
        filters["category"] = category.value

    return await repo.get_all(skip=skip, limit=limit, filters=filters)


@router.get("/{row_id}", response_model=ReferenceLinePydModel)
async def get_reference_line(
    row_id: int,
    session: AsyncSession = Depends(get_db_session),
):
    """
    Get reference line by row ID.
    """
    repo = ReferenceLineRepository(session)
    row = await repo.get_by_pk(row_id)

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Reference line {row_id} not found",
        )

    return row
