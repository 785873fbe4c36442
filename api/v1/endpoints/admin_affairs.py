"""
Affair admin API endpoints.

Duplicate review for a politician's affairs and the follow-up merge and
delete actions. Routes live under ``/api/v1/admin`` and require the admin key.

Responsibility: Affair admin endpoints for API v1
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from transparence.db.session import get_db
from transparence.services import (
    AffairAdminService,
    AffairNotFoundError,
    InvalidMergeError,
    PoliticianNotFoundError,
)
from api.v1.schemas.affairs import (
    DeleteResponse,
    DuplicateDetectionResponse,
    MergeRequest,
    MergeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_affair_admin_service(db: AsyncSession = Depends(get_db)) -> AffairAdminService:
    return AffairAdminService(db)


@router.get(
    "/politicians/{politician_id}/duplicates",
    response_model=DuplicateDetectionResponse,
)
async def detect_duplicates(
    politician_id: int = Path(..., ge=1),
    service: AffairAdminService = Depends(get_affair_admin_service),
):
    """
    List candidate duplicate affair pairs for a politician.

    Args:
        politician_id: Politician database ID
        service: Affair admin service

    Returns:
        DuplicateDetectionResponse sorted by descending score

    Raises:
        HTTPException: 404 if politician not found
    """
    try:
        groups, total = await service.detect_duplicates(politician_id)
    except PoliticianNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return DuplicateDetectionResponse(politician_id=politician_id, groups=groups, total=total)


@router.post("/affairs/merge", response_model=MergeResponse)
async def merge_affairs(
    request: MergeRequest,
    service: AffairAdminService = Depends(get_affair_admin_service),
):
    """
    Merge a secondary affair into a primary one.

    Raises:
        HTTPException: 400 when both ids are equal, 404 if an affair is missing
    """
    try:
        result = await service.merge(request.primary_id, request.secondary_id)
    except InvalidMergeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except AffairNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return MergeResponse(**result.model_dump())


@router.delete("/affairs/{affair_id}", response_model=DeleteResponse)
async def delete_affair(
    affair_id: int = Path(..., ge=1),
    service: AffairAdminService = Depends(get_affair_admin_service),
):
    """Delete an affair and its sources."""
    try:
        await service.delete(affair_id)
    except AffairNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return DeleteResponse(deleted_id=affair_id)
