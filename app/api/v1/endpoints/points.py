from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.leaderboard import PointsEntryResponse, PointsSummary
from app.schemas.responses import SuccessResponse
from app.services.access_service import AccessService
from app.services.points_service import PointsService

router = APIRouter()


async def _summary(db: AsyncSession, user_id: UUID) -> PointsSummary:
    entries = await PointsService.list_entries(db, user_id)
    total = await PointsService.total_points(db, user_id)
    return PointsSummary(
        user_id=user_id,
        total_points=total,
        entries=[PointsEntryResponse.model_validate(e) for e in entries],
    )


@router.get("/me", response_model=SuccessResponse[PointsSummary])
async def get_my_points(
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Caller's total points and ledger entries.
    """
    return SuccessResponse(data=await _summary(db, principal.user_id))


@router.get("/users/{user_id}", response_model=SuccessResponse[PointsSummary])
async def get_user_points(
    user_id: UUID,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Another user's points. Members may only look up themselves.
    """
    if user_id != principal.user_id:
        AccessService.ensure_grader(principal)
    return SuccessResponse(data=await _summary(db, user_id))
