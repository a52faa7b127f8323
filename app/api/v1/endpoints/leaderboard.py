from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.leaderboard import LeaderboardEntry
from app.schemas.responses import SuccessResponse
from app.services.leaderboard_service import LeaderboardService

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[LeaderboardEntry]])
async def get_leaderboard(
    domain_id: Optional[UUID] = None,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Members ranked by total points, optionally within one domain.
    """
    entries = await LeaderboardService.get_leaderboard(db, domain_id=domain_id)
    return SuccessResponse(data=entries)
