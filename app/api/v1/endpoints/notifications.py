from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.notification import NotificationResponse, NotificationMarkRead
from app.schemas.responses import SuccessResponse
from app.services.notification_service import NotificationService

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[NotificationResponse]])
async def list_notifications(
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Latest notifications for the caller, newest first.
    """
    notifications = await NotificationService.list_for_user(db, principal.user_id)
    return SuccessResponse(data=notifications)


@router.put("/read", response_model=SuccessResponse)
async def mark_notifications_read(
    body: NotificationMarkRead,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    if body.mark_all_read:
        await NotificationService.mark_all_read(db, principal.user_id)
        return SuccessResponse(message="All marked as read")
    await NotificationService.mark_read(db, principal.user_id, body.id)
    return SuccessResponse(message="Marked as read")
