from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.domain import DomainLeadAssign, DomainLeadResponse
from app.schemas.responses import SuccessResponse
from app.services.domain_service import DomainService

router = APIRouter()


@router.post("/{domain_id}/leads", response_model=SuccessResponse[DomainLeadResponse])
async def assign_domain_lead(
    domain_id: UUID,
    body: DomainLeadAssign,
    principal: Principal = Depends(deps.require_admin),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Make a lead responsible for this domain, replacing their previous domain.
    """
    link = await DomainService.assign_lead(db, principal, domain_id, body.user_id)
    return SuccessResponse(data=link, message="Lead assigned")


@router.delete("/{domain_id}/leads/{user_id}", response_model=SuccessResponse)
async def remove_domain_lead(
    domain_id: UUID,
    user_id: UUID,
    principal: Principal = Depends(deps.require_admin),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    await DomainService.remove_lead(db, principal, domain_id, user_id)
    return SuccessResponse(message="Lead removed")
