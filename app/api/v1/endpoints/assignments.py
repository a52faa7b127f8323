from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.assessment import AssignmentCreate, AssignmentUpdate, AssignmentResponse
from app.schemas.responses import SuccessResponse
from app.services.assessment_service import AssignmentService

router = APIRouter()


@router.post("", response_model=SuccessResponse[AssignmentResponse], status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_in: AssignmentCreate,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Create an assignment. Publishing notifies the domain's members.
    """
    assignment = await AssignmentService.create_assignment(db, principal, assignment_in)
    return SuccessResponse(data=assignment, message="Assignment created successfully")


@router.get("", response_model=SuccessResponse[List[AssignmentResponse]])
async def list_assignments(
    domain_id: Optional[UUID] = None,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Members see published assignments of their domain, leads the domains
    they lead, admins everything.
    """
    assignments = await AssignmentService.list_assignments(db, principal, domain_id=domain_id)
    return SuccessResponse(data=assignments)


@router.patch("/{assignment_id}", response_model=SuccessResponse[AssignmentResponse])
async def update_assignment(
    assignment_id: UUID,
    assignment_in: AssignmentUpdate,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    assignment = await AssignmentService.update_assignment(db, principal, assignment_id, assignment_in)
    return SuccessResponse(data=assignment, message="Assignment updated")


@router.delete("/{assignment_id}", response_model=SuccessResponse)
async def delete_assignment(
    assignment_id: UUID,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    await AssignmentService.delete_assignment(db, principal, assignment_id)
    return SuccessResponse(message="Assignment deleted successfully")
