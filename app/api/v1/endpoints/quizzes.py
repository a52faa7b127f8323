from typing import Any, List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.assessment import QuizCreate, QuizUpdate, QuizResponse, QuizPublic, QuizSummary
from app.schemas.responses import SuccessResponse
from app.services.assessment_service import QuizService

router = APIRouter()


@router.post("", response_model=SuccessResponse[QuizResponse], status_code=status.HTTP_201_CREATED)
async def create_quiz(
    quiz_in: QuizCreate,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Create a quiz; total_points is the sum of the question points.
    """
    quiz = await QuizService.create_quiz(db, principal, quiz_in)
    return SuccessResponse(data=quiz, message="Quiz created successfully")


@router.get("", response_model=SuccessResponse[List[QuizSummary]])
async def list_quizzes(
    domain_id: Optional[UUID] = None,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    quizzes = await QuizService.list_quizzes(db, principal, domain_id=domain_id)
    return SuccessResponse(data=quizzes)


@router.get("/{quiz_id}", response_model=SuccessResponse[Union[QuizPublic, QuizResponse]])
async def get_quiz(
    quiz_id: UUID,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Quiz with questions. Correct answers are withheld from members.
    """
    quiz = await QuizService.get_visible_quiz(db, principal, quiz_id)
    schema = QuizPublic if principal.is_member else QuizResponse
    return SuccessResponse(data=schema.model_validate(quiz))


@router.put("/{quiz_id}", response_model=SuccessResponse[QuizResponse])
async def update_quiz(
    quiz_id: UUID,
    quiz_in: QuizUpdate,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Replace a quiz and its questions.
    """
    quiz = await QuizService.update_quiz(db, principal, quiz_id, quiz_in)
    return SuccessResponse(data=quiz, message="Quiz updated")


@router.delete("/{quiz_id}", response_model=SuccessResponse)
async def delete_quiz(
    quiz_id: UUID,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    await QuizService.delete_quiz(db, principal, quiz_id)
    return SuccessResponse(message="Quiz deleted successfully")
