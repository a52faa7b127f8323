from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.principal import Principal
from app.schemas.responses import SuccessResponse
from app.schemas.submission import (
    SubmissionCreate,
    SubmissionResponse,
    SubmissionDetail,
    GradeDecision,
    ScoreBreakdown,
)
from app.services.grading_service import GradingService
from app.services.submission_service import SubmissionService

router = APIRouter()


@router.post("", response_model=SuccessResponse[SubmissionResponse], status_code=status.HTTP_201_CREATED)
async def create_submission(
    submission_in: SubmissionCreate,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Submit an assignment or a quiz. One submission per target per member.
    """
    submission = await SubmissionService.create_submission(db, principal, submission_in)
    return SuccessResponse(data=submission, message="Submission received")


@router.get("", response_model=SuccessResponse[List[SubmissionDetail]])
async def list_submissions(
    assignment_id: Optional[UUID] = None,
    quiz_id: Optional[UUID] = None,
    user_id: Optional[UUID] = None,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    List submissions. Members only ever see their own.
    """
    submissions = await SubmissionService.list_submissions(
        db, principal, assignment_id=assignment_id, quiz_id=quiz_id, user_id=user_id
    )
    return SuccessResponse(data=[SubmissionDetail.model_validate(s) for s in submissions])


@router.get("/{submission_id}", response_model=SuccessResponse[SubmissionDetail])
async def get_submission(
    submission_id: UUID,
    principal: Principal = Depends(deps.get_current_principal),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    submission = await SubmissionService.get_visible_submission(db, principal, submission_id)
    return SuccessResponse(data=SubmissionDetail.model_validate(submission))


@router.get("/{submission_id}/score-preview", response_model=SuccessResponse[ScoreBreakdown])
async def preview_quiz_score(
    submission_id: UUID,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Auto-score a quiz submission. MCQ answers are scored, free-text answers
    start at 0 for the grader to adjust.
    """
    breakdown = await SubmissionService.score_preview(db, principal, submission_id)
    return SuccessResponse(data=breakdown)


@router.put("/{submission_id}/grade", response_model=SuccessResponse[SubmissionResponse])
async def grade_submission(
    submission_id: UUID,
    decision: GradeDecision,
    principal: Principal = Depends(deps.require_grader),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Grade or re-grade a submission; replaces any points previously awarded for it.
    """
    submission = await GradingService.grade_submission(db, principal, submission_id, decision)
    return SuccessResponse(data=submission, message="Submission graded")
