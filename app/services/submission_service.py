"""Submission Service - intake, lookup and grader previews"""

from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ValidationError, NotFoundError, ConflictError, AuthorizationError
from app.core.logging import get_logger
from app.core.principal import Principal
from app.models.assessment import Assignment, Quiz
from app.models.enums import SubmissionStatus
from app.models.submission import Submission
from app.schemas.submission import SubmissionCreate, ScoreBreakdown
from app.services.access_service import AccessService
from app.services.quiz_scoring import score_quiz

logger = get_logger(__name__)


class SubmissionService:
    """Service layer for member submissions"""

    @staticmethod
    def _validate_payload(data: SubmissionCreate) -> None:
        """Exactly one target, and a payload that matches its kind"""
        if (data.assignment_id is None) == (data.quiz_id is None):
            raise ValidationError(
                "Either assignment_id or quiz_id is required, not both",
                fields={"assignment_id": "exactly one target", "quiz_id": "exactly one target"},
            )
        if data.assignment_id is not None and data.answers is not None:
            raise ValidationError(
                "Answer maps are only accepted for quizzes",
                fields={"answers": "not allowed for assignments"},
            )
        if data.quiz_id is not None:
            wrong = {
                name: "not allowed for quizzes"
                for name in ("answer_text", "files")
                if getattr(data, name) is not None
            }
            if wrong:
                raise ValidationError("Quizzes take an answer map only", fields=wrong)

    @staticmethod
    async def _find_existing(
        db: AsyncSession, user_id: UUID, data: SubmissionCreate
    ) -> Optional[Submission]:
        if data.assignment_id is not None:
            target_clause = Submission.assignment_id == data.assignment_id
        else:
            target_clause = Submission.quiz_id == data.quiz_id
        result = await db.execute(
            select(Submission).where(Submission.user_id == user_id, target_clause)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def create_submission(
        db: AsyncSession,
        principal: Principal,
        data: SubmissionCreate,
    ) -> Submission:
        """
        Record a submission at SUBMITTED.

        The existence query gives a friendly error for the common case; the
        partial unique indexes on (user_id, assignment_id) and
        (user_id, quiz_id) settle concurrent duplicates.

        Raises:
            ValidationError: Neither/both targets, or payload of the wrong kind
            NotFoundError: Target assignment or quiz does not exist
            ConflictError: The principal already submitted for this target
        """
        SubmissionService._validate_payload(data)

        if data.assignment_id is not None:
            target = await db.get(Assignment, data.assignment_id)
        else:
            target = await db.get(Quiz, data.quiz_id)
        if target is None:
            raise NotFoundError("Assignment not found" if data.assignment_id else "Quiz not found")

        if await SubmissionService._find_existing(db, principal.user_id, data):
            raise ConflictError("You have already submitted this.")

        submission = Submission(
            user_id=principal.user_id,
            assignment_id=data.assignment_id,
            quiz_id=data.quiz_id,
            files=data.files,
            answer_text=data.answer_text,
            answers=data.answers,
            status=SubmissionStatus.SUBMITTED,
            grade_points=0,
        )
        db.add(submission)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info(
                "Duplicate submission rejected by constraint",
                extra={"user_id": str(principal.user_id)},
            )
            raise ConflictError("You have already submitted this.")

        await db.refresh(submission)
        logger.info(
            "Submission created",
            extra={
                "submission_id": str(submission.id),
                "user_id": str(principal.user_id),
                "source_type": submission.source_type.value,
            },
        )
        return submission

    @staticmethod
    def _detail_query():
        return select(Submission).options(
            selectinload(Submission.user),
            selectinload(Submission.assignment),
            selectinload(Submission.quiz).selectinload(Quiz.questions),
        )

    @staticmethod
    async def get_submission(db: AsyncSession, submission_id: UUID) -> Optional[Submission]:
        """Submission with author and target loaded; refreshes stale identity-map copies"""
        result = await db.execute(
            SubmissionService._detail_query()
            .where(Submission.id == submission_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_submission_for_update(db: AsyncSession, submission_id: UUID) -> Optional[Submission]:
        """Load and row-lock a submission so concurrent grades serialize"""
        result = await db.execute(
            select(Submission)
            .options(selectinload(Submission.assignment), selectinload(Submission.quiz))
            .where(Submission.id == submission_id)
            .with_for_update(of=Submission)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def ensure_can_view(db: AsyncSession, principal: Principal, submission: Submission) -> None:
        """Members see their own; leads see submissions in domains they lead"""
        if principal.is_admin:
            return
        if principal.is_member:
            if submission.user_id != principal.user_id:
                raise AuthorizationError("You can only view your own submissions")
            return
        await AccessService.ensure_domain_access(
            db, principal, submission.target_domain_id,
            message="You do not lead the domain of this submission",
        )

    @staticmethod
    async def get_visible_submission(
        db: AsyncSession, principal: Principal, submission_id: UUID
    ) -> Submission:
        submission = await SubmissionService.get_submission(db, submission_id)
        if submission is None:
            raise NotFoundError("Submission not found")
        await SubmissionService.ensure_can_view(db, principal, submission)
        return submission

    @staticmethod
    async def list_submissions(
        db: AsyncSession,
        principal: Principal,
        assignment_id: Optional[UUID] = None,
        quiz_id: Optional[UUID] = None,
        user_id: Optional[UUID] = None,
    ) -> List[Submission]:
        """
        Newest first. Members are pinned to their own rows whatever the
        filters; leads only see submissions whose target lives in a domain
        they lead.
        """
        stmt = SubmissionService._detail_query().order_by(Submission.created_at.desc())

        if assignment_id:
            stmt = stmt.where(Submission.assignment_id == assignment_id)
        if quiz_id:
            stmt = stmt.where(Submission.quiz_id == quiz_id)
        if user_id:
            stmt = stmt.where(Submission.user_id == user_id)

        if principal.is_member:
            stmt = stmt.where(Submission.user_id == principal.user_id)
        elif principal.is_lead:
            domain_ids = await AccessService.get_led_domain_ids(db, principal.user_id)
            if not domain_ids:
                return []
            stmt = stmt.where(
                or_(
                    Submission.assignment_id.in_(
                        select(Assignment.id).where(Assignment.domain_id.in_(domain_ids))
                    ),
                    Submission.quiz_id.in_(
                        select(Quiz.id).where(Quiz.domain_id.in_(domain_ids))
                    ),
                )
            )

        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def score_preview(
        db: AsyncSession, principal: Principal, submission_id: UUID
    ) -> ScoreBreakdown:
        """Auto-score a quiz submission for the grading screen"""
        AccessService.ensure_grader(principal)
        submission = await SubmissionService.get_visible_submission(db, principal, submission_id)
        if submission.quiz_id is None:
            raise ValidationError("Only quiz submissions can be auto-scored")
        return score_quiz(submission.quiz.questions, submission.answers, submission_id=submission.id)
