"""Grading Engine

Grades are re-entrant: a CHECKED or REJECTED submission can be graded again.
Each call replaces the submission's ledger entry instead of adding to it, and
the status change, ledger change and grading notice commit together or not
at all.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AppError, NotFoundError, ValidationError, TransactionError
from app.core.logging import get_logger
from app.core.principal import Principal
from app.models.enums import GradeStatus, SubmissionStatus, PointsSourceType
from app.models.submission import Submission
from app.schemas.submission import GradeDecision
from app.services.access_service import AccessService
from app.services.notification_service import NotificationService
from app.services.points_service import PointsService
from app.services.submission_service import SubmissionService

logger = get_logger(__name__)


class GradingService:

    @staticmethod
    def default_reason(submission: Submission) -> str:
        if submission.source_type == PointsSourceType.ASSIGNMENT:
            return f"Assignment: {submission.target_title}"
        return f"Quiz: {submission.target_title}"

    @staticmethod
    async def grade_submission(
        db: AsyncSession,
        principal: Principal,
        submission_id: UUID,
        decision: GradeDecision,
    ) -> Submission:
        """
        Grade (or re-grade) a submission in one transaction.

        Steps: lock the row, check the grader's domain, write
        status/grade_points/graded_by, drop the previous ledger entry, award
        the new points if CHECKED with points > 0, and stage the notice for
        the submitter.

        Raises:
            AuthorizationError: Member caller, or a lead outside the domain
            ValidationError: Negative grade_points
            NotFoundError: No such submission
            TransactionError: A write failed; nothing was persisted
        """
        AccessService.ensure_grader(principal)
        if decision.grade_points is not None and decision.grade_points < 0:
            raise ValidationError(
                "grade_points must be zero or positive",
                fields={"grade_points": "must be >= 0"},
            )

        try:
            submission = await SubmissionService.get_submission_for_update(db, submission_id)
            if submission is None:
                raise NotFoundError("Submission not found")

            await AccessService.ensure_domain_access(
                db, principal, submission.target_domain_id,
                message="You do not lead the domain of this submission",
            )

            checked = decision.status == GradeStatus.CHECKED
            points = (decision.grade_points or 0) if checked else 0
            previous_status = submission.status

            submission.status = SubmissionStatus(decision.status.value)
            submission.grade_points = points
            submission.graded_by = principal.user_id
            await db.flush()

            await PointsService.clear_for_submission(db, submission.id, submission.source_type)
            if checked and points > 0:
                await PointsService.award(
                    db,
                    user_id=submission.user_id,
                    submission_id=submission.id,
                    source_type=submission.source_type,
                    points=points,
                    reason=decision.feedback or GradingService.default_reason(submission),
                    awarded_by=principal.user_id,
                )

            await NotificationService.notify_grade_result(
                db,
                user_id=submission.user_id,
                status=decision.status,
                target_title=submission.target_title,
                points=points,
            )
            await db.commit()
        except AppError:
            await db.rollback()
            raise
        except Exception as exc:
            await db.rollback()
            logger.error(
                "Grading transaction rolled back",
                extra={"submission_id": str(submission_id), "grader_id": str(principal.user_id)},
                exc_info=True,
            )
            raise TransactionError("Grading failed; no changes were saved") from exc

        await db.refresh(submission)
        logger.info(
            "Submission graded",
            extra={
                "submission_id": str(submission.id),
                "grader_id": str(principal.user_id),
                "from_status": previous_status.value,
                "to_status": submission.status.value,
                "grade_points": points,
            },
        )
        return submission
