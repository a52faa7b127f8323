"""Assignment and quiz management with publish notifications"""

from typing import Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ValidationError, NotFoundError, ConflictError, AuthorizationError
from app.core.logging import get_logger
from app.core.principal import Principal
from app.models.assessment import Assignment, Quiz, Question
from app.models.enums import QuestionType
from app.models.submission import Submission
from app.schemas.assessment import AssignmentCreate, AssignmentUpdate, QuizCreate, QuizUpdate, QuestionCreate
from app.services.access_service import AccessService
from app.services.notification_service import NotificationService

logger = get_logger(__name__)


async def _visible_domain_ids(
    db: AsyncSession, principal: Principal, domain_id: Optional[UUID]
) -> Optional[List[UUID]]:
    """
    Domains whose content the principal may list. None means unrestricted
    (admin without a filter); an empty list means nothing is visible.
    """
    if principal.is_member:
        return [principal.domain_id] if principal.domain_id else []
    if principal.is_lead:
        if domain_id is not None:
            await AccessService.ensure_domain_access(db, principal, domain_id, message="Unauthorized for this domain")
            return [domain_id]
        return await AccessService.get_led_domain_ids(db, principal.user_id)
    return [domain_id] if domain_id is not None else None


class AssignmentService:

    # NOT NULL columns a PATCH may change but never clear
    NON_NULLABLE_FIELDS = ("title", "points_base", "timely_bonus_points", "submission_type", "published")

    @staticmethod
    async def get_assignment(db: AsyncSession, assignment_id: UUID) -> Optional[Assignment]:
        return await db.get(Assignment, assignment_id)

    @staticmethod
    async def _announce(db: AsyncSession, assignment: Assignment) -> None:
        await NotificationService.notify_domain_members(
            db,
            assignment.domain_id,
            title="New Assignment Posted",
            body=f'A new assignment "{assignment.title}" has been posted in your domain.',
        )

    @staticmethod
    async def create_assignment(db: AsyncSession, principal: Principal, data: AssignmentCreate) -> Assignment:
        await AccessService.ensure_domain_access(db, principal, data.domain_id)

        assignment = Assignment(**data.model_dump(), created_by=principal.user_id)
        db.add(assignment)
        await db.commit()
        logger.info("Assignment created", extra={"assignment_id": str(assignment.id), "published": assignment.published})

        if assignment.published:
            await AssignmentService._announce(db, assignment)
        await db.refresh(assignment)
        return assignment

    @staticmethod
    async def update_assignment(
        db: AsyncSession, principal: Principal, assignment_id: UUID, data: AssignmentUpdate
    ) -> Assignment:
        assignment = await AssignmentService.get_assignment(db, assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found")
        await AccessService.ensure_domain_access(
            db, principal, assignment.domain_id, message="You do not have permission to edit this assignment"
        )

        changes = data.model_dump(exclude_unset=True)
        cleared = {
            field: "may not be null"
            for field in AssignmentService.NON_NULLABLE_FIELDS
            if field in changes and changes[field] is None
        }
        if cleared:
            raise ValidationError("Required fields cannot be cleared", fields=cleared)

        was_published = assignment.published
        for field, value in changes.items():
            setattr(assignment, field, value)
        await db.commit()

        if assignment.published and not was_published:
            await AssignmentService._announce(db, assignment)
        await db.refresh(assignment)
        return assignment

    @staticmethod
    async def list_assignments(
        db: AsyncSession, principal: Principal, domain_id: Optional[UUID] = None
    ) -> List[Assignment]:
        domain_ids = await _visible_domain_ids(db, principal, domain_id)
        if domain_ids is not None and not domain_ids:
            return []

        stmt = select(Assignment).order_by(Assignment.due_date.asc().nulls_last(), Assignment.created_at.desc())
        if domain_ids is not None:
            stmt = stmt.where(Assignment.domain_id.in_(domain_ids))
        if principal.is_member:
            stmt = stmt.where(Assignment.published.is_(True))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def delete_assignment(db: AsyncSession, principal: Principal, assignment_id: UUID) -> None:
        """Refused once the assignment has submissions; they are never deleted"""
        assignment = await AssignmentService.get_assignment(db, assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found")
        await AccessService.ensure_domain_access(
            db, principal, assignment.domain_id, message="You do not have permission to delete this assignment"
        )
        existing = await db.execute(
            select(Submission.id).where(Submission.assignment_id == assignment_id).limit(1)
        )
        if existing.first():
            raise ConflictError("Assignment has submissions and cannot be deleted")

        await db.delete(assignment)
        await db.commit()
        logger.info("Assignment deleted", extra={"assignment_id": str(assignment_id)})


class QuizService:

    @staticmethod
    def _build_questions(questions: List[QuestionCreate]) -> List[Question]:
        """Validate and materialise questions in the order given"""
        if not questions:
            raise ValidationError("A quiz needs at least one question", fields={"questions": "empty"})

        built = []
        errors = {}
        for position, q in enumerate(questions):
            if q.question_type == QuestionType.MCQ:
                if not q.options:
                    errors[f"questions.{position}.options"] = "required for MCQ"
                if q.correct_answer is None or q.correct_answer == "":
                    errors[f"questions.{position}.correct_answer"] = "required for MCQ"
            is_mcq = q.question_type == QuestionType.MCQ
            built.append(
                Question(
                    position=position,
                    question_text=q.question_text,
                    question_type=q.question_type,
                    options=q.options if is_mcq else None,
                    correct_answer=q.correct_answer if is_mcq else None,
                    points=q.points,
                )
            )
        if errors:
            raise ValidationError("Invalid quiz questions", fields=errors)
        return built

    @staticmethod
    async def get_quiz(db: AsyncSession, quiz_id: UUID) -> Optional[Quiz]:
        result = await db.execute(
            select(Quiz)
            .options(selectinload(Quiz.questions))
            .where(Quiz.id == quiz_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def _announce(db: AsyncSession, quiz: Quiz) -> None:
        await NotificationService.notify_domain_members(
            db,
            quiz.domain_id,
            title="New Quiz Published",
            body=f'A new quiz "{quiz.title}" has been published in your domain.',
        )

    @staticmethod
    async def create_quiz(db: AsyncSession, principal: Principal, data: QuizCreate) -> Quiz:
        """Create a quiz with total_points equal to the sum of its question points"""
        await AccessService.ensure_domain_access(db, principal, data.domain_id)
        questions = QuizService._build_questions(data.questions)

        quiz = Quiz(
            title=data.title,
            description=data.description,
            domain_id=data.domain_id,
            published=data.published,
            total_points=sum(q.points for q in questions),
            created_by=principal.user_id,
            questions=questions,
        )
        db.add(quiz)
        await db.commit()
        logger.info("Quiz created", extra={"quiz_id": str(quiz.id), "total_points": quiz.total_points})

        if data.published:
            await QuizService._announce(db, quiz)
        return await QuizService.get_quiz(db, quiz.id)

    @staticmethod
    async def update_quiz(db: AsyncSession, principal: Principal, quiz_id: UUID, data: QuizUpdate) -> Quiz:
        """
        Replace a quiz's fields and questions in one transaction and rewrite
        total_points from the new questions.
        """
        quiz = await QuizService.get_quiz(db, quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found")
        await AccessService.ensure_domain_access(
            db, principal, quiz.domain_id, message="You do not have permission to edit this quiz"
        )
        if data.domain_id != quiz.domain_id:
            await AccessService.ensure_domain_access(db, principal, data.domain_id)
        questions = QuizService._build_questions(data.questions)

        was_published = quiz.published
        quiz.title = data.title
        quiz.description = data.description
        quiz.domain_id = data.domain_id
        quiz.published = data.published
        quiz.questions = questions
        quiz.total_points = sum(q.points for q in questions)
        await db.commit()
        logger.info("Quiz updated", extra={"quiz_id": str(quiz_id), "total_points": quiz.total_points})

        if data.published and not was_published:
            await QuizService._announce(db, quiz)
        return await QuizService.get_quiz(db, quiz_id)

    @staticmethod
    async def get_visible_quiz(db: AsyncSession, principal: Principal, quiz_id: UUID) -> Quiz:
        quiz = await QuizService.get_quiz(db, quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found")
        if principal.is_member and (quiz.domain_id != principal.domain_id or not quiz.published):
            raise AuthorizationError("Unauthorized")
        if principal.is_lead:
            await AccessService.ensure_domain_access(db, principal, quiz.domain_id)
        return quiz

    @staticmethod
    async def list_quizzes(
        db: AsyncSession, principal: Principal, domain_id: Optional[UUID] = None
    ) -> List[Quiz]:
        domain_ids = await _visible_domain_ids(db, principal, domain_id)
        if domain_ids is not None and not domain_ids:
            return []

        stmt = select(Quiz).order_by(Quiz.created_at.desc())
        if domain_ids is not None:
            stmt = stmt.where(Quiz.domain_id.in_(domain_ids))
        if principal.is_member:
            stmt = stmt.where(Quiz.published.is_(True))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def delete_quiz(db: AsyncSession, principal: Principal, quiz_id: UUID) -> None:
        """Refused once the quiz has submissions"""
        quiz = await QuizService.get_quiz(db, quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found")
        await AccessService.ensure_domain_access(
            db, principal, quiz.domain_id, message="You do not have permission to delete this quiz"
        )
        existing = await db.execute(select(Submission.id).where(Submission.quiz_id == quiz_id).limit(1))
        if existing.first():
            raise ConflictError("Quiz has submissions and cannot be deleted")

        await db.delete(quiz)
        await db.commit()
        logger.info("Quiz deleted", extra={"quiz_id": str(quiz_id)})
