"""Submissions: one per member per assignment or quiz"""

from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Column, Text, Integer, ForeignKey, JSON, Uuid, Enum, Index, CheckConstraint, text
)
from sqlalchemy.orm import relationship

from app.models.base import BaseModel
from app.models.enums import SubmissionStatus, PointsSourceType


class Submission(BaseModel):
    """
    A member's answer to exactly one assignment or quiz.

    The answer payload depends on the target: assignments carry ``files`` and
    free-text ``answer_text``; quizzes carry ``answers``, a map of question id
    to the chosen answer. Only the grading engine mutates status,
    grade_points and graded_by after creation.
    """
    __tablename__ = "submissions"
    __table_args__ = (
        CheckConstraint(
            "(assignment_id IS NULL) <> (quiz_id IS NULL)",
            name="ck_submissions_single_target",
        ),
        Index(
            "uq_submissions_user_assignment",
            "user_id",
            "assignment_id",
            unique=True,
            postgresql_where=text("assignment_id IS NOT NULL"),
            sqlite_where=text("assignment_id IS NOT NULL"),
        ),
        Index(
            "uq_submissions_user_quiz",
            "user_id",
            "quiz_id",
            unique=True,
            postgresql_where=text("quiz_id IS NOT NULL"),
            sqlite_where=text("quiz_id IS NOT NULL"),
        ),
    )

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    assignment_id = Column(Uuid, ForeignKey("assignments.id", ondelete="RESTRICT"), nullable=True, index=True)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id", ondelete="RESTRICT"), nullable=True, index=True)

    files = Column(JSON, nullable=True)
    answer_text = Column(Text, nullable=True)
    answers = Column(JSON, nullable=True)

    status = Column(
        Enum(SubmissionStatus, name="submission_status"),
        nullable=False,
        default=SubmissionStatus.SUBMITTED,
        index=True,
    )
    grade_points = Column(Integer, nullable=False, default=0)
    graded_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    user = relationship("User", back_populates="submissions", foreign_keys=[user_id])
    assignment = relationship("Assignment", back_populates="submissions")
    quiz = relationship("Quiz", back_populates="submissions")

    @property
    def source_type(self) -> PointsSourceType:
        """Ledger source type for points awarded on this submission"""
        return PointsSourceType.ASSIGNMENT if self.assignment_id else PointsSourceType.QUIZ

    @property
    def target_title(self) -> Optional[str]:
        """Title of the assignment or quiz; both relationships must be loaded"""
        target = self.assignment if self.assignment_id else self.quiz
        return target.title if target is not None else None

    @property
    def target_domain_id(self) -> Optional[UUID]:
        target = self.assignment if self.assignment_id else self.quiz
        return target.domain_id if target is not None else None

    def __repr__(self) -> str:
        return f"<Submission {self.user_id} -> {self.assignment_id or self.quiz_id} ({self.status})>"
