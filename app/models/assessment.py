"""Assessment Models (Assignments, Quizzes, Questions)"""

from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean, ForeignKey, JSON, Uuid, Enum
from sqlalchemy.orm import relationship

from app.models.base import BaseModel, DomainScopedMixin
from app.models.enums import SubmissionType, QuestionType


class Assignment(BaseModel, DomainScopedMixin):
    """
    Task posted to a domain. Graded manually; points_base is the suggested
    maximum, timely_bonus_points is stored but not applied by grading.
    """
    __tablename__ = "assignments"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    points_base = Column(Integer, nullable=False, default=0)
    timely_bonus_points = Column(Integer, nullable=False, default=0)
    submission_type = Column(Enum(SubmissionType, name="submission_type"), nullable=False)
    published = Column(Boolean, nullable=False, default=False, index=True)
    created_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    domain = relationship("Domain", back_populates="assignments")
    submissions = relationship("Submission", back_populates="assignment")

    def __repr__(self) -> str:
        return f"<Assignment {self.title}>"


class Quiz(BaseModel, DomainScopedMixin):
    """
    Quiz posted to a domain. total_points is written from the questions
    whenever the quiz is saved through QuizService.
    """
    __tablename__ = "quizzes"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    published = Column(Boolean, nullable=False, default=False, index=True)
    total_points = Column(Integer, nullable=False, default=0)
    created_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    domain = relationship("Domain", back_populates="quizzes")
    questions = relationship(
        "Question",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="Question.position",
    )
    submissions = relationship("Submission", back_populates="quiz")

    def __repr__(self) -> str:
        return f"<Quiz {self.title} ({self.total_points} pts)>"


class Question(BaseModel):
    """Quiz question. options/correct_answer are only set for MCQ."""
    __tablename__ = "questions"

    quiz_id = Column(Uuid, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    question_text = Column(Text, nullable=False)
    question_type = Column(Enum(QuestionType, name="question_type"), nullable=False)
    options = Column(JSON, nullable=True)
    correct_answer = Column(JSON, nullable=True)  # option index or option value
    points = Column(Integer, nullable=False, default=1)

    # Relationships
    quiz = relationship("Quiz", back_populates="questions")

    def __repr__(self) -> str:
        return f"<Question {self.question_type} ({self.points} pts)>"
