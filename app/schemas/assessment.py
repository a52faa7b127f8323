"""Assignment and quiz schemas"""

from datetime import datetime, timezone
from typing import Optional, List, Any
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.models.enums import SubmissionType, QuestionType


def _to_naive_utc(v: Optional[datetime]) -> Optional[datetime]:
    """Due dates are stored as naive UTC (TIMESTAMP WITHOUT TIME ZONE)"""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class AssignmentCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    domain_id: UUID
    points_base: int = Field(..., ge=0)
    timely_bonus_points: int = Field(0, ge=0)
    submission_type: SubmissionType
    published: bool = False

    @field_validator("due_date")
    @classmethod
    def naive_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)


class AssignmentUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    points_base: Optional[int] = Field(None, ge=0)
    timely_bonus_points: Optional[int] = Field(None, ge=0)
    submission_type: Optional[SubmissionType] = None
    published: Optional[bool] = None

    @field_validator("due_date")
    @classmethod
    def naive_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)


class AssignmentResponse(BaseModel):
    id: UUID
    domain_id: UUID
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    points_base: int
    timely_bonus_points: int
    submission_type: SubmissionType
    published: bool
    created_by: Optional[UUID] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuestionCreate(BaseModel):
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: Optional[Any] = None
    points: int = Field(..., ge=1)


class QuizCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = None
    domain_id: UUID
    published: bool = False
    questions: List[QuestionCreate]


class QuizUpdate(QuizCreate):
    """Full replacement; questions are recreated"""


class QuestionResponse(BaseModel):
    id: UUID
    position: int
    question_text: str
    question_type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: Optional[Any] = None
    points: int

    model_config = ConfigDict(from_attributes=True)


class QuestionPublic(BaseModel):
    """
    Question as shown to members: no correct answer. Extra keys are refused
    so a full question never validates as a public one.
    """
    id: UUID
    position: int
    question_text: str
    question_type: QuestionType
    options: Optional[List[str]] = None
    points: int

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class QuizSummary(BaseModel):
    id: UUID
    domain_id: UUID
    title: str
    description: Optional[str] = None
    published: bool
    total_points: int
    created_by: Optional[UUID] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuizResponse(QuizSummary):
    questions: List[QuestionResponse] = []


class QuizPublic(QuizSummary):
    questions: List[QuestionPublic] = []
