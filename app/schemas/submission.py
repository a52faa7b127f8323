"""Submission and grading schemas"""

from datetime import datetime
from typing import Optional, List, Dict, Union
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.models.enums import SubmissionStatus, GradeStatus


class SubmissionCreate(BaseModel):
    """
    Exactly one of assignment_id / quiz_id. Assignments take files and
    answer_text; quizzes take answers keyed by question id. The pairing is
    checked by SubmissionService so direct callers get the same errors.
    """
    assignment_id: Optional[UUID] = None
    quiz_id: Optional[UUID] = None
    files: Optional[List[str]] = None
    answer_text: Optional[str] = None
    answers: Optional[Dict[str, Union[str, int]]] = None

    @field_validator("answers")
    @classmethod
    def stringify_answers(cls, v: Optional[Dict[str, Union[str, int]]]) -> Optional[Dict[str, str]]:
        """Option indexes may arrive as numbers; answers are stored as strings"""
        if v is None:
            return v
        return {question_id: str(answer) for question_id, answer in v.items()}


class GradeDecision(BaseModel):
    status: GradeStatus
    grade_points: Optional[int] = None
    feedback: Optional[str] = Field(None, max_length=500)


class SubmissionUser(BaseModel):
    id: UUID
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class SubmissionResponse(BaseModel):
    id: UUID
    user_id: UUID
    assignment_id: Optional[UUID] = None
    quiz_id: Optional[UUID] = None
    files: Optional[List[str]] = None
    answer_text: Optional[str] = None
    answers: Optional[Dict[str, Union[str, int]]] = None
    status: SubmissionStatus
    grade_points: int
    graded_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubmissionDetail(SubmissionResponse):
    """Submission with its author and target title, for graders and listings"""
    user: Optional[SubmissionUser] = None
    target_title: Optional[str] = None


class QuestionScore(BaseModel):
    question_id: UUID
    question_type: str
    answer: Optional[str] = None
    awarded: int
    max_points: int
    needs_review: bool


class ScoreBreakdown(BaseModel):
    """Auto-score of a quiz submission; graders may override before grading"""
    submission_id: Optional[UUID] = None
    questions: List[QuestionScore]
    total: int
    max_total: int
