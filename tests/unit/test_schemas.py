"""Unit tests for request schemas."""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4
from pydantic import ValidationError

from app.models.enums import GradeStatus, SubmissionType, QuestionType
from app.schemas.assessment import AssignmentCreate, AssignmentUpdate, QuizCreate
from app.schemas.notification import NotificationMarkRead
from app.schemas.submission import GradeDecision, SubmissionCreate


def test_submission_create_defaults():
    data = SubmissionCreate(assignment_id=uuid4(), answer_text="done")
    assert data.quiz_id is None
    assert data.answers is None


def test_grade_decision_statuses():
    assert GradeDecision(status="CHECKED", grade_points=80).status == GradeStatus.CHECKED
    assert GradeDecision(status="REJECTED").grade_points is None


def test_grade_decision_rejects_non_terminal_status():
    with pytest.raises(ValidationError):
        GradeDecision(status="SUBMITTED")


def test_grade_decision_feedback_max_length():
    with pytest.raises(ValidationError):
        GradeDecision(status="CHECKED", grade_points=1, feedback="x" * 501)


def test_assignment_due_date_stored_naive_utc():
    due = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=5)))
    data = AssignmentCreate(
        title="Landing page",
        domain_id=uuid4(),
        points_base=100,
        submission_type=SubmissionType.FILE,
        due_date=due,
    )
    assert data.due_date.tzinfo is None
    assert data.due_date == datetime(2026, 3, 1, 7, 0)


def test_assignment_create_rejects_negative_points():
    with pytest.raises(ValidationError):
        AssignmentCreate(
            title="Landing page",
            domain_id=uuid4(),
            points_base=-1,
            submission_type=SubmissionType.IN_PERSON,
        )


def test_assignment_update_partial():
    data = AssignmentUpdate(published=True)
    assert data.model_dump(exclude_unset=True) == {"published": True}


def test_quiz_question_points_positive():
    with pytest.raises(ValidationError):
        QuizCreate(
            title="Quiz one",
            domain_id=uuid4(),
            questions=[{"question_text": "Q", "question_type": QuestionType.MCQ, "points": 0}],
        )


def test_mark_read_requires_target():
    with pytest.raises(ValidationError):
        NotificationMarkRead()
    assert NotificationMarkRead(mark_all_read=True).mark_all_read is True
    assert NotificationMarkRead(id=uuid4()).id is not None


def test_submission_answers_stringified():
    data = SubmissionCreate(quiz_id=uuid4(), answers={"q1": 1, "q2": "b"})
    assert data.answers == {"q1": "1", "q2": "b"}
