"""Quiz auto-scoring

Produces the suggested score a grader starts from. MCQ answers are compared
as strings so an option stored as an index (1) matches an answer sent as
"1"; free-text questions score 0 until a grader overrides them. The grading
engine never calls this: it only persists the total it is given.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from app.models.enums import QuestionType
from app.schemas.submission import QuestionScore, ScoreBreakdown


def normalize_answer(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip()


def score_question(question, answer: Optional[str]) -> int:
    if QuestionType(question.question_type) != QuestionType.MCQ:
        return 0
    given = normalize_answer(answer)
    expected = normalize_answer(question.correct_answer)
    if given is None or expected is None:
        return 0
    return question.points if given == expected else 0


def score_quiz(
    questions: Iterable,
    answers: Optional[Dict[str, Any]],
    submission_id: Optional[UUID] = None,
) -> ScoreBreakdown:
    """
    Score every question of a quiz against a member's answer map.

    Args:
        questions: Question rows (id, question_type, correct_answer, points)
        answers: Map of question id (as string) to the submitted answer
        submission_id: Echoed into the breakdown

    Returns:
        Per-question scores and the total
    """
    answers = answers or {}
    scores = []
    for question in questions:
        qtype = QuestionType(question.question_type)
        answer = answers.get(str(question.id))
        scores.append(
            QuestionScore(
                question_id=question.id,
                question_type=qtype.value,
                answer=normalize_answer(answer),
                awarded=score_question(question, answer),
                max_points=question.points,
                needs_review=qtype != QuestionType.MCQ,
            )
        )
    return ScoreBreakdown(
        submission_id=submission_id,
        questions=scores,
        total=sum(s.awarded for s in scores),
        max_total=sum(s.max_points for s in scores),
    )
