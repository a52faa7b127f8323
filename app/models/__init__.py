"""Models Package - Export all models for easy imports"""

from app.models.base import BaseModel, DomainScopedMixin
from app.models.enums import (
    Role,
    SubmissionType,
    QuestionType,
    ResourceType,
    SubmissionStatus,
    GradeStatus,
    PointsSourceType,
    NotificationType,
)
from app.models.domain import Domain, DomainLead, Resource
from app.models.user import User
from app.models.assessment import Assignment, Quiz, Question
from app.models.submission import Submission
from app.models.points import PointsEntry
from app.models.communication import Notification


__all__ = [
    # Base classes
    "BaseModel",
    "DomainScopedMixin",

    # Enums
    "Role",
    "SubmissionType",
    "QuestionType",
    "ResourceType",
    "SubmissionStatus",
    "GradeStatus",
    "PointsSourceType",
    "NotificationType",

    # Domains
    "Domain",
    "DomainLead",
    "Resource",

    # Identity
    "User",

    # Assessment
    "Assignment",
    "Quiz",
    "Question",
    "Submission",

    # Points
    "PointsEntry",

    # Communication
    "Notification",
]
