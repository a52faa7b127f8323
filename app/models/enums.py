"""Centralized Enum Definitions"""

import enum


# Identity
class Role(str, enum.Enum):
    """User roles for RBAC"""
    MEMBER = "MEMBER"
    LEAD = "LEAD"
    ADMIN = "ADMIN"


# Content
class SubmissionType(str, enum.Enum):
    """How an assignment is handed in"""
    FILE = "FILE"
    IN_PERSON = "IN_PERSON"


class QuestionType(str, enum.Enum):
    """Quiz question types; only MCQ is auto-scored"""
    MCQ = "MCQ"
    SHORT_ANSWER = "SHORT_ANSWER"
    LONG_ANSWER = "LONG_ANSWER"


class ResourceType(str, enum.Enum):
    VIDEO = "VIDEO"
    IMAGE = "IMAGE"
    PDF = "PDF"
    DOC = "DOC"
    DRIVE_LINK = "DRIVE_LINK"
    EXTERNAL_LINK = "EXTERNAL_LINK"


# Submissions & grading
class SubmissionStatus(str, enum.Enum):
    """Submission lifecycle: SUBMITTED -> CHECKED | REJECTED, re-gradable"""
    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    CHECKED = "CHECKED"
    REJECTED = "REJECTED"


class GradeStatus(str, enum.Enum):
    """Outcomes a grader may choose"""
    CHECKED = "CHECKED"
    REJECTED = "REJECTED"


class PointsSourceType(str, enum.Enum):
    """Kind of submission a points entry was awarded for"""
    ASSIGNMENT = "ASSIGNMENT"
    QUIZ = "QUIZ"


# Communication
class NotificationType(str, enum.Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ALERT = "ALERT"
    SUCCESS = "SUCCESS"
