"""Application error taxonomy.

Services raise these; ``app.main`` renders them into the ``ErrorResponse``
envelope with the matching HTTP status.
"""

from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, fields: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.fields = fields


class ValidationError(AppError):
    """Malformed input: missing field, conflicting targets, out-of-range points"""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class AuthorizationError(AppError):
    """Principal lacks the role or the domain scope for the operation"""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ConflictError(AppError):
    """Duplicate submission, or a write that would orphan existing data"""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class TransactionError(AppError):
    """A multi-step write failed and was rolled back; safe to retry"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "TRANSACTION_FAILED"
