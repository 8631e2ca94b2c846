"""Error taxonomy and the JSON error envelope returned by the API."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REVIEW_TOO_LONG = "REVIEW_TOO_LONG"
    EMPTY_REVIEW = "EMPTY_REVIEW"  # reserved; empty reviews are accepted
    LLM_ERROR = "LLM_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class FeedbackError(Exception):
    """Base error carrying the public code, HTTP status and message."""

    code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    status_code: int = 500
    public_message: str = "An unexpected error occurred. Please try again."

    def __init__(self, message: str | None = None, *, code: ErrorCode | None = None) -> None:
        self.message = message or self.public_message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class SubmissionValidationError(FeedbackError):
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400
    public_message = "Invalid review submission"


class EnrichmentError(FeedbackError):
    code = ErrorCode.LLM_ERROR
    status_code = 503
    public_message = "Failed to process review with AI. Please try again."


class DatabaseError(FeedbackError):
    code = ErrorCode.DATABASE_ERROR
    status_code = 503
    public_message = "Database operation failed. Please try again."


class AuthenticationError(FeedbackError):
    code = ErrorCode.UNAUTHORIZED
    status_code = 401
    public_message = "Admin session required"


def error_body(code: ErrorCode | str, message: str) -> dict[str, Any]:
    """Build the ``{success: false, error: {code, message}}`` envelope."""
    return {
        "success": False,
        "error": {"code": ErrorCode(code).value, "message": message},
    }
