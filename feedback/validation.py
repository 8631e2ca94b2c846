"""Explicit validation of incoming review submissions.

``validate_submission`` never raises: it returns either a ``ValidSubmission``
or a ``SubmissionRejected`` describing every violated constraint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from feedback.errors import ErrorCode

MIN_RATING = 1
MAX_RATING = 5
MAX_REVIEW_LENGTH = 5000

REVIEW_TOO_LONG_MESSAGE = f"Review cannot exceed {MAX_REVIEW_LENGTH} characters"


@dataclass(frozen=True)
class ValidSubmission:
    rating: int
    review: str


@dataclass(frozen=True)
class SubmissionRejected:
    code: ErrorCode
    errors: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return ", ".join(self.errors)


SubmissionResult = ValidSubmission | SubmissionRejected


def _rating_errors(rating: Any) -> list[str]:
    # bool is an int subclass; JSON true/false is not a rating
    if isinstance(rating, bool) or not isinstance(rating, int):
        return ["Rating must be an integer"]
    if rating < MIN_RATING:
        return [f"Rating must be at least {MIN_RATING}"]
    if rating > MAX_RATING:
        return [f"Rating cannot exceed {MAX_RATING}"]
    return []


def validate_submission(payload: Any) -> SubmissionResult:
    """Validate a decoded JSON body for ``POST /reviews``."""
    if not isinstance(payload, dict):
        return SubmissionRejected(
            code=ErrorCode.VALIDATION_ERROR,
            errors=["Request body must be a JSON object"],
        )

    errors = _rating_errors(payload.get("rating"))

    review = payload.get("review")
    too_long = False
    if not isinstance(review, str):
        errors.append("Review must be a string")
    elif len(review) > MAX_REVIEW_LENGTH:
        too_long = True
        errors.append(REVIEW_TOO_LONG_MESSAGE)

    if errors:
        code = ErrorCode.REVIEW_TOO_LONG if too_long else ErrorCode.VALIDATION_ERROR
        return SubmissionRejected(code=code, errors=errors)

    return ValidSubmission(rating=payload["rating"], review=review.strip())
