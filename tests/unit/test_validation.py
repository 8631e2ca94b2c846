"""Unit tests for review submission validation."""

import pytest

from feedback.errors import ErrorCode
from feedback.validation import (
    MAX_REVIEW_LENGTH,
    SubmissionRejected,
    ValidSubmission,
    validate_submission,
)


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
def test_valid_ratings_accepted(rating):
    result = validate_submission({"rating": rating, "review": "ok"})
    assert isinstance(result, ValidSubmission)
    assert result.rating == rating


@pytest.mark.parametrize("rating", [0, 6, -1, 3.5, 5.0, "5", None, True])
def test_invalid_ratings_rejected(rating):
    result = validate_submission({"rating": rating, "review": "ok"})
    assert isinstance(result, SubmissionRejected)
    assert result.code == ErrorCode.VALIDATION_ERROR


def test_rating_messages():
    low = validate_submission({"rating": 0, "review": ""})
    high = validate_submission({"rating": 6, "review": ""})
    assert low.message == "Rating must be at least 1"
    assert high.message == "Rating cannot exceed 5"


def test_review_is_trimmed():
    result = validate_submission({"rating": 4, "review": "  nice place \n"})
    assert isinstance(result, ValidSubmission)
    assert result.review == "nice place"


def test_empty_review_accepted():
    result = validate_submission({"rating": 2, "review": ""})
    assert isinstance(result, ValidSubmission)
    assert result.review == ""


def test_review_at_limit_accepted():
    result = validate_submission({"rating": 3, "review": "x" * MAX_REVIEW_LENGTH})
    assert isinstance(result, ValidSubmission)


def test_review_too_long():
    result = validate_submission({"rating": 3, "review": "x" * (MAX_REVIEW_LENGTH + 1)})
    assert isinstance(result, SubmissionRejected)
    assert result.code == ErrorCode.REVIEW_TOO_LONG
    assert "5000" in result.message


def test_too_long_wins_over_rating_error():
    """All violations are listed; the length violation decides the code."""
    result = validate_submission({"rating": 9, "review": "x" * 5001})
    assert result.code == ErrorCode.REVIEW_TOO_LONG
    assert result.errors == [
        "Rating cannot exceed 5",
        "Review cannot exceed 5000 characters",
    ]
    assert result.message == "Rating cannot exceed 5, Review cannot exceed 5000 characters"


def test_missing_review_rejected():
    result = validate_submission({"rating": 3})
    assert isinstance(result, SubmissionRejected)
    assert result.code == ErrorCode.VALIDATION_ERROR
    assert "Review must be a string" in result.errors


@pytest.mark.parametrize("payload", [None, [], "text", 5])
def test_non_object_body_rejected(payload):
    result = validate_submission(payload)
    assert isinstance(result, SubmissionRejected)
    assert result.code == ErrorCode.VALIDATION_ERROR
