"""Review endpoints — submission with AI enrichment, and the admin listing."""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Request

from feedback.auth.session import require_admin
from feedback.enrichment import EnrichmentService
from feedback.errors import (
    DatabaseError,
    EnrichmentError,
    FeedbackError,
    SubmissionValidationError,
)
from feedback.persistence.store import ReviewStore, now_iso
from feedback.schemas.reviews import (
    ReviewListData,
    ReviewListResponse,
    ReviewRecord,
    SubmissionData,
    SubmissionResponse,
)
from feedback.validation import (
    MAX_RATING,
    MIN_RATING,
    SubmissionRejected,
    validate_submission,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_store(request: Request) -> ReviewStore:
    store = getattr(request.app.state, "review_store", None)
    if store is None:
        raise DatabaseError("Review store not available")
    return store


def _get_enrichment(request: Request) -> EnrichmentService:
    service = getattr(request.app.state, "enrichment", None)
    if service is None:
        raise EnrichmentError("Enrichment service not available")
    return service


@router.post("/reviews", response_model=SubmissionResponse, status_code=201)
async def submit_review(request: Request):
    """Validate, enrich and persist a customer review."""
    try:
        return await _submit(request)
    except FeedbackError:
        raise
    except Exception as e:
        logger.exception("Unexpected error in POST /reviews")
        raise FeedbackError() from e


async def _submit(request: Request) -> SubmissionResponse:
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    result = validate_submission(payload)
    if isinstance(result, SubmissionRejected):
        raise SubmissionValidationError(result.message, code=result.code)

    store = _get_store(request)
    enrichment_service = _get_enrichment(request)

    review_id = str(uuid.uuid4())
    created_at = now_iso()

    try:
        enrichment = await enrichment_service.analyze(result.rating, result.review)
    except Exception as e:
        logger.exception("Enrichment failed for review %s", review_id)
        raise EnrichmentError() from e

    record = ReviewRecord(
        id=review_id,
        rating=result.rating,
        review=result.review,
        ai_response=enrichment.user_response,
        ai_summary=enrichment.summary,
        ai_recommended_actions=enrichment.recommended_actions,
        created_at=created_at,
        processed_at=now_iso(),
    )

    try:
        await store.save(record)
    except Exception as e:
        logger.exception("Database save failed for review %s", review_id)
        raise DatabaseError("Failed to save review. Please try again.") from e

    logger.info("Stored review %s (rating=%d)", record.id, record.rating)
    return SubmissionResponse(
        data=SubmissionData(id=record.id, ai_response=record.ai_response)
    )


def parse_rating_filter(value: str | None) -> int | None:
    """Exact-match rating filter; anything outside 1-5 means no filter."""
    if value is None:
        return None
    try:
        rating = int(value)
    except ValueError:
        return None
    if MIN_RATING <= rating <= MAX_RATING:
        return rating
    return None


def parse_datetime_filter(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


@router.get("/reviews", response_model=ReviewListResponse)
async def list_reviews(
    request: Request,
    rating: str | None = None,
    start: str | None = None,
    end: str | None = None,
):
    """All reviews (optionally filtered) plus analytics over the full table."""
    if getattr(request.app.state, "reviews_require_admin", False):
        require_admin(request)

    store = _get_store(request)
    try:
        reviews, analytics = await asyncio.gather(
            store.list_filtered(
                rating=parse_rating_filter(rating),
                start=parse_datetime_filter(start),
                end=parse_datetime_filter(end),
            ),
            store.compute_analytics(),
        )
    except Exception as e:
        logger.exception("Error in GET /reviews")
        raise DatabaseError("Failed to fetch reviews. Please try again.") from e

    return ReviewListResponse(
        data=ReviewListData(reviews=reviews, total=len(reviews), analytics=analytics)
    )
