"""Feedback service FastAPI application with lifespan-managed store and services."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from feedback.auth.session import SessionGuard
from feedback.config import settings
from feedback.enrichment import EnrichmentService
from feedback.errors import FeedbackError, error_body
from feedback.middleware.auth_audit import AuthAuditMiddleware
from feedback.middleware.request_timing import RequestTimingMiddleware
from feedback.persistence.store import ReviewStore
from feedback.routes.auth import router as auth_router
from feedback.routes.health import router as health_router
from feedback.routes.reviews import router as reviews_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the review store, build enrichment and session guard."""
    db_dir = os.path.dirname(settings.database_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    review_store = ReviewStore(
        settings.database_path,
        analytics_ttl_seconds=settings.analytics_cache_ttl_seconds,
    )
    try:
        await review_store.init_db()
        logger.info("SQLite persistence initialized at %s", settings.database_path)
    except FeedbackError as e:
        # Requests will fail with DATABASE_ERROR until the store is reachable
        logger.warning("Review store unavailable at startup: %s", e)
    app.state.review_store = review_store

    enrichment = EnrichmentService.from_settings(settings)
    if not enrichment.configured:
        logger.warning("ANTHROPIC_API_KEY not set — enrichment uses fallback text")
    app.state.enrichment = enrichment

    app.state.session_guard = SessionGuard.from_settings(settings)
    app.state.reviews_require_admin = settings.reviews_require_admin

    logger.info("Feedback service started")
    yield

    await review_store.close()
    logger.info("Feedback service shutdown — store closed")


async def feedback_error_handler(request: Request, exc: FeedbackError) -> JSONResponse:
    return JSONResponse(error_body(exc.code, exc.message), status_code=exc.status_code)


app = FastAPI(title="Customer Feedback Service", lifespan=lifespan)

app.add_exception_handler(FeedbackError, feedback_error_handler)  # type: ignore[arg-type]
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(AuthAuditMiddleware)

app.include_router(health_router)
app.include_router(reviews_router)
app.include_router(auth_router)
