"""Shared test fixtures for feedback service unit tests."""

import os
import tempfile
import uuid
from datetime import datetime, timezone

import httpx
import pytest

from feedback.auth.session import SessionGuard
from feedback.enrichment import EnrichmentService
from feedback.main import app
from feedback.persistence.store import ReviewStore
from feedback.schemas.reviews import ReviewRecord

ADMIN_PASSWORD = "letmein"


@pytest.fixture
async def review_store():
    """Temporary SQLite-backed ReviewStore for tests."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    store = ReviewStore(db_path)
    await store.init_db()
    yield store
    await store.close()
    os.unlink(db_path)


@pytest.fixture
def make_record():
    """Factory for ReviewRecord instances with sensible defaults."""

    def _make(
        rating: int = 5,
        review: str = "Great service",
        created_at: datetime | str | None = None,
        record_id: str | None = None,
    ) -> ReviewRecord:
        if created_at is None:
            created_at = datetime.now(timezone.utc)
        if isinstance(created_at, datetime):
            created_at = created_at.astimezone(timezone.utc).isoformat(
                timespec="microseconds"
            )
        return ReviewRecord(
            id=record_id or str(uuid.uuid4()),
            rating=rating,
            review=review,
            ai_response="Thanks!",
            ai_summary="Summary",
            ai_recommended_actions=["Keep it up"],
            created_at=created_at,
            processed_at=created_at,
        )

    return _make


@pytest.fixture
def session_guard():
    return SessionGuard(admin_password=ADMIN_PASSWORD, secret="test-secret")


@pytest.fixture
async def client(review_store, session_guard, tmp_path, monkeypatch):
    """ASGI client wired to a temp store, fallback enrichment and test guard."""
    monkeypatch.setattr("feedback.middleware.request_timing.LOG_DIR", tmp_path)
    monkeypatch.setattr(
        "feedback.middleware.request_timing.LOG_FILE", tmp_path / "request_log.jsonl"
    )
    monkeypatch.setattr("feedback.middleware.auth_audit.LOG_DIR", tmp_path)
    monkeypatch.setattr(
        "feedback.middleware.auth_audit.AUDIT_LOG_FILE", tmp_path / "auth_audit.jsonl"
    )

    app.state.review_store = review_store
    app.state.enrichment = EnrichmentService(models=None)
    app.state.session_guard = session_guard
    app.state.reviews_require_admin = False

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
