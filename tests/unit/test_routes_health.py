"""Route tests for the health endpoint."""

from unittest.mock import AsyncMock

import pytest

from feedback.main import app


@pytest.mark.asyncio
async def test_health_ok(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["services"] == {"database": True, "api": True}
    assert "T" in body["timestamp"]
    assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"


@pytest.mark.asyncio
async def test_health_degraded(client):
    store = AsyncMock()
    store.health_check.return_value = False
    app.state.review_store = store

    resp = await client.get("/health")
    assert resp.status_code == 503
    assert resp.json()["status"] == "degraded"
    assert resp.json()["services"]["database"] is False


@pytest.mark.asyncio
async def test_health_error(client):
    store = AsyncMock()
    store.health_check.side_effect = RuntimeError("probe crashed")
    app.state.review_store = store

    resp = await client.get("/health")
    assert resp.status_code == 503
    assert resp.json()["status"] == "error"
    assert resp.json()["services"] == {"database": False, "api": True}
