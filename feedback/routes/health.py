"""Health endpoint — database liveness probe."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()
logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


def _body(status: str, database: bool) -> dict:
    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {"database": database, "api": True},
    }


@router.get("/health")
async def health(request: Request):
    """Report service status; 503 when the database probe fails."""
    try:
        store = request.app.state.review_store
        db_healthy = await store.health_check()
    except Exception:
        logger.exception("Health check failed")
        return JSONResponse(
            _body("error", False), status_code=503, headers=NO_CACHE_HEADERS
        )

    return JSONResponse(
        _body("ok" if db_healthy else "degraded", db_healthy),
        status_code=200 if db_healthy else 503,
        headers=NO_CACHE_HEADERS,
    )
