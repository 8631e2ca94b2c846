"""Request timing middleware: review endpoint latency, one JSONL line per call."""

import time
from pathlib import Path

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from feedback.config import settings
from feedback.middleware.jsonl import append_entry

LOG_DIR = Path(settings.log_dir)
LOG_FILE = LOG_DIR / "request_log.jsonl"

TIMED_PATHS = frozenset({"/reviews"})


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        timed = request.url.path in TIMED_PATHS
        started = time.perf_counter()
        response: Response = await call_next(request)
        if timed:
            append_entry(
                LOG_DIR,
                LOG_FILE,
                {
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "elapsed_seconds": round(time.perf_counter() - started, 3),
                },
            )
        return response
