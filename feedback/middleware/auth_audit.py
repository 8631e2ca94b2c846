"""Admin auth audit middleware: records every /auth call outcome to JSONL.

Login attempts are not rate limited, so this log is the only record of
repeated password guessing. Request bodies are never read or logged.
"""

from pathlib import Path

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from feedback.config import settings
from feedback.middleware.jsonl import append_entry

LOG_DIR = Path(settings.log_dir)
AUDIT_LOG_FILE = LOG_DIR / "auth_audit.jsonl"

_ACTIONS = {"POST": "login", "GET": "check", "DELETE": "logout"}


class AuthAuditMiddleware(BaseHTTPMiddleware):
    """Logs admin login, session check and logout events."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response: Response = await call_next(request)
        action = _ACTIONS.get(request.method)
        if request.url.path == "/auth" and action:
            append_entry(
                LOG_DIR,
                AUDIT_LOG_FILE,
                {
                    "action": action,
                    "client": request.client.host if request.client else "",
                    "status_code": response.status_code,
                    "success": response.status_code == 200,
                },
            )
        return response
