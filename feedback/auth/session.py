"""Admin session guard — password check issuing a signed, expiring session token.

Tokens are HS256 JWTs with a random ``jti`` per login. Logout revokes the
``jti`` for the remainder of its lifetime; revocations live in process memory
and are lost on restart.
"""

from __future__ import annotations

import logging
import secrets
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import HTTPException, Request, Response

from feedback.config import Settings
from feedback.errors import AuthenticationError

logger = logging.getLogger(__name__)

AUTH_COOKIE_NAME = "admin_session"
SESSION_ALGORITHM = "HS256"
SESSION_SUBJECT = "admin"


class SessionGuard:
    """Issues, verifies and revokes admin session tokens."""

    def __init__(
        self,
        admin_password: str,
        secret: str = "",
        ttl: timedelta = timedelta(hours=24),
        cookie_secure: bool = False,
    ) -> None:
        self._admin_password = admin_password
        self._secret = secret or secrets.token_urlsafe(32)
        self.ttl = ttl
        self.cookie_secure = cookie_secure
        self._revoked: dict[str, float] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> SessionGuard:
        if not settings.session_secret:
            logger.warning(
                "SESSION_SECRET not set; sessions will not survive a restart"
            )
        return cls(
            admin_password=settings.admin_password,
            secret=settings.session_secret,
            ttl=timedelta(hours=settings.session_ttl_hours),
            cookie_secure=settings.cookie_secure,
        )

    def check_password(self, password: str) -> bool:
        return secrets.compare_digest(
            password.encode("utf-8"), self._admin_password.encode("utf-8")
        )

    def issue_token(self) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": SESSION_SUBJECT,
            "iat": now,
            "exp": now + self.ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=SESSION_ALGORITHM)

    def _decode(self, token: str) -> dict[str, Any] | None:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[SESSION_ALGORITHM],
                options={"require": ["exp", "iat", "jti", "sub"]},
            )
        except jwt.PyJWTError:
            return None
        if payload.get("sub") != SESSION_SUBJECT:
            return None
        return payload

    def verify_token(self, token: str | None) -> bool:
        if not token:
            return False
        payload = self._decode(token)
        if payload is None:
            return False
        self._prune_revoked()
        return payload["jti"] not in self._revoked

    def revoke_token(self, token: str | None) -> None:
        if not token:
            return
        payload = self._decode(token)
        if payload is not None:
            self._revoked[payload["jti"]] = float(payload["exp"])

    def _prune_revoked(self) -> None:
        now = time.time()
        for jti in [j for j, exp in self._revoked.items() if exp <= now]:
            del self._revoked[jti]

    def set_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            AUTH_COOKIE_NAME,
            token,
            max_age=int(self.ttl.total_seconds()),
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.cookie_secure,
        )

    def clear_cookie(self, response: Response) -> None:
        response.delete_cookie(
            AUTH_COOKIE_NAME,
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.cookie_secure,
        )

    def is_authenticated(self, request: Request) -> bool:
        return self.verify_token(request.cookies.get(AUTH_COOKIE_NAME))


def get_session_guard(request: Request) -> SessionGuard:
    guard = getattr(request.app.state, "session_guard", None)
    if guard is None:
        raise HTTPException(status_code=503, detail="Session guard not available")
    return guard


def require_admin(request: Request) -> None:
    """Dependency rejecting requests without a valid admin session."""
    if not get_session_guard(request).is_authenticated(request):
        raise AuthenticationError()
