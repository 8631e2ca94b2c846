"""Admin authentication endpoints — login, session check, logout."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from feedback.auth.session import AUTH_COOKIE_NAME, get_session_guard

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/auth")
async def login(request: Request):
    """Exchange the admin password for a session cookie."""
    guard = get_session_guard(request)
    try:
        body = await request.json()
    except ValueError:
        body = None

    password = body.get("password") if isinstance(body, dict) else None
    if not password or not isinstance(password, str):
        return JSONResponse(
            {"success": False, "error": "Password is required"}, status_code=400
        )

    if not guard.check_password(password):
        logger.warning("Rejected admin login attempt")
        return JSONResponse(
            {"success": False, "error": "Invalid password"}, status_code=401
        )

    response = JSONResponse({"success": True})
    guard.set_cookie(response, guard.issue_token())
    logger.info("Admin session issued")
    return response


@router.get("/auth")
async def session_status(request: Request):
    """Report whether the request carries a valid admin session."""
    if get_session_guard(request).is_authenticated(request):
        return {"authenticated": True}
    return JSONResponse({"authenticated": False}, status_code=401)


@router.delete("/auth")
async def logout(request: Request):
    """Revoke the current session and clear its cookie."""
    guard = get_session_guard(request)
    guard.revoke_token(request.cookies.get(AUTH_COOKIE_NAME))
    response = JSONResponse({"success": True})
    guard.clear_cookie(response)
    return response
