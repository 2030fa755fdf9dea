# vanfleet/routers/auth.py
"""
Single shared-password session: login, current session, logout.
These routes are public; every other router requires a valid session.
"""

import hmac
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, Response
from vanfleet.config import settings
from vanfleet.dependencies import get_optional_session
from vanfleet.exceptions import UnauthorizedError
from vanfleet.schemas.auth import LoginOut, LoginRequest, SessionOut
from vanfleet.schemas.common import SuccessOut
from vanfleet.utils.logger import get_logger
from vanfleet.utils.session_token import create_session_token

router = APIRouter(prefix="/auth")
logger = get_logger(__name__, "AUTH")


@router.post("/login", response_model=LoginOut, summary="Log in with the shared password")
def login(body: LoginRequest, response: Response):
    if not hmac.compare_digest(body.password.encode(), settings.APP_PASSWORD.encode()):
        logger.warning("Login rejected: wrong password")
        raise UnauthorizedError("Incorrect password")

    token = create_session_token()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    logger.info("Session opened")
    return LoginOut(success=True, message="Login successful", token=token)


@router.get("/me", response_model=Optional[SessionOut], summary="Current session, or null")
def me(session: Optional[dict] = Depends(get_optional_session)):
    if session is None:
        return None
    return SessionOut(
        authenticated=True,
        issued_at=datetime.fromtimestamp(session["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(session["exp"], tz=timezone.utc),
    )


@router.post("/logout", response_model=SuccessOut, summary="Clear the session cookie")
def logout(response: Response):
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return SuccessOut()
