# vanfleet/dependencies.py
"""
Session dependencies for FastAPI.
The session token travels in the SESSION_COOKIE_NAME cookie; an
"Authorization: Bearer <token>" header is accepted as well for API clients.
"""

from typing import Any, Dict, Optional
from fastapi import Request
from vanfleet.config import settings
from vanfleet.exceptions import UnauthorizedError
from vanfleet.utils.session_token import decode_session_token


def _token_from_request(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    auth_header = request.headers.get("Authorization", "")
    scheme, _, credentials = auth_header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def get_optional_session(request: Request) -> Optional[Dict[str, Any]]:
    """Claims of the caller's session, or None when there is no valid session."""
    return decode_session_token(_token_from_request(request))


def require_session(request: Request) -> Dict[str, Any]:
    """Router-level guard: every protected procedure runs only for a valid session."""
    session = get_optional_session(request)
    if session is None:
        raise UnauthorizedError("Not authenticated")
    return session
