# vanfleet/utils/session_token.py
"""
Signed session tokens for the single shared-password login.

The token only says "this is a valid session": claims are
{"authenticated": true, "iat": ..., "exp": ...}, signed with SESSION_SECRET.
It is verified on every request; nothing in it is trusted unsigned.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import JWTError, jwt
from vanfleet.config import settings


def create_session_token(now: datetime = None, max_age_seconds: int = None) -> str:
    issued = now or datetime.now(timezone.utc)
    lifetime = timedelta(seconds=max_age_seconds or settings.SESSION_MAX_AGE_SECONDS)
    payload = {
        "authenticated": True,
        "iat": int(issued.timestamp()),
        "exp": int((issued + lifetime).timestamp()),
    }
    return jwt.encode(payload, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Returns the claims of a valid session token, None otherwise
    (bad signature, expired, malformed, or not an authenticated session).
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGORITHM])
    except JWTError:
        return None
    if payload.get("authenticated") is not True or "iat" not in payload:
        return None
    return payload
