# tests/test_session_token.py
"""Unit tests for session token issue / verification."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime, timedelta, timezone
from jose import jwt
from vanfleet.config import settings
from vanfleet.utils.session_token import create_session_token, decode_session_token


class TestSessionToken:
    def test_valid_token_decodes(self):
        claims = decode_session_token(create_session_token())
        assert claims["authenticated"] is True
        assert claims["exp"] - claims["iat"] == settings.SESSION_MAX_AGE_SECONDS

    def test_expired_token_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = create_session_token(now=issued, max_age_seconds=60)
        assert decode_session_token(token) is None

    def test_tampered_token_rejected(self):
        token = create_session_token()
        head, payload, signature = token.split(".")
        forged = ".".join([head, payload, signature[::-1]])
        assert decode_session_token(forged) is None

    def test_token_signed_with_other_secret_rejected(self):
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode({"authenticated": True, "iat": now, "exp": now + 60}, "another-secret", algorithm="HS256")
        assert decode_session_token(token) is None

    def test_token_without_authenticated_claim_rejected(self):
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode({"iat": now, "exp": now + 60}, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)
        assert decode_session_token(token) is None

    def test_garbage_and_empty(self):
        assert decode_session_token("not-a-token") is None
        assert decode_session_token("") is None
        assert decode_session_token(None) is None
