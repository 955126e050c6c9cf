from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.tokens import Token


class SessionToken(Token):
    """Signed session token; honoured only while its user_sessions row exists."""

    token_type = "session"
    lifetime = settings.AUTH_SESSION_LIFETIME

    @classmethod
    def for_identity(cls, user_id: int, username: str, role: str) -> "SessionToken":
        token = cls()
        token["userId"] = user_id
        token["username"] = username
        token["role"] = role
        return token
