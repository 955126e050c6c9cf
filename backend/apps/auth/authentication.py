from __future__ import annotations

from typing import Optional

from django.conf import settings
from rest_framework.authentication import BaseAuthentication, get_authorization_header

AUTH_HEADER_TYPE = b"bearer"


def extract_token(request) -> Optional[str]:
    """Session token from the auth cookie, falling back to ``Authorization: Bearer``."""
    cookie = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
    if cookie:
        return cookie
    parts = get_authorization_header(request).split()
    if len(parts) == 2 and parts[0].lower() == AUTH_HEADER_TYPE:
        return parts[1].decode("latin-1")
    return None


class SessionTokenAuthentication(BaseAuthentication):
    """Authenticate every request against the signed token and the session table.

    Unlike DRF's stock classes this one never returns ``None``: a request
    without a token fails with "Access token required". Public views opt out
    with ``authentication_classes = []``.
    """

    def __init__(self, service=None):
        if service is None:
            # deferred: DRF imports this class while rest_framework.views is still loading
            from .container import build_auth_service

            service = build_auth_service()
        self.service = service

    def authenticate(self, request):
        raw = extract_token(request)
        identity = self.service.verify(raw)
        return identity, raw

    def authenticate_header(self, request):
        return 'Bearer realm="api"'
