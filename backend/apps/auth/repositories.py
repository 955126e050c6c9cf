from __future__ import annotations

from datetime import datetime

from apps.common.repository import GenericRepository
from .models import UserSession


class SessionRepository(GenericRepository[UserSession]):
    def __init__(self) -> None:
        super().__init__(UserSession)

    def find_active(self, token: str, now: datetime):
        return self.model.objects.filter(session_token=token, expires_at__gt=now).first()

    def delete_token(self, token: str) -> int:
        return self.delete_where(session_token=token)

    def delete_for_user(self, user_id: int) -> int:
        # one DELETE ... WHERE user_id statement, never a per-row loop
        return self.delete_where(user_id=user_id)

    def delete_expired(self, now: datetime) -> int:
        return self.delete_where(expires_at__lte=now)
