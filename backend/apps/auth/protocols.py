from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.auth.models import UserSession


class SessionRepositoryProtocol(Protocol):
    def create(self, **data) -> "UserSession": ...

    def find_active(self, token: str, now: datetime) -> Optional["UserSession"]: ...

    def delete_token(self, token: str) -> int: ...

    def delete_for_user(self, user_id: int) -> int: ...

    def delete_expired(self, now: datetime) -> int: ...
