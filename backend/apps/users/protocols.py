from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["User"]: ...

    def get_active_for_login(self, username: str, role: str) -> Optional["User"]: ...

    def create_user(self, **data) -> "User": ...

    def set_password_hash(self, user: "User", password_hash: str) -> "User": ...
