from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError

from apps.common import get_logger
from apps.users.dtos import UserDTO, user_to_dto
from apps.users.models import Role
from apps.users.protocols import UserRepositoryProtocol
from .exceptions import (
    AuthenticationFailed,
    AuthorizationDenied,
    Conflict,
    InvalidToken,
)
from .protocols import SessionRepositoryProtocol
from .tokens import SessionToken

logger = get_logger(__name__).bind(component="auth", service="AuthService")


@dataclass(frozen=True)
class SessionIdentity:
    """Decoded token claims attached to an authenticated request."""

    user_id: int
    username: str
    role: str

    # DRF permission classes look for this on request.user
    is_authenticated = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "username": self.username, "role": self.role}


@dataclass(frozen=True)
class LoginResult:
    token: str
    expires_at: datetime
    user: UserDTO


class AuthService:
    def __init__(
        self,
        users: UserRepositoryProtocol,
        sessions: SessionRepositoryProtocol,
        token_class=SessionToken,
        clock=timezone.now,
    ):
        self.users = users
        self.sessions = sessions
        self.token_class = token_class
        self.clock = clock
        self.logger = logger

    def login(self, username: str, password: str, role: str) -> LoginResult:
        user = self.users.get_active_for_login(username=username, role=role)
        if user is None:
            # keep the unknown-user path as slow as a real hash check
            make_password(password)
            self.logger.info("Login rejected: no active user for role", username=username, role=role)
            raise AuthenticationFailed("Invalid credentials")
        if not check_password(password, user.password):
            self.logger.info("Login rejected: bad password", username=username, role=role)
            raise AuthenticationFailed("Invalid credentials")

        token = self.token_class.for_identity(user.id, user.username, user.role)
        raw = str(token)
        expires_at = self.clock() + self.token_class.lifetime
        self.sessions.create(user_id=user.id, session_token=raw, expires_at=expires_at)
        self.logger.info("User logged in", user_id=user.id, role=user.role)
        return LoginResult(token=raw, expires_at=expires_at, user=user_to_dto(user))

    def verify(self, raw_token: Optional[str]) -> SessionIdentity:
        if not raw_token:
            raise AuthenticationFailed("Access token required")
        try:
            token = self.token_class(raw_token)
        except TokenError as exc:
            self.logger.info("Token rejected", error=str(exc))
            raise InvalidToken("Invalid token")
        # a valid signature alone is not enough: logout and password change
        # only take effect through the session table
        if self.sessions.find_active(raw_token, self.clock()) is None:
            self.logger.info("Token has no live session", user_id=token.get("userId"))
            raise AuthenticationFailed("Invalid or expired session")
        return SessionIdentity(
            user_id=token["userId"], username=token["username"], role=token["role"]
        )

    def logout(self, raw_token: Optional[str]) -> int:
        if not raw_token:
            return 0
        removed = self.sessions.delete_token(raw_token)
        self.logger.info("Session closed", sessions_removed=removed)
        return removed

    def change_password(self, identity: SessionIdentity, current_password: str, new_password: str) -> int:
        user = self.users.get(id=identity.user_id)
        if user is None or not check_password(current_password, user.password):
            self.logger.info("Password change rejected: bad current password", user_id=identity.user_id)
            raise AuthenticationFailed("Current password is incorrect")
        with transaction.atomic():
            self.users.set_password_hash(user, make_password(new_password))
            removed = self.sessions.delete_for_user(user.id)
        self.logger.info("Password changed; sessions invalidated", user_id=user.id, sessions_removed=removed)
        return removed

    def create_user(self, identity: SessionIdentity, data: Dict[str, Any]) -> Dict[str, Any]:
        if not identity.is_admin:
            self.logger.warning("Create user rejected: caller is not admin", actor_id=identity.user_id)
            raise AuthorizationDenied("Admin access required")
        try:
            with transaction.atomic():
                user = self.users.create_user(
                    username=data["username"],
                    email=data["email"],
                    role=data["role"],
                    password=make_password(data["password"]),
                )
        except IntegrityError as exc:
            self.logger.info("Create user rejected: duplicate", username=data["username"], error=str(exc))
            raise Conflict("Username or email already exists")
        self.logger.info("User created", actor_id=identity.user_id, user_id=user.id, role=user.role)
        payload = user_to_dto(user).to_dict()
        payload["created_at"] = user.date_joined.isoformat() if getattr(user, "date_joined", None) else None
        return payload

    def purge_expired_sessions(self) -> int:
        removed = self.sessions.delete_expired(self.clock())
        self.logger.info("Expired sessions purged", sessions_removed=removed)
        return removed
