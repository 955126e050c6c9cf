from __future__ import annotations

from apps.users.repositories import UserRepository
from .repositories import SessionRepository
from .services import AuthService


def build_auth_service() -> AuthService:
    return AuthService(users=UserRepository(), sessions=SessionRepository())
