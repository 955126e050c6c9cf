from dataclasses import asdict, dataclass
from typing import Any, Dict

from .models import User


@dataclass
class UserDTO:
    """Public user profile; never carries the password hash."""

    id: int
    username: str
    email: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(id=u.id, username=u.username, email=u.email, role=u.role)
