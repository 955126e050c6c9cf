from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_active_for_login(self, username: str, role: str):
        # role is part of the lookup key: a kitchen account never logs in as admin
        return self.model.objects.filter(
            username=username, role=role, is_active=True
        ).first()

    def create_user(self, **data) -> User:
        """Insert a user whose ``password`` is already a hash."""
        return self.model.objects.create(**data)

    def set_password_hash(self, user: User, password_hash: str) -> User:
        user.password = password_hash
        user.save(update_fields=["password", "updated_at"])
        return user
