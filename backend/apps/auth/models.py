from django.conf import settings
from django.db import models
from django.utils import timezone


class UserSession(models.Model):
    """Server-side proof that an issued token is still honoured."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sessions"
    )
    session_token = models.TextField(unique=True)
    created_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(db_index=True)

    class Meta:
        db_table = "user_sessions"

    def is_active(self, at=None) -> bool:
        return self.expires_at > (at or timezone.now())

    def __str__(self):
        return f"Session {self.id} for {self.user_id} until {self.expires_at:%Y-%m-%d %H:%M}"
