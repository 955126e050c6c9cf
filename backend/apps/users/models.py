from django.db import models
from django.contrib.auth.models import AbstractUser


class Role(models.TextChoices):
    ADMIN = "admin", "Admin"
    KITCHEN = "kitchen", "Kitchen"
    RIDER = "rider", "Rider"
    CUSTOMER = "customer", "Customer"


class User(AbstractUser):
    # id, username, password, is_active, date_joined are inherited
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.CUSTOMER)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        indexes = [
            models.Index(fields=["username", "role"], name="user_username_role_idx"),
        ]

    def __str__(self):
        return f"{self.username} ({self.role})"
