from rest_framework.permissions import BasePermission

from .exceptions import AuthorizationDenied


class IsAdminRole(BasePermission):
    """Caller's decoded role must be ``admin``."""

    message = "Admin access required"

    def has_permission(self, request, view):
        if getattr(request.user, "role", None) != "admin":
            raise AuthorizationDenied(self.message)
        return True
