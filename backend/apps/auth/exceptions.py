from rest_framework import status

from apps.api.exceptions import ApplicationError


class MissingCredentials(ApplicationError):
    code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Required fields are missing"


class InvalidFields(ApplicationError):
    code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "One or more fields are invalid"


class AuthenticationFailed(ApplicationError):
    """Bad username/password/role combination, or an unusable session."""

    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class InvalidToken(AuthenticationFailed):
    """Token failed signature or expiry validation."""

    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class AuthorizationDenied(ApplicationError):
    """Caller is authenticated but their role is not permitted."""

    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin access required"


class Conflict(ApplicationError):
    code = "CONFLICT"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username or email already exists"


class Unexpected(ApplicationError):
    code = "SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


__all__ = [
    "MissingCredentials",
    "InvalidFields",
    "AuthenticationFailed",
    "InvalidToken",
    "AuthorizationDenied",
    "Conflict",
    "Unexpected",
]
