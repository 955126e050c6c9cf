import unittest
from datetime import timedelta
from unittest.mock import Mock

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIRequestFactory

from apps.auth.authentication import SessionTokenAuthentication, extract_token
from apps.auth.cookies import clear_session_cookie, set_session_cookie
from apps.auth.exceptions import (
    AuthenticationFailed,
    AuthorizationDenied,
    InvalidFields,
    MissingCredentials,
)
from apps.auth.permissions import IsAdminRole
from apps.auth.services import LoginResult, SessionIdentity
from apps.auth.views import ChangePasswordView, CreateUserView, LoginView, LogoutView, VerifyView
from apps.users.dtos import UserDTO


class DummyRequest:
    def __init__(self, data=None, user=None, auth=None):
        self.data = data or {}
        self.user = user
        self.auth = auth


CHEF = SessionIdentity(user_id=3, username="chef1", role="kitchen")
ADMIN = SessionIdentity(user_id=1, username="admin1", role="admin")


def http_request(cookie=None, authorization=None):
    factory = APIRequestFactory()
    if cookie is not None:
        factory.cookies["auth_token"] = cookie
    extra = {"HTTP_AUTHORIZATION": authorization} if authorization else {}
    return factory.get("/api/auth/verify", **extra)


class ExtractTokenTests(unittest.TestCase):
    def test_cookie_wins_over_header(self):
        request = http_request(cookie="from-cookie", authorization="Bearer from-header")
        self.assertEqual(extract_token(request), "from-cookie")

    def test_bearer_header(self):
        request = http_request(authorization="Bearer abc.def.ghi")
        self.assertEqual(extract_token(request), "abc.def.ghi")

    def test_other_schemes_ignored(self):
        self.assertIsNone(extract_token(http_request(authorization="Basic dXNlcjpwdw==")))
        self.assertIsNone(extract_token(http_request()))


class SessionTokenAuthenticationTests(unittest.TestCase):
    def test_returns_identity_and_raw_token(self):
        service = Mock()
        service.verify.return_value = CHEF
        auth = SessionTokenAuthentication(service=service)
        user, token = auth.authenticate(http_request(cookie="tok"))
        self.assertIs(user, CHEF)
        self.assertEqual(token, "tok")
        service.verify.assert_called_once_with("tok")

    def test_bearer_token_is_verified(self):
        service = Mock()
        service.verify.return_value = CHEF
        auth = SessionTokenAuthentication(service=service)
        _, token = auth.authenticate(http_request(authorization="Bearer abc.def.ghi"))
        self.assertEqual(token, "abc.def.ghi")

    def test_missing_token_is_delegated_to_service(self):
        service = Mock()
        service.verify.side_effect = AuthenticationFailed("Access token required")
        auth = SessionTokenAuthentication(service=service)
        with self.assertRaises(AuthenticationFailed):
            auth.authenticate(http_request())
        service.verify.assert_called_once_with(None)


class IsAdminRoleTests(unittest.TestCase):
    def test_admin_allowed(self):
        self.assertTrue(IsAdminRole().has_permission(DummyRequest(user=ADMIN), None))

    def test_other_roles_denied(self):
        with self.assertRaises(AuthorizationDenied):
            IsAdminRole().has_permission(DummyRequest(user=CHEF), None)


class CookieTests(unittest.TestCase):
    def test_session_cookie_attributes(self):
        response = HttpResponse()
        set_session_cookie(response, "tok")
        cookie = response.cookies["auth_token"]
        self.assertEqual(cookie.value, "tok")
        self.assertTrue(cookie["httponly"])
        self.assertEqual(cookie["samesite"], "Strict")
        self.assertEqual(cookie["max-age"], 86400)

    def test_clear_cookie_expires_immediately(self):
        response = HttpResponse()
        clear_session_cookie(response)
        self.assertEqual(response.cookies["auth_token"]["max-age"], 0)


class AuthViewsUnitTests(unittest.TestCase):
    def test_login_success(self):
        service = Mock()
        service.login.return_value = LoginResult(
            token="tok",
            expires_at=timezone.now() + timedelta(hours=24),
            user=UserDTO(id=3, username="chef1", email="chef1@example.com", role="kitchen"),
        )
        view = LoginView()
        view.service = service
        response = view.post(
            DummyRequest({"username": "chef1", "password": "correct-pw", "role": "kitchen"})
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["username"], "chef1")
        self.assertEqual(response.cookies["auth_token"].value, "tok")
        service.login.assert_called_once_with("chef1", "correct-pw", "kitchen")

    def test_login_missing_fields(self):
        service = Mock()
        view = LoginView()
        view.service = service
        with self.assertRaises(MissingCredentials) as ctx:
            view.post(DummyRequest({"username": "chef1", "password": "pw"}))
        self.assertIn("role", ctx.exception.details)
        service.login.assert_not_called()

    def test_logout_uses_request_token(self):
        service = Mock()
        view = LogoutView()
        view.service = service
        response = view.post(DummyRequest(user=CHEF, auth="tok"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Logged out successfully")
        service.logout.assert_called_once_with("tok")

    def test_verify_returns_identity(self):
        response = VerifyView().get(DummyRequest(user=CHEF))
        self.assertEqual(
            response.data,
            {"valid": True, "user": {"userId": 3, "username": "chef1", "role": "kitchen"}},
        )

    def test_change_password_passes_identity(self):
        service = Mock()
        service.change_password.return_value = 2
        view = ChangePasswordView()
        view.service = service
        response = view.post(
            DummyRequest({"currentPassword": "old", "newPassword": "new"}, user=CHEF)
        )
        self.assertTrue(response.data["success"])
        service.change_password.assert_called_once_with(CHEF, "old", "new")

    def test_create_user_missing_fields(self):
        service = Mock()
        view = CreateUserView()
        view.service = service
        with self.assertRaises(MissingCredentials):
            view.post(DummyRequest({"username": "x"}, user=ADMIN))
        service.create_user.assert_not_called()

    def test_create_user_success(self):
        service = Mock()
        service.create_user.return_value = {
            "id": 9,
            "username": "rider9",
            "email": "rider9@example.com",
            "role": "rider",
            "created_at": None,
        }
        view = CreateUserView()
        view.service = service
        payload = {
            "username": "rider9",
            "email": "rider9@example.com",
            "password": "pw",
            "role": "rider",
        }
        response = view.post(DummyRequest(payload, user=ADMIN))
        self.assertEqual(response.data["user"]["id"], 9)
        args = service.create_user.call_args[0]
        self.assertIs(args[0], ADMIN)
        self.assertEqual(dict(args[1]), payload)

    def test_create_user_invalid_values_are_not_reported_missing(self):
        service = Mock()
        view = CreateUserView()
        view.service = service
        payload = {"username": "rider9", "email": "not-an-email", "password": "pw", "role": "chef"}
        with self.assertRaises(InvalidFields) as ctx:
            view.post(DummyRequest(payload, user=ADMIN))
        self.assertEqual(ctx.exception.message, "One or more fields are invalid")
        self.assertEqual(set(ctx.exception.details), {"email", "role"})
        service.create_user.assert_not_called()
