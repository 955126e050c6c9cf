from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import OpenApiResponse, extend_schema

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .authentication import extract_token
from .container import build_auth_service
from .cookies import clear_session_cookie, set_session_cookie
from .exceptions import InvalidFields, MissingCredentials
from .permissions import IsAdminRole
from .serializers import (
    ChangePasswordRequestSerializer,
    CreateUserRequestSerializer,
    CreateUserResponseSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    MessageResponseSerializer,
    VerifyResponseSerializer,
)

logger = get_logger(__name__).bind(component="auth", layer="view")

ERROR = OpenApiResponse(response=ErrorResponseSerializer)

MISSING_CODES = {"required", "blank", "null"}


def _validated(serializer_class, data, message):
    """Validate ``data``; absent fields raise ``message``, present but bad ones do not."""
    serializer = serializer_class(data=data)
    if serializer.is_valid():
        return serializer.validated_data
    codes = {
        getattr(error, "code", None)
        for errors in serializer.errors.values()
        for error in errors
    }
    if codes & MISSING_CODES:
        raise MissingCredentials(message, details=serializer.errors)
    raise InvalidFields(details=serializer.errors)


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service = build_auth_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login with username, password and role",
        request=LoginRequestSerializer,
        responses={200: LoginResponseSerializer, 400: ERROR, 401: ERROR},
    )
    def post(self, request):
        data = _validated(
            LoginRequestSerializer, request.data, "Username, password, and role are required"
        )
        result = self.service.login(data["username"], data["password"], data["role"])
        response = Response(
            {"success": True, "user": result.user.to_dict()}, status=status.HTTP_200_OK
        )
        set_session_cookie(response, result.token)
        self.log.debug("Session cookie issued", user_id=result.user.id)
        return response


@extend_schema(tags=["Auth"])
class LogoutView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_auth_service()
    log = logger.bind(view="LogoutView")

    @extend_schema(
        summary="Logout (delete the current session)",
        request=None,
        responses={200: MessageResponseSerializer, 401: ERROR, 403: ERROR},
    )
    def post(self, request):
        self.service.logout(request.auth or extract_token(request))
        response = Response(
            {"success": True, "message": "Logged out successfully"},
            status=status.HTTP_200_OK,
        )
        clear_session_cookie(response)
        self.log.debug("Session cookie cleared", user_id=request.user.user_id)
        return response


@extend_schema(tags=["Auth"])
class VerifyView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Verify the current session",
        responses={200: VerifyResponseSerializer, 401: ERROR, 403: ERROR},
    )
    def get(self, request):
        return Response({"valid": True, "user": request.user.to_dict()})


@extend_schema(tags=["Auth"])
class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_auth_service()
    log = logger.bind(view="ChangePasswordView")

    @extend_schema(
        summary="Change password and sign out every device",
        request=ChangePasswordRequestSerializer,
        responses={200: MessageResponseSerializer, 400: ERROR, 401: ERROR},
    )
    def post(self, request):
        data = _validated(
            ChangePasswordRequestSerializer,
            request.data,
            "Current and new passwords are required",
        )
        removed = self.service.change_password(
            request.user, data["currentPassword"], data["newPassword"]
        )
        self.log.info(
            "Password changed", user_id=request.user.user_id, sessions_removed=removed
        )
        response = Response(
            {"success": True, "message": "Password changed successfully"},
            status=status.HTTP_200_OK,
        )
        # the caller's own session is gone too
        clear_session_cookie(response)
        return response


@extend_schema(tags=["Auth"])
class CreateUserView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]
    service = build_auth_service()

    @extend_schema(
        summary="Create a staff or customer account (admin only)",
        request=CreateUserRequestSerializer,
        responses={200: CreateUserResponseSerializer, 400: ERROR, 401: ERROR, 403: ERROR},
    )
    def post(self, request):
        data = _validated(CreateUserRequestSerializer, request.data, "All fields are required")
        user = self.service.create_user(request.user, data)
        return Response({"success": True, "user": user}, status=status.HTTP_200_OK)
