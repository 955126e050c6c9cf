from django.urls import path
from .views import (
    ChangePasswordView,
    CreateUserView,
    LoginView,
    LogoutView,
    VerifyView,
)

urlpatterns = [
    path("login", LoginView.as_view(), name="auth-login"),
    path("logout", LogoutView.as_view(), name="auth-logout"),
    path("verify", VerifyView.as_view(), name="auth-verify"),
    path("change-password", ChangePasswordView.as_view(), name="auth-change-password"),
    path("create-user", CreateUserView.as_view(), name="auth-create-user"),
]
