from django.urls import path, include
from apps.common.views import health

urlpatterns = [
    path("health", health, name="api-health"),
    path("auth/", include("apps.auth.urls")),
]
