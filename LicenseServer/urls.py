"""
URL configuration for LicenseServer project.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from api.licenses.urls import license_urlpatterns
from api.views import PingView
from core.views import HealthCacheView, HealthDBView, HealthView, MetricsView, ReadyView

urlpatterns = [
    path("admin/", admin.site.urls),
    # Health check endpoints
    path("health/", HealthView.as_view(), name="health"),
    path("health/db/", HealthDBView.as_view(), name="health-db"),
    path("health/cache/", HealthCacheView.as_view(), name="health-cache"),
    path("ready/", ReadyView.as_view(), name="ready"),
    path("metrics", MetricsView.as_view(), name="metrics"),
    # License verification and audit log
    path("license/", include(license_urlpatterns)),
    # API endpoints
    path("api/ping", PingView.as_view(), name="ping"),
    path("api/auth/", include("api.auth.urls")),
    path("api/licenses/", include("api.licenses.urls")),
    # OpenAPI Schema
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    # Swagger UI
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    # ReDoc
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]
