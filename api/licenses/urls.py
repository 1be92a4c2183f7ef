"""
URL configuration for license endpoints.
"""

from django.urls import path

from api.licenses import views

# Mounted under /license/
license_urlpatterns = [
    path(
        "verify",
        views.VerifyLicenseView.as_view(),
        name="verify-license",
    ),
    path(
        "audit-logs",
        views.AuditLogsView.as_view(),
        name="audit-logs",
    ),
]

# Mounted under /api/licenses/
urlpatterns = [
    path(
        "",
        views.LicenseListView.as_view(),
        name="licenses",
    ),
    path(
        "<str:key>/<str:product>",
        views.LicenseDetailView.as_view(),
        name="license-detail",
    ),
]
