"""
Security headers middleware.

Adds response headers not already covered by Django's SecurityMiddleware
and XFrameOptionsMiddleware.
"""

from typing import Callable

from django.http import HttpRequest, HttpResponse

PERMISSIONS_POLICY = (
    "geolocation=(), microphone=(), camera=(), payment=(), usb=(), "
    "magnetometer=(), gyroscope=()"
)


class SecurityHeadersMiddleware:
    """Set hardening headers on every response."""

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        response.setdefault("X-Content-Type-Options", "nosniff")
        response.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.setdefault("Permissions-Policy", PERMISSIONS_POLICY)
        response.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        return response
