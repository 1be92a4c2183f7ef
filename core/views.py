"""
Core views for health checks, liveness and metrics.
"""

import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

logger = logging.getLogger(__name__)


def _database_ok() -> bool:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return True
    except DatabaseError as e:
        logger.warning("Database health check failed: %s", e)
        return False


def _cache_ok(key: str) -> bool:
    try:
        cache.set(key, "ok", 10)
        return cache.get(key) == "ok"
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Cache health check failed: %s", e)
        return False


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        return JsonResponse({"status": "healthy", "service": "license-server"})


@method_decorator(csrf_exempt, name="dispatch")
class HealthDBView(View):
    """Database health check endpoint."""

    def get(self, _request):
        """Check database connectivity."""
        if _database_ok():
            return JsonResponse({"status": "healthy", "database": "connected"})
        return JsonResponse({"status": "unhealthy", "database": "disconnected"}, status=503)


@method_decorator(csrf_exempt, name="dispatch")
class HealthCacheView(View):
    """Cache health check endpoint."""

    def get(self, _request):
        """Check cache connectivity."""
        if _cache_ok("health_check"):
            return JsonResponse({"status": "healthy", "cache": "connected"})
        return JsonResponse({"status": "unhealthy", "cache": "disconnected"}, status=503)


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness check endpoint."""

    def get(self, _request):
        """Check if service is ready to accept traffic."""
        checks = {
            "database": _database_ok(),
            "cache": _cache_ok("ready_check"),
        }

        all_healthy = all(checks.values())
        return JsonResponse(
            {
                "status": "ready" if all_healthy else "not_ready",
                "checks": checks,
            },
            status=200 if all_healthy else 503,
        )


class MetricsView(View):
    """Prometheus scrape endpoint."""

    def get(self, _request):
        """Render the default registry in the Prometheus text format."""
        return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
