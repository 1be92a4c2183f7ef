"""
Metrics middleware for Prometheus.

Records HTTP request metrics for monitoring.
"""

import re
import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)

LICENSE_KEY_SEGMENT = re.compile(r"/[A-Za-z0-9]{4}-[A-Za-z0-9]{4}-[A-Za-z0-9]{4}-[A-Za-z0-9]{4}(/[^/]+)?")
NUMERIC_SEGMENT = re.compile(r"/\d+")


def normalize_endpoint(path: str) -> str:
    """Collapse per-resource path segments so metric labels stay bounded."""
    endpoint = path.split("?")[0]
    endpoint = LICENSE_KEY_SEGMENT.sub("/{key}/{product}", endpoint)
    return NUMERIC_SEGMENT.sub("/{id}", endpoint)


class MetricsMiddleware:
    """
    Middleware to record HTTP metrics for Prometheus.

    Records:
    - Request count by method, endpoint, status
    - Request duration histogram
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request and record metrics."""
        start_time = time.time()
        endpoint = normalize_endpoint(request.path)

        try:
            response = self.get_response(request)
        except Exception:
            self._record(request.method, endpoint, 500, time.time() - start_time)
            raise

        self._record(request.method, endpoint, response.status_code, time.time() - start_time)
        return response

    def _record(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status_code=status_code,
        ).inc()
        http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint,
        ).observe(duration)
