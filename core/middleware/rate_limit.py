"""
Rate limiting middleware.

Implements a fixed-window request limit per client IP.
"""

import hashlib
import time
from typing import Callable, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.metrics import errors_total
from core.middleware.metrics import normalize_endpoint
from core.request_utils import get_client_ip


class RateLimitMiddleware:
    """
    Rate limiting middleware per client IP.

    Counters live in the Django cache so they are shared between workers
    when a shared backend (Redis) is configured.
    Default limit: 100 requests per minute per client.
    """

    DEFAULT_RATE_LIMIT = 100  # requests per minute
    RATE_LIMIT_WINDOW = 60  # seconds
    LIMITED_PATH_PREFIXES = ("/license/", "/api/")
    EXEMPT_PATH_PREFIXES = ("/api/docs", "/api/schema")

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response
        self.limit = int(getattr(settings, "RATE_LIMIT_PER_MINUTE", self.DEFAULT_RATE_LIMIT))

    def _get_rate_limit_key(self, client_ip: str) -> str:
        """
        Generate cache key for rate limiting.

        Args:
            client_ip: Client IP address

        Returns:
            Cache key string
        """
        ip_hash = hashlib.sha256(client_ip.encode()).hexdigest()[:16]
        return f"rate_limit:{ip_hash}"

    def _check_rate_limit(self, client_ip: str) -> Tuple[bool, int, int]:
        """
        Check if request is within rate limit.

        Args:
            client_ip: Client IP address

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        window_start = int(time.time() / self.RATE_LIMIT_WINDOW)
        reset_time = (window_start + 1) * self.RATE_LIMIT_WINDOW
        full_key = f"{self._get_rate_limit_key(client_ip)}:{window_start}"

        current_count = cache.get(full_key, 0)
        if current_count >= self.limit:
            return False, 0, reset_time

        try:
            new_count = cache.incr(full_key, 1)
        except ValueError:
            # Key doesn't exist yet
            cache.set(full_key, 1, timeout=self.RATE_LIMIT_WINDOW)
            new_count = 1

        return True, max(0, self.limit - new_count), reset_time

    def _is_limited(self, path: str) -> bool:
        if path.startswith(self.EXEMPT_PATH_PREFIXES):
            return False
        return path.startswith(self.LIMITED_PATH_PREFIXES)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response with rate limit headers
        """
        if self.limit <= 0 or not self._is_limited(request.path):
            return self.get_response(request)

        client_ip = get_client_ip(request) or "unknown"
        is_allowed, remaining, reset_time = self._check_rate_limit(client_ip)

        if not is_allowed:
            errors_total.labels(
                error_type="rate_limit_exceeded", endpoint=normalize_endpoint(request.path)
            ).inc()
            response = JsonResponse(
                {
                    "error": {
                        "code": "RATE_LIMIT_EXCEEDED",
                        "message": "Rate limit exceeded. Please try again later.",
                    }
                },
                status=429,
            )
            response["Retry-After"] = str(max(0, reset_time - int(time.time())))
        else:
            response = self.get_response(request)

        # Rate limit headers (RFC 6585)
        response["X-RateLimit-Limit"] = str(self.limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)

        return response
