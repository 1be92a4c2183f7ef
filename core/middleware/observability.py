"""
Observability middleware.

This middleware adds structured request logging and correlation IDs.
"""

import logging
import time
import uuid
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.request_utils import get_client_ip

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "HTTP_X_CORRELATION_ID"


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Assigns a correlation ID (reusing an incoming X-Correlation-ID)
    2. Logs request/response information
    3. Tracks request duration
    4. Adds correlation ID to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.META.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore

        start_time = time.time()
        logger.info(
            "Request started",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.path,
                "remote_addr": get_client_ip(request),
                "user_agent": request.META.get("HTTP_USER_AGENT", ""),
            },
        )

        try:
            response = self.get_response(request)
        except Exception as e:  # pylint: disable=broad-exception-caught
            self._handle_exception(request, e, start_time, correlation_id)
            raise

        duration = time.time() - start_time
        request_status = self._get_request_status(response)
        self._log_response(request, response, correlation_id, request_status, duration)
        self._add_observability_headers(response, correlation_id, request_status, duration)
        return response

    def _get_request_status(self, response: HttpResponse) -> str:
        """Determine request status based on status code."""
        if response.status_code >= 500:
            return "server_error"
        if response.status_code >= 400:
            return "client_error"
        return "success"

    def _log_response(self, request, response, correlation_id, status, duration):
        """Log structured response information."""
        log_extra = {
            "correlation_id": correlation_id,
            "request_status": status,
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }

        # Authenticated account, set by the bearer token authentication
        account_id = getattr(getattr(request, "user", None), "account_id", None)
        if account_id:
            log_extra["account_id"] = str(account_id)

        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

    def _add_observability_headers(self, response, correlation_id, status, duration):
        """Add observability headers to response."""
        response["X-Correlation-ID"] = correlation_id
        response["X-Request-Status"] = status
        response["X-Request-Duration"] = f"{duration:.3f}"

    def _handle_exception(self, request, e, start_time, correlation_id):
        """Handle and log request exception."""
        duration = time.time() - start_time
        logger.error(
            "Request failed",
            extra={
                "correlation_id": correlation_id,
                "request_status": "exception",
                "method": request.method,
                "path": request.path,
                "error_type": type(e).__name__,
                "duration_ms": round(duration * 1000, 2),
            },
            exc_info=True,
        )
