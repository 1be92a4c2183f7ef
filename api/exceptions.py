"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error body has the shape {"error": {"code": ..., "message": ...}}.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    DuplicateAccountError,
    DuplicateKeyError,
    InvalidCredentialsError,
    InvalidTokenError,
    LicenseNotFoundError,
    PersistenceError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred"

DOMAIN_STATUS_CODES = (
    (LicenseNotFoundError, status.HTTP_404_NOT_FOUND),
    ((DuplicateKeyError, DuplicateAccountError), status.HTTP_409_CONFLICT),
    ((InvalidCredentialsError, InvalidTokenError), status.HTTP_401_UNAUTHORIZED),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_body(code: str, message: str, **extra: Any) -> Dict[str, Any]:
    """Build the standard error payload."""
    error = {"code": code, "message": message}
    error.update(extra)
    return {"error": error}


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, correlation_id)
    elif isinstance(exc, ValidationError):
        response = exception_handler(exc, context)
        response.data = error_body("VALIDATION_ERROR", "Invalid request", details=response.data)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        detail = exc.default_detail
        if isinstance(response.data, dict):
            detail = response.data.get("detail", detail)
        code = exc.default_code.upper().replace("-", "_")
        response.data = error_body(code, str(detail))
    elif isinstance(exc, Http404):
        response = Response(
            error_body("NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, correlation_id)

    if correlation_id:
        response["X-Correlation-ID"] = correlation_id
    return response


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _endpoint(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request is not None else ""


def _status_for(exc: DomainException) -> int:
    for exc_types, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_types):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = _status_for(exc)

    if isinstance(exc, PersistenceError):
        # Detail stays in the server log
        logger.error(
            "Persistence failure: %s",
            exc.message,
            extra={"correlation_id": correlation_id},
            exc_info=exc,
        )
        errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()
        return Response(error_body(exc.code, GENERIC_ERROR_MESSAGE), status=status_code)

    logger.warning(
        "Domain exception: %s - %s", exc.code, exc.message, extra={"correlation_id": correlation_id}
    )
    response = Response(error_body(exc.code, exc.message), status=status_code)
    if isinstance(exc, InvalidTokenError):
        response["WWW-Authenticate"] = "Bearer"
    return response


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=exc
    )
    errors_total.labels(error_type=type(exc).__name__, endpoint=_endpoint(context)).inc()
    return Response(
        error_body("INTERNAL_ERROR", GENERIC_ERROR_MESSAGE),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
