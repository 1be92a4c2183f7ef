"""
License API views.

These endpoints are used to:
- Verify a license for a product (public)
- Add, list, get and delete licenses (bearer token)
- Read the audit log (bearer token)
"""

from datetime import timedelta

from asgiref.sync import async_to_sync
from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.licenses.serializers import (
    AddLicenseRequestSerializer,
    AuditLogQuerySerializer,
    AuditLogSerializer,
    LicenseSerializer,
    VerifyLicenseRequestSerializer,
    VerifyLicenseResponseSerializer,
)
from licenses.application.commands.add_license import AddLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.handlers.add_license_handler import AddLicenseHandler
from licenses.application.handlers.delete_license_handler import DeleteLicenseHandler
from licenses.application.handlers.license_query_handlers import (
    GetAuditLogsHandler,
    GetLicenseHandler,
    ListLicensesHandler,
)
from licenses.application.handlers.verify_license_handler import VerifyLicenseHandler
from licenses.application.queries.get_audit_logs import (
    DEFAULT_AUDIT_LOG_LIMIT,
    MAX_AUDIT_LOG_LIMIT,
    GetAuditLogsQuery,
)
from licenses.application.queries.get_license import GetLicenseQuery
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.application.queries.verify_license import VerifyLicenseQuery
from licenses.infrastructure.repositories.django_audit_log_repository import (
    DjangoAuditLogRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

_license_repo = DjangoLicenseRepository()
_audit_log_repo = DjangoAuditLogRepository()

ERROR_RESPONSES = {
    400: {"description": "Bad Request"},
    401: {"description": "Unauthorized - Missing or invalid bearer token"},
}


class VerifyLicenseView(APIView):
    """View for verifying licenses."""

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="verify_license",
        summary="Verify License",
        description=(
            "Check whether a license key is valid for a product. "
            "Unknown and expired licenses return 200 with valid=false and a reason."
        ),
        tags=["Licenses"],
        request=VerifyLicenseRequestSerializer,
        responses={200: VerifyLicenseResponseSerializer, 400: {"description": "Bad Request"}},
    )
    def post(self, request: Request) -> Response:
        """Verify a license."""
        return async_to_sync(self._handle_verify_license)(request)

    async def _handle_verify_license(self, request: Request) -> Response:
        """Async handler for verify license."""
        serializer = VerifyLicenseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = VerifyLicenseHandler(license_repository=_license_repo)
        result = await handler.handle(
            VerifyLicenseQuery(
                key=serializer.validated_data["key"],
                product=serializer.validated_data["product"],
            )
        )
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class AuditLogsView(APIView):
    """View for reading the audit log."""

    @extend_schema(
        operation_id="list_audit_logs",
        summary="List Audit Logs",
        description="Return the most recent license mutations, newest first.",
        tags=["Licenses"],
        parameters=[
            OpenApiParameter(
                name="limit",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description=(
                    f"Maximum number of entries, 1 to {MAX_AUDIT_LOG_LIMIT} "
                    f"(default {DEFAULT_AUDIT_LOG_LIMIT})"
                ),
            ),
        ],
        responses={200: AuditLogSerializer(many=True), **ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List audit log entries."""
        return async_to_sync(self._handle_audit_logs)(request)

    async def _handle_audit_logs(self, request: Request) -> Response:
        """Async handler for audit logs."""
        params = AuditLogQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        limit = params.validated_data["limit"]

        handler = GetAuditLogsHandler(audit_log_repository=_audit_log_repo)
        entries = await handler.handle(GetAuditLogsQuery(limit=limit))
        return Response(AuditLogSerializer(entries, many=True).data)


class LicenseListView(APIView):
    """View for adding and listing licenses."""

    @extend_schema(
        operation_id="add_license",
        summary="Add License",
        description=(
            "Add a license for a product. Omit key or pass 'random' to generate one. "
            "The license and its audit entry are written together."
        ),
        tags=["Licenses"],
        request=AddLicenseRequestSerializer,
        responses={
            201: LicenseSerializer,
            **ERROR_RESPONSES,
            409: {"description": "License key already exists for this product"},
        },
    )
    def post(self, request: Request) -> Response:
        """Add a license."""
        return async_to_sync(self._handle_add_license)(request)

    async def _handle_add_license(self, request: Request) -> Response:
        """Async handler for add license."""
        serializer = AddLicenseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        expires_at = data.get("expires_at")
        if data.get("hours"):
            expires_at = timezone.now() + timedelta(hours=data["hours"])

        handler = AddLicenseHandler(license_repository=_license_repo)
        license = await handler.handle(
            AddLicenseCommand(
                key=data.get("key"),
                product=data["product"],
                owner_email=data["owner_email"],
                owner_name=data["owner_name"],
                expires_at=expires_at,
            )
        )
        return Response(LicenseSerializer(license).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="list_licenses",
        summary="List Licenses",
        description="List all licenses of a product in insertion order.",
        tags=["Licenses"],
        parameters=[
            OpenApiParameter(
                name="product",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Product name",
            ),
        ],
        responses={200: LicenseSerializer(many=True), **ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List licenses for a product."""
        return async_to_sync(self._handle_list_licenses)(request)

    async def _handle_list_licenses(self, request: Request) -> Response:
        """Async handler for list licenses."""
        product = request.query_params.get("product", "").strip()
        if not product:
            raise ValidationError({"product": ["This query parameter is required."]})

        handler = ListLicensesHandler(license_repository=_license_repo)
        licenses = await handler.handle(ListLicensesQuery(product=product))
        return Response(LicenseSerializer(licenses, many=True).data)


class LicenseDetailView(APIView):
    """View for a single license identified by key and product."""

    @extend_schema(
        operation_id="get_license",
        summary="Get License",
        tags=["Licenses"],
        responses={200: LicenseSerializer, **ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def get(self, request: Request, key: str, product: str) -> Response:
        """Get a license."""
        return async_to_sync(self._handle_get_license)(key, product)

    async def _handle_get_license(self, key: str, product: str) -> Response:
        """Async handler for get license."""
        handler = GetLicenseHandler(license_repository=_license_repo)
        license = await handler.handle(GetLicenseQuery(key=key, product=product))
        return Response(LicenseSerializer(license).data)

    @extend_schema(
        operation_id="delete_license",
        summary="Delete License",
        description="Delete a license; a DELETE audit entry is written in the same transaction.",
        tags=["Licenses"],
        responses={204: None, **ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def delete(self, request: Request, key: str, product: str) -> Response:
        """Delete a license."""
        return async_to_sync(self._handle_delete_license)(key, product)

    async def _handle_delete_license(self, key: str, product: str) -> Response:
        """Async handler for delete license."""
        handler = DeleteLicenseHandler(license_repository=_license_repo)
        await handler.handle(DeleteLicenseCommand(key=key, product=product))
        return Response(status=status.HTTP_204_NO_CONTENT)
