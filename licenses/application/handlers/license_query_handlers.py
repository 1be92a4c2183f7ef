"""
License query handlers.

Handlers for get license, list licenses and audit log queries.
"""
from typing import List

from core.domain.exceptions import LicenseNotFoundError
from licenses.application.dto.license_dto import AuditLogDTO, LicenseDTO
from licenses.application.queries.get_audit_logs import (
    DEFAULT_AUDIT_LOG_LIMIT,
    MAX_AUDIT_LOG_LIMIT,
    GetAuditLogsQuery,
)
from licenses.application.queries.get_license import GetLicenseQuery
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.ports.audit_log_repository import AuditLogRepository
from licenses.ports.license_repository import LicenseRepository


class GetLicenseHandler:
    """Handler for GetLicenseQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, query: GetLicenseQuery) -> LicenseDTO:
        """
        Handle get license query.

        Raises:
            LicenseNotFoundError: If no license matches (key, product)
        """
        license = await self.license_repository.find_by_key_and_product(query.key, query.product)
        if license is None:
            raise LicenseNotFoundError(f"License not found for product {query.product}")
        return LicenseDTO.from_entity(license)


class ListLicensesHandler:
    """Handler for ListLicensesQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, query: ListLicensesQuery) -> List[LicenseDTO]:
        """Handle list licenses query."""
        licenses = await self.license_repository.list_by_product(query.product)
        return [LicenseDTO.from_entity(license) for license in licenses]


class GetAuditLogsHandler:
    """Handler for GetAuditLogsQuery."""

    def __init__(self, audit_log_repository: AuditLogRepository):
        """Initialize handler with repositories."""
        self.audit_log_repository = audit_log_repository

    async def handle(self, query: GetAuditLogsQuery) -> List[AuditLogDTO]:
        """
        Handle audit log query.

        Non-positive limits fall back to the default; larger ones are capped.
        """
        limit = query.limit if query.limit and query.limit > 0 else DEFAULT_AUDIT_LOG_LIMIT
        limit = min(limit, MAX_AUDIT_LOG_LIMIT)
        entries = await self.audit_log_repository.find_recent(limit)
        return [AuditLogDTO.from_entity(entry) for entry in entries]
