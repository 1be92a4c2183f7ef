"""
DeleteLicenseHandler.

Handles the delete license command.
"""
import logging

from core.domain.exceptions import LicenseNotFoundError
from core.domain.value_objects import AuditAction, mask_license_key
from core.metrics import licenses_deleted_total
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.domain.audit_log import AuditLogEntry
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class DeleteLicenseHandler:
    """Handler for DeleteLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, command: DeleteLicenseCommand) -> None:
        """
        Handle delete license command.

        Args:
            command: DeleteLicenseCommand

        Raises:
            LicenseNotFoundError: If no license matched (no audit entry is written)
            PersistenceError: On storage failure; the license is left intact
        """
        audit_entry = AuditLogEntry.create(
            action=AuditAction.DELETE,
            license_key=command.key,
            product=command.product,
        )

        deleted = await self.license_repository.delete(command.key, command.product, audit_entry)
        if not deleted:
            raise LicenseNotFoundError(
                f"License not found for product {command.product}"
            )

        licenses_deleted_total.labels(product=command.product).inc()
        logger.info(
            "License deleted",
            extra={"license_key": mask_license_key(command.key), "product": command.product},
        )
