"""
AddLicenseHandler.

Handles the add license command.
"""
import logging

from core.domain.exceptions import DuplicateKeyError
from core.domain.value_objects import AuditAction, LicenseKeyValue
from core.infrastructure.database import ConstraintViolation
from core.metrics import licenses_added_total
from licenses.application.commands.add_license import AddLicenseCommand
from licenses.application.dto.license_dto import LicenseDTO
from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License
from licenses.domain.license_key import resolve_license_key
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class AddLicenseHandler:
    """Handler for AddLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    async def handle(self, command: AddLicenseCommand) -> LicenseDTO:
        """
        Handle add license command.

        Args:
            command: AddLicenseCommand

        Returns:
            LicenseDTO of the stored license

        Raises:
            InvalidKeyFormatError: If key format is invalid
            InvalidEmailError: If owner email is malformed
            InvalidProductError: If product is empty or too long
            DuplicateKeyError: If (key, product) already exists
            PersistenceError: On storage failure
        """
        key = resolve_license_key(command.key)

        # Validates key format and email
        license = License.create(
            key=key,
            product=command.product,
            owner_email=command.owner_email,
            owner_name=command.owner_name,
            expires_at=command.expires_at,
        )

        audit_entry = AuditLogEntry.create(
            action=AuditAction.ADD,
            license_key=license.key,
            product=license.product,
            details=license.audit_details,
        )

        try:
            saved = await self.license_repository.add(license, audit_entry)
        except ConstraintViolation as exc:
            raise DuplicateKeyError(
                f"License key already exists for product {command.product}"
            ) from exc

        licenses_added_total.labels(product=saved.product).inc()
        logger.info(
            "License added",
            extra={"license_key": LicenseKeyValue(saved.key).masked, "product": saved.product},
        )

        return LicenseDTO.from_entity(saved)
