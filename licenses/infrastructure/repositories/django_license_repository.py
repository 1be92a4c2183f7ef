"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async

from core.infrastructure.database import atomic_operation, translate_db_errors
from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License
from licenses.infrastructure.models import AuditLog as AuditLogModel
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Writes the license row and its audit row in one transaction
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            key=model.license_key,
            product=model.product,
            owner_email=model.owner_email,
            owner_name=model.owner_name,
            expires_at=model.expires_at,
            is_activated=model.is_activated,
            created_at=model.created_at,
        )

    def _append_audit(self, audit_entry: AuditLogEntry) -> None:
        """Insert an audit row; changed_at is assigned by the database layer."""
        AuditLogModel.objects.create(
            id=audit_entry.id,
            action=audit_entry.action.value,
            license_key=audit_entry.license_key,
            product=audit_entry.product,
            details=audit_entry.details,
        )

    @sync_to_async
    def add(self, license: License, audit_entry: AuditLogEntry) -> License:
        """
        Insert a license and its audit entry atomically.

        Args:
            license: License entity to insert
            audit_entry: ADD audit entry

        Returns:
            Saved license entity
        """
        with atomic_operation("license insert"):
            model = LicenseModel.objects.create(
                id=license.id,
                license_key=license.key,
                product=license.product,
                expires_at=license.expires_at,
                owner_email=license.owner_email,
                owner_name=license.owner_name,
                is_activated=license.is_activated,
            )
            self._append_audit(audit_entry)
        return self._to_domain(model)

    @sync_to_async
    def find_by_key_and_product(self, key: str, product: str) -> Optional[License]:
        """
        Find a license by key and product.

        Args:
            key: License key string
            product: Product name

        Returns:
            License entity or None if not found
        """
        with translate_db_errors("license query"):
            try:
                model = LicenseModel.objects.get(license_key=key, product=product)
            except LicenseModel.DoesNotExist:
                return None
        return self._to_domain(model)

    @sync_to_async
    def delete(self, key: str, product: str, audit_entry: AuditLogEntry) -> bool:
        """
        Delete a license and append its audit entry atomically.

        Args:
            key: License key string
            product: Product name
            audit_entry: DELETE audit entry

        Returns:
            True if a row was deleted, False if none matched
        """
        with atomic_operation("license delete"):
            deleted, _ = LicenseModel.objects.filter(license_key=key, product=product).delete()
            if deleted == 0:
                return False
            self._append_audit(audit_entry)
        return True

    @sync_to_async
    def list_by_product(self, product: str) -> List[License]:
        """
        List all licenses for a product in insertion order.

        Args:
            product: Product name

        Returns:
            List of License entities
        """
        with translate_db_errors("license list"):
            models = list(LicenseModel.objects.filter(product=product).order_by("created_at"))
        return [self._to_domain(model) for model in models]
