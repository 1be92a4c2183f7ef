"""
Django implementation of AuditLogRepository port.
"""
from typing import List

from asgiref.sync import sync_to_async

from core.domain.value_objects import AuditAction
from core.infrastructure.database import translate_db_errors
from licenses.domain.audit_log import AuditLogEntry
from licenses.infrastructure.models import AuditLog as AuditLogModel
from licenses.ports.audit_log_repository import AuditLogRepository


class DjangoAuditLogRepository(AuditLogRepository):
    """Django ORM implementation of AuditLogRepository."""

    def _to_domain(self, model: AuditLogModel) -> AuditLogEntry:
        """Convert Django model to domain entity."""
        return AuditLogEntry(
            id=model.id,
            action=AuditAction(model.action),
            license_key=model.license_key,
            product=model.product,
            changed_at=model.changed_at,
            details=model.details or "",
        )

    @sync_to_async
    def find_recent(self, limit: int) -> List[AuditLogEntry]:
        """
        Return the most recent audit entries.

        Args:
            limit: Maximum number of entries

        Returns:
            Entries ordered by changed_at descending
        """
        with translate_db_errors("audit log query"):
            models = list(AuditLogModel.objects.order_by("-changed_at")[:limit])
        return [self._to_domain(model) for model in models]
