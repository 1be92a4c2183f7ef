"""
AuditLogEntry domain entity.

Immutable record of a license mutation.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import AuditAction


@dataclass(frozen=True)
class AuditLogEntry:
    """Append-only audit record linked to a license by (key, product)."""

    id: uuid.UUID
    action: AuditAction
    license_key: str
    product: str
    changed_at: datetime
    details: str = ""

    @classmethod
    def create(
        cls,
        action: AuditAction,
        license_key: str,
        product: str,
        details: str = "",
        changed_at: Optional[datetime] = None,
    ) -> "AuditLogEntry":
        """
        Create a new audit entry.

        changed_at is normally assigned by the server on insert; the value
        set here is only used by in-memory repositories.
        """
        return cls(
            id=uuid.uuid4(),
            action=action,
            license_key=license_key,
            product=product,
            changed_at=changed_at or datetime.now(timezone.utc),
            details=details,
        )
