"""
License DTOs for API and CLI responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License


@dataclass
class LicenseDTO:
    """DTO for license information."""

    id: uuid.UUID
    key: str
    product: str
    expires_at: Optional[datetime]
    owner_email: str
    owner_name: str
    is_activated: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, license: License) -> "LicenseDTO":
        """Build DTO from a License entity."""
        return cls(
            id=license.id,
            key=license.key,
            product=license.product,
            expires_at=license.expires_at,
            owner_email=license.owner_email,
            owner_name=license.owner_name,
            is_activated=license.is_activated,
            created_at=license.created_at,
        )


@dataclass
class AuditLogDTO:
    """DTO for an audit log entry."""

    action: str
    license_key: str
    product: str
    changed_at: datetime
    details: str

    @classmethod
    def from_entity(cls, entry: AuditLogEntry) -> "AuditLogDTO":
        """Build DTO from an AuditLogEntry entity."""
        return cls(
            action=entry.action.value,
            license_key=entry.license_key,
            product=entry.product,
            changed_at=entry.changed_at,
            details=entry.details,
        )


@dataclass
class VerificationResultDTO:
    """
    DTO for a verification result.

    Invalid results carry only a reason; valid ones carry the license.
    """

    valid: bool
    reason: Optional[str] = None
    license: Optional[LicenseDTO] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render the wire shape of the verify endpoint."""
        if not self.valid:
            return {"valid": False, "reason": self.reason}
        return {
            "valid": True,
            "key": self.license.key,
            "product": self.license.product,
            "expires_at": self.license.expires_at.isoformat() if self.license.expires_at else None,
            "owner_email": self.license.owner_email,
            "owner_name": self.license.owner_name,
            "is_activated": self.license.is_activated,
        }
