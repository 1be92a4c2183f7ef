"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.exceptions import InvalidProductError
from core.domain.value_objects import Email, LicenseKeyValue


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Grants an owner the use of one product under one key.
    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    key: str
    product: str
    owner_email: str
    owner_name: str
    expires_at: Optional[datetime]
    is_activated: bool
    created_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.product or len(self.product.strip()) == 0:
            raise InvalidProductError("Product is required")
        if len(self.product) > 255:
            raise InvalidProductError("Product name too long")

    @classmethod
    def create(
        cls,
        key: str,
        product: str,
        owner_email: str,
        owner_name: str,
        expires_at: Optional[datetime] = None,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            key: License key in XXXX-XXXX-XXXX-XXXX format
            product: Product name
            owner_email: Owner email address
            owner_name: Owner display name
            expires_at: Optional expiration datetime
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance

        Raises:
            InvalidKeyFormatError: If key format is invalid
            InvalidEmailError: If owner email is malformed
        """
        LicenseKeyValue(key)
        Email(owner_email)
        return cls(
            id=license_id or uuid.uuid4(),
            key=key,
            product=product,
            owner_email=owner_email,
            owner_name=owner_name,
            expires_at=expires_at,
            is_activated=False,
            created_at=datetime.now(timezone.utc),
        )

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check whether the license expiry lies strictly in the past.

        Args:
            current_time: Current time (defaults to now, UTC)

        Returns:
            True if expires_at is set and before current_time
        """
        if self.expires_at is None:
            return False
        check_time = current_time or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # Naive datetimes are treated as UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if check_time.tzinfo is None:
            check_time = check_time.replace(tzinfo=timezone.utc)
        return expires_at < check_time

    @property
    def audit_details(self) -> str:
        """Detail text recorded with the ADD audit entry."""
        return f"Owner: {self.owner_name} ({self.owner_email})"
