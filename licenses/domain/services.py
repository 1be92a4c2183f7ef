"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from datetime import datetime
from typing import Optional, Tuple

from core.domain.value_objects import VerificationReason
from licenses.domain.license import License


class LicenseVerifier:
    """Domain service deciding whether a looked-up license is usable."""

    @staticmethod
    def verify(
        license: Optional[License],
        current_time: Optional[datetime] = None,
    ) -> Tuple[bool, Optional[VerificationReason]]:
        """
        Verify a license.

        Args:
            license: License entity, or None when the lookup found nothing
            current_time: Time to check expiry against (defaults to now)

        Returns:
            Tuple of (is_valid, reason); reason is None for valid licenses
        """
        if license is None:
            return False, VerificationReason.NOT_FOUND
        if license.is_expired(current_time):
            return False, VerificationReason.EXPIRED
        return True, None
