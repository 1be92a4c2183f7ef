"""
VerifyLicenseHandler.

Handler for the license verification query. Evaluated on every call;
expiry depends on the current time so results are never cached.
"""
from datetime import datetime, timezone
from typing import Callable

from core.metrics import license_verifications_total
from licenses.application.dto.license_dto import LicenseDTO, VerificationResultDTO
from licenses.application.queries.verify_license import VerifyLicenseQuery
from licenses.domain.services import LicenseVerifier
from licenses.ports.license_repository import LicenseRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VerifyLicenseHandler:
    """Handler for VerifyLicenseQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize handler with repositories and a clock."""
        self.license_repository = license_repository
        self.clock = clock

    async def handle(self, query: VerifyLicenseQuery) -> VerificationResultDTO:
        """
        Handle verify license query.

        Args:
            query: VerifyLicenseQuery

        Returns:
            VerificationResultDTO; not-found and expired are results, not errors
        """
        license = await self.license_repository.find_by_key_and_product(query.key, query.product)
        is_valid, reason = LicenseVerifier.verify(license, self.clock())

        if not is_valid:
            license_verifications_total.labels(result=reason.name.lower()).inc()
            return VerificationResultDTO(valid=False, reason=reason.value)

        license_verifications_total.labels(result="valid").inc()
        return VerificationResultDTO(valid=True, license=LicenseDTO.from_entity(license))
