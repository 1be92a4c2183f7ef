"""
Audit log repository port (interface).

Audit entries are appended by LicenseRepository mutations;
this port only reads them back.
"""
from abc import ABC, abstractmethod
from typing import List

from licenses.domain.audit_log import AuditLogEntry


class AuditLogRepository(ABC):
    """Abstract read-side repository for AuditLogEntry entities."""

    @abstractmethod
    async def find_recent(self, limit: int) -> List[AuditLogEntry]:
        """
        Return the most recent audit entries.

        Args:
            limit: Maximum number of entries

        Returns:
            Entries ordered by changed_at descending
        """
        pass
