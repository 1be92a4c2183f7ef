"""
GetAuditLogsQuery.
"""
from dataclasses import dataclass

DEFAULT_AUDIT_LOG_LIMIT = 100
MAX_AUDIT_LOG_LIMIT = 1000


@dataclass
class GetAuditLogsQuery:
    """Query for the most recent audit entries."""

    limit: int = DEFAULT_AUDIT_LOG_LIMIT
