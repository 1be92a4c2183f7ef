"""
Django management command to show the most recent audit log entries.
"""
from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.application.handlers.license_query_handlers import GetAuditLogsHandler
from licenses.application.queries.get_audit_logs import GetAuditLogsQuery
from licenses.infrastructure.repositories.django_audit_log_repository import (
    DjangoAuditLogRepository,
)
from licenses.management.table import render_table

DEFAULT_LIMIT = 10
HEADERS = ("Date", "Action", "License", "Product", "Details")


def _parse_limit(raw):
    """Positive integer limit, or the default for anything else."""
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return limit if limit > 0 else DEFAULT_LIMIT


class Command(BaseCommand):
    """Command to show audit log entries, newest first."""

    help = "Show audit logs"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "limit",
            nargs="?",
            default=None,
            help=f"Number of entries to show (default {DEFAULT_LIMIT})",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        handler = GetAuditLogsHandler(DjangoAuditLogRepository())
        query = GetAuditLogsQuery(limit=_parse_limit(options["limit"]))
        try:
            entries = async_to_sync(handler.handle)(query)
        except DomainException as e:
            raise CommandError(e.message) from e

        rows = [
            (
                entry.changed_at.strftime("%Y-%m-%d %H:%M"),
                entry.action,
                entry.license_key,
                entry.product,
                entry.details,
            )
            for entry in entries
        ]
        self.stdout.write(render_table(HEADERS, rows))
