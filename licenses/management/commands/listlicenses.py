"""
Django management command to list the licenses of a product.
"""
from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.application.handlers.license_query_handlers import ListLicensesHandler
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.management.table import render_table

HEADERS = ("Key", "Owner", "Email", "Activated", "Expires")


class Command(BaseCommand):
    """Command to list licenses for a product."""

    help = "List licenses of a product"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("product", help="Product name")

    def handle(self, *args, **options):
        """Execute the command."""
        handler = ListLicensesHandler(DjangoLicenseRepository())
        try:
            licenses = async_to_sync(handler.handle)(ListLicensesQuery(product=options["product"]))
        except DomainException as e:
            raise CommandError(e.message) from e

        if not licenses:
            self.stdout.write("No licenses found for this product.")
            return

        rows = [
            (
                license.key,
                license.owner_name,
                license.owner_email,
                "Yes" if license.is_activated else "No",
                license.expires_at.strftime("%Y-%m-%d") if license.expires_at else "Never",
            )
            for license in licenses
        ]
        self.stdout.write(render_table(HEADERS, rows))
