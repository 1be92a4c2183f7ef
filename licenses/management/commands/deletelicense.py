"""
Django management command to delete a license.
"""
from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.handlers.delete_license_handler import DeleteLicenseHandler
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository


class Command(BaseCommand):
    """Command to delete a license by key and product."""

    help = "Delete a license"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("key", help="License key")
        parser.add_argument("product", help="Product name")

    def handle(self, *args, **options):
        """Execute the command."""
        key = options["key"]
        product = options["product"]
        handler = DeleteLicenseHandler(DjangoLicenseRepository())

        try:
            async_to_sync(handler.handle)(DeleteLicenseCommand(key=key, product=product))
        except DomainException as e:
            raise CommandError(f"Could not delete license: {e.message}") from e

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"License deleted: {key} (Product: {product})"))
