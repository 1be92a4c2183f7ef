"""
Django management command to add a license.

Usage:
    python manage.py addlicense --key random --product Demo --email a@b.com --name "A B" --hours 72
"""
from datetime import timedelta

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.domain.exceptions import DomainException
from licenses.application.commands.add_license import AddLicenseCommand
from licenses.application.handlers.add_license_handler import AddLicenseHandler
from licenses.domain.license_key import RANDOM_KEY
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository


class Command(BaseCommand):
    """Command to add a license for a product."""

    help = "Add a new license"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--key",
            required=True,
            help=f"License key (XXXX-XXXX-XXXX-XXXX) or '{RANDOM_KEY}' to generate one",
        )
        parser.add_argument("--product", required=True, help="Product name")
        parser.add_argument("--email", required=True, help="Owner email address")
        parser.add_argument("--name", required=True, help="Owner name")
        parser.add_argument(
            "--hours",
            type=int,
            default=0,
            help="License duration in hours (omit for a perpetual license)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        expires_at = None
        if options["hours"] > 0:
            expires_at = timezone.now() + timedelta(hours=options["hours"])

        command = AddLicenseCommand(
            key=options["key"],
            product=options["product"],
            owner_email=options["email"],
            owner_name=options["name"],
            expires_at=expires_at,
        )
        handler = AddLicenseHandler(DjangoLicenseRepository())

        try:
            license = async_to_sync(handler.handle)(command)
        except DomainException as e:
            raise CommandError(f"Could not add license: {e.message}") from e

        if options["key"].strip().lower() == RANDOM_KEY:
            self.stdout.write(f"Generated license key: {license.key}")

        owner = f"{license.owner_name} <{license.owner_email}>"
        if license.expires_at is not None:
            # pylint: disable=no-member
            self.stdout.write(
                self.style.SUCCESS(
                    f"License added: {license.key} (Product: {license.product}, "
                    f"Owner: {owner}, Expires: {license.expires_at:%Y-%m-%d %H:%M %Z})"
                )
            )
        else:
            # pylint: disable=no-member
            self.stdout.write(
                self.style.SUCCESS(
                    f"Perpetual license added: {license.key} "
                    f"(Product: {license.product}, Owner: {owner})"
                )
            )
