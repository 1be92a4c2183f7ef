"""
Integration tests for license management commands.
"""
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from licenses.infrastructure.models import AuditLog, License

KEY = "ABCD-1234-EFGH-5678"


def run(*args, **options):
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


@pytest.mark.django_db
@pytest.mark.integration
class TestAddLicenseCommand:
    """Tests for the addlicense command."""

    def test_add_perpetual(self):
        """Test adding a license without expiry."""
        output = run("addlicense", key=KEY, product="Demo", email="a@b.com", name="A B")

        assert "Perpetual license added: ABCD-1234-EFGH-5678" in output
        model = License.objects.get(license_key=KEY, product="Demo")
        assert model.expires_at is None
        assert AuditLog.objects.filter(action="ADD", license_key=KEY).count() == 1

    def test_add_with_hours(self):
        """Test --hours sets an expiry."""
        output = run(
            "addlicense", key=KEY, product="Demo", email="a@b.com", name="A B", hours=48
        )

        assert "License added: ABCD-1234-EFGH-5678" in output
        assert "Expires:" in output
        assert License.objects.get().expires_at is not None

    def test_add_random_key(self):
        """Test 'random' generates and prints a key."""
        output = run("addlicense", key="random", product="Demo", email="a@b.com", name="A B")

        model = License.objects.get()
        assert f"Generated license key: {model.license_key}" in output

    def test_add_invalid_key(self):
        """Test an invalid key aborts with a command error."""
        with pytest.raises(CommandError, match="Could not add license"):
            run("addlicense", key="bad", product="Demo", email="a@b.com", name="A B")

        assert not License.objects.exists()

    def test_add_empty_product(self):
        """Test an empty product aborts with a command error."""
        with pytest.raises(CommandError, match="Product is required"):
            run("addlicense", key=KEY, product="", email="a@b.com", name="A B")

        assert not License.objects.exists()

    def test_add_duplicate(self):
        """Test a duplicate pair aborts with a command error."""
        run("addlicense", key=KEY, product="Demo", email="a@b.com", name="A B")

        with pytest.raises(CommandError, match="already exists"):
            run("addlicense", key=KEY, product="Demo", email="c@d.com", name="C D")


@pytest.mark.django_db
@pytest.mark.integration
class TestDeleteLicenseCommand:
    """Tests for the deletelicense command."""

    def test_delete(self, add_license):
        """Test deleting an existing license."""
        add_license()

        output = run("deletelicense", KEY, "Demo")

        assert "License deleted: ABCD-1234-EFGH-5678 (Product: Demo)" in output
        assert not License.objects.exists()
        assert AuditLog.objects.filter(action="DELETE").count() == 1

    def test_delete_missing(self):
        """Test deleting an unknown license fails without an audit row."""
        with pytest.raises(CommandError, match="Could not delete license"):
            run("deletelicense", KEY, "Demo")

        assert not AuditLog.objects.exists()


@pytest.mark.django_db
@pytest.mark.integration
class TestListingCommands:
    """Tests for listlicenses and auditlogs."""

    def test_list_empty(self):
        """Test the empty-product message."""
        assert "No licenses found for this product." in run("listlicenses", "Demo")

    def test_list_table(self, add_license):
        """Test the licenses table shows owner and expiry."""
        add_license()

        output = run("listlicenses", "Demo")

        assert "| Key" in output
        assert KEY in output
        assert "a@b.com" in output
        assert "Never" in output
        assert "| No " in output

    def test_audit_logs(self, add_license):
        """Test the audit log table lists mutations."""
        add_license()
        run("deletelicense", KEY, "Demo")

        output = run("auditlogs")

        assert "ADD" in output
        assert "DELETE" in output
        assert "Owner: A B (a@b.com)" in output

    def test_audit_logs_limit(self, add_license):
        """Test the positional limit caps the rows."""
        add_license(key="AAAA-AAAA-AAAA-AAAA")
        add_license(key="BBBB-BBBB-BBBB-BBBB")
        add_license(key="CCCC-CCCC-CCCC-CCCC")

        output = run("auditlogs", "1")

        assert output.count("| ADD ") == 1
