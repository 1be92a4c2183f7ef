"""
Integration tests for Django repositories.
"""
from datetime import timedelta
from unittest import mock

import pytest
from asgiref.sync import async_to_sync
from django.db import DatabaseError
from django.utils import timezone

from accounts.domain.account import Account
from accounts.infrastructure.models import Account as AccountModel
from core.domain.exceptions import DuplicateKeyError, LicenseNotFoundError, PersistenceError
from core.domain.value_objects import AuditAction
from core.infrastructure.database import ConstraintViolation
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.handlers.delete_license_handler import DeleteLicenseHandler
from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License
from licenses.infrastructure.models import AuditLog as AuditLogModel
from licenses.infrastructure.models import License as LicenseModel

KEY = "ABCD-1234-EFGH-5678"


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoLicenseRepository:
    """Integration tests for DjangoLicenseRepository."""

    def test_add_and_find(self, add_license, license_repository):
        """Test add then find returns the same fields."""
        add_license()

        found = async_to_sync(license_repository.find_by_key_and_product)(KEY, "Demo")

        assert found is not None
        assert found.owner_email == "a@b.com"
        assert found.owner_name == "A B"
        assert found.expires_at is None
        assert found.is_activated is False

    def test_find_missing(self, license_repository):
        """Test find returns None for an unknown pair."""
        assert async_to_sync(license_repository.find_by_key_and_product)(KEY, "Demo") is None

    def test_add_writes_audit_entry(self, add_license):
        """Test add writes one ADD audit row with owner details."""
        add_license()

        entry = AuditLogModel.objects.get()
        assert entry.action == "ADD"
        assert entry.license_key == KEY
        assert entry.product == "Demo"
        assert entry.details == "Owner: A B (a@b.com)"

    def test_duplicate_pair(self, add_license):
        """Test a duplicate pair fails and exactly one row remains."""
        add_license()

        with pytest.raises(DuplicateKeyError):
            add_license(owner_name="Someone Else")

        assert LicenseModel.objects.filter(license_key=KEY, product="Demo").count() == 1
        assert AuditLogModel.objects.count() == 1

    def test_duplicate_raises_constraint_violation(self, add_license, license_repository):
        """Test the repository signals the unique constraint."""
        add_license()
        license = License.create(key=KEY, product="Demo", owner_email="x@y.com", owner_name="X")
        entry = AuditLogEntry.create(AuditAction.ADD, KEY, "Demo", license.audit_details)

        with pytest.raises(ConstraintViolation):
            async_to_sync(license_repository.add)(license, entry)

    def test_add_rolls_back_when_audit_fails(self, license_repository):
        """Test a failed audit insert leaves no license behind."""
        license = License.create(key=KEY, product="Demo", owner_email="a@b.com", owner_name="A B")
        entry = AuditLogEntry.create(AuditAction.ADD, KEY, "Demo", license.audit_details)

        with mock.patch.object(
            AuditLogModel.objects, "create", side_effect=DatabaseError("disk full")
        ):
            with pytest.raises(PersistenceError):
                async_to_sync(license_repository.add)(license, entry)

        assert not LicenseModel.objects.exists()

    def test_delete_writes_audit_entry(self, add_license, license_repository):
        """Test delete removes the row and appends a DELETE entry."""
        add_license()

        async_to_sync(DeleteLicenseHandler(license_repository).handle)(
            DeleteLicenseCommand(key=KEY, product="Demo")
        )

        assert not LicenseModel.objects.exists()
        assert list(AuditLogModel.objects.order_by("changed_at").values_list("action", flat=True)) == [
            "ADD",
            "DELETE",
        ]

    def test_delete_missing_writes_nothing(self, license_repository):
        """Test deleting a missing pair raises and writes no audit row."""
        with pytest.raises(LicenseNotFoundError):
            async_to_sync(DeleteLicenseHandler(license_repository).handle)(
                DeleteLicenseCommand(key=KEY, product="Demo")
            )

        assert not AuditLogModel.objects.exists()

    def test_delete_rolls_back_when_audit_fails(self, add_license, license_repository):
        """Test the license survives when the DELETE audit insert fails."""
        add_license()
        entry = AuditLogEntry.create(AuditAction.DELETE, KEY, "Demo")

        with mock.patch.object(
            AuditLogModel.objects, "create", side_effect=DatabaseError("disk full")
        ):
            with pytest.raises(PersistenceError):
                async_to_sync(license_repository.delete)(KEY, "Demo", entry)

        assert LicenseModel.objects.filter(license_key=KEY, product="Demo").exists()
        assert AuditLogModel.objects.count() == 1

    def test_list_by_product(self, add_license, license_repository):
        """Test listing is per product in insertion order."""
        add_license(key="AAAA-AAAA-AAAA-AAAA")
        add_license(key="BBBB-BBBB-BBBB-BBBB")
        add_license(key="CCCC-CCCC-CCCC-CCCC", product="Other")

        licenses = async_to_sync(license_repository.list_by_product)("Demo")

        assert [lic.key for lic in licenses] == ["AAAA-AAAA-AAAA-AAAA", "BBBB-BBBB-BBBB-BBBB"]

    def test_expiry_round_trip(self, add_license, license_repository):
        """Test an expiry timestamp is stored and returned."""
        expires_at = timezone.now() + timedelta(days=3)
        add_license(expires_at=expires_at)

        found = async_to_sync(license_repository.find_by_key_and_product)(KEY, "Demo")

        assert found.expires_at == expires_at


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoAuditLogRepository:
    """Integration tests for DjangoAuditLogRepository."""

    def test_find_recent_newest_first(self, add_license, audit_log_repository):
        """Test the most recent entries come first, limited."""
        add_license(key="AAAA-AAAA-AAAA-AAAA")
        add_license(key="BBBB-BBBB-BBBB-BBBB")
        add_license(key="CCCC-CCCC-CCCC-CCCC")
        base = timezone.now()
        for offset, key in enumerate(
            ["AAAA-AAAA-AAAA-AAAA", "BBBB-BBBB-BBBB-BBBB", "CCCC-CCCC-CCCC-CCCC"]
        ):
            AuditLogModel.objects.filter(license_key=key).update(
                changed_at=base + timedelta(seconds=offset)
            )

        entries = async_to_sync(audit_log_repository.find_recent)(2)

        assert [e.license_key for e in entries] == ["CCCC-CCCC-CCCC-CCCC", "BBBB-BBBB-BBBB-BBBB"]
        assert entries[0].action is AuditAction.ADD


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoAccountRepository:
    """Integration tests for DjangoAccountRepository."""

    def _account(self, username="alice", email="alice@example.com"):
        return Account.create(username=username, email=email, password_hash="md5$salt$hash")

    def test_add_and_find(self, account_repository):
        """Test an account can be found by email and id."""
        saved = async_to_sync(account_repository.add)(self._account())

        by_email = async_to_sync(account_repository.find_by_email)("alice@example.com")
        by_id = async_to_sync(account_repository.find_by_id)(saved.id)

        assert by_email.id == saved.id
        assert by_id.username == "alice"
        assert by_id.last_login is None

    @pytest.mark.parametrize(
        "username,email",
        [("alice", "other@example.com"), ("bob", "alice@example.com")],
    )
    def test_unique_username_and_email(self, account_repository, username, email):
        """Test username and email are each unique."""
        async_to_sync(account_repository.add)(self._account())

        with pytest.raises(ConstraintViolation):
            async_to_sync(account_repository.add)(self._account(username, email))

        assert AccountModel.objects.count() == 1

    def test_update_last_login(self, account_repository):
        """Test last-login fields are recorded."""
        saved = async_to_sync(account_repository.add)(self._account())
        now = timezone.now()

        async_to_sync(account_repository.update_last_login)(saved.id, now, "192.168.1.10")

        model = AccountModel.objects.get(id=saved.id)
        assert model.last_login == now
        assert model.last_login_ip == "192.168.1.10"
