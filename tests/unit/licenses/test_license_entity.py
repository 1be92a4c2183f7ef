"""
Unit tests for License and AuditLogEntry entities.
"""
from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import InvalidEmailError, InvalidKeyFormatError, InvalidProductError
from core.domain.value_objects import AuditAction
from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License


class TestLicenseEntity:
    """Tests for License entity."""

    def test_create_license(self):
        """Test license creation."""
        license = License.create(
            key="ABCD-1234-EFGH-5678",
            product="Demo",
            owner_email="a@b.com",
            owner_name="A B",
        )

        assert license.key == "ABCD-1234-EFGH-5678"
        assert license.product == "Demo"
        assert license.owner_email == "a@b.com"
        assert license.owner_name == "A B"
        assert license.expires_at is None
        assert license.is_activated is False
        assert license.id is not None

    def test_create_with_invalid_key(self):
        """Test creation rejects a malformed key."""
        with pytest.raises(InvalidKeyFormatError):
            License.create(key="abcd", product="Demo", owner_email="a@b.com", owner_name="A B")

    def test_create_with_invalid_email(self):
        """Test creation rejects a malformed email."""
        with pytest.raises(InvalidEmailError):
            License.create(
                key="ABCD-1234-EFGH-5678",
                product="Demo",
                owner_email="not-an-email",
                owner_name="A B",
            )

    def test_create_requires_product(self):
        """Test an empty product is rejected."""
        with pytest.raises(InvalidProductError, match="Product is required"):
            License.create(
                key="ABCD-1234-EFGH-5678", product="  ", owner_email="a@b.com", owner_name="A B"
            )

    def test_create_rejects_long_product(self):
        """Test an over-long product is rejected with a domain error."""
        with pytest.raises(InvalidProductError) as exc_info:
            License.create(
                key="ABCD-1234-EFGH-5678", product="P" * 256, owner_email="a@b.com", owner_name="A B"
            )

        assert exc_info.value.code == "INVALID_PRODUCT"

    def test_license_is_immutable(self):
        """Test License is frozen."""
        license = License.create(
            key="ABCD-1234-EFGH-5678", product="Demo", owner_email="a@b.com", owner_name="A B"
        )
        with pytest.raises(AttributeError):
            license.product = "Other"

    def test_is_expired(self):
        """Test expiry is strictly before the current time."""
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        past = License.create(
            key="ABCD-1234-EFGH-5678",
            product="Demo",
            owner_email="a@b.com",
            owner_name="A B",
            expires_at=now - timedelta(seconds=1),
        )
        future = License.create(
            key="ABCD-1234-EFGH-5678",
            product="Demo",
            owner_email="a@b.com",
            owner_name="A B",
            expires_at=now + timedelta(days=1),
        )
        exact = License.create(
            key="ABCD-1234-EFGH-5678",
            product="Demo",
            owner_email="a@b.com",
            owner_name="A B",
            expires_at=now,
        )

        assert past.is_expired(now) is True
        assert future.is_expired(now) is False
        assert exact.is_expired(now) is False

    def test_perpetual_license_never_expires(self):
        """Test a license without expiry is never expired."""
        license = License.create(
            key="ABCD-1234-EFGH-5678", product="Demo", owner_email="a@b.com", owner_name="A B"
        )
        assert license.is_expired(datetime(2999, 1, 1, tzinfo=timezone.utc)) is False

    def test_naive_expiry_treated_as_utc(self):
        """Test naive datetimes compare as UTC."""
        license = License.create(
            key="ABCD-1234-EFGH-5678",
            product="Demo",
            owner_email="a@b.com",
            owner_name="A B",
            expires_at=datetime(2025, 1, 1, 12, 0),
        )
        assert license.is_expired(datetime(2025, 1, 1, 12, 1, tzinfo=timezone.utc)) is True
        assert license.is_expired(datetime(2025, 1, 1, 11, 59, tzinfo=timezone.utc)) is False

    def test_audit_details(self):
        """Test the ADD audit detail text."""
        license = License.create(
            key="ABCD-1234-EFGH-5678", product="Demo", owner_email="a@b.com", owner_name="A B"
        )
        assert license.audit_details == "Owner: A B (a@b.com)"


class TestAuditLogEntry:
    """Tests for AuditLogEntry entity."""

    def test_create_entry(self):
        """Test audit entry creation."""
        entry = AuditLogEntry.create(
            action=AuditAction.DELETE,
            license_key="ABCD-1234-EFGH-5678",
            product="Demo",
        )
        assert entry.action is AuditAction.DELETE
        assert entry.details == ""
        assert entry.changed_at.tzinfo is not None
