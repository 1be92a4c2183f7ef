"""
Unit tests for core value objects.
"""
import pytest

from core.domain.exceptions import InvalidEmailError, InvalidKeyFormatError
from core.domain.value_objects import (
    AuditAction,
    Email,
    LicenseKeyValue,
    VerificationReason,
    is_valid_email,
    is_valid_license_key,
    mask_license_key,
)


class TestLicenseKeyValue:
    """Tests for LicenseKeyValue value object."""

    @pytest.mark.parametrize(
        "key",
        ["ABCD-1234-EFGH-5678", "0000-0000-0000-0000", "ZZZZ-9999-A1B2-C3D4"],
    )
    def test_valid_keys(self, key):
        """Test well-formed keys are accepted."""
        assert LicenseKeyValue(key).value == key
        assert is_valid_license_key(key)

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "abcd-1234-efgh-5678",
            "ABCD1234EFGH5678",
            "ABCD-1234-EFGH-567",
            "ABCD-1234-EFGH-56789",
            "ABCD-1234-EFGH-5678-",
            " ABCD-1234-EFGH-5678",
            "ABCD-1234-EFGH-5678\n",
            "ABCD_1234_EFGH_5678",
            "ABÇD-1234-EFGH-5678",
        ],
    )
    def test_invalid_keys(self, key):
        """Test every other string is rejected."""
        assert not is_valid_license_key(key)
        with pytest.raises(InvalidKeyFormatError) as exc_info:
            LicenseKeyValue(key)
        assert exc_info.value.code == "INVALID_KEY_FORMAT"

    def test_masked(self):
        """Test masked form shows only the first group."""
        assert LicenseKeyValue("ABCD-1234-EFGH-5678").masked == "ABCD-****"
        assert mask_license_key("WXYZ-0000-0000-0000") == "WXYZ-****"


class TestEmail:
    """Tests for Email value object."""

    def test_valid_email(self):
        """Test valid email creation."""
        email = Email("test@example.com")
        assert str(email) == "test@example.com"
        assert email.value == "test@example.com"

    @pytest.mark.parametrize(
        "value",
        ["", "invalid-email", "a@b", "a@@b.com", "@b.com", "a@.com", "a@b.c@d.com"],
    )
    def test_invalid_email(self, value):
        """Test malformed emails are rejected."""
        assert not is_valid_email(value)
        with pytest.raises(InvalidEmailError, match="Invalid email"):
            Email(value)

    def test_subdomain_email(self):
        """Test a dot anywhere after the @ is enough."""
        assert is_valid_email("owner@mail.example.co")


class TestEnums:
    """Tests for audit and verification enums."""

    def test_audit_action_values(self):
        """Test audit action tags."""
        assert str(AuditAction.ADD) == "ADD"
        assert AuditAction("DELETE") is AuditAction.DELETE

    def test_verification_reason_values(self):
        """Test wire values of verification reasons."""
        assert VerificationReason.NOT_FOUND.value == "not found"
        assert VerificationReason.EXPIRED.value == "expired"
