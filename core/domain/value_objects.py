"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from core.domain.exceptions import InvalidEmailError, InvalidKeyFormatError

LICENSE_KEY_PATTERN = re.compile(r"^[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}$")
EMAIL_PATTERN = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


def is_valid_license_key(value: str) -> bool:
    """Return True if value is four hyphenated groups of four [A-Z0-9]."""
    return bool(value) and LICENSE_KEY_PATTERN.fullmatch(value) is not None


def mask_license_key(value: str) -> str:
    """Return the first key group followed by a mask, for log lines."""
    return f"{value[:4]}-****"


def is_valid_email(value: str) -> bool:
    """Return True for a basic local@domain.tld shape."""
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class LicenseKeyValue(ValueObject):
    """License key value object with format validation."""

    value: str

    def __post_init__(self):
        """Validate key format."""
        if not is_valid_license_key(self.value):
            raise InvalidKeyFormatError(f"Invalid license key format: {self.value!r}")

    def __str__(self) -> str:
        """Return key as string."""
        return self.value

    @property
    def masked(self) -> str:
        """Key prefix suitable for log lines."""
        return mask_license_key(self.value)


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def __post_init__(self):
        """Validate email format."""
        if not is_valid_email(self.value):
            raise InvalidEmailError(f"Invalid email address: {self.value}")

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


class AuditAction(Enum):
    """Audit log action tag."""

    ADD = "ADD"
    DELETE = "DELETE"

    def __str__(self) -> str:
        """Return action as string."""
        return self.value


class VerificationReason(Enum):
    """Reason reported for a failed verification."""

    NOT_FOUND = "not found"
    EXPIRED = "expired"

    def __str__(self) -> str:
        """Return reason as string."""
        return self.value
