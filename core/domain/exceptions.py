"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class InvalidKeyFormatError(LicenseException):
    """Raised when a license key does not match XXXX-XXXX-XXXX-XXXX."""

    def __init__(self, message: str = "Invalid license key format"):
        super().__init__(message, code="INVALID_KEY_FORMAT")


class InvalidEmailError(LicenseException):
    """Raised when an owner email is malformed."""

    def __init__(self, message: str = "Invalid email format"):
        super().__init__(message, code="INVALID_EMAIL")


class InvalidProductError(LicenseException):
    """Raised when a product name is empty or too long."""

    def __init__(self, message: str = "Invalid product name"):
        super().__init__(message, code="INVALID_PRODUCT")


class DuplicateKeyError(LicenseException):
    """Raised when a (key, product) pair already exists."""

    def __init__(self, message: str = "License key already exists for this product"):
        super().__init__(message, code="DUPLICATE_KEY")


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="NOT_FOUND")


class AccountException(DomainException):
    """Base exception for account-related errors."""

    pass


class PasswordMismatchError(AccountException):
    """Raised when a password and its confirmation differ."""

    def __init__(self, message: str = "Passwords do not match"):
        super().__init__(message, code="PASSWORD_MISMATCH")


class WeakPasswordError(AccountException):
    """Raised when a password fails the configured password validators."""

    def __init__(self, message: str = "Password is too weak"):
        super().__init__(message, code="WEAK_PASSWORD")


class DuplicateAccountError(AccountException):
    """Raised when the username or email is already registered."""

    def __init__(self, message: str = "Username or email already registered"):
        super().__init__(message, code="DUPLICATE_ACCOUNT")


class InvalidCredentialsError(AccountException):
    """
    Raised when login fails.

    Unknown email and wrong password both map here with the same message.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AccountException):
    """Raised for any bearer token that fails verification."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class PersistenceError(DomainException):
    """Wraps a lower-level storage failure."""

    def __init__(self, message: str = "A storage error occurred"):
        super().__init__(message, code="PERSISTENCE_FAILURE")
