"""
Account domain entity.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    Holds only the password hash; plaintext passwords never reach this layer.
    """

    id: uuid.UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime
    last_login: Optional[datetime] = None
    last_login_ip: Optional[str] = None

    def __post_init__(self):
        """Validate account entity."""
        if not self.username or len(self.username.strip()) == 0:
            raise ValueError("Username is required")
        if len(self.username) > 150:
            raise ValueError("Username too long")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password_hash: str,
        account_id: Optional[uuid.UUID] = None,
    ) -> "Account":
        """
        Create a new Account entity.

        Args:
            username: Unique username
            email: Unique email address
            password_hash: Encoded password hash
            account_id: Optional UUID (generated if not provided)

        Returns:
            Account entity instance
        """
        return cls(
            id=account_id or uuid.uuid4(),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )

    def record_login(self, ip_address: Optional[str], at: Optional[datetime] = None) -> "Account":
        """Return a copy with last-login fields set."""
        return replace(
            self,
            last_login=at or datetime.now(timezone.utc),
            last_login_ip=ip_address,
        )

    def __repr__(self) -> str:
        """Keep the password hash out of reprs."""
        return f"Account(id={self.id!r}, username={self.username!r}, email={self.email!r})"
