"""
Account DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from accounts.domain.account import Account


@dataclass
class AccountDTO:
    """DTO for public account information. Never carries the password hash."""

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime
    last_login: Optional[datetime] = None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDTO":
        """Build DTO from an Account entity."""
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            created_at=account.created_at,
            last_login=account.last_login,
        )


@dataclass
class LoginResultDTO:
    """DTO for a successful login."""

    token: str
    account: AccountDTO
