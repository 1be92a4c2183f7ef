"""
Account repository port (interface).
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from accounts.domain.account import Account


class AccountRepository(ABC):
    """Repository interface for Account entities."""

    @abstractmethod
    async def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Raises:
            ConstraintViolation: If username or email already exists
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        pass

    @abstractmethod
    async def find_by_id(self, account_id: uuid.UUID) -> Optional[Account]:
        """Find an account by ID."""
        pass

    @abstractmethod
    async def update_last_login(
        self,
        account_id: uuid.UUID,
        at: datetime,
        ip_address: Optional[str],
    ) -> None:
        """Record the last successful login."""
        pass
