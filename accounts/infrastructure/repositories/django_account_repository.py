"""
Django implementation of AccountRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from datetime import datetime
from typing import Optional

from asgiref.sync import sync_to_async

from accounts.domain.account import Account
from accounts.infrastructure.models import Account as AccountModel
from accounts.ports.account_repository import AccountRepository
from core.infrastructure.database import atomic_operation, translate_db_errors


class DjangoAccountRepository(AccountRepository):
    """Django ORM implementation of AccountRepository."""

    def _to_domain(self, model: AccountModel) -> Account:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Account model

        Returns:
            Account domain entity
        """
        return Account(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            last_login=model.last_login,
            last_login_ip=model.last_login_ip,
        )

    @sync_to_async
    def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: Account entity to insert

        Returns:
            Saved account entity

        Raises:
            ConstraintViolation: If username or email already exists
        """
        with atomic_operation("account insert"):
            # pylint: disable=no-member
            model = AccountModel.objects.create(
                id=account.id,
                username=account.username,
                email=account.email,
                password_hash=account.password_hash,
            )
        return self._to_domain(model)

    @sync_to_async
    def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email.

        Args:
            email: Account email

        Returns:
            Account entity or None if not found
        """
        with translate_db_errors("account query"):
            # pylint: disable=no-member
            model = AccountModel.objects.filter(email=email).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def find_by_id(self, account_id: uuid.UUID) -> Optional[Account]:
        """
        Find an account by ID.

        Args:
            account_id: Account UUID

        Returns:
            Account entity or None if not found
        """
        with translate_db_errors("account query"):
            # pylint: disable=no-member
            model = AccountModel.objects.filter(id=account_id).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def update_last_login(
        self,
        account_id: uuid.UUID,
        at: datetime,
        ip_address: Optional[str],
    ) -> None:
        """
        Record the last successful login.

        Args:
            account_id: Account UUID
            at: Login time
            ip_address: Client IP address, if known
        """
        with atomic_operation("account last login update"):
            # pylint: disable=no-member
            AccountModel.objects.filter(id=account_id).update(
                last_login=at,
                last_login_ip=ip_address,
            )
