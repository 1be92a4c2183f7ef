"""
RegisterAccountHandler.

Handles account registration.
"""
import logging

from django.contrib.auth.hashers import make_password
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError

from accounts.application.commands.register_account import RegisterAccountCommand
from accounts.application.dto.account_dto import AccountDTO
from accounts.domain.account import Account
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import DuplicateAccountError, PasswordMismatchError, WeakPasswordError
from core.infrastructure.database import ConstraintViolation
from core.metrics import accounts_registered_total

logger = logging.getLogger(__name__)


class RegisterAccountHandler:
    """Handler for RegisterAccountCommand."""

    def __init__(self, account_repository: AccountRepository):
        """Initialize handler with repositories."""
        self.account_repository = account_repository

    async def handle(self, command: RegisterAccountCommand) -> AccountDTO:
        """
        Handle register account command.

        Args:
            command: RegisterAccountCommand

        Returns:
            AccountDTO of the new account

        Raises:
            PasswordMismatchError: If password and repeat differ
            WeakPasswordError: If the password fails AUTH_PASSWORD_VALIDATORS
            DuplicateAccountError: If username or email is taken
            PersistenceError: On storage failure
        """
        # Checked before any hashing or storage
        if command.password != command.password_repeat:
            raise PasswordMismatchError()

        try:
            validate_password(command.password)
        except ValidationError as exc:
            raise WeakPasswordError(" ".join(exc.messages)) from exc

        account = Account.create(
            username=command.username,
            email=command.email,
            password_hash=make_password(command.password),
        )

        try:
            saved = await self.account_repository.add(account)
        except ConstraintViolation as exc:
            raise DuplicateAccountError() from exc

        accounts_registered_total.inc()
        logger.info("Account registered", extra={"account_id": str(saved.id)})
        return AccountDTO.from_entity(saved)
