"""
LoginHandler.

Authenticates an account and issues a bearer token.
"""
import logging
from datetime import datetime, timezone

from django.contrib.auth.hashers import check_password, make_password

from accounts.application.commands.login import LoginCommand
from accounts.application.dto.account_dto import AccountDTO, LoginResultDTO
from accounts.infrastructure.tokens import JWTTokenService
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import DomainException, InvalidCredentialsError
from core.metrics import login_attempts_total

logger = logging.getLogger(__name__)


class LoginHandler:
    """Handler for LoginCommand."""

    def __init__(self, account_repository: AccountRepository, token_service: JWTTokenService):
        """Initialize handler with repositories and the token service."""
        self.account_repository = account_repository
        self.token_service = token_service

    async def handle(self, command: LoginCommand) -> LoginResultDTO:
        """
        Handle login command.

        Args:
            command: LoginCommand

        Returns:
            LoginResultDTO with the issued token and account

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password alike
            PersistenceError: If the account lookup fails
        """
        account = await self.account_repository.find_by_email(command.email)

        if account is None:
            # Run the hasher anyway so both failures cost the same
            make_password(command.password)
            login_attempts_total.labels(result="failure").inc()
            raise InvalidCredentialsError()

        if not check_password(command.password, account.password_hash):
            login_attempts_total.labels(result="failure").inc()
            raise InvalidCredentialsError()

        now = datetime.now(timezone.utc)
        try:
            await self.account_repository.update_last_login(account.id, now, command.ip_address)
            account = account.record_login(command.ip_address, now)
        except DomainException as e:
            logger.warning(
                "Failed to record last login",
                extra={"account_id": str(account.id), "error": e.code},
            )

        token = self.token_service.issue(account.id, now)
        login_attempts_total.labels(result="success").inc()
        logger.info("Account logged in", extra={"account_id": str(account.id)})

        return LoginResultDTO(token=token, account=AccountDTO.from_entity(account))
