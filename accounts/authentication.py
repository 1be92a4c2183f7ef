"""
Bearer token authentication for Django REST Framework.
"""
import logging
import uuid
from dataclasses import dataclass

from asgiref.sync import async_to_sync
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from accounts.infrastructure.tokens import JWTTokenService
from core.config import get_service_config
from core.domain.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

KEYWORD = "Bearer"


@dataclass(frozen=True)
class AuthenticatedAccount:
    """The request principal for a verified bearer token."""

    account_id: uuid.UUID
    username: str
    email: str

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False


class BearerTokenAuthentication(BaseAuthentication):
    """
    Authenticate requests carrying `Authorization: Bearer <jwt>`.

    Requests without the header are left unauthenticated so permission
    classes decide; a present but unusable token raises InvalidTokenError.
    """

    def __init__(self, token_service: JWTTokenService = None, account_repository=None):
        self.token_service = token_service or JWTTokenService(get_service_config())
        self.account_repository = account_repository or DjangoAccountRepository()

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != KEYWORD.lower().encode():
            return None
        if len(auth) != 2:
            raise InvalidTokenError()

        try:
            token = auth[1].decode()
        except UnicodeError as exc:
            raise InvalidTokenError() from exc

        account_id = self.token_service.verify(token)
        account = async_to_sync(self.account_repository.find_by_id)(account_id)
        if account is None:
            # Signed for an account that no longer exists
            logger.warning("Token for unknown account", extra={"account_id": str(account_id)})
            raise InvalidTokenError()

        principal = AuthenticatedAccount(
            account_id=account.id,
            username=account.username,
            email=account.email,
        )
        return principal, token

    def authenticate_header(self, request):
        return KEYWORD
