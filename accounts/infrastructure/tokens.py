"""
Bearer token service.

Issues and verifies HS256-signed JWTs carrying the account identifier.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

import jwt

from core.config import ServiceConfig
from core.domain.exceptions import InvalidTokenError

REQUIRED_CLAIMS = ["user_id", "iat", "exp"]


class JWTTokenService:
    """
    Signs and verifies account bearer tokens.

    Every verification failure (bad signature, malformed token, missing
    claim, expiry) surfaces as the same InvalidTokenError.
    """

    def __init__(self, config: ServiceConfig):
        """Initialize with service configuration."""
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._ttl = config.token_ttl

    def issue(self, account_id: uuid.UUID, now: Optional[datetime] = None) -> str:
        """
        Issue a token for an account.

        Args:
            account_id: Account UUID
            now: Issue time (defaults to now, UTC)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user_id": str(account_id),
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> uuid.UUID:
        """
        Verify a token and return the account identifier it carries.

        Args:
            token: Encoded JWT string

        Returns:
            Account UUID

        Raises:
            InvalidTokenError: If the token is not acceptable for any reason
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return uuid.UUID(str(payload["user_id"]))
        except (jwt.PyJWTError, ValueError) as exc:
            raise InvalidTokenError() from exc
