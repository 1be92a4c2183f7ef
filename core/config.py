"""
Service configuration.

Settings the services need are read once at startup into an immutable
ServiceConfig and passed to the components that use them.
"""
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_TOKEN_TTL_HOURS = 24


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable runtime configuration for license and account services."""

    jwt_secret: str
    token_ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS)
    jwt_algorithm: str = "HS256"

    def __post_init__(self):
        """Validate configuration."""
        if not self.jwt_secret:
            raise ImproperlyConfigured("JWT_SECRET must be set")
        if self.token_ttl <= timedelta(0):
            raise ImproperlyConfigured("JWT_TTL_HOURS must be positive")

    def __repr__(self) -> str:
        """Keep the signing secret out of reprs and tracebacks."""
        return f"ServiceConfig(token_ttl={self.token_ttl!r}, jwt_algorithm={self.jwt_algorithm!r})"

    @classmethod
    def from_settings(cls) -> "ServiceConfig":
        """
        Build configuration from Django settings.

        Raises:
            ImproperlyConfigured: If JWT_SECRET is missing or TTL is invalid
        """
        return cls(
            jwt_secret=getattr(settings, "JWT_SECRET", "") or "",
            token_ttl=timedelta(
                hours=int(getattr(settings, "JWT_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS))
            ),
        )


_config = None


def get_service_config() -> ServiceConfig:
    """Return the ServiceConfig built at startup."""
    global _config
    if _config is None:
        _config = ServiceConfig.from_settings()
    return _config


def reset_service_config() -> None:
    """Drop the cached config so the next call re-reads settings."""
    global _config
    _config = None
