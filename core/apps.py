"""
App configuration for the core app.
"""
import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Validates service configuration when Django starts."""

    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Fail startup when required service configuration is missing."""
        from core.config import get_service_config

        # Registers the bearer auth scheme with drf-spectacular
        import core.schema_extensions  # noqa: F401

        config = get_service_config()
        logger.info(
            "Service configuration loaded",
            extra={"token_ttl_seconds": config.token_ttl.total_seconds()},
        )
