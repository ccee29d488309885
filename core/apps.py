"""Django application configuration for core."""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "System administration"

    def ready(self) -> None:
        """Log that the app registry is populated."""
        logger.info("Core application ready")
