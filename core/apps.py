"""Django application configuration for core."""

import logging

from django.apps import AppConfig
from django.conf import settings

from core.enums import RatingSyncMode

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Restaurant review analytics"

    def ready(self) -> None:
        """Configure logging and connect signal receivers."""
        import core.signals  # noqa: F401, PLC0415

        if not getattr(settings, "TEST_MODE", False):
            from core.logging import setup_logging  # noqa: PLC0415

            setup_logging()

        mode = RatingSyncMode(settings.RATING_SYNC_MODE)
        logger.info("Rating sync mode: %s", mode.value)
