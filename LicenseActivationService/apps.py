"""
App configuration for License Activation Service.
"""

import logging
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve requests
SKIP_SETUP_COMMANDS = {"migrate", "makemigrations", "collectstatic", "shell", "check"}


class LicenseActivationServiceConfig(AppConfig):
    """App configuration for LicenseActivationService."""

    name = "LicenseActivationService"
    verbose_name = "License Activation Service"

    def ready(self):
        """Register event handlers and observability once apps are loaded."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return

        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
        logger.info("Observability setup complete")
