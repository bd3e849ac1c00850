"""
App configuration for Plugin Licensing.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PluginLicensingConfig(AppConfig):
    """App configuration for PluginLicensing."""

    name = "PluginLicensing"
    verbose_name = "Plugin Licensing"

    def ready(self):
        """Called when Django starts."""
        # Skip for management commands
        if len(sys.argv) > 1 and sys.argv[1] in [
            "migrate",
            "makemigrations",
            "collectstatic",
            "shell",
            "check",
        ]:
            return

        # RUN_MAIN is "false" in the autoreloader's parent process
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        from core.infrastructure.event_handlers import register_event_handlers
        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()
        register_event_handlers()
        self._initialized = True
        logger.info("Observability setup complete")
