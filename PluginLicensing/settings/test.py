"""
Test settings for PluginLicensing.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Tests point LICENSE_FILE at a temporary directory
LICENSING = {
    **LICENSING,  # noqa: F405
    "LICENSE_FILE": str(BASE_DIR / ".test-plugin-licenses"),  # noqa: F405
    "API_URL": "https://licensing.test/api",
    "API_TIMEOUT": 1,
    "PLUGIN_VERSIONS": {},
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable logging during tests
LOGGING_CONFIG = None
