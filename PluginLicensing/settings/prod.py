"""
Production settings for PluginLicensing.
"""

import os

from .base import *  # noqa: F403, F401
from .logging import add_file_handler

DEBUG = False

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "").split(",")

# Security settings
SECURE_SSL_REDIRECT = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# Logging in production
LOGGING = add_file_handler(
    LOGGING,  # noqa: F405
    os.environ.get("LOG_FILE", "/var/log/plugin-licensing/app.log"),
)
