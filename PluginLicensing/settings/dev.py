"""
Development settings for PluginLicensing.
"""

import json
import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Installed plugin versions for local testing, e.g.
# LICENSING_PLUGIN_VERSIONS='{"vendor/kirby-copilot": "2.1.0"}'
LICENSING["PLUGIN_VERSIONS"] = json.loads(  # noqa: F405
    os.environ.get("LICENSING_PLUGIN_VERSIONS", "{}")
)
