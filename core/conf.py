"""
Licensing configuration.

Options live in the ``LICENSING`` Django setting; missing keys fall back
to the defaults below.
"""
from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "LICENSE_FILE": ".plugin-licenses",
    "API_URL": "https://licensing.example.com/api",
    "API_TIMEOUT": 10,
    "PLUGIN_VERSIONS": {},
}


def licensing_settings() -> Dict[str, Any]:
    """Return licensing settings merged with defaults."""
    return {**DEFAULTS, **getattr(settings, "LICENSING", {})}
