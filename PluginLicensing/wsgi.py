"""
WSGI config for PluginLicensing project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "PluginLicensing.settings.dev")

application = get_wsgi_application()
