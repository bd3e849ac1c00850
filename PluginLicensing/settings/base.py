"""
Base Django settings for PluginLicensing.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-plugin-licensing-development-key")

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "PluginLicensing.apps.PluginLicensingConfig",
    "core",
    "licenses",
    "activations",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Custom middleware
    "core.middleware.metrics.MetricsMiddleware",
]

ROOT_URLCONF = "PluginLicensing.urls"

WSGI_APPLICATION = "PluginLicensing.wsgi.application"

# The license file is the only durable state; the database only backs contrib apps
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Plugin Licensing API",
    "DESCRIPTION": (
        "License activation and status for installed plugins. "
        "Licenses are obtained from the remote licensing authority "
        "and stored in a shared license file."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api/v1",
    "TAGS": [
        {"name": "License API", "description": "Plugin license activation and status"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# Licensing
LICENSING = {
    "LICENSE_FILE": os.environ.get("LICENSING_LICENSE_FILE", str(BASE_DIR / ".plugin-licenses")),
    "API_URL": os.environ.get("LICENSING_API_URL", "https://licensing.example.com/api"),
    "API_TIMEOUT": float(os.environ.get("LICENSING_API_TIMEOUT", "10")),
    # Package name -> installed version, e.g. {"vendor/kirby-copilot": "2.1.0"}
    "PLUGIN_VERSIONS": {},
}

# Observability
LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
