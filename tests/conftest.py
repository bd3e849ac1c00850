"""
Pytest configuration and shared fixtures.
"""

import json

import pytest

from core.infrastructure.events import event_bus
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.plugin_registry import StaticPluginRegistry
from licenses.infrastructure.repositories.in_memory_license_repository import (
    InMemoryLicenseRepository,
)
from licenses.infrastructure.repositories.json_license_repository import JsonLicenseRepository

PACKAGE_NAME = "johannschopplich/kirby-copilot"
VALID_KEY = "KT1-ABC123-DEF456"


class FakeLicensingAuthority:
    """LicensingAuthorityClient returning a canned response and recording calls."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def request(self, payload):
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def package_name():
    """Fixture for the package under test."""
    return PACKAGE_NAME


@pytest.fixture
def license_file(tmp_path):
    """Fixture for a license file location inside a temporary directory."""
    return tmp_path / ".plugin-licenses"


@pytest.fixture
def write_license_file(license_file):
    """Fixture writing raw content to the license file."""

    def write(content):
        if not isinstance(content, str):
            content = json.dumps(content)
        license_file.write_text(content, encoding="utf-8")
        return license_file

    return write


@pytest.fixture
def json_repository(license_file):
    """Fixture for JsonLicenseRepository."""
    return JsonLicenseRepository(license_file)


@pytest.fixture
def license_repository():
    """Fixture for an in-memory LicenseRepository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def plugin_registry():
    """Fixture for a PluginRegistry with the test plugin installed at 2.1.0."""
    return StaticPluginRegistry({PACKAGE_NAME: "2.1.0"})


@pytest.fixture
def sample_record():
    """Fixture for a license record covering v1 and v2."""
    return LicenseRecord.create(
        license_key=VALID_KEY,
        license_compatibility="^1 || ^2",
        plugin_version="2.1.0",
        created_at="2024-01-15 10:30:00",
    )


@pytest.fixture
def authority_response():
    """Fixture for a successful licensing authority response."""
    return {
        "packageName": PACKAGE_NAME,
        "licenseKey": VALID_KEY,
        "licenseCompatibility": "^1 || ^2",
        "order": {"createdAt": "2024-01-15 10:30:00"},
    }


@pytest.fixture
def make_licensing_authority():
    """Fixture for building licensing authorities with a given response or error."""
    return FakeLicensingAuthority


@pytest.fixture
def licensing_authority(authority_response):
    """Fixture for a licensing authority answering with authority_response."""
    return FakeLicensingAuthority(response=authority_response)


@pytest.fixture
def clean_event_bus():
    """Fixture for the shared event bus without subscriptions."""
    event_bus.clear()
    yield event_bus
    event_bus.clear()


@pytest.fixture
def licensing_settings(settings, license_file):
    """Fixture pointing the LICENSING setting at a temporary license file."""
    settings.LICENSING = {
        "LICENSE_FILE": str(license_file),
        "API_URL": "https://licensing.test/api",
        "API_TIMEOUT": 1,
        "PLUGIN_VERSIONS": {PACKAGE_NAME: "2.1.0"},
    }
    return settings.LICENSING


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
