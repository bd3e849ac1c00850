"""
Unit tests for GetLicenseStatusHandler.
"""

import pytest

from licenses.application.handlers.get_license_status_handler import GetLicenseStatusHandler
from licenses.application.queries.get_license_status import GetLicenseStatusQuery
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.plugin_registry import StaticPluginRegistry


@pytest.mark.asyncio
class TestGetLicenseStatusHandler:
    """Tests for GetLicenseStatusHandler."""

    async def test_inactive_without_record(self, license_repository, plugin_registry, package_name):
        handler = GetLicenseStatusHandler(license_repository, plugin_registry)

        result = await handler.handle(GetLicenseStatusQuery(package_name=package_name))

        assert result.status == "inactive"
        assert result.plugin_version == "2.1.0"
        assert result.license is None

    async def test_active_with_summary(
        self, license_repository, plugin_registry, sample_record, package_name
    ):
        await license_repository.save(package_name, sample_record)
        handler = GetLicenseStatusHandler(license_repository, plugin_registry)

        result = await handler.handle(GetLicenseStatusQuery(package_name=package_name))

        assert result.status == "active"
        assert result.license.key == "KT1-ABC123-DEF456"
        assert result.license.generation == 1
        assert result.license.compatibility == "v1, v2"

    async def test_upgradeable_after_plugin_update(
        self, license_repository, sample_record, package_name
    ):
        """Status follows the installed version without touching the stored record."""
        await license_repository.save(package_name, sample_record)
        handler = GetLicenseStatusHandler(
            license_repository, StaticPluginRegistry({package_name: "3.0.0"})
        )

        result = await handler.handle(GetLicenseStatusQuery(package_name=package_name))

        assert result.status == "upgradeable"
        assert (await license_repository.find_by_package(package_name)).plugin_version == "2.1.0"

    async def test_invalid_key_has_no_summary(
        self, license_repository, plugin_registry, package_name
    ):
        await license_repository.save(
            package_name, LicenseRecord(license_key="bogus", license_compatibility="^2")
        )
        handler = GetLicenseStatusHandler(license_repository, plugin_registry)

        result = await handler.handle(GetLicenseStatusQuery(package_name=package_name))

        assert result.status == "invalid"
        assert result.license is None

    async def test_reads_json_store(self, json_repository, plugin_registry, sample_record, package_name):
        json_repository.write(package_name, sample_record)
        handler = GetLicenseStatusHandler(json_repository, plugin_registry)

        result = await handler.handle(GetLicenseStatusQuery(package_name=package_name))

        assert result.status == "active"
