"""
GetLicenseStatusHandler.

Handler for getting license status query.
"""

import logging

from core.metrics import license_status_checks_total
from licenses.application.dto.license_dto import LicenseDTO, LicenseStatusDTO
from licenses.application.queries.get_license_status import GetLicenseStatusQuery
from licenses.domain.package_naming import format_compatibility
from licenses.domain.services import LicenseStatusResolver
from licenses.ports.license_repository import LicenseRepository
from licenses.ports.plugin_registry import PluginRegistry

logger = logging.getLogger(__name__)


class GetLicenseStatusHandler:
    """Handler for GetLicenseStatusQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_registry: PluginRegistry,
    ):
        """Initialize handler with its collaborators."""
        self.license_repository = license_repository
        self.plugin_registry = plugin_registry

    async def handle(self, query: GetLicenseStatusQuery) -> LicenseStatusDTO:
        """
        Handle get license status query.

        The status is derived from the stored record and the currently
        installed version on every call.

        Args:
            query: GetLicenseStatusQuery

        Returns:
            LicenseStatusDTO with status and license details

        Raises:
            LicenseStoreCorruptedError: If the license file cannot be read
        """
        record = await self.license_repository.find_by_package(query.package_name)
        installed_version = self.plugin_registry.get_installed_version(query.package_name)
        status = LicenseStatusResolver.resolve(record, installed_version)
        license_status_checks_total.labels(status=status.value).inc()

        license_dto = None
        if record is not None and record.has_valid_key:
            license_dto = LicenseDTO(
                key=record.license_key,
                generation=record.generation,
                compatibility=format_compatibility(record.license_compatibility or ""),
            )

        logger.debug("License status of %s: %s", query.package_name, status)
        return LicenseStatusDTO(
            package_name=query.package_name,
            status=status.value,
            plugin_version=installed_version,
            license=license_dto,
        )
