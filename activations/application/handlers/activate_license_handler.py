"""
ActivateLicenseHandler.

Handler for activating a license against the remote licensing authority.
"""

import logging
from typing import Any, Mapping, Optional

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.dto.activation_dto import ActivateLicenseResponseDTO
from activations.domain.events import LicenseActivated
from activations.ports.licensing_authority import LicensingAuthorityClient
from core.domain.events import EventBus
from core.domain.exceptions import (
    DomainException,
    LicenseAlreadyActivatedError,
    LicensePackageMismatchError,
    LicenseVersionIncompatibleError,
    LicensingAuthorityError,
    MissingLicenseParametersError,
)
from core.domain.value_objects import LicenseStatus
from core.infrastructure.events import event_bus as default_event_bus
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import license_activations_total
from licenses.domain.compatibility import CompatibilityEvaluator
from licenses.domain.license import LicenseRecord
from licenses.domain.license_key import mask_license_key
from licenses.domain.services import LicenseStatusResolver
from licenses.ports.license_repository import LicenseRepository
from licenses.ports.plugin_registry import PluginRegistry

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

# Metric label for packages the plugin registry does not know
UNKNOWN_PACKAGE_LABEL = "unknown"


class ActivateLicenseHandler:
    """Handler for ActivateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_registry: PluginRegistry,
        licensing_authority: LicensingAuthorityClient,
        event_bus: Optional[EventBus] = None,
    ):
        """Initialize handler with its collaborators."""
        self.license_repository = license_repository
        self.plugin_registry = plugin_registry
        self.licensing_authority = licensing_authority
        self.event_bus = event_bus or default_event_bus

    async def handle(self, command: ActivateLicenseCommand) -> LicenseRecord:
        """
        Handle activate license command.

        Args:
            command: ActivateLicenseCommand

        Returns:
            The stored LicenseRecord

        Raises:
            MissingLicenseParametersError: If email or order ID is empty
            LicenseAlreadyActivatedError: If an active license already exists
            LicensePackageMismatchError: If the license belongs to another package
            LicenseVersionIncompatibleError: If the license does not cover the installed version
            LicenseStoreCorruptedError: If the license file cannot be read
            Exception: Whatever the licensing authority client raises, unchanged
        """
        package_name = command.package_name
        metric_package = self._metric_package_label(package_name)

        with tracer.start_as_current_span("activate_license") as span:
            span.set_attribute("package_name", package_name)
            try:
                record = await self._activate(command)
            except DomainException as e:
                license_activations_total.labels(
                    package_name=metric_package, outcome=e.code.lower()
                ).inc()
                span.set_status(Status(StatusCode.ERROR, e.code))
                raise
            except Exception:
                license_activations_total.labels(package_name=metric_package, outcome="error").inc()
                span.set_status(Status(StatusCode.ERROR, "activation_failed"))
                raise

            license_activations_total.labels(package_name=metric_package, outcome="success").inc()
            span.set_attribute("license.generation", record.generation or 0)
            span.set_status(Status(StatusCode.OK))

        await self.event_bus.publish(
            LicenseActivated(
                package_name=package_name,
                license_generation=record.generation,
                license_compatibility=record.license_compatibility,
                plugin_version=record.plugin_version,
            )
        )
        return record

    async def activate_from_request(
        self, package_name: str, body: Mapping[str, Any]
    ) -> ActivateLicenseResponseDTO:
        """
        Activate a license from an inbound request payload.

        Args:
            package_name: Package to activate
            body: Request body with ``email`` and ``orderId``

        Returns:
            Success envelope
        """
        await self.handle(ActivateLicenseCommand.from_request_body(package_name, body))
        return ActivateLicenseResponseDTO()

    def _metric_package_label(self, package_name: str) -> str:
        """Return the package name for installed plugins, "unknown" otherwise."""
        if self.plugin_registry.get_installed_version(package_name) is None:
            return UNKNOWN_PACKAGE_LABEL
        return package_name

    async def _activate(self, command: ActivateLicenseCommand) -> LicenseRecord:
        package_name = command.package_name

        if not command.email or not command.order_id:
            logger.warning("Activation of %s rejected: missing parameters", package_name)
            raise MissingLicenseParametersError()

        existing = await self.license_repository.find_by_package(package_name)
        installed_version = self.plugin_registry.get_installed_version(package_name)
        if LicenseStatusResolver.resolve(existing, installed_version) == LicenseStatus.ACTIVE:
            logger.warning("Activation of %s rejected: license already active", package_name)
            raise LicenseAlreadyActivatedError()

        logger.info("Requesting license activation for %s", package_name)
        response = await self.licensing_authority.request(
            {
                "packageName": package_name,
                "email": command.email,
                "orderId": command.order_id,
            }
        )

        if response.get("packageName") != package_name:
            logger.warning(
                "Activation of %s rejected: license issued for %s",
                package_name,
                response.get("packageName"),
            )
            raise LicensePackageMismatchError()

        license_key = response.get("licenseKey")
        license_compatibility = response.get("licenseCompatibility")
        if not license_key or not license_compatibility:
            raise LicensingAuthorityError("Invalid response from licensing authority")

        installed_version = self.plugin_registry.get_installed_version(package_name)
        if not CompatibilityEvaluator.is_compatible(license_compatibility, installed_version):
            logger.warning(
                "Activation of %s rejected: version %s not covered by %s",
                package_name,
                installed_version,
                license_compatibility,
            )
            raise LicenseVersionIncompatibleError()

        order = response.get("order") or {}
        record = LicenseRecord.create(
            license_key=license_key,
            license_compatibility=license_compatibility,
            plugin_version=installed_version,
            created_at=order.get("createdAt"),
        )
        # Another activation may have stored a record during the remote call
        if not await self.license_repository.save_if_unchanged(package_name, record, existing):
            logger.warning("Activation of %s rejected: license stored concurrently", package_name)
            raise LicenseAlreadyActivatedError()

        logger.info(
            "License %s activated for %s %s",
            mask_license_key(license_key),
            package_name,
            installed_version,
        )
        return record
