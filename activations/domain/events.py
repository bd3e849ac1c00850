"""
Activation domain events.

Domain events represent something that happened in the activation domain.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class LicenseActivated(DomainEvent):
    """Event raised when a license is activated and stored."""

    def __init__(
        self,
        package_name: str,
        license_generation: Optional[int],
        license_compatibility: str,
        plugin_version: Optional[str],
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseActivated event.

        Args:
            package_name: Package the license was activated for
            license_generation: Generation of the issued key
            license_compatibility: Compatibility range of the license
            plugin_version: Installed plugin version at activation time
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=package_name, occurred_at=occurred_at)
        self.package_name = package_name
        self.license_generation = license_generation
        self.license_compatibility = license_compatibility
        self.plugin_version = plugin_version

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            **super().to_dict(),
            "package_name": self.package_name,
            "license_generation": self.license_generation,
            "license_compatibility": self.license_compatibility,
            "plugin_version": self.plugin_version,
        }
