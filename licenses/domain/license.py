"""
License domain entity.

This is the core domain entity representing an activated license.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from licenses.domain.license_key import LicenseKeyValidator


@dataclass(frozen=True)
class LicenseRecord:
    """
    License record domain entity.

    One record exists per package name. Records are created by a successful
    activation and always replaced as a whole, never partially updated.
    """

    license_key: str
    license_compatibility: str
    plugin_version: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def create(
        cls,
        license_key: str,
        license_compatibility: str,
        plugin_version: Optional[str],
        created_at: str,
    ) -> "LicenseRecord":
        """
        Create a new LicenseRecord entity from an activation result.

        Args:
            license_key: License key issued by the licensing authority
            license_compatibility: Compatibility range covered by the license
            plugin_version: Installed plugin version at activation time
            created_at: Order creation timestamp reported by the authority

        Returns:
            LicenseRecord entity instance
        """
        if not license_key:
            raise ValueError("License key is required")
        if not license_compatibility:
            raise ValueError("License compatibility is required")

        return cls(
            license_key=license_key,
            license_compatibility=license_compatibility,
            plugin_version=plugin_version,
            created_at=created_at,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LicenseRecord":
        """
        Build a record from its stored representation.

        Older files may lack ``pluginVersion`` and ``createdAt``.
        """
        return cls(
            license_key=data.get("licenseKey"),
            license_compatibility=data.get("licenseCompatibility"),
            plugin_version=data.get("pluginVersion"),
            created_at=data.get("createdAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to its stored representation."""
        return {
            "licenseKey": self.license_key,
            "licenseCompatibility": self.license_compatibility,
            "pluginVersion": self.plugin_version,
            "createdAt": self.created_at,
        }

    @property
    def has_valid_key(self) -> bool:
        """Check if the stored key is well-formed."""
        return LicenseKeyValidator.is_valid(self.license_key)

    @property
    def generation(self) -> Optional[int]:
        """Return the key generation, None if the key is not valid."""
        return LicenseKeyValidator.get_generation(self.license_key)
