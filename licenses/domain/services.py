"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from typing import Optional

from core.domain.value_objects import LicenseStatus
from licenses.domain.compatibility import CompatibilityEvaluator
from licenses.domain.license import LicenseRecord
from licenses.domain.license_key import LicenseKeyValidator


class LicenseStatusResolver:
    """
    Domain service deriving the status of a license.

    Status is never stored; it is recomputed from the record and the
    installed plugin version on every call.
    """

    @staticmethod
    def resolve(
        record: Optional[LicenseRecord], installed_version: Optional[str]
    ) -> LicenseStatus:
        """
        Resolve the license status.

        Args:
            record: Stored license record, None if the package has none
            installed_version: Installed plugin version, None if not installed

        Returns:
            LicenseStatus for the package
        """
        if record is None:
            return LicenseStatus.INACTIVE

        # Key format is checked before any version logic
        if not LicenseKeyValidator.is_valid(record.license_key):
            return LicenseStatus.INVALID

        compatibility = record.license_compatibility
        if CompatibilityEvaluator.is_compatible(compatibility, installed_version):
            return LicenseStatus.ACTIVE
        if CompatibilityEvaluator.is_upgradeable(compatibility, installed_version):
            return LicenseStatus.UPGRADEABLE
        return LicenseStatus.INCOMPATIBLE
