"""
In-memory implementation of LicenseRepository port.

Used by tests and by hosts that keep licenses outside the file system.
"""
from typing import Dict, Optional

from licenses.domain.license import LicenseRecord
from licenses.ports.license_repository import LicenseRepository


class InMemoryLicenseRepository(LicenseRepository):
    """Dictionary-backed LicenseRepository."""

    def __init__(self, records: Optional[Dict[str, LicenseRecord]] = None):
        """Initialize repository with optional initial records."""
        self._records: Dict[str, LicenseRecord] = dict(records or {})

    async def save(self, package_name: str, record: LicenseRecord) -> LicenseRecord:
        """Save the license record of a package."""
        self._records[package_name] = record
        return record

    async def save_if_unchanged(
        self,
        package_name: str,
        record: LicenseRecord,
        expected: Optional[LicenseRecord],
    ) -> bool:
        """Save the record unless another one was stored since ``expected`` was read."""
        if self._records.get(package_name) != expected:
            return False
        self._records[package_name] = record
        return True

    async def find_by_package(self, package_name: str) -> Optional[LicenseRecord]:
        """Find the license record of a package."""
        return self._records.get(package_name)

    async def find_all(self) -> Dict[str, LicenseRecord]:
        """Return every stored record keyed by package name."""
        return dict(self._records)
