"""
License repository port (interface).

This defines the contract for license record persistence.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from licenses.domain.license import LicenseRecord


class LicenseRepository(ABC):
    """
    Abstract repository for LicenseRecord entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Records are keyed by package name; saving one package's record
    must leave every other package's record untouched.
    """

    @abstractmethod
    async def save(self, package_name: str, record: LicenseRecord) -> LicenseRecord:
        """
        Save the license record of a package, replacing any previous one.

        Args:
            package_name: Package name the record belongs to
            record: LicenseRecord entity to save

        Returns:
            Saved license record

        Raises:
            LicenseStoreCorruptedError: If existing records cannot be read
        """
        pass

    @abstractmethod
    async def save_if_unchanged(
        self,
        package_name: str,
        record: LicenseRecord,
        expected: Optional[LicenseRecord],
    ) -> bool:
        """
        Save the record only if the stored one still equals ``expected``.

        The comparison and the write happen atomically with respect to other
        saves through the same store.

        Args:
            package_name: Package name the record belongs to
            record: LicenseRecord entity to save
            expected: Record read earlier, None if there was none

        Returns:
            True if the record was saved, False if the stored record changed

        Raises:
            LicenseStoreCorruptedError: If existing records cannot be read
        """
        pass

    @abstractmethod
    async def find_by_package(self, package_name: str) -> Optional[LicenseRecord]:
        """
        Find the license record of a package.

        Args:
            package_name: Package name

        Returns:
            LicenseRecord entity or None if not found

        Raises:
            LicenseStoreCorruptedError: If existing records cannot be read
        """
        pass

    @abstractmethod
    async def find_all(self) -> Dict[str, LicenseRecord]:
        """
        Return every stored record keyed by package name.

        Returns:
            Mapping of package name to LicenseRecord
        """
        pass
