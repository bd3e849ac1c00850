"""
JSON file implementation of LicenseRepository port.

All packages share one JSON document shaped ``{packageName: record}``.
Every save is a read-modify-write of the whole document under a lock,
so records of other packages survive.
"""
import json
import logging
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from asgiref.sync import sync_to_async

from core.domain.exceptions import LicenseStoreCorruptedError
from licenses.domain.license import LicenseRecord
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

# One lock per resolved file path, shared by every repository instance
_path_locks: Dict[str, threading.RLock] = {}
_path_locks_guard = threading.Lock()

# Stored record fields; each holds a string or null
RECORD_FIELDS = ("licenseKey", "licenseCompatibility", "pluginVersion", "createdAt")


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _path_locks_guard:
        return _path_locks.setdefault(key, threading.RLock())


class JsonLicenseRepository(LicenseRepository):
    """
    JSON file implementation of LicenseRepository.

    This adapter:
    1. Treats a missing file as an empty mapping
    2. Fails loudly on a file that cannot be parsed
    3. Replaces the file atomically on every write
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize repository.

        Args:
            path: Location of the shared license file
        """
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def _load(self) -> Dict[str, Dict[str, Any]]:
        """
        Load the raw mapping from disk.

        Returns:
            Mapping of package name to stored record dict

        Raises:
            LicenseStoreCorruptedError: If the file is not a valid license document
        """
        if not self.path.exists():
            return {}

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error("License file %s is not valid UTF-8: %s", self.path, e.reason)
            raise LicenseStoreCorruptedError(
                f"License file {self.path} is corrupted: invalid encoding"
            ) from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("License file %s cannot be parsed: %s", self.path, e.msg)
            raise LicenseStoreCorruptedError(
                f"License file {self.path} is corrupted: {e.msg}"
            ) from e

        if not isinstance(data, dict):
            logger.error("License file %s does not contain a JSON object", self.path)
            raise LicenseStoreCorruptedError(
                f"License file {self.path} is corrupted: expected an object"
            )

        for package_name, entry in data.items():
            if not isinstance(entry, dict):
                logger.error("License entry %s in %s is not an object", package_name, self.path)
                raise LicenseStoreCorruptedError(
                    f"License file {self.path} is corrupted: invalid entry for {package_name}"
                )
            for field in RECORD_FIELDS:
                if not isinstance(entry.get(field), (str, type(None))):
                    logger.error(
                        "License entry %s in %s has a non-string %s", package_name, self.path, field
                    )
                    raise LicenseStoreCorruptedError(
                        f"License file {self.path} is corrupted: invalid {field} for {package_name}"
                    )

        return data

    def _dump(self, data: Dict[str, Dict[str, Any]]) -> None:
        """Write the mapping to a temporary file and move it into place."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            if self.path.exists():
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def read(self, package_name: str) -> Optional[LicenseRecord]:
        """Blocking variant of find_by_package."""
        with self._lock:
            entry = self._load().get(package_name)
        return LicenseRecord.from_dict(entry) if entry is not None else None

    def read_all(self) -> Dict[str, LicenseRecord]:
        """Blocking variant of find_all."""
        with self._lock:
            data = self._load()
        return {name: LicenseRecord.from_dict(entry) for name, entry in data.items()}

    def write(self, package_name: str, record: LicenseRecord) -> LicenseRecord:
        """Blocking variant of save."""
        with self._lock:
            data = self._load()
            data[package_name] = record.to_dict()
            self._dump(data)
        logger.debug("Stored license record for %s in %s", package_name, self.path)
        return record

    def write_if_unchanged(
        self,
        package_name: str,
        record: LicenseRecord,
        expected: Optional[LicenseRecord],
    ) -> bool:
        """Blocking variant of save_if_unchanged."""
        with self._lock:
            data = self._load()
            entry = data.get(package_name)
            current = LicenseRecord.from_dict(entry) if entry is not None else None
            if current != expected:
                logger.debug("License record for %s changed since it was read", package_name)
                return False
            data[package_name] = record.to_dict()
            self._dump(data)
        logger.debug("Stored license record for %s in %s", package_name, self.path)
        return True

    @sync_to_async
    def save(self, package_name: str, record: LicenseRecord) -> LicenseRecord:
        """
        Save the license record of a package.

        Args:
            package_name: Package name the record belongs to
            record: LicenseRecord entity to save

        Returns:
            Saved license record
        """
        return self.write(package_name, record)

    @sync_to_async
    def save_if_unchanged(
        self,
        package_name: str,
        record: LicenseRecord,
        expected: Optional[LicenseRecord],
    ) -> bool:
        """
        Save the record only if the stored one still equals ``expected``.

        Args:
            package_name: Package name the record belongs to
            record: LicenseRecord entity to save
            expected: Record read earlier, None if there was none

        Returns:
            True if the record was saved
        """
        return self.write_if_unchanged(package_name, record, expected)

    @sync_to_async
    def find_by_package(self, package_name: str) -> Optional[LicenseRecord]:
        """
        Find the license record of a package.

        Args:
            package_name: Package name

        Returns:
            LicenseRecord entity or None if not found
        """
        return self.read(package_name)

    @sync_to_async
    def find_all(self) -> Dict[str, LicenseRecord]:
        """Return every stored record keyed by package name."""
        return self.read_all()
