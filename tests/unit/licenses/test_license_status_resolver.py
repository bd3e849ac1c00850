"""
Unit tests for LicenseStatusResolver.
"""

import pytest

from core.domain.value_objects import LicenseStatus
from licenses.domain.license import LicenseRecord
from licenses.domain.services import LicenseStatusResolver


def _record(license_key="KT1-ABC123-DEF456", compatibility="^1 || ^2"):
    return LicenseRecord(license_key=license_key, license_compatibility=compatibility)


class TestLicenseStatusResolver:
    """Tests for LicenseStatusResolver."""

    def test_no_record_is_inactive(self):
        assert LicenseStatusResolver.resolve(None, "2.0.0") == LicenseStatus.INACTIVE

    def test_no_record_and_not_installed_is_inactive(self):
        assert LicenseStatusResolver.resolve(None, None) == LicenseStatus.INACTIVE

    def test_covered_version_is_active(self):
        assert LicenseStatusResolver.resolve(_record(), "2.1.0") == LicenseStatus.ACTIVE

    def test_malformed_key_is_invalid(self):
        record = _record(license_key="KT-ABC123-DEF456")

        assert LicenseStatusResolver.resolve(record, "2.1.0") == LicenseStatus.INVALID

    def test_key_is_checked_before_version(self):
        """A malformed key is invalid even when the version is not covered."""
        record = _record(license_key="not-a-key", compatibility="^1")

        assert LicenseStatusResolver.resolve(record, "5.0.0") == LicenseStatus.INVALID

    def test_newer_version_is_upgradeable(self):
        assert LicenseStatusResolver.resolve(_record(), "3.0.0") == LicenseStatus.UPGRADEABLE

    def test_older_version_is_incompatible(self):
        record = _record(compatibility="^2")

        assert LicenseStatusResolver.resolve(record, "1.0.0") == LicenseStatus.INCOMPATIBLE

    def test_not_installed_is_incompatible(self):
        assert LicenseStatusResolver.resolve(_record(), None) == LicenseStatus.INCOMPATIBLE

    def test_missing_compatibility_is_incompatible(self):
        record = _record(compatibility=None)

        assert LicenseStatusResolver.resolve(record, "2.0.0") == LicenseStatus.INCOMPATIBLE

    @pytest.mark.parametrize(
        "status,value",
        [
            (LicenseStatus.INACTIVE, "inactive"),
            (LicenseStatus.INVALID, "invalid"),
            (LicenseStatus.ACTIVE, "active"),
            (LicenseStatus.INCOMPATIBLE, "incompatible"),
            (LicenseStatus.UPGRADEABLE, "upgradeable"),
        ],
    )
    def test_status_values(self, status, value):
        assert str(status) == value
