"""
License key format validation.

License keys look like ``KT<generation>-<segment>-<segment>`` where the
generation is a decimal integer and each segment is six alphanumeric
characters, e.g. ``KT1-ABC123-DEF456``.
"""

import re
from typing import Optional

LICENSE_KEY_PATTERN = re.compile(r"KT(?P<generation>[0-9]+)-[A-Za-z0-9]{6}-[A-Za-z0-9]{6}")


class LicenseKeyValidator:
    """Domain service for license key format checks."""

    @staticmethod
    def is_valid(license_key: Optional[str]) -> bool:
        """
        Check whether a license key is well-formed.

        Args:
            license_key: License key string (may be None)

        Returns:
            True if the key matches the license key format
        """
        if not license_key or not isinstance(license_key, str):
            return False
        return LICENSE_KEY_PATTERN.fullmatch(license_key) is not None

    @staticmethod
    def get_generation(license_key: Optional[str]) -> Optional[int]:
        """
        Extract the generation number from a license key.

        Args:
            license_key: License key string (may be None)

        Returns:
            Generation number, or None if the key is not valid
        """
        if not LicenseKeyValidator.is_valid(license_key):
            return None
        match = LICENSE_KEY_PATTERN.fullmatch(license_key)
        return int(match.group("generation"))


def mask_license_key(license_key: Optional[str]) -> str:
    """Mask a license key for logs, keeping only the generation prefix."""
    if not license_key:
        return ""
    prefix = license_key.split("-", 1)[0]
    return f"{prefix}-******-******"
