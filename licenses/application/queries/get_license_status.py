"""
GetLicenseStatusQuery.

Query to get the license status of an installed plugin.
"""
from dataclasses import dataclass


@dataclass
class GetLicenseStatusQuery:
    """Query to get license status for a package."""

    package_name: str
