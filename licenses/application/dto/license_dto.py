"""
License DTOs for API responses.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class LicenseDTO:
    """DTO for the details of a valid stored license."""

    key: str
    generation: int
    compatibility: str


@dataclass
class LicenseStatusDTO:
    """DTO for license status response."""

    package_name: str
    status: str
    plugin_version: Optional[str]
    license: Optional[LicenseDTO]
