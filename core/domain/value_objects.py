"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PackageName:
    """
    Fully-qualified package name value object.

    Package names have the form ``vendor/name``; the vendor part is optional.
    """

    value: str

    def __post_init__(self):
        """Validate package name format."""
        if not self.value or not self.value.strip():
            raise ValueError("Package name cannot be empty")
        if self.value != self.value.strip() or " " in self.value:
            raise ValueError(f"Invalid package name: {self.value}")
        if self.value.count("/") > 1 or self.value.startswith("/") or self.value.endswith("/"):
            raise ValueError(f"Invalid package name: {self.value}")

    @property
    def vendor(self) -> str:
        """Return the vendor part, or an empty string."""
        return self.value.split("/", 1)[0] if "/" in self.value else ""

    @property
    def name(self) -> str:
        """Return the name without the vendor part."""
        return self.value.rsplit("/", 1)[-1]

    def __str__(self) -> str:
        """Return package name as string."""
        return self.value


class LicenseStatus(Enum):
    """License status value object."""

    INACTIVE = "inactive"
    INVALID = "invalid"
    ACTIVE = "active"
    INCOMPATIBLE = "incompatible"
    UPGRADEABLE = "upgradeable"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
