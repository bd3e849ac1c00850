"""
ActivateLicenseCommand.

Command to activate a license for an installed plugin.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class ActivateLicenseCommand:
    """Command to exchange buyer credentials for a license."""

    package_name: str
    email: Optional[str]
    order_id: Optional[str]

    @classmethod
    def from_request_body(cls, package_name: str, body: Mapping[str, Any]) -> "ActivateLicenseCommand":
        """
        Build a command from an activation request payload.

        Args:
            package_name: Package to activate
            body: Request body with ``email`` and ``orderId``

        Returns:
            ActivateLicenseCommand
        """
        body = body or {}
        email = body.get("email")
        order_id = body.get("orderId")
        return cls(
            package_name=package_name,
            email=str(email).strip() if email is not None else None,
            order_id=str(order_id).strip() if order_id is not None else None,
        )
