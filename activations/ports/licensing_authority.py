"""
Licensing authority port (interface).

This defines the contract of the remote service that exchanges buyer
credentials for a license key. Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class LicensingAuthorityClient(ABC):
    """
    Abstract client of the remote licensing authority.

    A successful activation response has the shape::

        {
            "packageName": "vendor/kirby-copilot",
            "licenseKey": "KT1-ABC123-DEF456",
            "licenseCompatibility": "^1.0.0",
            "order": {"createdAt": "2024-01-01T00:00:00Z"}
        }
    """

    @abstractmethod
    async def request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an activation request.

        Args:
            payload: ``{"packageName", "email", "orderId"}``

        Returns:
            Activation response

        Raises:
            LicensingAuthorityError: If the authority rejects or fails the request
        """
        pass
