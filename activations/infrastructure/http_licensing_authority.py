"""
HTTP implementation of LicensingAuthorityClient port.

Posts activation requests to the licensing authority's REST API.
"""
import logging
import time
from typing import Any, Dict, Optional

import requests
from asgiref.sync import sync_to_async

from activations.ports.licensing_authority import LicensingAuthorityClient
from core.conf import licensing_settings
from core.domain.exceptions import LicensingAuthorityError
from core.metrics import licensing_authority_request_duration_seconds

logger = logging.getLogger(__name__)


class HttpLicensingAuthorityClient(LicensingAuthorityClient):
    """
    requests-based LicensingAuthorityClient.

    Transport failures and error responses are raised as
    LicensingAuthorityError carrying the original message unchanged.
    """

    def __init__(self, api_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            api_url: Base URL of the licensing API
            timeout: Request timeout in seconds
            session: Optional requests session
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "HttpLicensingAuthorityClient":
        """Build a client from the licensing settings."""
        options = licensing_settings()
        return cls(api_url=options["API_URL"], timeout=options["API_TIMEOUT"])

    @sync_to_async
    def request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an activation request.

        Args:
            payload: ``{"packageName", "email", "orderId"}``

        Returns:
            Activation response

        Raises:
            LicensingAuthorityError: If the request fails or is rejected
        """
        return self.post("activate", payload)

    def post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload and return the decoded JSON response."""
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        headers = {
            "Accept": "application/json",
            "User-Agent": "Plugin-Licensing/1.0",
        }

        start_time = time.time()
        try:
            response = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Licensing authority request to %s failed: %s", url, e)
            raise LicensingAuthorityError(str(e)) from e
        finally:
            licensing_authority_request_duration_seconds.labels(endpoint=endpoint).observe(
                time.time() - start_time
            )

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            message = self._error_message(data) or response.reason or response.text
            logger.warning(
                "Licensing authority rejected request to %s: %s %s",
                url,
                response.status_code,
                message,
            )
            raise LicensingAuthorityError(message, status_code=response.status_code)

        if not isinstance(data, dict):
            raise LicensingAuthorityError(
                "Invalid response from licensing authority", status_code=response.status_code
            )

        error = self._error_message(data)
        if error and "licenseKey" not in data:
            raise LicensingAuthorityError(error, status_code=response.status_code)

        return data

    @staticmethod
    def _error_message(data: Any) -> Optional[str]:
        """Extract the authority's error message from a response body."""
        if not isinstance(data, dict):
            return None
        error = data.get("error") or data.get("message")
        if isinstance(error, dict):
            error = error.get("message")
        return str(error) if error else None
