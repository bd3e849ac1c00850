"""
Activation DTOs for API responses.
"""
from dataclasses import dataclass


@dataclass
class ActivateLicenseResponseDTO:
    """DTO for the activation success envelope."""

    code: int = 200
    status: str = "ok"
    message: str = "License key successfully activated"
