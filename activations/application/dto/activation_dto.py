"""
Activation DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class ActivateLicenseResponseDTO:
    """DTO for activate license response."""

    message: str
    token: str
    license_type: str
    domain: str
    expires_at: datetime
    first_bind: bool
