"""
ActivateLicenseCommand.

Command to activate a license for a domain.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class ActivateLicenseCommand:
    """Command to activate a license for a client on a domain."""

    license_key: str
    client_uuid: str
    domain: str

    def missing_fields(self) -> List[str]:
        """Return the wire names of required fields that are empty."""
        fields = {
            "licenseKey": self.license_key,
            "uuid": self.client_uuid,
            "domain": self.domain,
        }
        return [
            name
            for name, value in fields.items()
            if not isinstance(value, str) or not value.strip()
        ]
