"""
Activation domain events.

Domain events represent something that happened in the activation domain.
"""
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class LicenseActivated(DomainEvent):
    """Event raised when a license is activated (or re-activated) for a domain."""

    domain: str
    client_uuid: str
    license_type: str
    first_bind: bool

    def to_dict(self):
        """Convert event to dictionary for serialization."""
        data = super().to_dict()
        data.update(
            {
                "domain": self.domain,
                "client_uuid": self.client_uuid,
                "license_type": self.license_type,
                "first_bind": self.first_bind,
            }
        )
        return data
