"""
License domain entity.

This is the core domain entity representing a license record.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.exceptions import LicenseInUseError
from core.domain.value_objects import LicenseType


@dataclass(frozen=True)
class LicenseRecord:
    """
    License domain entity.

    A record is unbound until its first activation binds it to a domain.
    Once bound, it may only be re-validated for that same domain.
    """

    key: str
    license_type: LicenseType
    bound: bool = False
    bound_domain: Optional[str] = None
    bound_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate license record."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if len(self.key) > 100:
            raise ValueError("License key too long")
        if not isinstance(self.license_type, LicenseType):
            raise ValueError(f"Invalid license type: {self.license_type}")
        if self.bound and not self.bound_domain:
            raise ValueError("A bound license requires a bound domain")
        if not self.bound and self.bound_domain is not None:
            raise ValueError("An unbound license cannot carry a bound domain")

    @classmethod
    def create(cls, key: str, license_type: LicenseType) -> "LicenseRecord":
        """
        Create a new, unbound LicenseRecord.

        Args:
            key: License key
            license_type: License type

        Returns:
            LicenseRecord entity instance
        """
        return cls(
            key=key,
            license_type=license_type,
            created_at=datetime.now(timezone.utc),
        )

    def is_bound_to(self, domain: str) -> bool:
        """Check if the license is bound to the given domain."""
        return self.bound and self.bound_domain == domain

    def bind(self, domain: str, bound_at: Optional[datetime] = None) -> "LicenseRecord":
        """
        Bind the license to a domain.

        Binding to the domain it is already bound to returns the record unchanged.

        Args:
            domain: Activation domain
            bound_at: Bind time (defaults to now)

        Returns:
            Bound LicenseRecord instance

        Raises:
            LicenseInUseError: If the license is bound to another domain
        """
        if not domain:
            raise ValueError("Domain cannot be empty")
        if self.is_bound_to(domain):
            return self
        if self.bound:
            raise LicenseInUseError()

        return replace(
            self,
            bound=True,
            bound_domain=domain,
            bound_at=bound_at or datetime.now(timezone.utc),
        )
