"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class LicenseType(Enum):
    """License type value object. Drives the credential lifetime."""

    LIFETIME = "lifetime"
    YEARLY = "yearly"

    def __str__(self) -> str:
        """Return license type as string."""
        return self.value


class BindStatus(Enum):
    """Outcome of an atomic bind attempt against the license store."""

    BOUND = "bound"
    ALREADY_BOUND_ELSEWHERE = "already_bound_elsewhere"
    NOT_FOUND = "not_found"

    def __str__(self) -> str:
        """Return bind status as string."""
        return self.value


def mask_license_key(key: str) -> str:
    """Return a log-safe rendering of a license key."""
    if not key:
        return ""
    return f"{key[:8]}..."
