"""
Principal and verification result value objects.

A Principal is the set of claims recovered from a verified credential.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.domain.value_objects import LicenseType


@dataclass(frozen=True)
class Principal:
    """Authenticated principal carried by a license token."""

    client_uuid: str
    domain: str
    license_type: LicenseType
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    def to_claims(self) -> dict:
        """Return the wire claims of this principal."""
        return {
            "uuid": self.client_uuid,
            "domain": self.domain,
            "type": self.license_type.value,
        }


class VerificationFailure(Enum):
    """Reason a presented token was rejected."""

    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"

    def __str__(self) -> str:
        """Return failure reason as string."""
        return self.value


@dataclass(frozen=True)
class VerificationResult:
    """Either a verified principal or a named failure."""

    principal: Optional[Principal] = None
    failure: Optional[VerificationFailure] = None

    def __post_init__(self):
        """Exactly one of principal and failure is set."""
        if (self.principal is None) == (self.failure is None):
            raise ValueError("VerificationResult needs exactly one of principal or failure")

    @classmethod
    def success(cls, principal: Principal) -> "VerificationResult":
        return cls(principal=principal)

    @classmethod
    def rejected(cls, failure: VerificationFailure) -> "VerificationResult":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.principal is not None
