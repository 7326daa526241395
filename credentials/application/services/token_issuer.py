"""
Token issuer.

Seals an activation outcome into a signed, self-expiring JWT.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

import jwt
from django.conf import settings

from core.domain.value_objects import LicenseType
from credentials.domain.policy import token_lifetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class IssuedToken:
    """A freshly issued credential."""

    token: str
    issued_at: datetime
    expires_at: datetime


class TokenIssuer:
    """Issues license tokens signed with the server secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", clock: Optional[Clock] = None):
        """
        Initialize the issuer.

        Args:
            secret: Signing secret
            algorithm: JWT signing algorithm
            clock: Callable returning the current UTC time
        """
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock or utc_now

    @classmethod
    def from_settings(cls, clock: Optional[Clock] = None) -> "TokenIssuer":
        """Build an issuer from the LICENSE_TOKEN_* settings."""
        return cls(
            secret=settings.LICENSE_TOKEN_SECRET,
            algorithm=settings.LICENSE_TOKEN_ALGORITHM,
            clock=clock,
        )

    def issue(self, client_uuid: str, domain: str, license_type: LicenseType) -> IssuedToken:
        """
        Issue a signed token for an activated license.

        Args:
            client_uuid: Client (browser/machine) identifier
            domain: Activation domain
            license_type: License type, which selects the token lifetime

        Returns:
            IssuedToken with the encoded JWT and its validity window
        """
        issued_at = self._clock()
        expires_at = issued_at + token_lifetime(license_type)
        payload = {
            "uuid": client_uuid,
            "domain": domain,
            "type": license_type.value,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, issued_at=issued_at, expires_at=expires_at)
