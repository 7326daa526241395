"""
Token verifier.

Validates a presented license token and reconstructs its principal.
Pure with respect to (token, current time, signing secret).
"""
import binascii
import logging
from datetime import datetime, timezone
from numbers import Number
from typing import Optional

import jwt
from django.conf import settings
from jwt.utils import base64url_decode, base64url_encode

from core.domain.value_objects import LicenseType
from credentials.application.services.token_issuer import Clock, utc_now
from credentials.domain.principal import Principal, VerificationFailure, VerificationResult

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["uuid", "domain", "type", "iat", "exp"]


class TokenVerifier:
    """Verifies license tokens signed with the server secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", clock: Optional[Clock] = None):
        """
        Initialize the verifier.

        Args:
            secret: Signing secret
            algorithm: Accepted JWT signing algorithm
            clock: Callable returning the current UTC time
        """
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock or utc_now

    @classmethod
    def from_settings(cls, clock: Optional[Clock] = None) -> "TokenVerifier":
        """Build a verifier from the LICENSE_TOKEN_* settings."""
        return cls(
            secret=settings.LICENSE_TOKEN_SECRET,
            algorithm=settings.LICENSE_TOKEN_ALGORITHM,
            clock=clock,
        )

    def verify(self, token: str) -> VerificationResult:
        """
        Verify a token.

        Signature integrity is checked before expiration.

        Args:
            token: Encoded JWT

        Returns:
            VerificationResult with the principal or the failure reason
        """
        if not token or not isinstance(token, str):
            return VerificationResult.rejected(VerificationFailure.MALFORMED)

        if not _has_canonical_signature(token):
            return VerificationResult.rejected(VerificationFailure.BAD_SIGNATURE)

        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError):
            return VerificationResult.rejected(VerificationFailure.BAD_SIGNATURE)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected malformed token: %s", e)
            return VerificationResult.rejected(VerificationFailure.MALFORMED)

        principal = self._to_principal(payload)
        if principal is None:
            return VerificationResult.rejected(VerificationFailure.MALFORMED)

        if principal.expires_at <= self._clock():
            return VerificationResult.rejected(VerificationFailure.EXPIRED)

        return VerificationResult.success(principal)

    def _to_principal(self, payload: dict) -> Optional[Principal]:
        """Build a principal from decoded claims, or None if they are unusable."""
        client_uuid = payload["uuid"]
        domain = payload["domain"]
        issued_at = payload["iat"]
        expires_at = payload["exp"]
        if not isinstance(client_uuid, str) or not isinstance(domain, str):
            return None
        if not isinstance(issued_at, Number) or not isinstance(expires_at, Number):
            return None
        try:
            return Principal(
                client_uuid=client_uuid,
                domain=domain,
                license_type=LicenseType(payload["type"]),
                issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
                expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
            )
        except (ValueError, OverflowError, OSError):
            return None


def _has_canonical_signature(token: str) -> bool:
    """
    Check that the signature segment is the canonical base64url encoding.

    The last character of an HS256 signature carries unused bits, and
    lenient decoders map several characters to the same bytes. Only the
    encoding the issuer produced is accepted.
    """
    segments = token.split(".")
    if len(segments) != 3:
        # Structural problems are reported by the decoder
        return True
    signature = segments[2]
    try:
        decoded = base64url_decode(signature)
    except (binascii.Error, ValueError):
        return True
    return base64url_encode(decoded).decode("ascii") == signature
