"""
Access gate.

Reusable guard that protected operations compose with: extracts the bearer
token, verifies it and yields the authenticated principal.
"""
import logging
from typing import Optional

from core.domain.exceptions import TokenInvalidOrExpiredError, UnauthenticatedError
from core.metrics import token_verifications_total
from credentials.application.services.token_verifier import TokenVerifier
from credentials.domain.principal import Principal

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header value.

    Args:
        authorization: Raw header value

    Returns:
        Token string or None if the header carries no bearer token
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX.lower():
        return None
    return parts[1]


class AccessGate:
    """Guards protected operations behind a valid license token."""

    def __init__(self, verifier: TokenVerifier):
        """Initialize gate with a token verifier."""
        self.verifier = verifier

    def authenticate(self, authorization: Optional[str]) -> Principal:
        """
        Authenticate a caller from its Authorization header.

        Args:
            authorization: Raw Authorization header value

        Returns:
            The authenticated Principal

        Raises:
            UnauthenticatedError: If no bearer token is present
            TokenInvalidOrExpiredError: If the token fails verification
        """
        token = extract_bearer_token(authorization)
        if token is None:
            token_verifications_total.labels(outcome="missing").inc()
            raise UnauthenticatedError()

        result = self.verifier.verify(token)
        if not result.ok:
            token_verifications_total.labels(outcome=result.failure.value).inc()
            logger.info("Token rejected: %s", result.failure)
            raise TokenInvalidOrExpiredError(reason=result.failure)

        token_verifications_total.labels(outcome="success").inc()
        return result.principal
