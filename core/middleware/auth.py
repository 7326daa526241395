"""
License token authentication middleware.

This middleware puts the access gate in front of protected API paths:
callers must present a valid license token as a bearer credential.
"""

import logging
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.domain.exceptions import (
    CredentialException,
    TokenInvalidOrExpiredError,
    UnauthenticatedError,
)
from credentials.application.access_gate import AccessGate
from credentials.application.services.token_verifier import TokenVerifier

logger = logging.getLogger(__name__)


class LicenseTokenAuthenticationMiddleware:
    """
    Middleware for license token authentication.

    This middleware:
    1. Applies only to paths under LICENSE_PROTECTED_PATH_PREFIXES
    2. Returns 401 when no bearer token is presented
    3. Returns 403 when the token is invalid or expired
    4. Attaches the principal as ``request.license_principal`` otherwise
    """

    def __init__(self, get_response, gate: Optional[AccessGate] = None):
        """Initialize middleware."""
        self.get_response = get_response
        self.gate = gate or AccessGate(TokenVerifier.from_settings())

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Authenticate protected requests before the view runs."""
        if not self._is_protected(request.path):
            return self.get_response(request)

        try:
            principal = self.gate.authenticate(request.headers.get("Authorization"))
        except CredentialException as exc:
            return self._reject(request, exc)

        request.license_principal = principal  # type: ignore
        return self.get_response(request)

    def _is_protected(self, path: str) -> bool:
        """
        Check if the path is guarded by the access gate.

        Args:
            path: Request path

        Returns:
            True if a license token is required
        """
        prefixes = getattr(settings, "LICENSE_PROTECTED_PATH_PREFIXES", [])
        return any(path.startswith(prefix) for prefix in prefixes)

    def _reject(self, request: HttpRequest, exc: CredentialException) -> HttpResponse:
        """Build the error response for a rejected credential."""
        status_code = 403
        if isinstance(exc, UnauthenticatedError):
            status_code = 401
        elif isinstance(exc, TokenInvalidOrExpiredError):
            logger.warning(
                "Rejected license token on %s: %s",
                request.path,
                exc.reason,
                extra={"correlation_id": getattr(request, "correlation_id", None)},
            )

        response = JsonResponse(
            {"error": {"code": exc.code, "message": exc.message}},
            status=status_code,
        )
        correlation_id = getattr(request, "correlation_id", None)
        if correlation_id:
            response["X-Correlation-ID"] = correlation_id
        return response
