"""
Unit tests for AccessGate.
"""
from datetime import timedelta

import pytest

from core.domain.exceptions import TokenInvalidOrExpiredError, UnauthenticatedError
from core.domain.value_objects import LicenseType
from credentials.application.access_gate import AccessGate, extract_bearer_token
from credentials.application.services.token_issuer import TokenIssuer
from credentials.domain.principal import VerificationFailure

SECRET = "unit-test-token-secret-0123456789abcdef0123456789"


class TestExtractBearerToken:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
            (None, None),
            ("", None),
            ("Bearer", None),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer abc def", None),
            ("abc.def.ghi", None),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected


class TestAccessGate:
    """Tests for AccessGate."""

    def test_valid_token(self, access_gate, token_issuer):
        token = token_issuer.issue("client-1", "a.example.com", LicenseType.LIFETIME).token

        principal = access_gate.authenticate(f"Bearer {token}")

        assert principal.client_uuid == "client-1"
        assert principal.domain == "a.example.com"
        assert principal.license_type is LicenseType.LIFETIME

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc"])
    def test_no_token(self, access_gate, header):
        with pytest.raises(UnauthenticatedError):
            access_gate.authenticate(header)

    def test_malformed_token(self, access_gate):
        with pytest.raises(TokenInvalidOrExpiredError) as exc_info:
            access_gate.authenticate("Bearer not-a-token")

        assert exc_info.value.reason is VerificationFailure.MALFORMED

    def test_expired_token(self, access_gate, fixed_now):
        issued_at = fixed_now - timedelta(days=400)
        token = TokenIssuer(SECRET, clock=lambda: issued_at).issue(
            "client-1", "a.example.com", LicenseType.YEARLY
        ).token

        with pytest.raises(TokenInvalidOrExpiredError) as exc_info:
            access_gate.authenticate(f"Bearer {token}")

        assert exc_info.value.reason is VerificationFailure.EXPIRED
        assert exc_info.value.code == "TOKEN_INVALID_OR_EXPIRED"

    def test_foreign_secret(self, token_verifier, fixed_now):
        token = TokenIssuer("another-secret-0123456789abcdef0123", clock=lambda: fixed_now).issue(
            "client-1", "a.example.com", LicenseType.YEARLY
        ).token

        with pytest.raises(TokenInvalidOrExpiredError) as exc_info:
            AccessGate(token_verifier).authenticate(f"Bearer {token}")

        assert exc_info.value.reason is VerificationFailure.BAD_SIGNATURE
