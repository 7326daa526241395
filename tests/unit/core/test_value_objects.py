"""
Unit tests for core value objects and exceptions.
"""
import pytest

from core.domain.exceptions import (
    InvalidLicenseKeyError,
    LicenseInUseError,
    MissingFieldsError,
    TokenInvalidOrExpiredError,
    UnauthenticatedError,
)
from core.domain.value_objects import LicenseType, mask_license_key


class TestLicenseType:
    """Tests for LicenseType value object."""

    def test_wire_values(self):
        assert LicenseType("lifetime") is LicenseType.LIFETIME
        assert LicenseType("yearly") is LicenseType.YEARLY

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            LicenseType("monthly")


class TestMaskLicenseKey:
    """Tests for license key masking in logs."""

    def test_long_key_is_truncated(self):
        assert mask_license_key("TALLERPRO-VALIDA-1234-5678") == "TALLERPR..."

    def test_full_key_never_appears(self):
        key = "TALLERPRO-ANUAL-ABCD-EFGH"
        assert key not in mask_license_key(key)


class TestErrorCodes:
    """The machine-readable codes are part of the wire contract."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (MissingFieldsError(["domain"]), "MISSING_FIELDS"),
            (InvalidLicenseKeyError(), "INVALID_LICENSE_KEY"),
            (LicenseInUseError(), "LICENSE_IN_USE"),
            (UnauthenticatedError(), "UNAUTHENTICATED"),
            (TokenInvalidOrExpiredError(), "TOKEN_INVALID_OR_EXPIRED"),
        ],
    )
    def test_code(self, exc, code):
        assert exc.code == code
        assert exc.message

    def test_missing_fields_lists_names(self):
        exc = MissingFieldsError(["licenseKey", "uuid"])
        assert exc.fields == ["licenseKey", "uuid"]
        assert "licenseKey" in exc.message
        assert "uuid" in exc.message
