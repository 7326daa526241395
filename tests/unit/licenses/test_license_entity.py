"""
Unit tests for LicenseRecord entity.
"""
from datetime import datetime, timezone

import pytest

from core.domain.exceptions import LicenseInUseError
from core.domain.value_objects import LicenseType
from licenses.domain.license import LicenseRecord


class TestLicenseRecord:
    """Tests for LicenseRecord entity."""

    def test_create_is_unbound(self):
        """A freshly provisioned license is not bound to any domain."""
        record = LicenseRecord.create(key="KEY-0001", license_type=LicenseType.YEARLY)

        assert record.bound is False
        assert record.bound_domain is None
        assert record.bound_at is None
        assert record.created_at is not None

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            LicenseRecord.create(key="  ", license_type=LicenseType.YEARLY)

    def test_key_too_long_rejected(self):
        with pytest.raises(ValueError, match="too long"):
            LicenseRecord.create(key="K" * 101, license_type=LicenseType.YEARLY)

    def test_invalid_license_type_rejected(self):
        with pytest.raises(ValueError, match="Invalid license type"):
            LicenseRecord(key="KEY-0001", license_type="yearly")

    def test_bound_requires_domain(self):
        with pytest.raises(ValueError):
            LicenseRecord(key="KEY-0001", license_type=LicenseType.LIFETIME, bound=True)

    def test_unbound_cannot_carry_domain(self):
        with pytest.raises(ValueError):
            LicenseRecord(
                key="KEY-0001",
                license_type=LicenseType.LIFETIME,
                bound_domain="example.com",
            )

    def test_bind(self):
        """Binding sets the domain and bind time."""
        record = LicenseRecord.create(key="KEY-0001", license_type=LicenseType.LIFETIME)
        at = datetime(2026, 3, 1, tzinfo=timezone.utc)

        bound = record.bind("example.com", bound_at=at)

        assert bound.bound is True
        assert bound.bound_domain == "example.com"
        assert bound.bound_at == at
        assert bound.is_bound_to("example.com")
        # Entities are immutable; the original is untouched
        assert record.bound is False

    def test_bind_same_domain_is_noop(self):
        record = LicenseRecord.create(key="KEY-0001", license_type=LicenseType.LIFETIME)
        bound = record.bind("example.com")

        assert bound.bind("example.com") is bound

    def test_bind_other_domain_rejected(self):
        record = LicenseRecord.create(key="KEY-0001", license_type=LicenseType.LIFETIME)
        bound = record.bind("example.com")

        with pytest.raises(LicenseInUseError):
            bound.bind("other.example.com")

    def test_domain_comparison_is_exact(self):
        """Domains are compared byte-for-byte, without normalization."""
        bound = LicenseRecord.create(key="KEY-0001", license_type=LicenseType.YEARLY).bind(
            "example.com"
        )

        assert not bound.is_bound_to("Example.com")
        assert not bound.is_bound_to("example.com ")
