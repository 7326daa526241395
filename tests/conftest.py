"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone

import pytest

from activations.application.handlers.activate_license_handler import ActivateLicenseHandler
from core.domain.value_objects import LicenseType
from core.infrastructure.events import InMemoryEventBus
from credentials.application.access_gate import AccessGate
from credentials.application.services.token_issuer import TokenIssuer
from credentials.application.services.token_verifier import TokenVerifier
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.infrastructure.repositories.in_memory_license_repository import (
    InMemoryLicenseRepository,
)

LIFETIME_KEY = "TALLERPRO-VALIDA-1234-5678"
YEARLY_KEY = "TALLERPRO-ANUAL-ABCD-EFGH"
TOKEN_SECRET = "unit-test-token-secret-0123456789abcdef0123456789"


@pytest.fixture
def fixed_now():
    """Fixture for a fixed point in time used as the clock."""
    return datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def token_issuer(fixed_now):
    """Fixture for a TokenIssuer with a fixed clock."""
    return TokenIssuer(secret=TOKEN_SECRET, clock=lambda: fixed_now)


@pytest.fixture
def token_verifier(fixed_now):
    """Fixture for a TokenVerifier with a fixed clock."""
    return TokenVerifier(secret=TOKEN_SECRET, clock=lambda: fixed_now)


@pytest.fixture
def access_gate(token_verifier):
    """Fixture for an AccessGate."""
    return AccessGate(token_verifier)


@pytest.fixture
def license_store():
    """Fixture for an in-memory license store seeded with both license types."""
    return InMemoryLicenseRepository(
        [
            LicenseRecord.create(key=LIFETIME_KEY, license_type=LicenseType.LIFETIME),
            LicenseRecord.create(key=YEARLY_KEY, license_type=LicenseType.YEARLY),
        ]
    )


@pytest.fixture
def event_bus():
    """Fixture for an isolated event bus."""
    return InMemoryEventBus()


@pytest.fixture
def activate_handler(license_store, token_issuer, event_bus):
    """Fixture for ActivateLicenseHandler over the in-memory store."""
    return ActivateLicenseHandler(
        license_repository=license_store,
        token_issuer=token_issuer,
        event_bus=event_bus,
    )


@pytest.fixture
def license_repository():
    """Fixture for the Django LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def db_lifetime_license(db):
    """Fixture for an unbound lifetime license saved in database."""
    from licenses.infrastructure.models import License as LicenseModel

    return LicenseModel.objects.create(key=LIFETIME_KEY, license_type=LicenseType.LIFETIME.value)


@pytest.fixture
def db_yearly_license(db):
    """Fixture for an unbound yearly license saved in database."""
    from licenses.infrastructure.models import License as LicenseModel

    return LicenseModel.objects.create(key=YEARLY_KEY, license_type=LicenseType.YEARLY.value)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
