"""
Integration tests for the license activation API.
"""

import pytest
from django.urls import reverse

from core.domain.value_objects import LicenseType
from credentials.application.services.token_verifier import TokenVerifier
from licenses.infrastructure.models import License

YEARLY_KEY = "TALLERPRO-ANUAL-ABCD-EFGH"
LIFETIME_KEY = "TALLERPRO-VALIDA-1234-5678"


def activate(api_client, **body):
    return api_client.post(reverse("licenses:activate-license"), body, format="json")


@pytest.mark.django_db
@pytest.mark.integration
class TestActivateLicenseAPI:
    """Integration tests for POST /api/v1/licenses/validate."""

    def test_activate_success(self, api_client, db_yearly_license):
        response = activate(
            api_client, licenseKey=YEARLY_KEY, uuid="client-1", domain="a.example.com"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "License activated successfully."
        assert set(data) == {"message", "token"}

        result = TokenVerifier.from_settings().verify(data["token"])
        assert result.ok
        assert result.principal.domain == "a.example.com"
        assert result.principal.client_uuid == "client-1"
        assert result.principal.license_type is LicenseType.YEARLY

        db_yearly_license.refresh_from_db()
        assert db_yearly_license.bound is True
        assert db_yearly_license.bound_domain == "a.example.com"

    def test_reactivate_same_domain(self, api_client, db_lifetime_license):
        first = activate(
            api_client, licenseKey=LIFETIME_KEY, uuid="client-1", domain="a.example.com"
        )
        second = activate(
            api_client, licenseKey=LIFETIME_KEY, uuid="client-9", domain="a.example.com"
        )

        assert first.status_code == 200
        assert second.status_code == 200
        verifier = TokenVerifier.from_settings()
        assert verifier.verify(first.json()["token"]).ok
        assert verifier.verify(second.json()["token"]).ok

    def test_other_domain_in_use(self, api_client, db_yearly_license):
        activate(api_client, licenseKey=YEARLY_KEY, uuid="client-1", domain="a.example.com")

        response = activate(
            api_client, licenseKey=YEARLY_KEY, uuid="client-1", domain="b.example.com"
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "LICENSE_IN_USE"
        db_yearly_license.refresh_from_db()
        assert db_yearly_license.bound_domain == "a.example.com"

    def test_unknown_key(self, api_client, db_yearly_license):
        response = activate(
            api_client, licenseKey="NOT-A-REAL-KEY", uuid="client-1", domain="a.example.com"
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVALID_LICENSE_KEY"
        assert License.objects.filter(bound=True).count() == 0

    @pytest.mark.parametrize(
        "body",
        [
            {"uuid": "client-1", "domain": "a.example.com"},
            {"licenseKey": YEARLY_KEY, "domain": "a.example.com"},
            {"licenseKey": YEARLY_KEY, "uuid": "client-1", "domain": ""},
            {"licenseKey": YEARLY_KEY, "uuid": None, "domain": "a.example.com"},
            {},
        ],
    )
    def test_missing_fields(self, api_client, db_yearly_license, body):
        response = api_client.post(reverse("licenses:activate-license"), body, format="json")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "MISSING_FIELDS"
        assert error["message"]
        db_yearly_license.refresh_from_db()
        assert db_yearly_license.bound is False

    def test_response_never_contains_secret(self, api_client, db_yearly_license, settings):
        response = activate(
            api_client, licenseKey=YEARLY_KEY, uuid="client-1", domain="a.example.com"
        )

        assert settings.LICENSE_TOKEN_SECRET not in response.content.decode()

    def test_long_domain(self, api_client, db_yearly_license):
        """Domains are opaque; a long one binds like any other."""
        domain = "sub." * 75 + "example.com"

        response = activate(api_client, licenseKey=YEARLY_KEY, uuid="client-1", domain=domain)

        assert response.status_code == 200
        principal = TokenVerifier.from_settings().verify(response.json()["token"]).principal
        assert principal.domain == domain
        db_yearly_license.refresh_from_db()
        assert db_yearly_license.bound_domain == domain

    def test_correlation_id_echoed(self, api_client, db_yearly_license):
        response = api_client.post(
            reverse("licenses:activate-license"),
            {"licenseKey": YEARLY_KEY, "uuid": "client-1", "domain": "a.example.com"},
            format="json",
            HTTP_X_CORRELATION_ID="corr-123",
        )

        assert response["X-Correlation-ID"] == "corr-123"
