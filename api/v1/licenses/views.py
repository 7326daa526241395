"""
License activation API views.

Clients present a license key, a client uuid and a domain; on success they
receive a signed token that the protected endpoints accept.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.handlers.activate_license_handler import ActivateLicenseHandler
from api.v1.licenses.serializers import (
    ActivateLicenseRequestSerializer,
    ActivateLicenseResponseSerializer,
)
from core.domain.exceptions import DomainException
from core.instrumentation import Status, StatusCode, get_tracer
from credentials.application.services.token_issuer import TokenIssuer
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()

tracer = get_tracer(__name__)


class ActivateLicenseView(APIView):
    """View for activating licenses."""

    @extend_schema(
        operation_id="activate_license",
        summary="Activate License",
        description=(
            "Validate a license key and bind it to the requesting domain on first use. "
            "Returns a signed token; re-activating the same domain returns a fresh token."
        ),
        tags=["License API"],
        request=ActivateLicenseRequestSerializer,
        responses={
            200: ActivateLicenseResponseSerializer,
            400: {"description": "Missing required fields"},
            404: {"description": "License key not found"},
            403: {"description": "License already in use on another domain"},
            429: {"description": "Too many activation attempts"},
        },
    )
    def post(self, request: Request) -> Response:
        """Activate a license for a domain."""
        return async_to_sync(self._handle_activate_license)(request)

    async def _handle_activate_license(self, request: Request) -> Response:
        """Async handler for activate license."""
        with tracer.start_as_current_span("activate_license") as span:
            span.set_attribute("operation", "activate_license")

            serializer = ActivateLicenseRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            data = serializer.validated_data

            command = ActivateLicenseCommand(
                license_key=data.get("licenseKey"),
                client_uuid=data.get("uuid"),
                domain=data.get("domain"),
            )
            if command.domain:
                span.set_attribute("domain", command.domain)

            handler = ActivateLicenseHandler(
                license_repository=_license_repo,
                token_issuer=TokenIssuer.from_settings(),
            )

            try:
                result = await handler.handle(command)
            except DomainException as exc:
                span.set_attribute("error", exc.code)
                span.set_status(Status(StatusCode.ERROR, exc.code))
                raise

            span.set_attribute("license.type", result.license_type)
            span.set_attribute("license.first_bind", result.first_bind)
            span.set_status(Status(StatusCode.OK))

            response_serializer = ActivateLicenseResponseSerializer(result)
            return Response(response_serializer.data, status=status.HTTP_200_OK)
