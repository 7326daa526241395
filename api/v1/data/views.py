"""
Token-protected data views.

Requests reach these views only after LicenseTokenAuthenticationMiddleware
has verified the bearer token and attached ``license_principal``.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.exceptions import UnauthenticatedError


class ProfileResponseSerializer(serializers.Serializer):
    """Serializer for the profile response."""

    message = serializers.CharField()
    uuid = serializers.CharField()
    domain = serializers.CharField()
    type = serializers.CharField()


class ProfileView(APIView):
    """Profile of the licensed client behind the presented token."""

    @extend_schema(
        operation_id="get_profile",
        summary="Licensed Profile",
        tags=["Data API"],
        parameters=[
            OpenApiParameter(
                name="Authorization",
                type=str,
                location=OpenApiParameter.HEADER,
                required=True,
                description="Bearer <token> obtained from license activation",
            ),
        ],
        responses={
            200: ProfileResponseSerializer,
            401: {"description": "No token provided"},
            403: {"description": "Invalid or expired token"},
        },
    )
    def get(self, request: Request) -> Response:
        """Return the profile of the authenticated principal."""
        principal = getattr(request, "license_principal", None)
        if principal is None:
            raise UnauthenticatedError()

        return Response(
            {
                "message": f"Welcome, user with license type: {principal.license_type.value}",
                **principal.to_claims(),
            },
            status=status.HTTP_200_OK,
        )
