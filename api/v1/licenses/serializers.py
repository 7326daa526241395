"""
Serializers for license activation endpoints.
"""

from rest_framework import serializers


def _wire_field():
    # Presence is checked by the activation handler, which reports MISSING_FIELDS.
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default="", trim_whitespace=False
    )


class ActivateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for activate license request."""

    licenseKey = _wire_field()  # noqa: N815
    uuid = _wire_field()
    domain = _wire_field()


class ActivateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for activate license response."""

    message = serializers.CharField()
    token = serializers.CharField()
