"""
Serializers for License API endpoints.
"""

from rest_framework import serializers


class ActivateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for activate license request."""

    # Presence is checked by the activation handler so both fields are
    # reported together.
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=254)
    orderId = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)


class ActivateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for activate license response."""

    code = serializers.IntegerField()
    status = serializers.CharField()
    message = serializers.CharField()


class LicenseDTOSerializer(serializers.Serializer):
    """Serializer for LicenseDTO."""

    key = serializers.CharField()
    generation = serializers.IntegerField()
    compatibility = serializers.CharField()


class LicenseStatusResponseSerializer(serializers.Serializer):
    """Serializer for license status response."""

    package_name = serializers.CharField()
    status = serializers.ChoiceField(
        choices=["inactive", "invalid", "active", "incompatible", "upgradeable"]
    )
    plugin_version = serializers.CharField(allow_null=True)
    license = LicenseDTOSerializer(allow_null=True)
