"""
Serializers for license API endpoints.
"""

from rest_framework import serializers

from licenses.application.queries.get_audit_logs import DEFAULT_AUDIT_LOG_LIMIT, MAX_AUDIT_LOG_LIMIT


class VerifyLicenseRequestSerializer(serializers.Serializer):
    """Serializer for verify license request."""

    key = serializers.CharField(required=True, max_length=255)
    product = serializers.CharField(required=True, max_length=255)


class VerifyLicenseResponseSerializer(serializers.Serializer):
    """
    Serializer for verify license response (schema only).

    Invalid results carry `valid` and `reason`; valid results carry the
    license fields instead.
    """

    valid = serializers.BooleanField()
    reason = serializers.CharField(required=False)
    key = serializers.CharField(required=False)
    product = serializers.CharField(required=False)
    expires_at = serializers.DateTimeField(required=False, allow_null=True)
    owner_email = serializers.CharField(required=False)
    owner_name = serializers.CharField(required=False)
    is_activated = serializers.BooleanField(required=False)


class AddLicenseRequestSerializer(serializers.Serializer):
    """Serializer for add license request."""

    key = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=255,
        help_text="License key, or omit / 'random' to generate one",
    )
    product = serializers.CharField(required=True, max_length=255)
    owner_email = serializers.CharField(required=True, max_length=255)
    owner_name = serializers.CharField(required=True, max_length=255)
    expires_at = serializers.DateTimeField(required=False, allow_null=True)
    hours = serializers.IntegerField(required=False, min_value=1)

    def validate(self, attrs):
        """Ensure expires_at and hours are not both set."""
        if attrs.get("expires_at") and attrs.get("hours"):
            raise serializers.ValidationError("Provide either expires_at or hours, not both")
        return attrs


class AuditLogQuerySerializer(serializers.Serializer):
    """Serializer for audit log query parameters."""

    limit = serializers.IntegerField(
        min_value=1,
        max_value=MAX_AUDIT_LOG_LIMIT,
        default=DEFAULT_AUDIT_LOG_LIMIT,
    )


class LicenseSerializer(serializers.Serializer):
    """Serializer for LicenseDTO."""

    key = serializers.CharField()
    product = serializers.CharField()
    expires_at = serializers.DateTimeField(allow_null=True)
    owner_email = serializers.CharField()
    owner_name = serializers.CharField()
    is_activated = serializers.BooleanField()
    created_at = serializers.DateTimeField()


class AuditLogSerializer(serializers.Serializer):
    """Serializer for AuditLogDTO."""

    action = serializers.CharField()
    license_key = serializers.CharField()
    product = serializers.CharField()
    changed_at = serializers.DateTimeField()
    details = serializers.CharField(allow_blank=True)
