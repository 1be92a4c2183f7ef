"""
Serializers for account API endpoints.
"""

from rest_framework import serializers


class RegisterRequestSerializer(serializers.Serializer):
    """Serializer for register request."""

    username = serializers.CharField(required=True, max_length=150)
    email = serializers.EmailField(required=True, max_length=255)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)
    password_repeat = serializers.CharField(required=True, write_only=True, trim_whitespace=False)


class LoginRequestSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.CharField(required=True, max_length=255)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)


class AccountSerializer(serializers.Serializer):
    """Serializer for public account fields."""

    id = serializers.UUIDField()
    username = serializers.CharField()
    email = serializers.CharField()


class RegisterResponseSerializer(serializers.Serializer):
    """Serializer for register response."""

    message = serializers.CharField()
    user = AccountSerializer()


class LoginResponseSerializer(serializers.Serializer):
    """Serializer for login response."""

    message = serializers.CharField()
    token = serializers.CharField()
    user = AccountSerializer()
