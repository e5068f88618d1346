"""Serializers for account requests and responses."""

from rest_framework import serializers


class AccountSerializer(serializers.Serializer):
    """Serializer for Account domain model."""

    id = serializers.UUIDField(source="id.value")
    username = serializers.CharField()
    email = serializers.EmailField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    image = serializers.URLField(allow_null=True)
    is_admin = serializers.BooleanField()
    is_approved = serializers.BooleanField()
    profile_completed = serializers.BooleanField()
    date_joined = serializers.DateTimeField()


class CompleteProfileSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=150, trim_whitespace=False, allow_blank=True)
    last_name = serializers.CharField(max_length=150, trim_whitespace=False, allow_blank=True)


class SetAdminSerializer(serializers.Serializer):
    is_admin = serializers.BooleanField()
