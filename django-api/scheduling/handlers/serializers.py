"""Serializers for transforming requests and domain models.

Input serializers check format only; domain invariants are enforced again by
the value objects the services build.
"""

from rest_framework import serializers

from scheduling.services.session_service import SessionScope


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model."""

    id = serializers.UUIDField(source="id.value")
    date = serializers.DateField()
    time = serializers.CharField(source="time.value")
    duration_minutes = serializers.IntegerField(source="duration.minutes")
    cost = serializers.DecimalField(source="cost.amount", max_digits=10, decimal_places=2)
    payment_link = serializers.SerializerMethodField()
    places = serializers.IntegerField(source="places.value")
    created_by = serializers.UUIDField(source="created_by.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_payment_link(self, session) -> str | None:
        return session.payment_link.url if session.payment_link else None


class SessionInputSerializer(serializers.Serializer):
    """Validates session fields for create and (with partial=True) update."""

    date = serializers.DateField()
    time = serializers.RegexField(
        r"^\d{2}:\d{2}$", error_messages={"invalid": "Time must use the HH:MM format."}
    )
    duration_minutes = serializers.IntegerField(min_value=1)
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    payment_link = serializers.URLField(
        max_length=500, required=False, allow_blank=True, allow_null=True
    )
    places = serializers.IntegerField(min_value=1)


class SessionListQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[scope.value for scope in SessionScope])
    date = serializers.DateField(required=False)


class SessionDatesQuerySerializer(serializers.Serializer):
    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=1, max_value=9999)


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.UUIDField(source="id.value")
    session_id = serializers.UUIDField(source="session_id.value")
    user_id = serializers.UUIDField(source="user_id.value")
    has_paid = serializers.BooleanField()
    registered_at = serializers.DateTimeField()


class ParticipantProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.CharField()
    image = serializers.CharField(allow_null=True)


class PlacementSerializer(serializers.Serializer):
    """A participant with its derived position in the session."""

    id = serializers.UUIDField(source="entry.registration.id.value")
    user_id = serializers.UUIDField(source="entry.registration.user_id.value")
    has_paid = serializers.BooleanField(source="entry.registration.has_paid")
    registered_at = serializers.DateTimeField(source="entry.registration.registered_at")
    user = ParticipantProfileSerializer(source="entry.user")
    position = serializers.IntegerField()
    status = serializers.SerializerMethodField()
    queue_rank = serializers.IntegerField(allow_null=True)

    def get_status(self, placement) -> str:
        return "main" if placement.in_main_list else "queued"
