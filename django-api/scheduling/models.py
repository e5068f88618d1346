"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
The uniqueness, check and cascade rules below are the authoritative guards;
services only pre-check them to return friendlier errors.
"""

import uuid

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone


class Session(models.Model):
    """Persistence model for badminton sessions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField()
    time = models.CharField(max_length=5)
    duration_minutes = models.PositiveIntegerField()
    cost = models.DecimalField(max_digits=10, decimal_places=2)
    payment_link = models.URLField(max_length=500, blank=True, null=True)
    places = models.PositiveIntegerField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_sessions",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "time"]
        indexes = [
            models.Index(fields=["date"], name="session_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(places__gte=1), name="session_places_positive"),
            models.CheckConstraint(
                condition=Q(duration_minutes__gt=0), name="session_duration_positive"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.date} {self.time}"


class Registration(models.Model):
    """Persistence model for session registrations."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        Session, on_delete=models.CASCADE, related_name="registrations"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="registrations",
    )
    has_paid = models.BooleanField(default=False)
    registered_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["registered_at", "id"]
        indexes = [
            models.Index(fields=["session", "registered_at"], name="registration_order_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["session", "user"], name="unique_registration_per_user"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.session}"
