"""Django ORM models (persistence layer).

The user record is created by the identity provider's sign-in flow; this
service reads it and manages the approval and admin flags.
"""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Persistence model for user accounts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    image = models.URLField(max_length=500, blank=True, null=True)
    is_admin = models.BooleanField(default=False)
    is_approved = models.BooleanField(default=False)
    profile_completed = models.BooleanField(default=False)

    class Meta:
        ordering = ["date_joined"]

    def __str__(self) -> str:
        full_name = self.get_full_name()
        return full_name or self.email or self.username
