"""Django signals for registration audit logging.

post_delete also fires for registrations removed by a session's cascade,
so every removal is logged whatever its origin.
"""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from scheduling.models import Registration, Session

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Registration)
def log_registration_removed(sender, instance, **kwargs):
    """Log a registration leaving a session."""
    logger.info(
        "Registration %s of user %s removed from session %s",
        instance.pk,
        instance.user_id,
        instance.session_id,
    )


@receiver(post_save, sender=Session)
def log_session_saved(sender, instance, created, **kwargs):
    """Log session creation and edits, including those made in the Django admin."""
    logger.info(
        "Session %s %s (%s %s, %d places)",
        instance.pk,
        "created" if created else "saved",
        instance.date,
        instance.time,
        instance.places,
    )
