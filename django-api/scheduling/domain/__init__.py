from scheduling.domain.models import (
    Participant,
    ParticipantProfile,
    Registration,
    Session,
    SessionDetails,
)
from scheduling.domain.value_objects import (
    Capacity,
    Duration,
    Money,
    PaymentLink,
    RegistrationId,
    SessionId,
    TimeOfDay,
)

__all__ = [
    "Session",
    "SessionDetails",
    "Registration",
    "Participant",
    "ParticipantProfile",
    "SessionId",
    "RegistrationId",
    "Money",
    "Capacity",
    "Duration",
    "TimeOfDay",
    "PaymentLink",
]
