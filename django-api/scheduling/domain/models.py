"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in scheduling/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from accounts.domain import UserId
from scheduling.domain.value_objects import (
    Capacity,
    Duration,
    Money,
    PaymentLink,
    RegistrationId,
    SessionId,
    TimeOfDay,
)


@dataclass(frozen=True)
class SessionDetails:
    """The admin-editable fields of a session."""

    date: date
    time: TimeOfDay
    duration: Duration
    cost: Money
    payment_link: PaymentLink | None
    places: Capacity


@dataclass(frozen=True)
class Session:
    """Domain representation of a Session."""

    id: SessionId
    date: date
    time: TimeOfDay
    duration: Duration
    cost: Money
    payment_link: PaymentLink | None
    places: Capacity
    created_by: UserId
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration."""

    id: RegistrationId
    session_id: SessionId
    user_id: UserId
    has_paid: bool
    registered_at: datetime


@dataclass(frozen=True)
class ParticipantProfile:
    """The public part of a registrant's account."""

    id: UserId
    first_name: str
    last_name: str
    email: str
    image: str | None


@dataclass(frozen=True)
class Participant:
    """A registration joined with its registrant's profile."""

    registration: Registration
    user: ParticipantProfile
