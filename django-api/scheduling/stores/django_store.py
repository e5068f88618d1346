"""Django ORM implementations of the scheduling stores."""

from contextlib import AbstractContextManager
from datetime import date, datetime

from django.db import IntegrityError, transaction

from accounts.domain import UserId
from scheduling import models
from scheduling.domain import (
    Capacity,
    Duration,
    Money,
    Participant,
    ParticipantProfile,
    PaymentLink,
    Registration,
    RegistrationId,
    Session,
    SessionDetails,
    SessionId,
    TimeOfDay,
)
from scheduling.domain.errors import AlreadyRegisteredError
from scheduling.stores.interfaces import RegistrationStore, SessionStore


def to_session(row: models.Session) -> Session:
    return Session(
        id=SessionId(row.pk),
        date=row.date,
        time=TimeOfDay(row.time),
        duration=Duration(row.duration_minutes),
        cost=Money(row.cost),
        payment_link=PaymentLink.parse(row.payment_link),
        places=Capacity(row.places),
        created_by=UserId(row.created_by_id),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_registration(row: models.Registration) -> Registration:
    return Registration(
        id=RegistrationId(row.pk),
        session_id=SessionId(row.session_id),
        user_id=UserId(row.user_id),
        has_paid=row.has_paid,
        registered_at=row.registered_at,
    )


def to_participant(row: models.Registration) -> Participant:
    user = row.user
    return Participant(
        registration=to_registration(row),
        user=ParticipantProfile(
            id=UserId(user.pk),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            image=user.image,
        ),
    )


def to_columns(details: SessionDetails | dict) -> dict:
    """Translate domain session fields to model column values."""
    fields = details if isinstance(details, dict) else vars(details)
    columns = {}
    for name, value in fields.items():
        if name == "time":
            columns["time"] = value.value
        elif name == "duration":
            columns["duration_minutes"] = value.minutes
        elif name == "cost":
            columns["cost"] = value.amount
        elif name == "payment_link":
            columns["payment_link"] = value.url if value is not None else None
        elif name == "places":
            columns["places"] = value.value
        else:
            columns[name] = value
    return columns


class DjangoSessionStore(SessionStore):
    """Relational session store using Django ORM."""

    def list_sessions(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        descending: bool = False,
    ) -> list[Session]:
        queryset = models.Session.objects.all()
        if date_from is not None:
            queryset = queryset.filter(date__gte=date_from)
        if date_to is not None:
            queryset = queryset.filter(date__lte=date_to)
        ordering = ["-date", "-time"] if descending else ["date", "time"]
        return [to_session(row) for row in queryset.order_by(*ordering)]

    def get_session(self, session_id: SessionId) -> Session | None:
        row = models.Session.objects.filter(pk=session_id.value).first()
        return to_session(row) if row is not None else None

    def create_session(self, details: SessionDetails, created_by: UserId) -> Session:
        row = models.Session.objects.create(
            created_by_id=created_by.value, **to_columns(details)
        )
        return to_session(row)

    def update_session(self, session_id: SessionId, changes: dict) -> Session | None:
        row = models.Session.objects.filter(pk=session_id.value).first()
        if row is None:
            return None
        columns = to_columns(changes)
        for name, value in columns.items():
            setattr(row, name, value)
        row.save(update_fields=[*columns, "updated_at"])
        return to_session(row)

    def delete_session(self, session_id: SessionId) -> bool:
        deleted, _ = models.Session.objects.filter(pk=session_id.value).delete()
        return deleted > 0

    def list_session_dates(self, date_from: date, date_to: date) -> list[date]:
        return list(
            models.Session.objects.filter(date__gte=date_from, date__lte=date_to)
            .order_by("date")
            .values_list("date", flat=True)
        )


class DjangoRegistrationStore(RegistrationStore):
    """Relational registration store using Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def get_capacity(self, session_id: SessionId, *, lock: bool = False) -> Capacity | None:
        queryset = models.Session.objects.filter(pk=session_id.value)
        if lock:
            queryset = queryset.select_for_update()
        places = queryset.values_list("places", flat=True).first()
        return Capacity(places) if places is not None else None

    def list_registrations(self, session_id: SessionId) -> list[Registration]:
        queryset = models.Registration.objects.filter(session_id=session_id.value)
        return [to_registration(row) for row in queryset.order_by("registered_at", "id")]

    def list_participants(self, session_id: SessionId) -> list[Participant]:
        queryset = (
            models.Registration.objects.filter(session_id=session_id.value)
            .select_related("user")
            .order_by("registered_at", "id")
        )
        return [to_participant(row) for row in queryset]

    def get_registration(self, registration_id: RegistrationId) -> Registration | None:
        row = models.Registration.objects.filter(pk=registration_id.value).first()
        return to_registration(row) if row is not None else None

    def find_registration(self, session_id: SessionId, user_id: UserId) -> Registration | None:
        row = models.Registration.objects.filter(
            session_id=session_id.value, user_id=user_id.value
        ).first()
        return to_registration(row) if row is not None else None

    def add_registration(
        self, session_id: SessionId, user_id: UserId, registered_at: datetime
    ) -> Registration:
        try:
            # Savepoint so a constraint violation leaves any outer transaction usable.
            with transaction.atomic():
                row = models.Registration.objects.create(
                    session_id=session_id.value,
                    user_id=user_id.value,
                    registered_at=registered_at,
                )
        except IntegrityError:
            raise AlreadyRegisteredError(str(session_id)) from None
        return to_registration(row)

    def delete_registration(self, registration_id: RegistrationId) -> bool:
        deleted, _ = models.Registration.objects.filter(pk=registration_id.value).delete()
        return deleted > 0

    def mark_paid(self, registration_id: RegistrationId) -> Registration | None:
        updated = models.Registration.objects.filter(pk=registration_id.value).update(
            has_paid=True
        )
        if not updated:
            return None
        return self.get_registration(registration_id)

    def count_registrations(self, session_id: SessionId) -> int:
        return models.Registration.objects.filter(session_id=session_id.value).count()
