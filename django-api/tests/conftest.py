"""Pytest configuration and shared fixtures."""

import contextlib
import itertools
import uuid
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from accounts.domain import Account, Caller, UserId
from accounts.stores.interfaces import AccountStore
from scheduling.domain import (
    Capacity,
    Duration,
    Money,
    Participant,
    ParticipantProfile,
    Registration,
    RegistrationId,
    Session,
    SessionDetails,
    SessionId,
    TimeOfDay,
)
from scheduling.domain.errors import AlreadyRegisteredError
from scheduling.stores.interfaces import RegistrationStore, SessionStore

START = datetime(2026, 3, 1, 18, 0, tzinfo=timezone.utc)


class TickingClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime = START) -> None:
        self._ticks = itertools.count()
        self._start = start

    def __call__(self) -> datetime:
        return self._start + timedelta(seconds=next(self._ticks))


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self.sessions: dict[SessionId, Session] = {}

    def list_sessions(self, *, date_from=None, date_to=None, descending=False):
        rows = [
            s
            for s in self.sessions.values()
            if (date_from is None or s.date >= date_from)
            and (date_to is None or s.date <= date_to)
        ]
        return sorted(rows, key=lambda s: (s.date, s.time.value), reverse=descending)

    def get_session(self, session_id):
        return self.sessions.get(session_id)

    def create_session(self, details: SessionDetails, created_by: UserId) -> Session:
        session = Session(
            id=SessionId(uuid.uuid4()),
            created_by=created_by,
            created_at=START,
            updated_at=START,
            **vars(details),
        )
        self.sessions[session.id] = session
        return session

    def update_session(self, session_id, changes):
        session = self.sessions.get(session_id)
        if session is None:
            return None
        fields = {**vars(session), **changes}
        self.sessions[session_id] = updated = Session(**fields)
        return updated

    def delete_session(self, session_id):
        return self.sessions.pop(session_id, None) is not None

    def list_session_dates(self, date_from, date_to):
        return sorted(
            s.date for s in self.sessions.values() if date_from <= s.date <= date_to
        )


class InMemoryRegistrationStore(RegistrationStore):
    def __init__(self) -> None:
        self.capacities: dict[SessionId, Capacity] = {}
        self.registrations: dict[RegistrationId, Registration] = {}
        self.profiles: dict[UserId, ParticipantProfile] = {}

    def add_session(self, places: int) -> SessionId:
        session_id = SessionId(uuid.uuid4())
        self.capacities[session_id] = Capacity(places)
        return session_id

    def atomic(self):
        return contextlib.nullcontext()

    def get_capacity(self, session_id, *, lock=False):
        return self.capacities.get(session_id)

    def list_registrations(self, session_id):
        rows = [r for r in self.registrations.values() if r.session_id == session_id]
        return sorted(rows, key=lambda r: (r.registered_at, str(r.id)))

    def list_participants(self, session_id):
        return [
            Participant(
                registration=r,
                user=self.profiles.get(
                    r.user_id, ParticipantProfile(r.user_id, "", "", "", None)
                ),
            )
            for r in self.list_registrations(session_id)
        ]

    def get_registration(self, registration_id):
        return self.registrations.get(registration_id)

    def find_registration(self, session_id, user_id):
        return next(
            (
                r
                for r in self.registrations.values()
                if r.session_id == session_id and r.user_id == user_id
            ),
            None,
        )

    def add_registration(self, session_id, user_id, registered_at):
        if self.find_registration(session_id, user_id) is not None:
            raise AlreadyRegisteredError(str(session_id))
        registration = Registration(
            id=RegistrationId(uuid.uuid4()),
            session_id=session_id,
            user_id=user_id,
            has_paid=False,
            registered_at=registered_at,
        )
        self.registrations[registration.id] = registration
        return registration

    def delete_registration(self, registration_id):
        return self.registrations.pop(registration_id, None) is not None

    def mark_paid(self, registration_id):
        registration = self.registrations.get(registration_id)
        if registration is None:
            return None
        self.registrations[registration_id] = paid = Registration(
            **{**vars(registration), "has_paid": True}
        )
        return paid

    def count_registrations(self, session_id):
        return len(self.list_registrations(session_id))


class InMemoryAccountStore(AccountStore):
    def __init__(self) -> None:
        self.accounts: dict[UserId, Account] = {}

    def add(self, **overrides) -> Account:
        user_id = UserId(uuid.uuid4())
        fields = {
            "id": user_id,
            "username": f"user-{user_id.value.hex[:8]}",
            "email": f"{user_id.value.hex[:8]}@example.com",
            "first_name": "",
            "last_name": "",
            "image": None,
            "is_admin": False,
            "is_approved": False,
            "profile_completed": False,
            "date_joined": START + timedelta(minutes=len(self.accounts)),
            **overrides,
        }
        account = Account(**fields)
        self.accounts[account.id] = account
        return account

    def list_accounts(self):
        return sorted(self.accounts.values(), key=lambda a: a.date_joined)

    def get_account(self, user_id):
        return self.accounts.get(user_id)

    def update_account(self, user_id, **changes):
        account = self.accounts.get(user_id)
        if account is None:
            return None
        self.accounts[user_id] = updated = Account(**{**vars(account), **changes})
        return updated


# --- Domain helpers ---


def make_caller(*, is_admin: bool = False, is_approved: bool = True) -> Caller:
    return Caller(id=UserId(uuid.uuid4()), is_admin=is_admin, is_approved=is_approved)


@pytest.fixture
def admin_caller() -> Caller:
    return make_caller(is_admin=True)


@pytest.fixture
def member_caller() -> Caller:
    return make_caller()


@pytest.fixture
def callers():
    """Factory for approved non-admin callers."""
    return make_caller


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def registration_store() -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore()


@pytest.fixture
def account_store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def session_details():
    def build(**overrides) -> SessionDetails:
        fields = {
            "date": date(2026, 3, 14),
            "time": TimeOfDay("19:30"),
            "duration": Duration(90),
            "cost": Money(Decimal("8.50")),
            "payment_link": None,
            "places": Capacity(8),
            **overrides,
        }
        return SessionDetails(**fields)

    return build


# --- Database and HTTP helpers ---


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(django_user_model):
    counter = itertools.count()

    def create(**overrides):
        n = next(counter)
        fields = {
            "username": f"player{n}",
            "email": f"player{n}@example.com",
            "first_name": f"First{n}",
            "last_name": f"Last{n}",
            "is_approved": True,
            **overrides,
        }
        return django_user_model.objects.create_user(password="shuttle-cock-42", **fields)

    return create


@pytest.fixture
def admin_user(make_user):
    return make_user(username="admin", email="admin@example.com", is_admin=True)


@pytest.fixture
def client_for():
    """Return an APIClient authenticated as the given user."""

    def build(user) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return build


@pytest.fixture
def admin_client(client_for, admin_user) -> APIClient:
    return client_for(admin_user)


@pytest.fixture
def make_session(admin_user):
    from scheduling.models import Session as SessionRow

    def create(**overrides):
        fields = {
            "date": date(2026, 3, 14),
            "time": "19:30",
            "duration_minutes": 90,
            "cost": Decimal("8.50"),
            "places": 8,
            "created_by": admin_user,
            **overrides,
        }
        return SessionRow.objects.create(**fields)

    return create
