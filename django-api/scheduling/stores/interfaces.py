"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date, datetime

from accounts.domain import UserId
from scheduling.domain import (
    Capacity,
    Participant,
    Registration,
    RegistrationId,
    Session,
    SessionDetails,
    SessionId,
)


class SessionStore(ABC):
    """Interface for session persistence operations."""

    @abstractmethod
    def list_sessions(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        descending: bool = False,
    ) -> list[Session]:
        """Return sessions dated within [date_from, date_to], ordered by date then time."""
        ...

    @abstractmethod
    def get_session(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def create_session(self, details: SessionDetails, created_by: UserId) -> Session:
        """Persist a new session and return it."""
        ...

    @abstractmethod
    def update_session(self, session_id: SessionId, changes: dict) -> Session | None:
        """Apply field changes and return the session, or None if not found.

        Keys are SessionDetails field names; a payment_link of None clears it.
        """
        ...

    @abstractmethod
    def delete_session(self, session_id: SessionId) -> bool:
        """Delete a session and, by cascade, its registrations. False if not found."""
        ...

    @abstractmethod
    def list_session_dates(self, date_from: date, date_to: date) -> list[date]:
        """Return one date per session dated within [date_from, date_to]."""
        ...


class RegistrationStore(ABC):
    """Interface for registration persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager running the enclosed calls in one transaction."""
        ...

    @abstractmethod
    def get_capacity(self, session_id: SessionId, *, lock: bool = False) -> Capacity | None:
        """Return the session's places, or None if the session does not exist.

        With lock set, the session row stays locked until the enclosing
        transaction ends.
        """
        ...

    @abstractmethod
    def list_registrations(self, session_id: SessionId) -> list[Registration]:
        """Return registrations ordered by registered_at ascending, then id."""
        ...

    @abstractmethod
    def list_participants(self, session_id: SessionId) -> list[Participant]:
        """Return registrations joined with user profiles, in registration order."""
        ...

    @abstractmethod
    def get_registration(self, registration_id: RegistrationId) -> Registration | None:
        """Return a registration by ID, or None if not found."""
        ...

    @abstractmethod
    def find_registration(self, session_id: SessionId, user_id: UserId) -> Registration | None:
        """Return the user's registration for the session, or None."""
        ...

    @abstractmethod
    def add_registration(
        self, session_id: SessionId, user_id: UserId, registered_at: datetime
    ) -> Registration:
        """Insert a registration.

        Raises:
            AlreadyRegisteredError: If the (session, user) pair already exists.
        """
        ...

    @abstractmethod
    def delete_registration(self, registration_id: RegistrationId) -> bool:
        """Delete a registration. False if not found."""
        ...

    @abstractmethod
    def mark_paid(self, registration_id: RegistrationId) -> Registration | None:
        """Set has_paid on a registration and return it, or None if not found."""
        ...

    @abstractmethod
    def count_registrations(self, session_id: SessionId) -> int:
        """Return the number of registrations for a session."""
        ...
