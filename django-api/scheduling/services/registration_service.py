"""Registration service - the registration ledger.

Queue placement is never stored: every check re-reads the session's
registrations in order and compares the caller's position with the
session's places. Writes that depend on a position run in one transaction
holding the session row lock.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from accounts.domain import Caller
from scheduling.domain import Participant, Registration, RegistrationId, SessionId
from scheduling.domain.errors import (
    AlreadyRegisteredError,
    InvalidRegistrationIdError,
    InvalidSessionIdError,
    NotRegisteredError,
    QueuedRegistrationError,
    RegistrationNotFoundError,
    SessionNotFoundError,
)
from scheduling.domain.roster import Placement, place, queue_rank
from scheduling.domain.value_objects import Capacity
from scheduling.stores.interfaces import RegistrationStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RegistrationService:
    """Service for registration operations."""

    def __init__(
        self, store: RegistrationStore, clock: Callable[[], datetime] = utc_now
    ) -> None:
        self._store = store
        self._clock = clock

    def get_participants(self, caller: Caller, session_id: str) -> list[Participant]:
        """Return a session's participants in registration order.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        _, participants = self._load_participants(session_id)
        return participants

    def get_placements(self, caller: Caller, session_id: str) -> list[Placement[Participant]]:
        """Return participants with their derived main-list or queue position.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        capacity, participants = self._load_participants(session_id)
        return place(participants, capacity)

    def register(self, caller: Caller, session_id: str) -> Registration:
        """Register the caller. No capacity check: late registrants are queued on read.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            AlreadyRegisteredError: If the caller is already registered.
        """
        sid = self._parse_session_id(session_id)
        with self._store.atomic():
            if self._store.get_capacity(sid) is None:
                raise SessionNotFoundError(session_id)
            if self._store.find_registration(sid, caller.id) is not None:
                logger.warning("User %s already registered for session %s", caller.id, sid)
                raise AlreadyRegisteredError(session_id)
            registration = self._store.add_registration(sid, caller.id, self._clock())
        logger.info("User %s registered for session %s", caller.id, sid)
        return registration

    def unregister(self, caller: Caller, session_id: str) -> None:
        """Remove the caller's own registration.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            NotRegisteredError: If the caller has no registration for the session.
        """
        sid = self._parse_session_id(session_id)
        with self._store.atomic():
            if self._store.get_capacity(sid, lock=True) is None:
                raise SessionNotFoundError(session_id)
            registration = self._store.find_registration(sid, caller.id)
            if registration is None:
                raise NotRegisteredError(session_id)
            self._store.delete_registration(registration.id)
        logger.info("User %s unregistered from session %s", caller.id, sid)

    def mark_as_paid(self, caller: Caller, session_id: str) -> Registration:
        """Flag the caller's own registration as paid. Idempotent.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            NotRegisteredError: If the caller is not registered.
            QueuedRegistrationError: If the caller is in the queue.
        """
        sid = self._parse_session_id(session_id)
        with self._store.atomic():
            capacity = self._store.get_capacity(sid, lock=True)
            if capacity is None:
                raise SessionNotFoundError(session_id)

            registrations = self._store.list_registrations(sid)
            position = next(
                (i for i, r in enumerate(registrations) if r.user_id == caller.id), None
            )
            if position is None:
                raise NotRegisteredError(session_id)

            rank = queue_rank(position, capacity.value)
            if rank is not None:
                logger.warning(
                    "User %s is queued at rank %d for session %s, cannot mark paid",
                    caller.id,
                    rank,
                    sid,
                )
                raise QueuedRegistrationError(rank)

            registration = self._store.mark_paid(registrations[position].id)
            if registration is None:
                raise NotRegisteredError(session_id)
        logger.info("User %s marked session %s as paid", caller.id, sid)
        return registration

    def remove_participant(self, caller: Caller, registration_id: str) -> None:
        """Delete any user's registration. Admin only.

        Raises:
            AdminRequiredError: If the caller is not an admin.
            InvalidRegistrationIdError: If the registration_id is not a valid UUID.
            RegistrationNotFoundError: If the registration does not exist.
        """
        caller.ensure_admin()
        try:
            rid = RegistrationId.from_string(registration_id)
        except ValueError:
            raise InvalidRegistrationIdError() from None

        with self._store.atomic():
            registration = self._store.get_registration(rid)
            if registration is None:
                raise RegistrationNotFoundError(registration_id)
            self._store.get_capacity(registration.session_id, lock=True)
            if not self._store.delete_registration(rid):
                raise RegistrationNotFoundError(registration_id)
        logger.info(
            "Admin %s removed registration %s of user %s from session %s",
            caller.id,
            rid,
            registration.user_id,
            registration.session_id,
        )

    def get_registration_count(self, caller: Caller, session_id: str) -> int:
        """Return the number of registrations for a session.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        sid = self._parse_session_id(session_id)
        if self._store.get_capacity(sid) is None:
            raise SessionNotFoundError(session_id)
        return self._store.count_registrations(sid)

    def _load_participants(self, session_id: str) -> tuple[Capacity, list[Participant]]:
        sid = self._parse_session_id(session_id)
        capacity = self._store.get_capacity(sid)
        if capacity is None:
            raise SessionNotFoundError(session_id)
        return capacity, self._store.list_participants(sid)

    @staticmethod
    def _parse_session_id(session_id: str) -> SessionId:
        try:
            return SessionId.from_string(session_id)
        except ValueError:
            raise InvalidSessionIdError() from None
