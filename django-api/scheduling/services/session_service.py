"""Session service - the session registry.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import calendar
import logging
from collections.abc import Callable
from datetime import date
from enum import Enum

from accounts.domain import Caller
from scheduling.domain import (
    Capacity,
    Duration,
    Money,
    PaymentLink,
    Session,
    SessionDetails,
    SessionId,
    TimeOfDay,
)
from scheduling.domain.errors import (
    InvalidSessionFieldError,
    InvalidSessionIdError,
    SessionNotFoundError,
)
from scheduling.stores.interfaces import SessionStore

logger = logging.getLogger(__name__)


class SessionScope(Enum):
    UPCOMING = "upcoming"
    PAST = "past"


# Raw input name -> (domain field name, value object factory)
FIELD_PARSERS: dict[str, tuple[str, Callable]] = {
    "date": ("date", lambda value: value),
    "time": ("time", TimeOfDay),
    "duration_minutes": ("duration", Duration),
    "cost": ("cost", Money),
    "payment_link": ("payment_link", PaymentLink.parse),
    "places": ("places", Capacity),
}


def parse_session_fields(raw: dict) -> dict:
    """Convert raw input values to domain field values.

    Raises:
        InvalidSessionFieldError: On an unknown field or a violated invariant.
    """
    fields = {}
    for name, value in raw.items():
        if name not in FIELD_PARSERS:
            raise InvalidSessionFieldError(name, "Unknown field")
        field_name, parser = FIELD_PARSERS[name]
        try:
            fields[field_name] = parser(value)
        except (TypeError, ValueError) as exc:
            raise InvalidSessionFieldError(name, str(exc)) from None
    return fields


class SessionService:
    """Service for session registry operations."""

    def __init__(self, store: SessionStore, today: Callable[[], date] = date.today) -> None:
        self._store = store
        self._today = today

    def list_sessions(
        self,
        caller: Caller,
        scope: SessionScope,
        anchor_date: date | None = None,
    ) -> list[Session]:
        """Return upcoming sessions ascending or past sessions descending.

        Today's sessions count as both upcoming and past. An anchor date
        further restricts the result to that day.
        """
        today = self._today()
        if scope is SessionScope.UPCOMING:
            date_from, date_to = today, None
        else:
            date_from, date_to = None, today

        if anchor_date is not None:
            date_from = anchor_date if date_from is None else max(date_from, anchor_date)
            date_to = anchor_date if date_to is None else min(date_to, anchor_date)
            if date_from > date_to:
                return []

        return self._store.list_sessions(
            date_from=date_from,
            date_to=date_to,
            descending=scope is SessionScope.PAST,
        )

    def get_session(self, caller: Caller, session_id: str) -> Session:
        """Return a session by ID.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        session = self._store.get_session(self._parse_id(session_id))
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def create_session(self, caller: Caller, **raw: object) -> Session:
        """Create a session owned by the caller.

        Raises:
            AdminRequiredError: If the caller is not an admin.
            InvalidSessionFieldError: If a field is missing or invalid.
        """
        caller.ensure_admin()
        fields = parse_session_fields(raw)
        fields.setdefault("payment_link", None)
        missing = [name for name in FIELD_PARSERS if FIELD_PARSERS[name][0] not in fields]
        if missing:
            raise InvalidSessionFieldError(missing[0], "This field is required")

        session = self._store.create_session(SessionDetails(**fields), created_by=caller.id)
        logger.info("Session %s on %s created by %s", session.id, session.date, caller.id)
        return session

    def update_session(self, caller: Caller, session_id: str, **raw: object) -> Session:
        """Apply the supplied fields to a session. An empty payment link clears it.

        Raises:
            AdminRequiredError: If the caller is not an admin.
            InvalidSessionIdError: If the session_id is not a valid UUID.
            InvalidSessionFieldError: If a supplied field is invalid.
            SessionNotFoundError: If the session does not exist.
        """
        caller.ensure_admin()
        sid = self._parse_id(session_id)
        changes = parse_session_fields(raw)

        session = self._store.update_session(sid, changes)
        if session is None:
            raise SessionNotFoundError(session_id)
        logger.info("Session %s updated by %s: %s", sid, caller.id, sorted(changes))
        return session

    def delete_session(self, caller: Caller, session_id: str) -> None:
        """Delete a session; its registrations go with it.

        Raises:
            AdminRequiredError: If the caller is not an admin.
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        caller.ensure_admin()
        sid = self._parse_id(session_id)
        if not self._store.delete_session(sid):
            raise SessionNotFoundError(session_id)
        logger.info("Session %s deleted by %s", sid, caller.id)

    def get_session_dates(self, caller: Caller, month: int, year: int) -> list[date]:
        """Return one date per session in the given month (1-12), duplicates kept."""
        if not 1 <= month <= 12:
            raise InvalidSessionFieldError("month", "Month must be between 1 and 12")
        if not 1 <= year <= 9999:
            raise InvalidSessionFieldError("year", "Year is out of range")
        last_day = calendar.monthrange(year, month)[1]
        return self._store.list_session_dates(
            date(year, month, 1), date(year, month, last_day)
        )

    @staticmethod
    def _parse_id(session_id: str) -> SessionId:
        try:
            return SessionId.from_string(session_id)
        except ValueError:
            raise InvalidSessionIdError() from None
