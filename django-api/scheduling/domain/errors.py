"""Domain error codes for the scheduling module."""

from enum import Enum

from core.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    NOT_REGISTERED = "NOT_REGISTERED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    QUEUED_REGISTRATION = "QUEUED_REGISTRATION"
    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    INVALID_REGISTRATION_ID = "INVALID_REGISTRATION_ID"
    INVALID_SESSION_FIELD = "INVALID_SESSION_FIELD"


class SessionNotFoundError(DomainError):
    """Raised when a session is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class RegistrationNotFoundError(DomainError):
    """Raised when a registration ID does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, registration_id: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Registration not found",
        )
        self.registration_id = registration_id


class NotRegisteredError(DomainError):
    """Raised when the caller has no registration for the session."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="You are not registered for this session",
        )
        self.session_id = session_id


class AlreadyRegisteredError(DomainError):
    """Raised when the caller is already registered for the session."""

    kind = ErrorKind.CONFLICT

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="You are already registered for this session",
        )
        self.session_id = session_id


class QueuedRegistrationError(DomainError):
    """Raised when a queued participant tries to mark themselves as paid."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, queue_rank: int) -> None:
        super().__init__(
            code=ErrorCode.QUEUED_REGISTRATION,
            message="You are in the queue and cannot mark as paid yet",
        )
        self.queue_rank = queue_rank


class InvalidSessionIdError(DomainError):
    """Raised when a session ID is invalid."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_ID,
            message="Invalid session ID format",
        )


class InvalidRegistrationIdError(DomainError):
    """Raised when a registration ID is invalid."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REGISTRATION_ID,
            message="Invalid registration ID format",
        )


class InvalidSessionFieldError(DomainError):
    """Raised when a session field violates a domain invariant."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_FIELD,
            message=f"{field}: {reason}",
        )
        self.field = field
