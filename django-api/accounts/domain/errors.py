"""Domain error codes for the accounts module."""

from enum import Enum

from core.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    ACCOUNT_NOT_APPROVED = "ACCOUNT_NOT_APPROVED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_PROFILE = "INVALID_PROFILE"
    SELF_MODIFICATION = "SELF_MODIFICATION"


class AuthenticationRequiredError(DomainError):
    """Raised when a request carries no authenticated user."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Authentication required",
        )


class AdminRequiredError(DomainError):
    """Raised when a non-admin calls an admin-only operation."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Administrator rights required",
        )


class AccountNotApprovedError(DomainError):
    """Raised when an account awaiting approval calls a member operation."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_NOT_APPROVED,
            message="Your account is awaiting approval",
        )


class AccountNotFoundError(DomainError):
    """Raised when an account is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class InvalidAccountIdError(DomainError):
    """Raised when a user ID is invalid."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid user ID format",
        )


class InvalidProfileError(DomainError):
    """Raised when profile fields fail validation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PROFILE, message=message)


class SelfModificationError(DomainError):
    """Raised when an admin tries to change their own approval or admin flag."""

    kind = ErrorKind.VALIDATION

    def __init__(self, flag: str) -> None:
        super().__init__(
            code=ErrorCode.SELF_MODIFICATION,
            message=f"Cannot modify your own {flag} status",
        )
