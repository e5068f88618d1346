"""Domain models for accounts.

Django's user model is in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.errors import AccountNotApprovedError, AdminRequiredError
from accounts.domain.value_objects import UserId


@dataclass(frozen=True)
class Account:
    """Domain representation of a user account."""

    id: UserId
    username: str
    email: str
    first_name: str
    last_name: str
    image: str | None
    is_admin: bool
    is_approved: bool
    profile_completed: bool
    date_joined: datetime


@dataclass(frozen=True)
class Caller:
    """The authenticated user on whose behalf an operation runs.

    Built by the handler layer and passed explicitly into every service call.
    """

    id: UserId
    is_admin: bool = False
    is_approved: bool = False

    def ensure_admin(self) -> None:
        if not self.is_admin:
            raise AdminRequiredError()

    def ensure_member(self) -> None:
        """Admins are always members; everyone else needs approval."""
        if not (self.is_admin or self.is_approved):
            raise AccountNotApprovedError()
