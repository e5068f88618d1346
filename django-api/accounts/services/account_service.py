"""Account service - profile self-service and the admin user directory.

Admin operations never change the caller's own flags.
"""

import logging

from accounts.domain import Account, Caller, PersonName, UserId
from accounts.domain.errors import (
    AccountNotFoundError,
    InvalidAccountIdError,
    InvalidProfileError,
    SelfModificationError,
)
from accounts.stores.interfaces import AccountStore

logger = logging.getLogger(__name__)


class AccountService:
    """Service for account operations."""

    def __init__(self, store: AccountStore) -> None:
        self._store = store

    def get_profile(self, caller: Caller) -> Account:
        """Return the caller's own account.

        Raises:
            AccountNotFoundError: If the caller's account no longer exists.
        """
        account = self._store.get_account(caller.id)
        if account is None:
            raise AccountNotFoundError(str(caller.id))
        return account

    def complete_profile(self, caller: Caller, first_name: str, last_name: str) -> Account:
        """Set the caller's names and flag the profile as completed.

        Raises:
            InvalidProfileError: If a name is blank.
            AccountNotFoundError: If the caller's account no longer exists.
        """
        try:
            first = PersonName(first_name)
        except ValueError:
            raise InvalidProfileError("First name is required") from None
        try:
            last = PersonName(last_name)
        except ValueError:
            raise InvalidProfileError("Last name is required") from None

        account = self._store.update_account(
            caller.id,
            first_name=first.value,
            last_name=last.value,
            profile_completed=True,
        )
        if account is None:
            raise AccountNotFoundError(str(caller.id))
        logger.info("Profile completed for user %s", caller.id)
        return account

    def list_accounts(self, caller: Caller) -> list[Account]:
        caller.ensure_admin()
        return self._store.list_accounts()

    def approve(self, caller: Caller, user_id: str) -> Account:
        """Approve an account.

        Raises:
            AdminRequiredError: If the caller is not an admin.
            InvalidAccountIdError: If user_id is not a valid UUID.
            SelfModificationError: If the target is the caller.
            AccountNotFoundError: If the account does not exist.
        """
        return self._set_flag(caller, user_id, "approval", is_approved=True)

    def revoke(self, caller: Caller, user_id: str) -> Account:
        """Revoke an account's approval. Same errors as approve."""
        return self._set_flag(caller, user_id, "approval", is_approved=False)

    def set_admin(self, caller: Caller, user_id: str, is_admin: bool) -> Account:
        """Grant or remove admin rights. Same errors as approve."""
        return self._set_flag(caller, user_id, "admin", is_admin=is_admin)

    def _set_flag(self, caller: Caller, user_id: str, flag: str, **changes: bool) -> Account:
        caller.ensure_admin()
        target = self._parse_user_id(user_id)
        if target == caller.id:
            raise SelfModificationError(flag)

        account = self._store.update_account(target, **changes)
        if account is None:
            raise AccountNotFoundError(user_id)
        logger.info("User %s changed %s on %s", caller.id, changes, target)
        return account

    @staticmethod
    def _parse_user_id(user_id: str) -> UserId:
        try:
            return UserId.from_string(user_id)
        except ValueError:
            raise InvalidAccountIdError() from None
