"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import Account, UserId


class AccountStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """Return all accounts ordered by date_joined ascending."""
        ...

    @abstractmethod
    def get_account(self, user_id: UserId) -> Account | None:
        """Return an account by ID, or None if not found."""
        ...

    @abstractmethod
    def update_account(self, user_id: UserId, **changes: object) -> Account | None:
        """Apply field changes and return the updated account, or None if not found."""
        ...
