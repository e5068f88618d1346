"""Django ORM implementation of the AccountStore."""

from accounts.domain import Account, UserId
from accounts.models import User
from accounts.stores.interfaces import AccountStore


def to_account(user: User) -> Account:
    return Account(
        id=UserId(user.pk),
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        image=user.image,
        is_admin=user.is_admin,
        is_approved=user.is_approved,
        profile_completed=user.profile_completed,
        date_joined=user.date_joined,
    )


class DjangoAccountStore(AccountStore):
    """Account store backed by the custom Django user model."""

    def list_accounts(self) -> list[Account]:
        return [to_account(user) for user in User.objects.order_by("date_joined")]

    def get_account(self, user_id: UserId) -> Account | None:
        user = User.objects.filter(pk=user_id.value).first()
        return to_account(user) if user is not None else None

    def update_account(self, user_id: UserId, **changes: object) -> Account | None:
        updated = User.objects.filter(pk=user_id.value).update(**changes)
        if not updated:
            return None
        return self.get_account(user_id)
