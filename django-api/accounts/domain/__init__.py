from accounts.domain.models import Account, Caller
from accounts.domain.value_objects import PersonName, UserId

__all__ = [
    "Account",
    "Caller",
    "UserId",
    "PersonName",
]
