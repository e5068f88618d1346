from accounts.handlers.views import (
    AccountListView,
    ApproveAccountView,
    CompleteProfileView,
    ProfileView,
    RevokeAccountView,
    SetAdminView,
)

__all__ = [
    "AccountListView",
    "ApproveAccountView",
    "CompleteProfileView",
    "ProfileView",
    "RevokeAccountView",
    "SetAdminView",
]
