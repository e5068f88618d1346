from django.urls import path

from accounts.handlers import (
    AccountListView,
    ApproveAccountView,
    CompleteProfileView,
    ProfileView,
    RevokeAccountView,
    SetAdminView,
)

urlpatterns = [
    path("me", ProfileView.as_view(), name="profile"),
    path("me/profile", CompleteProfileView.as_view(), name="complete-profile"),
    path("accounts", AccountListView.as_view(), name="account-list"),
    path(
        "accounts/<str:user_id>/approve",
        ApproveAccountView.as_view(),
        name="account-approve",
    ),
    path(
        "accounts/<str:user_id>/revoke",
        RevokeAccountView.as_view(),
        name="account-revoke",
    ),
    path("accounts/<str:user_id>/admin", SetAdminView.as_view(), name="account-admin"),
]
