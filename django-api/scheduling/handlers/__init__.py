from scheduling.handlers.views import (
    MarkPaidView,
    ParticipantListView,
    RegistrationCountView,
    RegistrationDetailView,
    RegistrationView,
    SessionDatesView,
    SessionDetailView,
    SessionListView,
)

__all__ = [
    "MarkPaidView",
    "ParticipantListView",
    "RegistrationCountView",
    "RegistrationDetailView",
    "RegistrationView",
    "SessionDatesView",
    "SessionDetailView",
    "SessionListView",
]
