from django.urls import path

from scheduling.handlers import (
    MarkPaidView,
    ParticipantListView,
    RegistrationCountView,
    RegistrationDetailView,
    RegistrationView,
    SessionDatesView,
    SessionDetailView,
    SessionListView,
)

urlpatterns = [
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/dates", SessionDatesView.as_view(), name="session-dates"),
    path("sessions/<str:session_id>", SessionDetailView.as_view(), name="session-detail"),
    path(
        "sessions/<str:session_id>/participants",
        ParticipantListView.as_view(),
        name="participant-list",
    ),
    path(
        "sessions/<str:session_id>/registrations/count",
        RegistrationCountView.as_view(),
        name="registration-count",
    ),
    path(
        "sessions/<str:session_id>/registration",
        RegistrationView.as_view(),
        name="registration",
    ),
    path(
        "sessions/<str:session_id>/registration/paid",
        MarkPaidView.as_view(),
        name="registration-paid",
    ),
    path(
        "registrations/<str:registration_id>",
        RegistrationDetailView.as_view(),
        name="registration-detail",
    ),
]
