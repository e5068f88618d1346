"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Build the Caller and pass it to services
- Never contain business logic
- Leave domain error mapping to the project exception handler
"""

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.caller import caller_from_request
from scheduling.handlers.serializers import (
    PlacementSerializer,
    RegistrationSerializer,
    SessionDatesQuerySerializer,
    SessionInputSerializer,
    SessionListQuerySerializer,
    SessionSerializer,
)
from scheduling.services.registration_service import RegistrationService
from scheduling.services.session_service import SessionScope, SessionService
from scheduling.stores.django_store import DjangoRegistrationStore, DjangoSessionStore


def get_session_service() -> SessionService:
    return SessionService(DjangoSessionStore(), today=timezone.localdate)


def get_registration_service() -> RegistrationService:
    return RegistrationService(DjangoRegistrationStore(), clock=timezone.now)


class SessionListView(APIView):
    """Handler for GET/POST /api/sessions"""

    def get(self, request: Request) -> Response:
        caller = caller_from_request(request)
        query = SessionListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        sessions = get_session_service().list_sessions(
            caller,
            SessionScope(query.validated_data["type"]),
            anchor_date=query.validated_data.get("date"),
        )
        return Response(SessionSerializer(sessions, many=True).data)

    def post(self, request: Request) -> Response:
        caller = caller_from_request(request)
        # Admin check precedes input validation.
        caller.ensure_admin()
        serializer = SessionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session = get_session_service().create_session(caller, **serializer.validated_data)
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/sessions/{session_id}"""

    def get(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        session = get_session_service().get_session(caller, session_id)
        return Response(SessionSerializer(session).data)

    def patch(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        caller.ensure_admin()
        serializer = SessionInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        session = get_session_service().update_session(
            caller, session_id, **serializer.validated_data
        )
        return Response(SessionSerializer(session).data)

    def delete(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        get_session_service().delete_session(caller, session_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionDatesView(APIView):
    """Handler for GET /api/sessions/dates"""

    def get(self, request: Request) -> Response:
        caller = caller_from_request(request)
        query = SessionDatesQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        dates = get_session_service().get_session_dates(
            caller, query.validated_data["month"], query.validated_data["year"]
        )
        return Response([day.isoformat() for day in dates])


class ParticipantListView(APIView):
    """Handler for GET /api/sessions/{session_id}/participants"""

    def get(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        placements = get_registration_service().get_placements(caller, session_id)
        return Response(PlacementSerializer(placements, many=True).data)


class RegistrationCountView(APIView):
    """Handler for GET /api/sessions/{session_id}/registrations/count"""

    def get(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        count = get_registration_service().get_registration_count(caller, session_id)
        return Response({"count": count})


class RegistrationView(APIView):
    """Handler for POST/DELETE /api/sessions/{session_id}/registration"""

    def post(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        registration = get_registration_service().register(caller, session_id)
        return Response(
            RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED
        )

    def delete(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        get_registration_service().unregister(caller, session_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MarkPaidView(APIView):
    """Handler for POST /api/sessions/{session_id}/registration/paid"""

    def post(self, request: Request, session_id: str) -> Response:
        caller = caller_from_request(request)
        registration = get_registration_service().mark_as_paid(caller, session_id)
        return Response(RegistrationSerializer(registration).data)


class RegistrationDetailView(APIView):
    """Handler for DELETE /api/registrations/{registration_id}"""

    def delete(self, request: Request, registration_id: str) -> Response:
        caller = caller_from_request(request)
        get_registration_service().remove_participant(caller, registration_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
