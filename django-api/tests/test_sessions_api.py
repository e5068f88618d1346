"""Integration tests for the session registry endpoints.

Run with: pytest tests/test_sessions_api.py -v
"""

import uuid
from datetime import date, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from scheduling.models import Registration, Session


def session_payload(**overrides) -> dict:
    return {
        "date": (timezone.localdate() + timedelta(days=3)).isoformat(),
        "time": "19:30",
        "duration_minutes": 90,
        "cost": "8.50",
        "payment_link": "https://pay.example.com/s/1",
        "places": 8,
        **overrides,
    }


@pytest.mark.django_db
class TestHealthCheck:
    def test_health_check_is_public(self, api_client: APIClient):
        response = api_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == "OK"


@pytest.mark.django_db
class TestSessionList:
    """Tests for GET /api/sessions"""

    def test_requires_authentication(self, api_client: APIClient):
        """Given no user, returns 401 with UNAUTHORIZED kind."""
        response = api_client.get("/api/sessions", {"type": "upcoming"})

        assert response.status_code == 401
        assert response.json()["error"]["kind"] == "UNAUTHORIZED"

    def test_unapproved_account_is_forbidden(self, client_for, make_user):
        client = client_for(make_user(is_approved=False))

        response = client.get("/api/sessions", {"type": "upcoming"})

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ACCOUNT_NOT_APPROVED"

    def test_upcoming_excludes_past_sessions(self, admin_client, make_session):
        """Sessions before today are not upcoming; today's are, ascending."""
        today = timezone.localdate()
        make_session(date=today - timedelta(days=1))
        make_session(date=today + timedelta(days=2))
        make_session(date=today)

        response = admin_client.get("/api/sessions", {"type": "upcoming"})

        assert response.status_code == 200
        assert [s["date"] for s in response.json()] == [
            today.isoformat(),
            (today + timedelta(days=2)).isoformat(),
        ]

    def test_past_includes_today_descending(self, admin_client, make_session):
        today = timezone.localdate()
        make_session(date=today - timedelta(days=7))
        make_session(date=today)
        make_session(date=today + timedelta(days=1))

        response = admin_client.get("/api/sessions", {"type": "past"})

        assert [s["date"] for s in response.json()] == [
            today.isoformat(),
            (today - timedelta(days=7)).isoformat(),
        ]

    def test_anchor_date_filters_to_day(self, admin_client, make_session):
        day = timezone.localdate() + timedelta(days=5)
        make_session(date=day, time="20:00")
        make_session(date=day, time="18:00")
        make_session(date=day + timedelta(days=1))

        response = admin_client.get(
            "/api/sessions", {"type": "upcoming", "date": day.isoformat()}
        )

        assert [(s["date"], s["time"]) for s in response.json()] == [
            (day.isoformat(), "18:00"),
            (day.isoformat(), "20:00"),
        ]

    def test_invalid_scope(self, admin_client):
        response = admin_client.get("/api/sessions", {"type": "someday"})

        assert response.status_code == 400
        assert response.json()["error"]["kind"] == "VALIDATION"
        assert "type" in response.json()["error"]["fields"]


@pytest.mark.django_db
class TestSessionCreate:
    """Tests for POST /api/sessions"""

    def test_admin_creates_session(self, admin_client, admin_user):
        response = admin_client.post("/api/sessions", session_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["cost"] == "8.50"
        assert body["places"] == 8
        assert body["created_by"] == str(admin_user.pk)
        assert Session.objects.filter(pk=body["id"]).exists()

    def test_empty_payment_link_stored_as_null(self, admin_client):
        response = admin_client.post("/api/sessions", session_payload(payment_link=""))

        assert response.json()["payment_link"] is None
        assert Session.objects.get(pk=response.json()["id"]).payment_link is None

    def test_non_admin_is_forbidden(self, client_for, make_user):
        client = client_for(make_user())

        response = client.post("/api/sessions", session_payload())

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ADMIN_REQUIRED"
        assert Session.objects.count() == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"places": 0},
            {"duration_minutes": 0},
            {"time": "7:30"},
            {"time": "25:00"},
            {"payment_link": "not-a-url"},
        ],
    )
    def test_rejects_invalid_fields(self, admin_client, overrides):
        response = admin_client.post("/api/sessions", session_payload(**overrides))

        assert response.status_code == 400
        assert response.json()["error"]["kind"] == "VALIDATION"
        assert Session.objects.count() == 0


@pytest.mark.django_db
class TestSessionDetail:
    """Tests for GET/PATCH/DELETE /api/sessions/{id}"""

    def test_get_session(self, admin_client, make_session):
        row = make_session(places=12)

        response = admin_client.get(f"/api/sessions/{row.pk}")

        assert response.status_code == 200
        assert response.json()["places"] == 12

    def test_get_session_not_found(self, admin_client):
        response = admin_client.get(f"/api/sessions/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"

    def test_get_session_invalid_id_format(self, admin_client):
        response = admin_client.get("/api/sessions/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SESSION_ID"

    def test_partial_update(self, admin_client, make_session):
        row = make_session(places=8, payment_link="https://pay.example.com/x")

        response = admin_client.patch(f"/api/sessions/{row.pk}", {"places": 10})

        assert response.status_code == 200
        row.refresh_from_db()
        assert row.places == 10
        assert row.payment_link == "https://pay.example.com/x"

    def test_update_clears_payment_link(self, admin_client, make_session):
        row = make_session(payment_link="https://pay.example.com/x")

        admin_client.patch(f"/api/sessions/{row.pk}", {"payment_link": ""})

        row.refresh_from_db()
        assert row.payment_link is None

    def test_update_not_found(self, admin_client):
        response = admin_client.patch(f"/api/sessions/{uuid.uuid4()}", {"places": 3})

        assert response.status_code == 404

    def test_update_requires_admin(self, client_for, make_user, make_session):
        row = make_session()

        response = client_for(make_user()).patch(f"/api/sessions/{row.pk}", {"places": 3})

        assert response.status_code == 403

    def test_delete_cascades_to_registrations(self, admin_client, make_session, make_user):
        """Deleting a session removes its registrations; participants then 404."""
        row = make_session()
        Registration.objects.create(session=row, user=make_user())
        Registration.objects.create(session=row, user=make_user())

        response = admin_client.delete(f"/api/sessions/{row.pk}")

        assert response.status_code == 204
        assert Registration.objects.count() == 0
        assert admin_client.get(f"/api/sessions/{row.pk}/participants").status_code == 404

    def test_delete_not_found(self, admin_client):
        response = admin_client.delete(f"/api/sessions/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_delete_requires_admin(self, client_for, make_user, make_session):
        row = make_session()

        response = client_for(make_user()).delete(f"/api/sessions/{row.pk}")

        assert response.status_code == 403
        assert Session.objects.filter(pk=row.pk).exists()


@pytest.mark.django_db
class TestSessionDates:
    """Tests for GET /api/sessions/dates"""

    def test_dates_within_month(self, admin_client, make_session):
        make_session(date=date(2026, 2, 28))
        make_session(date=date(2026, 3, 1))
        make_session(date=date(2026, 3, 1))
        make_session(date=date(2026, 3, 31))
        make_session(date=date(2026, 4, 1))

        response = admin_client.get("/api/sessions/dates", {"month": 3, "year": 2026})

        assert response.status_code == 200
        assert response.json() == ["2026-03-01", "2026-03-01", "2026-03-31"]

    def test_month_out_of_range(self, admin_client):
        response = admin_client.get("/api/sessions/dates", {"month": 0, "year": 2026})

        assert response.status_code == 400
