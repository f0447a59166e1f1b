"""
Tests for trainer listing, session booking and session status changes.
"""
import pytest

from app.models.mongodb import Role, SessionStatus
from tests.conftest import auth_headers, make_user


@pytest.fixture
def booked(client, member, trainer):
    response = client.post(
        "/sessions",
        json={"trainerId": str(trainer.id), "duration": 2, "scheduledTime": "2026-11-02T18:00:00Z"},
        headers=auth_headers(member),
    )
    assert response.status_code == 201
    return response.json()


def test_list_verified_trainers(client, member, trainer, users):
    users.add(make_user(role=Role.TRAINER, name="Unverified", email="unverified@example.com"))

    response = client.get("/trainers", headers=auth_headers(member))

    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["Trainer"]


def test_get_trainer(client, member, trainer):
    response = client.get(f"/trainers/{trainer.id}", headers=auth_headers(member))

    assert response.status_code == 200
    assert response.json()["specialization"] == "Strength"


def test_get_unknown_trainer(client, member):
    response = client.get(f"/trainers/{member.id}", headers=auth_headers(member))

    assert response.status_code == 404
    assert response.json() == {"error": "Trainer not found"}


def test_booking_is_pending(booked, member, trainer):
    assert booked["status"] == "PENDING"
    assert booked["duration"] == 2
    assert booked["trainer"] == str(trainer.id)
    assert booked["user"] == str(member.id)
    assert booked["meetingLink"] is None


def test_booking_unknown_trainer(client, member):
    response = client.post(
        "/sessions", json={"trainerId": "665f1c2e8b3f4a0012345678"}, headers=auth_headers(member)
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Trainer not found"}


def test_trainer_cannot_book(client, trainer):
    response = client.post("/sessions", json={"trainerId": str(trainer.id)}, headers=auth_headers(trainer))

    assert response.status_code == 403


def test_accept_assigns_meeting(client, booked, trainer, sessions):
    response = client.patch(f"/sessions/{booked['_id']}/accept", headers=auth_headers(trainer))

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ACCEPTED"
    assert body["roomId"]
    assert body["meetingLink"] == f"http://localhost:5173/session/{body['roomId']}"


def test_complete_after_accept(client, booked, trainer, sessions):
    client.patch(f"/sessions/{booked['_id']}/accept", headers=auth_headers(trainer))

    response = client.patch(f"/sessions/{booked['_id']}/complete", headers=auth_headers(trainer))

    assert response.status_code == 200
    assert sessions.sessions[booked["_id"]].status == SessionStatus.COMPLETED


def test_cannot_complete_pending_session(client, booked, trainer):
    response = client.patch(f"/sessions/{booked['_id']}/complete", headers=auth_headers(trainer))

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot complete a pending session"}


def test_cannot_accept_rejected_session(client, booked, trainer):
    client.patch(f"/sessions/{booked['_id']}/reject", headers=auth_headers(trainer))

    response = client.patch(f"/sessions/{booked['_id']}/accept", headers=auth_headers(trainer))

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot accept a rejected session"}


def test_other_trainer_is_forbidden(client, booked, users):
    other = users.add(make_user(role=Role.TRAINER, name="Other", email="other@example.com"))

    response = client.patch(f"/sessions/{booked['_id']}/accept", headers=auth_headers(other))

    assert response.status_code == 403


def test_member_cannot_accept(client, booked, member):
    response = client.patch(f"/sessions/{booked['_id']}/accept", headers=auth_headers(member))

    assert response.status_code == 403
    assert response.json() == {"message": "Not authorized as trainer"}


def test_list_sessions_by_role(client, booked, member, trainer, admin):
    as_user = client.get("/sessions", headers=auth_headers(member)).json()
    as_trainer = client.get("/sessions", headers=auth_headers(trainer)).json()
    as_admin = client.get("/sessions", headers=auth_headers(admin)).json()

    assert [s["_id"] for s in as_user] == [booked["_id"]]
    assert [s["_id"] for s in as_trainer] == [booked["_id"]]
    assert as_admin == []
