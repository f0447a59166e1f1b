"""
Pytest configuration and fixtures for testing.

Routes run against in-memory repositories through FastAPI dependency
overrides; no MongoDB, Redis, Gemini or Pexels is needed.
"""
import os

os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("CACHE_ENABLED", "false")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from beanie import PydanticObjectId
from fastapi.testclient import TestClient

from database import Database
from main import app
from app.dependencies import (
    get_user_repository,
    get_subscription_repository,
    get_session_repository,
    get_workout_generator,
    get_meal_plan_generator,
)
from app.models.mongodb import Role, SessionStatus, SubscriptionPlan
from app.services.auth import create_access_token, hash_password


def make_user(role=Role.USER, **fields):
    """User record shaped like UserDocument."""
    now = datetime.now(timezone.utc)
    values = {
        "id": PydanticObjectId(),
        "name": "Test User",
        "email": f"user{PydanticObjectId()}@example.com",
        "password_hash": hash_password("Password123", rounds=4),
        "role": role,
        "specialization": None,
        "hourly_rate": None,
        "bio": None,
        "is_verified": False,
        "fitness_level": None,
        "fitness_goal": None,
        "created_at": now,
        "updated_at": now,
    }
    values.update(fields)
    return SimpleNamespace(**values)


class FakeUserRepository:
    """In-memory stand-in for UserRepository."""

    def __init__(self):
        self.users = {}
        self.writes = 0

    def add(self, user):
        self.users[str(user.id)] = user
        return user

    async def get_by_id(self, user_id):
        return self.users.get(str(user_id))

    async def get_by_email(self, email):
        for user in self.users.values():
            if user.email == email.lower():
                return user
        return None

    async def get_trainer(self, trainer_id):
        user = self.users.get(str(trainer_id))
        if user and user.role == Role.TRAINER:
            return user
        return None

    async def create(self, **fields):
        fields["email"] = fields["email"].lower()
        self.writes += 1
        return self.add(make_user(**fields))

    async def list_all(self):
        return sorted(self.users.values(), key=lambda u: u.name)

    async def list_by_role(self, role, verified_only=False):
        found = [
            u for u in self.users.values()
            if u.role == role and (u.is_verified or not verified_only)
        ]
        return sorted(found, key=lambda u: u.name)

    async def update_fields(self, user, **fields):
        self.writes += 1
        for name, value in fields.items():
            setattr(user, name, value)
        user.updated_at = datetime.now(timezone.utc)
        return user

    async def delete(self, user):
        self.writes += 1
        self.users.pop(str(user.id), None)


class FakeSubscriptionRepository:
    """
    In-memory stand-in for SubscriptionRepository.

    Mirrors the store semantics: find-or-create returns the one active
    record and increments only match FREE records below the limit.
    """

    def __init__(self):
        self.records = []
        self.error = None

    def add(self, user_id, plan=SubscriptionPlan.FREE, active=True, end_date=None, start_date=None, **counters):
        now = start_date or datetime.now(timezone.utc)
        record = SimpleNamespace(
            id=PydanticObjectId(),
            user_id=user_id,
            plan=plan,
            active=active,
            start_date=now,
            end_date=end_date or now + timedelta(days=365),
            workout_plans_generated=counters.get("workout_plans_generated", 0),
            meal_plans_generated=counters.get("meal_plans_generated", 0),
        )
        self.records.append(record)
        return record

    def for_user(self, user_id):
        return [r for r in self.records if r.user_id == user_id]

    async def get_active(self, user_id, now):
        for record in self.records:
            if record.user_id == user_id and record.active and record.end_date >= now:
                return record
        return None

    async def deactivate_expired(self, user_id, now):
        if self.error:
            raise self.error
        expired = [
            r for r in self.records
            if r.user_id == user_id and r.active and r.end_date < now
        ]
        for record in expired:
            record.active = False
        return len(expired)

    async def find_or_create_active(self, user_id, now, duration_days):
        existing = await self.get_active(user_id, now)
        if existing:
            return existing
        return self.add(user_id, start_date=now, end_date=now + timedelta(days=duration_days))

    async def increment_if_under(self, subscription_id, counter_field, limit, now):
        for record in self.records:
            if record.id == subscription_id:
                if record.plan != SubscriptionPlan.FREE or getattr(record, counter_field) >= limit:
                    return None
                setattr(record, counter_field, getattr(record, counter_field) + 1)
                return record
        return None

    async def set_plan(self, user_id, plan, now, duration_days):
        await self.deactivate_expired(user_id, now)
        record = await self.find_or_create_active(user_id, now, duration_days)
        record.plan = plan
        return record


class FakeSessionRepository:
    """In-memory stand-in for TrainingSessionRepository."""

    def __init__(self):
        self.sessions = {}

    async def create(self, **fields):
        now = datetime.now(timezone.utc)
        values = {
            "id": PydanticObjectId(),
            "duration": 1,
            "status": SessionStatus.PENDING,
            "meeting_link": None,
            "room_id": None,
            "scheduled_time": None,
            "created_at": now,
            "updated_at": now,
        }
        values.update(fields)
        session = SimpleNamespace(**values)
        self.sessions[str(session.id)] = session
        return session

    async def get(self, session_id):
        return self.sessions.get(str(session_id))

    async def list_for_user(self, user_id):
        return [s for s in self.sessions.values() if s.user_id == user_id]

    async def list_for_trainer(self, trainer_id):
        return [s for s in self.sessions.values() if s.trainer_id == trainer_id]

    async def update_fields(self, session, **fields):
        for name, value in fields.items():
            setattr(session, name, value)
        return session


class FakePlanGenerator:
    """Returns a canned envelope and counts calls."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def generate(self, request):
        self.calls += 1
        return self.result


def auth_headers(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def users():
    return FakeUserRepository()


@pytest.fixture
def subscriptions():
    return FakeSubscriptionRepository()


@pytest.fixture
def sessions():
    return FakeSessionRepository()


@pytest.fixture
def workout_generator():
    return FakePlanGenerator({
        "success": True,
        "message": "Workout plan generated successfully",
        "data": {"workout_plan": {"daily_workouts": {}}},
    })


@pytest.fixture
def meal_generator():
    return FakePlanGenerator({
        "success": True,
        "message": "Meal plan generated successfully",
        "data": {"meal_plan": {"daily_meals": {}}},
    })


@pytest.fixture
def client(monkeypatch, users, subscriptions, sessions, workout_generator, meal_generator):
    """
    TestClient wired to the in-memory fakes.

    The lifespan is not entered and the lazy database middleware sees an
    initialised connection, so nothing touches MongoDB.
    """
    monkeypatch.setattr(Database, "_initialized", True)
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_subscription_repository] = lambda: subscriptions
    app.dependency_overrides[get_session_repository] = lambda: sessions
    app.dependency_overrides[get_workout_generator] = lambda: workout_generator
    app.dependency_overrides[get_meal_plan_generator] = lambda: meal_generator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def member(users):
    return users.add(make_user(name="Member", email="member@example.com"))


@pytest.fixture
def admin(users):
    return users.add(make_user(role=Role.ADMIN, name="Admin", email="admin@example.com"))


@pytest.fixture
def trainer(users):
    return users.add(make_user(
        role=Role.TRAINER,
        name="Trainer",
        email="trainer@example.com",
        specialization="Strength",
        hourly_rate=50.0,
        bio="Coach",
        is_verified=True,
    ))
