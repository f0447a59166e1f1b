# app/models/mongodb.py
"""
Freaky Fit MongoDB Document Models.

Beanie ODM models for MongoDB.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import EmailStr, Field
from pymongo import ASCENDING, IndexModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(str, Enum):
    """Closed set of account roles."""

    USER = "USER"
    TRAINER = "TRAINER"
    ADMIN = "ADMIN"

    def permits(self, allowed: Iterable["Role"]) -> bool:
        """Capability check: does this role appear in the allowed set?"""
        return self in set(allowed)


class SubscriptionPlan(str, Enum):
    FREE = "FREE"
    PREMIUM = "PREMIUM"


class PlanKind(str, Enum):
    """Kinds of AI generation that consume subscription quota."""

    WORKOUT = "workout"
    MEAL = "meal"

    @property
    def counter_field(self) -> str:
        return "workout_plans_generated" if self is PlanKind.WORKOUT else "meal_plans_generated"


class SessionStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


class UserDocument(Document):
    """User model for MongoDB."""

    name: str
    email: Indexed(EmailStr, unique=True)
    password_hash: str
    role: Role = Role.USER

    # Trainer-only fields
    specialization: Optional[str] = None
    hourly_rate: Optional[float] = None
    bio: Optional[str] = None
    is_verified: bool = False

    # Profile fields
    fitness_level: Optional[str] = None  # beginner/intermediate/advanced
    fitness_goal: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "users"
        indexes = [
            "role",
        ]


class SubscriptionDocument(Document):
    """
    Subscription model for MongoDB.

    At most one active subscription exists per user; the partial unique
    index enforces it.
    """

    user_id: PydanticObjectId
    plan: SubscriptionPlan = SubscriptionPlan.FREE
    active: bool = True
    start_date: datetime = Field(default_factory=utcnow)
    end_date: datetime
    workout_plans_generated: int = 0
    meal_plans_generated: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "subscriptions"
        indexes = [
            IndexModel(
                [("user_id", ASCENDING)],
                name="one_active_subscription_per_user",
                unique=True,
                partialFilterExpression={"active": True},
            ),
            IndexModel([("user_id", ASCENDING), ("end_date", ASCENDING)]),
        ]


class TrainingSessionDocument(Document):
    """Training session booked between a user and a trainer."""

    trainer_id: PydanticObjectId
    user_id: PydanticObjectId
    duration: int = 1  # hours
    status: SessionStatus = SessionStatus.PENDING
    meeting_link: Optional[str] = None
    room_id: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "trainingsessions"
        indexes = [
            IndexModel([("trainer_id", ASCENDING), ("scheduled_time", ASCENDING)]),
            IndexModel([("user_id", ASCENDING), ("scheduled_time", ASCENDING)]),
            "status",
        ]
