"""Freaky Fit API - Repositories over the Beanie document models."""

from app.crud.users import UserRepository, parse_object_id
from app.crud.subscriptions import SubscriptionRepository
from app.crud.sessions import TrainingSessionRepository

__all__ = [
    "UserRepository",
    "parse_object_id",
    "SubscriptionRepository",
    "TrainingSessionRepository",
]
