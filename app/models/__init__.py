"""
Freaky Fit API - MongoDB Models Package.

Export all Beanie ODM models for MongoDB operations.
"""

from app.models.mongodb import (
    Role,
    SubscriptionPlan,
    PlanKind,
    SessionStatus,
    UserDocument,
    SubscriptionDocument,
    TrainingSessionDocument,
)

__all__ = [
    "Role",
    "SubscriptionPlan",
    "PlanKind",
    "SessionStatus",
    "UserDocument",
    "SubscriptionDocument",
    "TrainingSessionDocument",
]
