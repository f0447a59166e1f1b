"""Freaky Fit API - Routes Package."""

from app.routes import (
    auth,
    user,
    admin,
    trainer,
    sessions,
    subscription,
    workout,
    meal_plan,
)

__all__ = [
    "auth",
    "user",
    "admin",
    "trainer",
    "sessions",
    "subscription",
    "workout",
    "meal_plan",
]
