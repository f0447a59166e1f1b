"""
Freaky Fit API - Subscription Schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.mongodb import SubscriptionPlan


class SubscriptionStatusResponse(BaseModel):
    """
    Current plan and quota usage.

    ``remaining_*`` are None on PREMIUM (unlimited).
    """

    plan: SubscriptionPlan
    active: bool
    start_date: Optional[datetime] = Field(None, serialization_alias="startDate")
    end_date: Optional[datetime] = Field(None, serialization_alias="endDate")
    workout_plans_generated: int = Field(0, serialization_alias="workoutPlansGenerated")
    meal_plans_generated: int = Field(0, serialization_alias="mealPlansGenerated")
    remaining_workout_plans: Optional[int] = Field(None, serialization_alias="remainingWorkoutPlans")
    remaining_meal_plans: Optional[int] = Field(None, serialization_alias="remainingMealPlans")


class SubscriptionPlanUpdate(BaseModel):
    """Admin request to switch a user's plan."""

    plan: SubscriptionPlan
