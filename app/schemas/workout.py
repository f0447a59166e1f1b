"""
Freaky Fit API - Workout Schemas.

Pydantic schemas for workout plan generation.
"""

from typing import Optional, Dict, Any

from pydantic import BaseModel, Field, ConfigDict


class WorkoutPlanRequest(BaseModel):
    """
    Schema for workout generation request.

    Attributes:
        fitness_level: User's fitness level.
        fitness_goal: Workout goal.
        duration: Session length in minutes.
        days_per_week: Training days per week.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "fitnessLevel": "intermediate",
                "fitnessGoal": "muscle gain",
                "duration": "45",
                "daysPerweek": "4"
            }
        }
    )

    fitness_level: str = Field(
        ...,
        alias="fitnessLevel",
        min_length=1,
        description="Fitness level (beginner/intermediate/advanced)"
    )
    fitness_goal: str = Field(
        ...,
        alias="fitnessGoal",
        min_length=1,
        description="Goal (weight loss/muscle gain/endurance/flexibility)"
    )
    duration: str = Field(
        ...,
        min_length=1,
        description="Session length in minutes"
    )
    days_per_week: str = Field(
        ...,
        alias="daysPerweek",
        min_length=1,
        description="Training days per week"
    )


class PlanGenerationResponse(BaseModel):
    """
    Envelope returned by the plan generation endpoints.

    Attributes:
        success: Whether a plan was produced.
        message: Human-readable outcome.
        data: ``{"workout_plan": ...}`` or ``{"meal_plan": ...}`` on success.
        error: Failure cause on error.
    """

    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
