"""
Freaky Fit API - Meal Plan Schemas.
"""

from typing import List

from pydantic import BaseModel, Field, ConfigDict


class MealPlanRequest(BaseModel):
    """
    Schema for meal plan generation request.

    Attributes:
        fitness_goal: Goal the diet supports.
        diet_type: Dietary pattern (e.g. vegetarian, keto, balanced).
        calories_per_day: Daily calorie target.
        meals_per_day: Number of meals per day.
        allergies: Ingredients to avoid.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "fitnessGoal": "weight loss",
                "dietType": "vegetarian",
                "caloriesPerDay": "1800",
                "mealsPerDay": "4",
                "allergies": ["peanuts"]
            }
        }
    )

    fitness_goal: str = Field(..., alias="fitnessGoal", min_length=1)
    diet_type: str = Field(default="balanced", alias="dietType", min_length=1)
    calories_per_day: str = Field(..., alias="caloriesPerDay", min_length=1)
    meals_per_day: str = Field(default="3", alias="mealsPerDay", min_length=1)
    allergies: List[str] = Field(default_factory=list)
