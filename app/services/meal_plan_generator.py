"""
Freaky Fit API - Meal Plan Generator.
"""

import logging
from typing import Any, Dict, Optional

from app.schemas.meal_plan import MealPlanRequest
from app.services.gemini import GeminiService, gemini_service
from app.services.prompts import meal_plan_prompt

logger = logging.getLogger(__name__)


def is_meal_plan(data: Optional[Dict[str, Any]]) -> bool:
    """``meal_plan.daily_meals`` must be a non-empty mapping of day -> {"meals": [...]}."""
    if not isinstance(data, dict):
        return False
    plan = data.get("meal_plan")
    if not isinstance(plan, dict):
        return False
    daily = plan.get("daily_meals")
    if not isinstance(daily, dict) or not daily:
        return False
    return all(isinstance(day, dict) and isinstance(day.get("meals"), list) for day in daily.values())


class MealPlanGenerator:
    """Builds an AI meal plan."""

    def __init__(self, ai: Optional[GeminiService] = None):
        self.ai = ai or gemini_service

    async def generate(self, request: MealPlanRequest) -> Dict[str, Any]:
        try:
            result = await self.ai.generate_json(meal_plan_prompt(request))

            if not result.success:
                return {
                    "success": False,
                    "message": result.message or "Failed to generate meal plan",
                    "error": result.error,
                }

            if not is_meal_plan(result.data):
                return {
                    "success": False,
                    "message": "Invalid meal plan data received",
                    "error": "Missing meal plan data",
                }

            return {
                "success": True,
                "message": "Meal plan generated successfully",
                "data": {"meal_plan": result.data["meal_plan"]},
            }
        except Exception as e:
            logger.error(f"Error generating meal plan: {e}")
            return {
                "success": False,
                "message": "Failed to generate meal plan",
                "error": str(e) or "Unknown error occurred",
            }


meal_plan_generator = MealPlanGenerator()
