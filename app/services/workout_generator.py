"""
Freaky Fit API - Workout Plan Generator.

Prompt -> Gemini -> shape check -> per-exercise video enrichment.
"""

import logging
from typing import Any, Dict, Iterator, Optional

from app.schemas.workout import WorkoutPlanRequest
from app.services.gemini import GeminiService, gemini_service
from app.services.pexels import PexelsService, pexels_service
from app.services.prompts import workout_prompt

logger = logging.getLogger(__name__)


def _has_exercises(section: Any) -> bool:
    return isinstance(section, dict) and isinstance(section.get("exercises"), list)


def is_workout_plan(data: Optional[Dict[str, Any]]) -> bool:
    """
    Check the payload has a usable ``workout_plan``.

    ``daily_workouts`` must be a mapping of day -> section, and every day,
    ``warm_up`` and ``cool_down`` must carry an ``exercises`` list.
    """
    if not isinstance(data, dict):
        return False
    plan = data.get("workout_plan")
    if not isinstance(plan, dict):
        return False
    daily = plan.get("daily_workouts")
    if not isinstance(daily, dict):
        return False
    if not all(_has_exercises(day) for day in daily.values()):
        return False
    return _has_exercises(plan.get("warm_up")) and _has_exercises(plan.get("cool_down"))


def iter_exercises(plan: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every exercise: each day in order, then warm-up, then cool-down."""
    for day in plan["daily_workouts"]:
        yield from plan["daily_workouts"][day]["exercises"]
    yield from plan["warm_up"]["exercises"]
    yield from plan["cool_down"]["exercises"]


class WorkoutPlanGenerator:
    """Builds an AI workout plan and attaches exercise videos."""

    def __init__(
        self,
        ai: Optional[GeminiService] = None,
        videos: Optional[PexelsService] = None,
    ):
        self.ai = ai or gemini_service
        self.videos = videos or pexels_service

    async def generate(self, request: WorkoutPlanRequest) -> Dict[str, Any]:
        """
        Generate a workout plan.

        Never raises; failures come back as ``{"success": False, ...}``.
        Video lookups run one at a time, and the first failing lookup
        aborts the whole plan.
        """
        try:
            result = await self.ai.generate_json(workout_prompt(request))

            if not result.success:
                return {
                    "success": False,
                    "message": result.message or "Failed to generate workout plan",
                    "error": result.error,
                }

            if not is_workout_plan(result.data):
                return {
                    "success": False,
                    "message": "Invalid workout plan data received",
                    "error": "Missing workout plan data",
                }

            workout_plan = result.data["workout_plan"]
            for exercise in iter_exercises(workout_plan):
                exercise["gif_url"] = await self.videos.get_exercise_video(exercise.get("name", ""))

            return {
                "success": True,
                "message": "Workout plan generated successfully",
                "data": {"workout_plan": workout_plan},
            }
        except Exception as e:
            logger.error(f"Error generating workout plan: {e}")
            return {
                "success": False,
                "message": "Failed to generate workout plan",
                "error": str(e) or "Unknown error occurred",
            }


workout_plan_generator = WorkoutPlanGenerator()
