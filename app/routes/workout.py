"""Freaky Fit API - Workout Routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.middleware.subscription import can_generate_workout_plan
from app.dependencies import get_workout_generator
from app.schemas.workout import WorkoutPlanRequest, PlanGenerationResponse
from app.services.workout_generator import WorkoutPlanGenerator


router = APIRouter()


@router.post(
    "/generate",
    response_model=PlanGenerationResponse,
    dependencies=[Depends(can_generate_workout_plan)],
)
async def generate_workout(
    request: WorkoutPlanRequest,
    generator: WorkoutPlanGenerator = Depends(get_workout_generator),
):
    """
    Generate a personalized workout plan with exercise videos.

    One unit of workout quota is consumed before generation starts, so a
    failed generation still counts against a FREE plan.
    """
    result = await generator.generate(request)
    return JSONResponse(status_code=200 if result["success"] else 500, content=result)
