"""Freaky Fit API - Meal Plan Routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.middleware.subscription import can_generate_meal_plan
from app.dependencies import get_meal_plan_generator
from app.schemas.meal_plan import MealPlanRequest
from app.schemas.workout import PlanGenerationResponse
from app.services.meal_plan_generator import MealPlanGenerator


router = APIRouter()


@router.post(
    "/generate",
    response_model=PlanGenerationResponse,
    dependencies=[Depends(can_generate_meal_plan)],
)
async def generate_meal_plan(
    request: MealPlanRequest,
    generator: MealPlanGenerator = Depends(get_meal_plan_generator),
):
    """Generate a personalized meal plan."""
    result = await generator.generate(request)
    return JSONResponse(status_code=200 if result["success"] else 500, content=result)
