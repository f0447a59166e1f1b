"""
Freaky Fit API - Prompt Templates.

Render plan request parameters into Gemini prompts. The JSON shape spelled
out in each prompt is what the plan generators validate against.
"""

from app.schemas.meal_plan import MealPlanRequest
from app.schemas.workout import WorkoutPlanRequest

# Placeholder the model is asked to emit; the workout generator overwrites it.
EXERCISE_VIDEO_PLACEHOLDER = "placeholder"


def workout_prompt(request: WorkoutPlanRequest) -> str:
    return f"""You are a certified personal trainer designing a weekly workout plan.

Client profile:
- Fitness level: {request.fitness_level}
- Fitness goal: {request.fitness_goal}
- Session duration: {request.duration} minutes
- Training days per week: {request.days_per_week}

Create exactly {request.days_per_week} training days. Use common exercise names
that can be found in exercise video libraries. Set every "gif_url" to
"{EXERCISE_VIDEO_PLACEHOLDER}".

Return ONLY valid JSON (no markdown) with this exact structure:
{{
    "workout_plan": {{
        "warm_up": {{
            "duration": "10 minutes",
            "exercises": [
                {{"name": "...", "duration": "...", "instructions": "...", "gif_url": "{EXERCISE_VIDEO_PLACEHOLDER}"}}
            ]
        }},
        "daily_workouts": {{
            "day_1": {{
                "focus": "...",
                "exercises": [
                    {{"name": "...", "sets": 3, "reps": "8-12", "rest": "60 seconds", "instructions": "...", "gif_url": "{EXERCISE_VIDEO_PLACEHOLDER}"}}
                ]
            }}
        }},
        "cool_down": {{
            "duration": "10 minutes",
            "exercises": [
                {{"name": "...", "duration": "...", "instructions": "...", "gif_url": "{EXERCISE_VIDEO_PLACEHOLDER}"}}
            ]
        }},
        "notes": "..."
    }}
}}
"""


def meal_plan_prompt(request: MealPlanRequest) -> str:
    allergies = ", ".join(request.allergies) if request.allergies else "none"
    return f"""You are a registered sports nutritionist designing a 7-day meal plan.

Client profile:
- Fitness goal: {request.fitness_goal}
- Diet type: {request.diet_type}
- Daily calories: {request.calories_per_day} kcal
- Meals per day: {request.meals_per_day}
- Allergies (never use): {allergies}

Return ONLY valid JSON (no markdown) with this exact structure:
{{
    "meal_plan": {{
        "daily_calories": {request.calories_per_day},
        "daily_meals": {{
            "day_1": {{
                "meals": [
                    {{
                        "type": "Breakfast",
                        "name": "...",
                        "calories": 400,
                        "macros": {{"protein": 20, "carbs": 45, "fat": 15}},
                        "ingredients": ["...", "..."],
                        "instructions": "..."
                    }}
                ]
            }}
        }},
        "tips": ["..."]
    }}
}}
"""
