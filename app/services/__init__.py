"""Freaky Fit API - Services Package."""

from .auth import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
)
from .cache import cache_service, CacheService
from .gemini import gemini_service, GeminiService
from .pexels import pexels_service, PexelsService
from .workout_generator import workout_plan_generator, WorkoutPlanGenerator
from .meal_plan_generator import meal_plan_generator, MealPlanGenerator

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "verify_token",
    "cache_service",
    "CacheService",
    "gemini_service",
    "GeminiService",
    "pexels_service",
    "PexelsService",
    "workout_plan_generator",
    "WorkoutPlanGenerator",
    "meal_plan_generator",
    "MealPlanGenerator",
]
