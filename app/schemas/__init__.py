"""Freaky Fit API - Pydantic Schemas Package."""

from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
)
from app.schemas.user import (
    UserPublic,
    ProfileUpdate,
    TrainerCreate,
    TrainerUpdate,
    TrainerInfoUpdate,
    UserRoleUpdate,
)
from app.schemas.workout import (
    WorkoutPlanRequest,
    PlanGenerationResponse,
)
from app.schemas.meal_plan import MealPlanRequest
from app.schemas.session import (
    SessionBookingRequest,
    SessionPublic,
)
from app.schemas.subscription import (
    SubscriptionStatusResponse,
    SubscriptionPlanUpdate,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "UserPublic",
    "ProfileUpdate",
    "TrainerCreate",
    "TrainerUpdate",
    "TrainerInfoUpdate",
    "UserRoleUpdate",
    "WorkoutPlanRequest",
    "PlanGenerationResponse",
    "MealPlanRequest",
    "SessionBookingRequest",
    "SessionPublic",
    "SubscriptionStatusResponse",
    "SubscriptionPlanUpdate",
]
