"""
Freaky Fit API - FastAPI Dependencies.

Dependency injection helpers for routes: repositories, services, the
authenticated user and role checks.
"""

from typing import Callable, Iterable

from fastapi import Depends

from app.crud import UserRepository, SubscriptionRepository, TrainingSessionRepository
from app.middleware.auth import jwt_bearer
from app.models.mongodb import Role, UserDocument
from app.services.meal_plan_generator import MealPlanGenerator, meal_plan_generator
from app.services.workout_generator import WorkoutPlanGenerator, workout_plan_generator
from app.utils.errors import AuthenticationError, ForbiddenError


def get_user_repository() -> UserRepository:
    return UserRepository()


def get_subscription_repository() -> SubscriptionRepository:
    return SubscriptionRepository()


def get_session_repository() -> TrainingSessionRepository:
    return TrainingSessionRepository()


def get_workout_generator() -> WorkoutPlanGenerator:
    return workout_plan_generator


def get_meal_plan_generator() -> MealPlanGenerator:
    return meal_plan_generator


async def get_current_user_id(user_id: str = Depends(jwt_bearer)) -> str:
    """
    Get current authenticated user ID from JWT token.

    Usage:
        @router.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user_id)):
            return {"user_id": user_id}
    """
    return user_id


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    users: UserRepository = Depends(get_user_repository),
) -> UserDocument:
    """
    Get current authenticated user from database.

    Raises:
        AuthenticationError: 401 if the token subject no longer exists.
    """
    user = await users.get_by_id(user_id)
    if not user:
        raise AuthenticationError("Not authorized, user not found")
    return user


def require_roles(*roles: Role) -> Callable:
    """
    Dependency factory that only lets the given roles through.

    Example:
        @router.get("/users", dependencies=[Depends(require_roles(Role.ADMIN))])
        async def list_users():
            ...
    """
    allowed: Iterable[Role] = tuple(roles)
    names = " or ".join(role.value.lower() for role in allowed)

    async def check_role(user: UserDocument = Depends(get_current_user)) -> UserDocument:
        if not Role(user.role).permits(allowed):
            raise ForbiddenError(f"Not authorized as {names}")
        return user

    return check_role


require_admin = require_roles(Role.ADMIN)
require_trainer = require_roles(Role.TRAINER)
