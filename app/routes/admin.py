"""
Freaky Fit API - Admin Routes.

Trainer and user management, restricted to the ADMIN role. Every user
record leaves through ``UserPublic`` so the password hash never does.
"""

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, status

from settings import settings
from app.crud import UserRepository, SubscriptionRepository
from app.dependencies import get_user_repository, get_subscription_repository, require_admin
from app.models.mongodb import Role, UserDocument
from app.schemas.user import (
    UserPublic,
    TrainerCreate,
    TrainerUpdate,
    TrainerInfoUpdate,
    UserRoleUpdate,
)
from app.schemas.subscription import SubscriptionPlanUpdate
from app.services.auth import hash_password
from app.utils.errors import NotFoundError, ValidationError, server_error_guard

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


def _public(users: List[UserDocument]) -> List[dict]:
    return [UserPublic.from_user(user).to_json() for user in users]


async def _trainer_or_404(users: UserRepository, trainer_id: str) -> UserDocument:
    trainer = await users.get_trainer(trainer_id)
    if not trainer:
        raise NotFoundError("Trainer not found")
    return trainer


@router.get("/trainers")
async def list_trainers(users: UserRepository = Depends(get_user_repository)) -> List[dict]:
    """All trainers, sorted by name."""
    with server_error_guard("listing trainers"):
        return _public(await users.list_by_role(Role.TRAINER))


@router.post("/trainers", status_code=status.HTTP_201_CREATED)
async def create_trainer(
    payload: TrainerCreate,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    """
    Add a new trainer.

    Admin-created trainers are verified immediately.

    Raises:
        ValidationError: 400 if the email already exists.
    """
    with server_error_guard("creating trainer"):
        if await users.get_by_email(payload.email):
            raise ValidationError("Email already exists")

        trainer = await users.create(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            role=Role.TRAINER,
            specialization=payload.specialization,
            hourly_rate=payload.hourly_rate,
            bio=payload.bio,
            is_verified=True,
        )
        logger.info(f"Admin created trainer {trainer.id}")
        return UserPublic.from_user(trainer).to_json()


@router.patch("/trainers/{trainer_id}")
async def update_trainer(
    trainer_id: str,
    payload: TrainerUpdate,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    """Partial update of trainer details; empty values leave fields unchanged."""
    with server_error_guard("updating trainer"):
        trainer = await _trainer_or_404(users, trainer_id)

        changes = {
            name: value
            for name, value in payload.model_dump().items()
            if name != "is_verified" and value
        }
        if payload.is_verified is not None:
            changes["is_verified"] = payload.is_verified

        trainer = await users.update_fields(trainer, **changes)
        return UserPublic.from_user(trainer).to_json()


@router.delete("/trainers/{trainer_id}")
async def delete_trainer(
    trainer_id: str,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    with server_error_guard("deleting trainer"):
        trainer = await _trainer_or_404(users, trainer_id)
        await users.delete(trainer)
        logger.info(f"Admin deleted trainer {trainer_id}")
        return {"message": "Trainer deleted successfully"}


@router.get("/users")
async def list_users(users: UserRepository = Depends(get_user_repository)) -> List[dict]:
    """All users, sorted by name."""
    with server_error_guard("listing users"):
        return _public(await users.list_all())


@router.patch("/users/{user_id}/role")
async def update_user_role(
    user_id: str,
    payload: UserRoleUpdate,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    """
    Change a user's role.

    The body is validated against the three known roles before any lookup.
    """
    with server_error_guard("updating user role"):
        user = await users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        user = await users.update_fields(user, role=payload.role)
        return UserPublic.from_user(user).to_json()


@router.patch("/trainers/{trainer_id}/info")
async def update_trainer_info(
    trainer_id: str,
    payload: TrainerInfoUpdate,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    """Replace specialization, hourly rate and bio of a trainer."""
    with server_error_guard("updating trainer info"):
        trainer = await _trainer_or_404(users, trainer_id)
        trainer = await users.update_fields(
            trainer,
            specialization=payload.specialization,
            hourly_rate=payload.hourly_rate,
            bio=payload.bio,
        )
        return UserPublic.from_user(trainer).to_json()


@router.patch("/users/{user_id}/subscription")
async def update_user_subscription(
    user_id: str,
    payload: SubscriptionPlanUpdate,
    users: UserRepository = Depends(get_user_repository),
    subscriptions: SubscriptionRepository = Depends(get_subscription_repository),
) -> dict:
    """Manually move a user between FREE and PREMIUM."""
    with server_error_guard("updating user subscription"):
        user = await users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        subscription = await subscriptions.set_plan(
            user.id,
            payload.plan,
            datetime.now(timezone.utc),
            settings.FREE_PLAN_DURATION_DAYS,
        )
        logger.info(f"Admin set plan {payload.plan.value} for user {user_id}")
        return {
            "userId": str(user.id),
            "plan": subscription.plan.value,
            "active": subscription.active,
            "endDate": subscription.end_date.isoformat(),
        }
