"""Freaky Fit API - Trainer Directory Routes."""

from typing import List

from fastapi import APIRouter, Depends

from app.crud import UserRepository
from app.dependencies import get_current_user, get_user_repository
from app.models.mongodb import Role
from app.schemas.user import UserPublic
from app.utils.errors import NotFoundError, server_error_guard


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("")
async def list_verified_trainers(users: UserRepository = Depends(get_user_repository)) -> List[dict]:
    """Verified trainers any signed-in user can book."""
    with server_error_guard("listing verified trainers"):
        trainers = await users.list_by_role(Role.TRAINER, verified_only=True)
        return [UserPublic.from_user(trainer).to_json() for trainer in trainers]


@router.get("/{trainer_id}")
async def get_trainer(
    trainer_id: str,
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    with server_error_guard("fetching trainer"):
        trainer = await users.get_trainer(trainer_id)
        if not trainer:
            raise NotFoundError("Trainer not found")
        return UserPublic.from_user(trainer).to_json()
