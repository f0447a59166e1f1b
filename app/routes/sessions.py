"""
Freaky Fit API - Training Session Routes.

Users book sessions with trainers; the booked trainer accepts, rejects
and completes them.

Status moves:
    PENDING  -> ACCEPTED | REJECTED
    ACCEPTED -> COMPLETED
"""

import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from settings import settings
from app.crud import UserRepository, TrainingSessionRepository
from app.dependencies import (
    get_current_user,
    get_session_repository,
    get_user_repository,
    require_roles,
    require_trainer,
)
from app.models.mongodb import Role, SessionStatus, UserDocument
from app.schemas.session import SessionBookingRequest, SessionPublic
from app.utils.errors import ForbiddenError, NotFoundError, ValidationError, server_error_guard

logger = logging.getLogger(__name__)

router = APIRouter()

# action -> (required current status, next status)
TRANSITIONS = {
    "accept": (SessionStatus.PENDING, SessionStatus.ACCEPTED),
    "reject": (SessionStatus.PENDING, SessionStatus.REJECTED),
    "complete": (SessionStatus.ACCEPTED, SessionStatus.COMPLETED),
}


def meeting_link(room_id: str) -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/session/{room_id}"


@router.post("", status_code=status.HTTP_201_CREATED)
async def book_session(
    payload: SessionBookingRequest,
    user: UserDocument = Depends(require_roles(Role.USER)),
    users: UserRepository = Depends(get_user_repository),
    sessions: TrainingSessionRepository = Depends(get_session_repository),
) -> dict:
    """
    Book a PENDING session with a trainer.

    Raises:
        NotFoundError: 404 if the trainer does not exist.
    """
    with server_error_guard("booking session"):
        trainer = await users.get_trainer(payload.trainer_id)
        if not trainer:
            raise NotFoundError("Trainer not found")

        session = await sessions.create(
            trainer_id=trainer.id,
            user_id=user.id,
            duration=payload.duration,
            scheduled_time=payload.scheduled_time,
        )
        logger.info(f"User {user.id} booked session {session.id} with trainer {trainer.id}")
        return SessionPublic.to_json(session)


@router.get("")
async def list_sessions(
    user: UserDocument = Depends(get_current_user),
    sessions: TrainingSessionRepository = Depends(get_session_repository),
) -> List[dict]:
    """Sessions the caller trains (TRAINER) or attends (everyone else)."""
    with server_error_guard("listing sessions"):
        if Role(user.role) == Role.TRAINER:
            found = await sessions.list_for_trainer(user.id)
        else:
            found = await sessions.list_for_user(user.id)
        return [SessionPublic.to_json(session) for session in found]


async def _transition(
    action: str,
    session_id: str,
    trainer: UserDocument,
    sessions: TrainingSessionRepository,
) -> dict:
    required, target = TRANSITIONS[action]

    with server_error_guard(f"trying to {action} session"):
        session = await sessions.get(session_id)
        if not session:
            raise NotFoundError("Session not found")
        if session.trainer_id != trainer.id:
            raise ForbiddenError("Not authorized to manage this session")

        current = SessionStatus(session.status)
        if current != required:
            raise ValidationError(f"Cannot {action} a {current.value.lower()} session")

        changes = {"status": target}
        if target == SessionStatus.ACCEPTED:
            room_id = uuid.uuid4().hex
            changes.update(room_id=room_id, meeting_link=meeting_link(room_id))

        session = await sessions.update_fields(session, **changes)
        logger.info(f"Session {session_id} moved {current.value} -> {target.value}")
        return SessionPublic.to_json(session)


@router.patch("/{session_id}/accept")
async def accept_session(
    session_id: str,
    trainer: UserDocument = Depends(require_trainer),
    sessions: TrainingSessionRepository = Depends(get_session_repository),
) -> dict:
    return await _transition("accept", session_id, trainer, sessions)


@router.patch("/{session_id}/reject")
async def reject_session(
    session_id: str,
    trainer: UserDocument = Depends(require_trainer),
    sessions: TrainingSessionRepository = Depends(get_session_repository),
) -> dict:
    return await _transition("reject", session_id, trainer, sessions)


@router.patch("/{session_id}/complete")
async def complete_session(
    session_id: str,
    trainer: UserDocument = Depends(require_trainer),
    sessions: TrainingSessionRepository = Depends(get_session_repository),
) -> dict:
    return await _transition("complete", session_id, trainer, sessions)
