"""
TrainingSessionRepository for database operations on TrainingSessionDocument.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from beanie import PydanticObjectId

from app.crud.users import parse_object_id
from app.models.mongodb import TrainingSessionDocument


class TrainingSessionRepository:
    """Repository class for training session database operations."""

    async def create(self, **fields: Any) -> TrainingSessionDocument:
        session = TrainingSessionDocument(**fields)
        await session.insert()
        return session

    async def get(self, session_id: str) -> Optional[TrainingSessionDocument]:
        oid = parse_object_id(session_id)
        if oid is None:
            return None
        return await TrainingSessionDocument.get(oid)

    async def list_for_user(self, user_id: PydanticObjectId) -> List[TrainingSessionDocument]:
        return await TrainingSessionDocument.find(
            TrainingSessionDocument.user_id == user_id
        ).sort(-TrainingSessionDocument.created_at).to_list()

    async def list_for_trainer(self, trainer_id: PydanticObjectId) -> List[TrainingSessionDocument]:
        return await TrainingSessionDocument.find(
            TrainingSessionDocument.trainer_id == trainer_id
        ).sort(-TrainingSessionDocument.created_at).to_list()

    async def update_fields(
        self,
        session: TrainingSessionDocument,
        **fields: Any
    ) -> TrainingSessionDocument:
        for name, value in fields.items():
            setattr(session, name, value)
        session.updated_at = datetime.now(timezone.utc)
        await session.save()
        return session
