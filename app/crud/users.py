"""
UserRepository for database operations on UserDocument.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from beanie import PydanticObjectId
from bson import ObjectId

from app.models.mongodb import Role, UserDocument


def parse_object_id(value: str) -> Optional[PydanticObjectId]:
    """Return the ObjectId for ``value``, or None when it is not a valid id."""
    if not ObjectId.is_valid(value):
        return None
    return PydanticObjectId(value)


class UserRepository:
    """
    Repository class for user database operations.
    Encapsulates all Beanie queries for the users collection.
    """

    async def get_by_id(self, user_id: str) -> Optional[UserDocument]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await UserDocument.get(oid)

    async def get_by_email(self, email: str) -> Optional[UserDocument]:
        return await UserDocument.find_one(UserDocument.email == email.lower())

    async def get_trainer(self, trainer_id: str) -> Optional[UserDocument]:
        oid = parse_object_id(trainer_id)
        if oid is None:
            return None
        return await UserDocument.find_one(
            UserDocument.id == oid,
            UserDocument.role == Role.TRAINER,
        )

    async def create(self, **fields: Any) -> UserDocument:
        """
        Insert a new user.

        Args:
            fields: UserDocument fields; ``email`` is stored lowercased.
        """
        fields["email"] = fields["email"].lower()
        user = UserDocument(**fields)
        await user.insert()
        return user

    async def list_all(self) -> List[UserDocument]:
        return await UserDocument.find_all().sort(+UserDocument.name).to_list()

    async def list_by_role(self, role: Role, verified_only: bool = False) -> List[UserDocument]:
        query = UserDocument.find(UserDocument.role == role)
        if verified_only:
            query = query.find(UserDocument.is_verified == True)  # noqa: E712
        return await query.sort(+UserDocument.name).to_list()

    async def update_fields(self, user: UserDocument, **fields: Any) -> UserDocument:
        """Apply field changes and persist the document."""
        for name, value in fields.items():
            setattr(user, name, value)
        user.updated_at = datetime.now(timezone.utc)
        await user.save()
        return user

    async def delete(self, user: UserDocument) -> None:
        await user.delete()
