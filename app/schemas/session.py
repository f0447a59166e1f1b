"""
Freaky Fit API - Training Session Schemas.
"""

from datetime import datetime
from typing import Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field

from app.models.mongodb import SessionStatus


class SessionBookingRequest(BaseModel):
    """
    Schema for booking a session with a trainer.

    Attributes:
        trainer_id: Trainer's user id.
        duration: Length in hours (1-8).
        scheduled_time: Requested start time.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "trainerId": "665f1c2e8b3f4a0012345678",
                "duration": 1,
                "scheduledTime": "2026-11-02T18:00:00Z"
            }
        }
    )

    trainer_id: str = Field(..., alias="trainerId", min_length=1)
    duration: int = Field(default=1, ge=1, le=8)
    scheduled_time: Optional[datetime] = Field(None, alias="scheduledTime")


class SessionPublic(BaseModel):
    """Training session as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: PydanticObjectId = Field(..., serialization_alias="_id")
    trainer_id: PydanticObjectId = Field(..., serialization_alias="trainer")
    user_id: PydanticObjectId = Field(..., serialization_alias="user")
    duration: int
    status: SessionStatus
    meeting_link: Optional[str] = Field(None, serialization_alias="meetingLink")
    room_id: Optional[str] = Field(None, serialization_alias="roomId")
    scheduled_time: Optional[datetime] = Field(None, serialization_alias="scheduledTime")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

    @classmethod
    def to_json(cls, session) -> dict:
        return cls.model_validate(session).model_dump(mode="json", by_alias=True)
