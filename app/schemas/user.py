"""
Freaky Fit API - User Schemas.

Pydantic schemas for user and trainer operations. ``UserPublic`` is the
only shape a user record leaves the API in; it has no credential fields.
"""

from datetime import datetime
from typing import Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.mongodb import Role


class UserPublic(BaseModel):
    """
    Public projection of a user record.

    Built from a document with ``UserPublic.from_user(user)``; the password
    hash is not a field here, so it cannot be serialized.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: PydanticObjectId = Field(..., serialization_alias="_id")
    name: str
    email: EmailStr
    role: Role
    specialization: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, serialization_alias="hourlyRate")
    bio: Optional[str] = None
    is_verified: bool = Field(False, serialization_alias="isVerified")
    fitness_level: Optional[str] = Field(None, serialization_alias="fitnessLevel")
    fitness_goal: Optional[str] = Field(None, serialization_alias="fitnessGoal")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    @classmethod
    def from_user(cls, user) -> "UserPublic":
        return cls.model_validate(user)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ProfileUpdate(BaseModel):
    """
    Schema for updating the caller's own profile.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "fitnessLevel": "intermediate",
                "fitnessGoal": "muscle gain"
            }
        }
    )

    name: Optional[str] = Field(None, min_length=1, description="Display name")
    fitness_level: Optional[str] = Field(None, alias="fitnessLevel")
    fitness_goal: Optional[str] = Field(None, alias="fitnessGoal")


class TrainerCreate(BaseModel):
    """Admin request to add a trainer account."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Trainer's display name")
    email: EmailStr
    password: str = Field(..., min_length=6)
    specialization: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, alias="hourlyRate", ge=0)
    bio: Optional[str] = None


class TrainerUpdate(BaseModel):
    """Admin partial update of trainer details; empty values are ignored."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    specialization: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, alias="hourlyRate", ge=0)
    bio: Optional[str] = None
    is_verified: Optional[bool] = Field(None, alias="isVerified")


class TrainerInfoUpdate(BaseModel):
    """Admin full replacement of trainer information."""

    model_config = ConfigDict(populate_by_name=True)

    specialization: str = Field(..., min_length=1)
    hourly_rate: float = Field(..., alias="hourlyRate", ge=0)
    bio: str = Field(..., min_length=1)


class UserRoleUpdate(BaseModel):
    """Admin role change; only the three known roles are accepted."""

    role: Role
