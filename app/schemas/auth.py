"""
Freaky Fit API - Authentication Schemas.

Pydantic schemas for authentication requests and responses.
"""

from typing import Any, Dict

from pydantic import BaseModel, EmailStr, Field, ConfigDict


class RegisterRequest(BaseModel):
    """
    Schema for user registration request.

    Attributes:
        email: User's email address.
        password: User's password.
        name: User's display name.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123",
                "name": "Jane Doe"
            }
        }
    )

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password, checked for strength")
    name: str = Field(..., min_length=1, description="User's display name")


class LoginRequest(BaseModel):
    """
    Schema for user login request.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123"
            }
        }
    )

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")


class AuthResponse(BaseModel):
    """
    Token plus the public user projection.

    Attributes:
        token: JWT access token.
        user: ``UserPublic`` JSON.
    """

    token: str
    user: Dict[str, Any]
