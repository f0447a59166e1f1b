"""
Freaky Fit API - Authentication Routes.

Endpoints for user registration, login, the current identity and logout.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from app.crud import UserRepository
from app.dependencies import get_current_user, get_current_user_id, get_user_repository
from app.middleware.rate_limit import limiter, auth_limit
from app.models.mongodb import Role, UserDocument
from app.schemas.auth import RegisterRequest, LoginRequest, AuthResponse
from app.schemas.user import UserPublic
from app.services.auth import (
    hash_password,
    verify_password,
    create_access_token,
    blacklist_token,
    token_ttl_seconds,
)
from app.utils.errors import AuthenticationError, ValidationError
from app.utils.security import validate_password_strength, sanitize_string

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(user: UserDocument) -> AuthResponse:
    token = create_access_token({"sub": str(user.id), "role": Role(user.role).value})
    return AuthResponse(token=token, user=UserPublic.from_user(user).to_json())


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(auth_limit)
async def register(
    request: Request,
    payload: RegisterRequest,
    users: UserRepository = Depends(get_user_repository),
) -> AuthResponse:
    """
    Register a new user with email and password.

    Args:
        payload: RegisterRequest with email, password, name.

    Returns:
        AuthResponse with a token and the public user record.

    Raises:
        ValidationError: 400 if the email exists or the password is weak.
    """
    is_valid, message = validate_password_strength(payload.password)
    if not is_valid:
        raise ValidationError(message)

    if await users.get_by_email(payload.email):
        raise ValidationError("Email already exists")

    user = await users.create(
        name=sanitize_string(payload.name),
        email=payload.email,
        password_hash=hash_password(payload.password),
        role=Role.USER,
    )
    logger.info(f"Registered user {user.id}")
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(auth_limit)
async def login(
    request: Request,
    payload: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
) -> AuthResponse:
    """
    Login user with email and password.

    Raises:
        AuthenticationError: 401 if credentials are invalid.
    """
    user = await users.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise AuthenticationError("Invalid email or password")

    return _auth_response(user)


@router.get("/me")
async def me(user: UserDocument = Depends(get_current_user)) -> dict:
    return UserPublic.from_user(user).to_json()


@router.post("/logout")
async def logout(request: Request, user_id: str = Depends(get_current_user_id)) -> dict:
    """Revoke the presented token until it would have expired."""
    await blacklist_token(request.state.token, token_ttl_seconds(request.state.token_payload))
    logger.info(f"User {user_id} logged out")
    return {"message": "Logged out successfully"}
