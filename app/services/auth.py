"""
Freaky Fit API - Authentication Service.

JWT token generation, password hashing and the logout blacklist.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import logging

import bcrypt
from jose import jwt, JWTError

from settings import settings
from .cache import cache_service

logger = logging.getLogger(__name__)


# Maximum password length for bcrypt (72 bytes)
MAX_PASSWORD_BYTES = 72


def _prepare_password(password: str) -> bytes:
    """
    Prepare password for bcrypt hashing.

    Bcrypt only uses the first 72 bytes of any password.
    """
    return password.encode('utf-8')[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash.
        rounds: bcrypt cost factor.

    Returns:
        str: Bcrypt hashed password.

    Example:
        >>> hashed = hash_password("mysecurepassword")
        >>> verify_password("mysecurepassword", hashed)
        True
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_prepare_password(password), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Returns:
        bool: True if password matches, False otherwise.
    """
    try:
        return bcrypt.checkpw(
            _prepare_password(plain_password),
            hashed_password.encode('utf-8')
        )
    except Exception as e:
        logger.warning(f"Password verification failed: {e}")
        return False


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary containing token payload (must include 'sub' key).
        expires_delta: Optional custom expiration time.

    Returns:
        str: Encoded JWT access token.
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode.update({
        "exp": expire,
        "iat": now
    })

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT access token.

    Returns:
        Optional[Dict[str, Any]]: Token payload if valid, None otherwise.

    Example:
        >>> token = create_access_token({"sub": "user-123"})
        >>> verify_token(token)["sub"]
        'user-123'
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        return None


def token_ttl_seconds(payload: Dict[str, Any]) -> int:
    """Seconds until the token's ``exp`` claim, never below zero."""
    exp = payload.get("exp")
    if not exp:
        return 0
    remaining = int(exp - datetime.now(timezone.utc).timestamp())
    return max(remaining, 0)


async def blacklist_token(token: str, ttl_seconds: int) -> bool:
    """
    Add a token to the Redis blacklist for logout functionality.

    Args:
        token: JWT access token to blacklist.
        ttl_seconds: Time-to-live matching token expiry.

    Returns:
        bool: True if successfully blacklisted, False otherwise.
    """
    if ttl_seconds <= 0:
        return True
    stored = await cache_service.set(f"blacklist:{token}", {"blacklisted": True}, ttl_seconds)
    if stored:
        logger.info("Token blacklisted successfully")
    else:
        logger.warning("Token blacklist unavailable, token stays valid until expiry")
    return stored


async def is_token_blacklisted(token: str) -> bool:
    """
    Check if a token is blacklisted.

    Fails open: if Redis is down the token is treated as not revoked.
    """
    result = await cache_service.get(f"blacklist:{token}")
    return result is not None
