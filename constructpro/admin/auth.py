"""Password hashing + Redis session management."""

from __future__ import annotations

import json
import secrets
from typing import Optional

import structlog
from passlib.context import CryptContext
from redis.asyncio import Redis

from constructpro.config import settings

logger = structlog.get_logger()

SESSION_PREFIX = "site_session:"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against its stored hash. Malformed hashes never match."""
    if not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        return False


async def create_session(
    redis: Redis,
    user_id: str,
    email: str,
    is_admin: bool = False,
) -> str:
    """Create a signed-in session in Redis.

    Args:
        redis: Redis client
        user_id: UUID of the profile
        email: Profile email for display
        is_admin: Whether the profile may open the dashboard

    Returns:
        Session token (random string)
    """
    token = secrets.token_urlsafe(32)
    session_data = json.dumps({
        "user_id": user_id,
        "email": email,
        "is_admin": is_admin,
    })

    await redis.setex(
        f"{SESSION_PREFIX}{token}",
        settings.session_ttl_seconds,
        session_data,
    )

    logger.info("session_created", user_id=user_id, is_admin=is_admin)

    return token


async def get_session(redis: Redis, token: Optional[str]) -> Optional[dict]:
    """Get session data from Redis.

    Args:
        redis: Redis client
        token: Session token from cookie

    Returns:
        Session dict with user_id, email, is_admin or None
    """
    if not token:
        return None

    data = await redis.get(f"{SESSION_PREFIX}{token}")
    if not data:
        return None

    try:
        return json.loads(data)
    except (json.JSONDecodeError, TypeError):
        return None


async def delete_session(redis: Redis, token: str) -> None:
    """Delete session from Redis."""
    await redis.delete(f"{SESSION_PREFIX}{token}")
