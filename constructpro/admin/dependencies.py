"""FastAPI dependencies for the signed-in user and dashboard gating."""

from __future__ import annotations

import uuid
from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.responses import RedirectResponse, Response
from redis.asyncio import Redis
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.auth import get_session
from constructpro.config import settings
from constructpro.database import get_db
from constructpro.models.profile import Profile
from constructpro.redis_client import get_redis
from constructpro.repositories.profile import ProfileRepository
from constructpro.templating import templates

logger = structlog.get_logger()


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
) -> Optional[Profile]:
    """Get the signed-in profile from the session cookie.

    Returns None if not signed in (views decide whether to redirect).
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    session = await get_session(redis, token)
    if not session:
        return None

    try:
        user_id = uuid.UUID(session.get("user_id", ""))
    except (TypeError, ValueError):
        return None

    try:
        return await ProfileRepository(db).get(user_id)
    except SQLAlchemyError as e:
        logger.error("current_user_lookup_failed", error=str(e))
        return None


def admin_gate(request: Request, user: Optional[Profile]) -> Optional[Response]:
    """Response to send instead of a dashboard page, or None to proceed.

    Signed-out visitors go to the sign-in page; signed-in non-admins get
    the access denied page.
    """
    if user is None:
        return RedirectResponse(url="/auth", status_code=303)
    if not user.is_admin:
        logger.warning("dashboard_access_denied", user_id=str(user.id))
        return templates.TemplateResponse(
            request,
            "admin/access_denied.html",
            {"user": user},
            status_code=403,
        )
    return None


def htmx_gate(user: Optional[Profile]) -> Optional[Response]:
    """Plain-status variant of admin_gate for HTMX partial endpoints."""
    if user is None:
        return Response("Unauthorized", status_code=401)
    if not user.is_admin:
        return Response("Forbidden", status_code=403)
    return None
