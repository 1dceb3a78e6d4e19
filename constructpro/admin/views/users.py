"""Users view: read-only list of registered accounts."""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.dependencies import admin_gate, get_current_user
from constructpro.database import get_db
from constructpro.models.profile import Profile
from constructpro.repositories.profile import ProfileRepository
from constructpro.templating import templates
from constructpro.toasts import get_toast

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/users", tags=["admin-users"])


@router.get("", response_class=HTMLResponse)
async def users_list(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Registered profiles, newest first."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    toast = None
    try:
        profiles = await ProfileRepository(db).list_all()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("users_fetch_failed", error=str(e))
        profiles = []
        toast = "users_load_failed"

    return templates.TemplateResponse(request, "admin/users/list.html", {
        "user": user,
        "active_page": "users",
        "profiles": profiles,
        "toast": get_toast(toast),
    })
