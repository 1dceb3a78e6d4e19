"""Dashboard views: landing tab and aggregate counts."""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.dependencies import admin_gate, get_current_user, htmx_gate
from constructpro.database import get_db
from constructpro.models.profile import Profile
from constructpro.repositories import (
    InquiryRepository,
    ProfileRepository,
    ProjectRepository,
    TestimonialRepository,
)
from constructpro.templating import templates

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/dashboard", tags=["admin-dashboard"])

# (key, title, repository) in display order
STAT_CARDS = [
    ("total_projects", "Total Projects", ProjectRepository),
    ("total_inquiries", "Contact Inquiries", InquiryRepository),
    ("total_users", "Registered Users", ProfileRepository),
    ("total_testimonials", "Testimonials", TestimonialRepository),
]


async def collect_stats(db: AsyncSession) -> dict[str, int]:
    """Row counts for the stat cards. Any failure zeroes all of them."""
    stats = {key: 0 for key, _, _ in STAT_CARDS}
    try:
        for key, _, repo_cls in STAT_CARDS:
            stats[key] = await repo_cls(db).count()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("dashboard_stats_failed", error=str(e))
        return {key: 0 for key, _, _ in STAT_CARDS}
    return stats


@router.get("", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
):
    """Dashboard opens on the projects tab."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied
    return RedirectResponse(url="/admin/projects")


@router.get("/stats", response_class=HTMLResponse)
async def dashboard_stats(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Stat cards partial (HTMX, loaded with every dashboard tab)."""
    denied = htmx_gate(user)
    if denied is not None:
        return denied

    stats = await collect_stats(db)
    cards = [(title, stats[key]) for key, title, _ in STAT_CARDS]

    return templates.TemplateResponse(request, "admin/partials/stats.html", {
        "cards": cards,
    })
