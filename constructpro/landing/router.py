"""Landing page and contact form routes."""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.dependencies import get_current_user
from constructpro.config import settings
from constructpro.database import get_db
from constructpro.landing import content
from constructpro.models.profile import Profile
from constructpro.notifications.telegram import notify_new_inquiry
from constructpro.repositories.inquiry import InquiryRepository
from constructpro.repositories.project import ProjectRepository
from constructpro.repositories.testimonial import TestimonialRepository
from constructpro.schemas.common import form_errors
from constructpro.schemas.inquiry import ContactForm
from constructpro.templating import templates
from constructpro.toasts import get_toast

logger = structlog.get_logger()

router = APIRouter(tags=["landing"])


async def _render_landing(
    request: Request,
    db: AsyncSession,
    user: Optional[Profile],
    status_code: int = 200,
    **extra,
) -> HTMLResponse:
    """Render the full page. Section fetch failures degrade to empty lists."""
    try:
        projects = await ProjectRepository(db).list_featured(settings.featured_projects_limit)
    except SQLAlchemyError as e:
        logger.error("featured_projects_fetch_failed", error=str(e))
        await db.rollback()
        projects = []

    try:
        testimonials = await TestimonialRepository(db).list_active(
            settings.featured_testimonials_limit
        )
    except SQLAlchemyError as e:
        logger.error("active_testimonials_fetch_failed", error=str(e))
        await db.rollback()
        testimonials = []

    context = {
        "user": user,
        "projects": projects,
        "testimonials": testimonials,
        "navigation_items": content.NAVIGATION_ITEMS,
        "services": content.SERVICES,
        "highlights": content.HIGHLIGHTS,
        "values": content.VALUES,
        "company_stats": content.COMPANY_STATS,
        "contact_details": content.CONTACT_DETAILS,
        "project_types": content.PROJECT_TYPES,
        "form": {},
        "errors": {},
        "toast": None,
    }
    context.update(extra)
    return templates.TemplateResponse(request, "landing/index.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def landing_page(
    request: Request,
    toast: Optional[str] = None,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Serve the marketing page."""
    return await _render_landing(request, db, user, toast=get_toast(toast))


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    background_tasks: BackgroundTasks,
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    project_type: str = Form(""),
    message: str = Form(""),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Store a contact inquiry and notify the owner."""
    submitted = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": phone,
        "project_type": project_type,
        "message": message,
    }

    try:
        form = ContactForm(**submitted)
    except ValidationError as e:
        return await _render_landing(
            request, db, user,
            status_code=422,
            form=submitted,
            errors=form_errors(e),
            toast=get_toast("form_invalid"),
        )

    try:
        inquiry = await InquiryRepository(db).insert(form.to_inquiry_values())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("inquiry_create_failed", error=str(e))
        return await _render_landing(
            request, db, user,
            status_code=500,
            form=submitted,
            toast=get_toast("inquiry_send_failed"),
        )

    logger.info(
        "inquiry_created",
        inquiry_id=str(inquiry.id),
        service_type=inquiry.service_type,
    )
    background_tasks.add_task(notify_new_inquiry, inquiry)

    return RedirectResponse(url="/?toast=inquiry_sent#contact", status_code=303)
