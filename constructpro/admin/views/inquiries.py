"""Contact inquiry views: list and status updates."""

from __future__ import annotations

import uuid
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.dependencies import admin_gate, get_current_user, htmx_gate
from constructpro.database import get_db
from constructpro.formatting import INQUIRY_STATUS_LABELS
from constructpro.models.contact_inquiry import INQUIRY_STATUSES
from constructpro.models.profile import Profile
from constructpro.repositories.inquiry import InquiryRepository
from constructpro.templating import templates
from constructpro.toasts import get_toast, htmx_toast_response, toast_headers

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/inquiries", tags=["admin-inquiries"])


@router.get("", response_class=HTMLResponse)
async def inquiries_list(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All inquiries, newest first."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    toast = None
    try:
        inquiries = await InquiryRepository(db).list_all()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("inquiries_fetch_failed", error=str(e))
        inquiries = []
        toast = "inquiry_load_failed"

    return templates.TemplateResponse(request, "admin/inquiries/list.html", {
        "user": user,
        "active_page": "inquiries",
        "inquiries": inquiries,
        "status_labels": INQUIRY_STATUS_LABELS,
        "toast": get_toast(toast),
    })


@router.patch("/{inquiry_id}/status", response_class=HTMLResponse)
async def update_inquiry_status(
    request: Request,
    inquiry_id: uuid.UUID,
    new_status: str = Form(...),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update inquiry status (HTMX partial, returns the new badge)."""
    denied = htmx_gate(user)
    if denied is not None:
        return denied

    if new_status not in INQUIRY_STATUSES:
        return HTMLResponse("Invalid status", status_code=400)

    try:
        updated = await InquiryRepository(db).update_status(inquiry_id, new_status)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("inquiry_status_update_failed", inquiry_id=str(inquiry_id), error=str(e))
        return htmx_toast_response("inquiry_update_failed", swap=False)

    if not updated:
        return htmx_toast_response("inquiry_update_failed", swap=False)

    logger.info("inquiry_status_updated", inquiry_id=str(inquiry_id), new_status=new_status)

    return templates.TemplateResponse(
        request,
        "admin/inquiries/_status_badge.html",
        {"status": new_status},
        headers=toast_headers("inquiry_status_updated"),
    )
