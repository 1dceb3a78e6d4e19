"""Testimonial views: list, create, edit, activate/deactivate, delete."""

from __future__ import annotations

import uuid
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.dependencies import admin_gate, get_current_user, htmx_gate
from constructpro.database import get_db
from constructpro.models.profile import Profile
from constructpro.repositories.testimonial import TestimonialRepository
from constructpro.schemas.common import form_errors
from constructpro.schemas.testimonial import TestimonialForm
from constructpro.templating import templates
from constructpro.toasts import get_toast, htmx_toast_response, toast_headers

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/testimonials", tags=["admin-testimonials"])

RATING_OPTIONS = [(n, "1 Star" if n == 1 else f"{n} Stars") for n in range(1, 6)]

EMPTY_FORM = {
    "client_name": "",
    "project_title": "",
    "rating": "5",
    "testimonial": "",
    "active": True,
}


def _form_page(
    request: Request,
    user: Profile,
    testimonial=None,
    form: Optional[dict] = None,
    errors: Optional[dict] = None,
    toast: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    if testimonial is not None:
        form_action = f"/admin/testimonials/{testimonial.id}"
        form_title = "Edit Testimonial"
        form_description = "Update testimonial details"
        submit_label = "Update Testimonial"
    else:
        form_action = "/admin/testimonials"
        form_title = "Add New Testimonial"
        form_description = "Create a new customer testimonial"
        submit_label = "Create Testimonial"

    return templates.TemplateResponse(request, "admin/testimonials/form.html", {
        "user": user,
        "active_page": "testimonials",
        "testimonial": testimonial,
        "form": form or dict(EMPTY_FORM),
        "errors": errors or {},
        "form_action": form_action,
        "form_title": form_title,
        "form_description": form_description,
        "submit_label": submit_label,
        "rating_options": RATING_OPTIONS,
        "toast": get_toast(toast),
    }, status_code=status_code)


def _submitted(client_name, project_title, rating, testimonial, active) -> dict:
    return {
        "client_name": client_name,
        "project_title": project_title,
        "rating": rating,
        "testimonial": testimonial,
        "active": active,
    }


@router.get("", response_class=HTMLResponse)
async def testimonials_list(
    request: Request,
    toast: Optional[str] = None,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All testimonials, newest first, active or not."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    try:
        testimonials = await TestimonialRepository(db).list_all()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonials_fetch_failed", error=str(e))
        testimonials = []
        toast = "testimonial_load_failed"

    return templates.TemplateResponse(request, "admin/testimonials/list.html", {
        "user": user,
        "active_page": "testimonials",
        "testimonials": testimonials,
        "toast": get_toast(toast),
    })


@router.get("/new", response_class=HTMLResponse)
async def testimonial_new(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
):
    """Form to create a new testimonial."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied
    return _form_page(request, user)


@router.post("", response_class=HTMLResponse)
async def testimonial_create(
    request: Request,
    client_name: str = Form(""),
    project_title: str = Form(""),
    rating: str = Form("5"),
    testimonial: str = Form(""),
    active: bool = Form(False),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new testimonial."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    submitted = _submitted(client_name, project_title, rating, testimonial, active)
    try:
        form = TestimonialForm(**submitted)
    except ValidationError as e:
        return _form_page(
            request, user, form=submitted, errors=form_errors(e),
            toast="form_invalid", status_code=422,
        )

    try:
        row = await TestimonialRepository(db).insert(form.model_dump())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonial_create_failed", error=str(e))
        return _form_page(
            request, user, form=submitted, toast="testimonial_save_failed", status_code=500,
        )

    logger.info("testimonial_created", testimonial_id=str(row.id), rating=row.rating)
    return RedirectResponse(url="/admin/testimonials?toast=testimonial_created", status_code=303)


@router.get("/{testimonial_id}/edit", response_class=HTMLResponse)
async def testimonial_edit(
    request: Request,
    testimonial_id: uuid.UUID,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Form to edit an existing testimonial."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    try:
        row = await TestimonialRepository(db).get(testimonial_id)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonial_fetch_failed", testimonial_id=str(testimonial_id), error=str(e))
        return RedirectResponse(
            url="/admin/testimonials?toast=testimonial_load_failed", status_code=303,
        )

    if row is None:
        return RedirectResponse(
            url="/admin/testimonials?toast=testimonial_not_found", status_code=303,
        )

    form = _submitted(
        row.client_name,
        row.project_title or "",
        str(row.rating or 5),
        row.testimonial,
        True if row.active is None else row.active,
    )
    return _form_page(request, user, testimonial=row, form=form)


@router.post("/{testimonial_id}", response_class=HTMLResponse)
async def testimonial_update(
    request: Request,
    testimonial_id: uuid.UUID,
    client_name: str = Form(""),
    project_title: str = Form(""),
    rating: str = Form("5"),
    testimonial: str = Form(""),
    active: bool = Form(False),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a testimonial."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    repo = TestimonialRepository(db)
    submitted = _submitted(client_name, project_title, rating, testimonial, active)
    try:
        form = TestimonialForm(**submitted)
    except ValidationError as e:
        try:
            row = await repo.get(testimonial_id)
        except SQLAlchemyError as db_error:
            await db.rollback()
            logger.error(
                "testimonial_fetch_failed", testimonial_id=str(testimonial_id), error=str(db_error),
            )
            return RedirectResponse(
                url="/admin/testimonials?toast=testimonial_load_failed", status_code=303,
            )
        if row is None:
            return RedirectResponse(
                url="/admin/testimonials?toast=testimonial_not_found", status_code=303,
            )
        return _form_page(
            request, user, testimonial=row, form=submitted, errors=form_errors(e),
            toast="form_invalid", status_code=422,
        )

    try:
        updated = await repo.update(testimonial_id, form.model_dump())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonial_update_failed", testimonial_id=str(testimonial_id), error=str(e))
        return RedirectResponse(
            url="/admin/testimonials?toast=testimonial_save_failed", status_code=303,
        )

    if not updated:
        return RedirectResponse(
            url="/admin/testimonials?toast=testimonial_not_found", status_code=303,
        )

    logger.info("testimonial_updated", testimonial_id=str(testimonial_id))
    return RedirectResponse(url="/admin/testimonials?toast=testimonial_updated", status_code=303)


@router.post("/{testimonial_id}/toggle", response_class=HTMLResponse)
async def testimonial_toggle(
    request: Request,
    testimonial_id: uuid.UUID,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Flip the active flag (HTMX, returns the updated row)."""
    denied = htmx_gate(user)
    if denied is not None:
        return denied

    repo = TestimonialRepository(db)
    try:
        row = await repo.get(testimonial_id)
        if row is None:
            return htmx_toast_response("testimonial_not_found", swap=False)

        new_active = not row.active
        await repo.set_active(testimonial_id, new_active)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonial_toggle_failed", testimonial_id=str(testimonial_id), error=str(e))
        return htmx_toast_response("testimonial_update_failed", swap=False)

    row.active = new_active
    logger.info("testimonial_toggled", testimonial_id=str(testimonial_id), active=new_active)

    toast = "testimonial_activated" if new_active else "testimonial_deactivated"
    return templates.TemplateResponse(
        request,
        "admin/testimonials/_row.html",
        {"testimonial": row},
        headers=toast_headers(toast),
    )


@router.delete("/{testimonial_id}", response_class=HTMLResponse)
async def testimonial_delete(
    testimonial_id: uuid.UUID,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a testimonial (HTMX; the row is removed on success)."""
    denied = htmx_gate(user)
    if denied is not None:
        return denied

    try:
        deleted = await TestimonialRepository(db).delete(testimonial_id)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("testimonial_delete_failed", testimonial_id=str(testimonial_id), error=str(e))
        return htmx_toast_response("testimonial_delete_failed", swap=False)

    if not deleted:
        return htmx_toast_response("testimonial_not_found", swap=False)

    logger.info("testimonial_deleted", testimonial_id=str(testimonial_id))
    return htmx_toast_response("testimonial_deleted")
