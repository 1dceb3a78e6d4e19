"""Project views: list, create, edit, delete."""

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
from constructpro.formatting import PROJECT_STATUS_LABELS
from constructpro.landing.content import PROJECT_TYPES
from constructpro.models.profile import Profile
from constructpro.repositories.project import ProjectRepository
from constructpro.schemas.common import form_errors
from constructpro.schemas.project import ProjectForm
from constructpro.templating import templates
from constructpro.toasts import get_toast, htmx_toast_response

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/projects", tags=["admin-projects"])


def _form_page(
    request: Request,
    user: Profile,
    project=None,
    form: Optional[dict] = None,
    errors: Optional[dict] = None,
    toast: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    if project is not None:
        form_action = f"/admin/projects/{project.id}"
        form_title = "Edit Project"
    else:
        form_action = "/admin/projects"
        form_title = "Add New Project"

    return templates.TemplateResponse(request, "admin/projects/form.html", {
        "user": user,
        "active_page": "projects",
        "project": project,
        "form": form or {},
        "errors": errors or {},
        "form_action": form_action,
        "form_title": form_title,
        "status_labels": PROJECT_STATUS_LABELS,
        "categories": PROJECT_TYPES,
        "toast": get_toast(toast),
    }, status_code=status_code)


def _project_form_values(project) -> dict:
    return {
        "title": project.title,
        "description": project.description or "",
        "category": project.category,
        "location": project.location or "",
        "status": project.status,
        "budget": "" if project.budget is None else str(project.budget),
        "image_url": project.image_url or "",
        "completion_date": project.completion_date.isoformat() if project.completion_date else "",
    }


@router.get("", response_class=HTMLResponse)
async def projects_list(
    request: Request,
    toast: Optional[str] = None,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All projects, newest first."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    try:
        projects = await ProjectRepository(db).list_all()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("projects_fetch_failed", error=str(e))
        projects = []
        toast = "project_load_failed"

    return templates.TemplateResponse(request, "admin/projects/list.html", {
        "user": user,
        "active_page": "projects",
        "projects": projects,
        "toast": get_toast(toast),
    })


@router.get("/new", response_class=HTMLResponse)
async def project_new(
    request: Request,
    user: Optional[Profile] = Depends(get_current_user),
):
    """Form to create a new project."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied
    return _form_page(request, user, form={"status": "planning"})


@router.post("", response_class=HTMLResponse)
async def project_create(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    location: str = Form(""),
    status: str = Form("planning"),
    budget: str = Form(""),
    image_url: str = Form(""),
    completion_date: str = Form(""),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    submitted = {
        "title": title,
        "description": description,
        "category": category,
        "location": location,
        "status": status,
        "budget": budget,
        "image_url": image_url,
        "completion_date": completion_date,
    }
    try:
        form = ProjectForm(**submitted)
    except ValidationError as e:
        return _form_page(
            request, user, form=submitted, errors=form_errors(e),
            toast="form_invalid", status_code=422,
        )

    try:
        project = await ProjectRepository(db).insert(form.model_dump())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("project_create_failed", error=str(e))
        return _form_page(
            request, user, form=submitted, toast="project_save_failed", status_code=500,
        )

    logger.info("project_created", project_id=str(project.id), title=project.title)
    return RedirectResponse(url="/admin/projects?toast=project_created", status_code=303)


@router.get("/{project_id}/edit", response_class=HTMLResponse)
async def project_edit(
    request: Request,
    project_id: uuid.UUID,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Form to edit an existing project."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    try:
        project = await ProjectRepository(db).get(project_id)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("project_fetch_failed", project_id=str(project_id), error=str(e))
        return RedirectResponse(url="/admin/projects?toast=project_load_failed", status_code=303)

    if project is None:
        return RedirectResponse(url="/admin/projects?toast=project_not_found", status_code=303)

    return _form_page(request, user, project=project, form=_project_form_values(project))


@router.post("/{project_id}", response_class=HTMLResponse)
async def project_update(
    request: Request,
    project_id: uuid.UUID,
    title: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    location: str = Form(""),
    status: str = Form("planning"),
    budget: str = Form(""),
    image_url: str = Form(""),
    completion_date: str = Form(""),
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a project."""
    denied = admin_gate(request, user)
    if denied is not None:
        return denied

    repo = ProjectRepository(db)
    submitted = {
        "title": title,
        "description": description,
        "category": category,
        "location": location,
        "status": status,
        "budget": budget,
        "image_url": image_url,
        "completion_date": completion_date,
    }
    try:
        form = ProjectForm(**submitted)
    except ValidationError as e:
        try:
            project = await repo.get(project_id)
        except SQLAlchemyError as db_error:
            await db.rollback()
            logger.error("project_fetch_failed", project_id=str(project_id), error=str(db_error))
            return RedirectResponse(url="/admin/projects?toast=project_load_failed", status_code=303)
        if project is None:
            return RedirectResponse(url="/admin/projects?toast=project_not_found", status_code=303)
        return _form_page(
            request, user, project=project, form=submitted, errors=form_errors(e),
            toast="form_invalid", status_code=422,
        )

    try:
        updated = await repo.update(project_id, form.model_dump())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("project_update_failed", project_id=str(project_id), error=str(e))
        return RedirectResponse(url="/admin/projects?toast=project_save_failed", status_code=303)

    if not updated:
        return RedirectResponse(url="/admin/projects?toast=project_not_found", status_code=303)

    logger.info("project_updated", project_id=str(project_id))
    return RedirectResponse(url="/admin/projects?toast=project_updated", status_code=303)


@router.delete("/{project_id}", response_class=HTMLResponse)
async def project_delete(
    project_id: uuid.UUID,
    user: Optional[Profile] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a project (HTMX; the row is removed on success)."""
    denied = htmx_gate(user)
    if denied is not None:
        return denied

    try:
        deleted = await ProjectRepository(db).delete(project_id)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("project_delete_failed", project_id=str(project_id), error=str(e))
        return htmx_toast_response("project_delete_failed", swap=False)

    if not deleted:
        return htmx_toast_response("project_not_found", swap=False)

    logger.info("project_deleted", project_id=str(project_id))
    return htmx_toast_response("project_deleted")
