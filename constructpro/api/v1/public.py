"""Public JSON API: portfolio, testimonials, and contact submissions."""

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro import __version__
from constructpro.database import get_db
from constructpro.notifications.telegram import notify_new_inquiry
from constructpro.repositories.inquiry import InquiryRepository
from constructpro.repositories.project import ProjectRepository
from constructpro.repositories.testimonial import TestimonialRepository
from constructpro.schemas.inquiry import ContactForm
from constructpro.schemas.project import ProjectOut
from constructpro.schemas.testimonial import TestimonialOut

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1", tags=["public"])


@router.get("/projects")
async def list_projects(
    limit: int = Query(6, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Completed projects, newest first.

    Returns:
        {"projects": [...]}
    """
    try:
        projects = await ProjectRepository(db).list_featured(limit)
    except SQLAlchemyError as e:
        logger.error("api_projects_fetch_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load projects")

    return {
        "projects": [
            ProjectOut(
                id=str(p.id),
                title=p.title,
                description=p.description,
                category=p.category,
                location=p.location,
                status=p.status,
                budget=float(p.budget) if p.budget is not None else None,
                image_url=p.image_url,
                completion_date=p.completion_date,
                created_at=p.created_at,
            ).model_dump(mode="json")
            for p in projects
        ],
    }


@router.get("/testimonials")
async def list_testimonials(
    limit: int = Query(6, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Active testimonials, newest first."""
    try:
        testimonials = await TestimonialRepository(db).list_active(limit)
    except SQLAlchemyError as e:
        logger.error("api_testimonials_fetch_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load testimonials")

    return {
        "testimonials": [
            TestimonialOut(
                id=str(t.id),
                client_name=t.client_name,
                project_title=t.project_title,
                rating=t.rating,
                testimonial=t.testimonial,
                created_at=t.created_at,
            ).model_dump(mode="json")
            for t in testimonials
        ],
    }


@router.post("/contact-inquiries", status_code=201)
async def create_contact_inquiry(
    data: ContactForm,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Save a contact inquiry and notify the owner."""
    try:
        inquiry = await InquiryRepository(db).insert(data.to_inquiry_values())
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("api_inquiry_create_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to send message")

    logger.info("inquiry_created", inquiry_id=str(inquiry.id), source="api")
    background_tasks.add_task(notify_new_inquiry, inquiry)

    return {"status": "ok", "id": str(inquiry.id)}


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
