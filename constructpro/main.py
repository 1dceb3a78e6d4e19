"""FastAPI application entry point."""

import logging
import pathlib
import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from constructpro import __version__
from constructpro.admin.router import router as auth_router
from constructpro.admin.views.dashboard import router as admin_dashboard_router
from constructpro.admin.views.inquiries import router as admin_inquiries_router
from constructpro.admin.views.projects import router as admin_projects_router
from constructpro.admin.views.testimonials import router as admin_testimonials_router
from constructpro.admin.views.users import router as admin_users_router
from constructpro.api.v1.public import router as public_api_router
from constructpro.config import settings
from constructpro.database import engine
from constructpro.landing.router import router as landing_router
from constructpro.redis_client import get_redis_client

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer() if settings.environment == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info(
        "app_starting",
        environment=settings.environment,
        site_name=settings.site_name,
    )
    yield
    await get_redis_client().aclose()
    await engine.dispose()
    logger.info("app_shutting_down")


app = FastAPI(
    title=f"{settings.site_name} Site",
    description="Construction company website with an admin dashboard",
    version=__version__,
    lifespan=lifespan,
)

_static = pathlib.Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(_static)), name="static")

# Include routers
app.include_router(landing_router)
app.include_router(auth_router)
app.include_router(admin_dashboard_router)
app.include_router(admin_projects_router)
app.include_router(admin_inquiries_router)
app.include_router(admin_testimonials_router)
app.include_router(admin_users_router)
app.include_router(public_api_router)
