"""Sign-in, sign-up, sign-out, and the dashboard entry point."""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from redis.asyncio import Redis
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.admin.auth import (
    create_session,
    delete_session,
    hash_password,
    verify_password,
)
from constructpro.admin.dependencies import get_current_user
from constructpro.config import settings
from constructpro.database import get_db
from constructpro.models.profile import Profile
from constructpro.redis_client import get_redis
from constructpro.repositories.profile import ProfileRepository
from constructpro.schemas.auth import SignUpForm
from constructpro.schemas.common import form_errors
from constructpro.templating import templates

logger = structlog.get_logger()

router = APIRouter(tags=["auth"])


def _auth_page(request: Request, status_code: int = 200, **extra) -> HTMLResponse:
    context = {
        "mode": "sign-in",
        "error": None,
        "errors": {},
        "form": {},
    }
    context.update(extra)
    return templates.TemplateResponse(request, "auth/login.html", context, status_code=status_code)


async def _signed_in_redirect(redis: Redis, profile: Profile) -> RedirectResponse:
    """Open a session for ``profile`` and send them where they belong."""
    token = await create_session(
        redis=redis,
        user_id=str(profile.id),
        email=profile.email,
        is_admin=profile.is_admin,
    )

    url = "/admin/dashboard" if profile.is_admin else "/"
    response = RedirectResponse(url=url, status_code=303)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.session_ttl_seconds,
    )
    return response


@router.get("/auth", response_class=HTMLResponse)
async def auth_page(
    request: Request,
    mode: str = "sign-in",
    user: Optional[Profile] = Depends(get_current_user),
):
    """Show the sign-in / sign-up page."""
    if user is not None:
        return RedirectResponse(url="/admin/dashboard" if user.is_admin else "/")
    return _auth_page(request, mode="sign-up" if mode == "sign-up" else "sign-in")


@router.post("/auth/sign-in")
async def sign_in(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
):
    """Verify credentials and start a session."""
    try:
        profile = await ProfileRepository(db).get_by_email(email)
    except SQLAlchemyError as e:
        logger.error("sign_in_lookup_failed", error=str(e))
        return _auth_page(
            request,
            status_code=500,
            error="Sign in failed. Please try again.",
            form={"email": email},
        )

    if profile is None or not verify_password(password, profile.password_hash):
        logger.warning("sign_in_invalid_credentials", email=email)
        return _auth_page(
            request,
            status_code=401,
            error="Invalid email or password.",
            form={"email": email},
        )

    logger.info("sign_in_success", user_id=str(profile.id), is_admin=profile.is_admin)
    return await _signed_in_redirect(redis, profile)


@router.post("/auth/sign-up")
async def sign_up(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    full_name: str = Form(""),
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
):
    """Register a regular (non-admin) account and sign it in."""
    submitted = {"email": email, "full_name": full_name}
    try:
        form = SignUpForm(email=email, password=password, full_name=full_name)
    except ValidationError as e:
        return _auth_page(
            request, status_code=422, mode="sign-up", errors=form_errors(e), form=submitted,
        )

    repo = ProfileRepository(db)
    try:
        if await repo.get_by_email(form.email) is not None:
            return _auth_page(
                request,
                status_code=409,
                mode="sign-up",
                error="An account with this email already exists.",
                form=submitted,
            )
        profile = await repo.insert({
            "email": form.email.lower(),
            "full_name": form.full_name,
            "password_hash": hash_password(form.password),
            "is_admin": False,
        })
        await db.commit()
    except IntegrityError:
        await db.rollback()
        return _auth_page(
            request,
            status_code=409,
            mode="sign-up",
            error="An account with this email already exists.",
            form=submitted,
        )
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("sign_up_failed", error=str(e))
        return _auth_page(
            request,
            status_code=500,
            mode="sign-up",
            error="Sign up failed. Please try again.",
            form=submitted,
        )

    logger.info("sign_up_success", user_id=str(profile.id))
    return await _signed_in_redirect(redis, profile)


@router.get("/auth/sign-out")
async def sign_out(
    request: Request,
    redis: Redis = Depends(get_redis),
):
    """Clear session and go back to the site."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        await delete_session(redis, token)

    response = RedirectResponse(url="/", status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/admin")
async def admin_root():
    """Dashboard entry point."""
    return RedirectResponse(url="/admin/dashboard")
