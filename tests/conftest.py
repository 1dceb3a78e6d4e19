"""Test fixtures and configuration."""

import os

# Settings are read at import time; point them at throwaway backends first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ["SESSION_COOKIE_SECURE"] = "false"
os.environ["INQUIRY_NOTIFY_TELEGRAM_BOT_TOKEN"] = ""
os.environ["INQUIRY_NOTIFY_TELEGRAM_CHAT_ID"] = ""

from datetime import datetime, timedelta, timezone  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from constructpro.admin.auth import create_session, hash_password  # noqa: E402
from constructpro.config import settings  # noqa: E402
from constructpro.database import get_db  # noqa: E402
from constructpro.main import app  # noqa: E402
from constructpro.models import ContactInquiry, Profile, Project, Testimonial  # noqa: E402
from constructpro.models.base import Base  # noqa: E402
from constructpro.redis_client import get_redis  # noqa: E402

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture
def at():
    """Deterministic created_at values so newest-first ordering is testable."""
    return _at


@pytest.fixture
def mock_redis():
    """Mock Redis client backed by a dict."""
    store: dict = {}

    async def _get(key):
        return store.get(key)

    async def _setex(key, ttl, value):
        store[key] = value

    async def _delete(key):
        store.pop(key, None)

    redis = AsyncMock()
    redis.get = AsyncMock(side_effect=_get)
    redis.setex = AsyncMock(side_effect=_setex)
    redis.delete = AsyncMock(side_effect=_delete)
    redis.store = store
    return redis


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    """Session for seeding and checking rows. Commit before making requests."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory, mock_redis):
    """HTTP client against the app with database and Redis overridden."""

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def _get_redis():
        return mock_redis

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_redis] = _get_redis

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _signed_in(client: AsyncClient, redis, profile: Profile) -> AsyncClient:
    token = await create_session(redis, str(profile.id), profile.email, profile.is_admin)
    client.cookies.set(settings.session_cookie_name, token)
    return client


@pytest_asyncio.fixture
async def admin_profile(db):
    profile = Profile(
        email="owner@constructpro.com",
        full_name="Site Owner",
        password_hash=hash_password("admin-secret"),
        is_admin=True,
        created_at=_at(0),
    )
    db.add(profile)
    await db.commit()
    return profile


@pytest_asyncio.fixture
async def user_profile(db):
    profile = Profile(
        email="visitor@example.com",
        full_name="Regular Visitor",
        password_hash=hash_password("visitor-secret"),
        is_admin=False,
        created_at=_at(1),
    )
    db.add(profile)
    await db.commit()
    return profile


@pytest_asyncio.fixture
async def admin_client(client, mock_redis, admin_profile):
    """Client holding a session cookie for an admin profile."""
    return await _signed_in(client, mock_redis, admin_profile)


@pytest_asyncio.fixture
async def user_client(client, mock_redis, user_profile):
    """Client holding a session cookie for a non-admin profile."""
    return await _signed_in(client, mock_redis, user_profile)


@pytest.fixture
def make_project(db):
    async def _make(**overrides) -> Project:
        values = {
            "title": "Riverside Villa",
            "description": "Four-bedroom villa with a river view.",
            "category": "villa",
            "location": "Austin, TX",
            "status": "completed",
            "budget": 1250000,
            "created_at": _at(0),
        }
        values.update(overrides)
        project = Project(**values)
        db.add(project)
        await db.commit()
        return project

    return _make


@pytest.fixture
def make_testimonial(db):
    async def _make(**overrides) -> Testimonial:
        values = {
            "client_name": "Dana Whitfield",
            "project_title": "Riverside Villa",
            "rating": 5,
            "testimonial": "They finished ahead of schedule.",
            "active": True,
            "created_at": _at(0),
        }
        values.update(overrides)
        testimonial = Testimonial(**values)
        db.add(testimonial)
        await db.commit()
        return testimonial

    return _make


@pytest.fixture
def make_inquiry(db):
    async def _make(**overrides) -> ContactInquiry:
        values = {
            "name": "Sam Carter",
            "email": "sam@example.com",
            "phone": "+1 555 0100",
            "subject": "commercial Inquiry",
            "message": "Looking to build a two-storey office.",
            "service_type": "commercial",
            "status": "new",
            "created_at": _at(0),
        }
        values.update(overrides)
        inquiry = ContactInquiry(**values)
        db.add(inquiry)
        await db.commit()
        return inquiry

    return _make
