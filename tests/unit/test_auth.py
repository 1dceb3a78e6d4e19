"""Tests for password hashing and Redis sessions."""

import json

import pytest

from constructpro.admin.auth import (
    SESSION_PREFIX,
    create_session,
    delete_session,
    get_session,
    hash_password,
    verify_password,
)
from constructpro.config import settings


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong", hashed)

    def test_malformed_or_empty_hash_never_matches(self):
        assert not verify_password("anything", "")
        assert not verify_password("anything", "not-a-hash")


class TestSessions:

    @pytest.mark.asyncio
    async def test_create_stores_with_ttl(self, mock_redis):
        token = await create_session(mock_redis, "user-1", "owner@constructpro.com", is_admin=True)

        key, ttl, data = mock_redis.setex.call_args.args
        assert key == f"{SESSION_PREFIX}{token}"
        assert ttl == settings.session_ttl_seconds
        assert json.loads(data) == {
            "user_id": "user-1",
            "email": "owner@constructpro.com",
            "is_admin": True,
        }

    @pytest.mark.asyncio
    async def test_get_round_trip(self, mock_redis):
        token = await create_session(mock_redis, "user-2", "visitor@example.com")
        session = await get_session(mock_redis, token)
        assert session["user_id"] == "user-2"
        assert session["is_admin"] is False

    @pytest.mark.asyncio
    async def test_missing_token_or_session(self, mock_redis):
        assert await get_session(mock_redis, None) is None
        assert await get_session(mock_redis, "unknown") is None

    @pytest.mark.asyncio
    async def test_corrupt_session_is_ignored(self, mock_redis):
        mock_redis.store[f"{SESSION_PREFIX}bad"] = "{not json"
        assert await get_session(mock_redis, "bad") is None

    @pytest.mark.asyncio
    async def test_delete(self, mock_redis):
        token = await create_session(mock_redis, "user-3", "someone@example.com")
        await delete_session(mock_redis, token)
        assert await get_session(mock_redis, token) is None
