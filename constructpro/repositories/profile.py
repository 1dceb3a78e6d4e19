"""Profile repository: account lookups for sign-in and the users tab."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select

from constructpro.models.profile import Profile
from constructpro.repositories.base import TableRepository


class ProfileRepository(TableRepository[Profile]):
    model = Profile

    async def get_by_email(self, email: str) -> Optional[Profile]:
        result = await self.db.execute(
            select(Profile).where(func.lower(Profile.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> Sequence[Profile]:
        return await self.select_rows()
