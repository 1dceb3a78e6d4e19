"""Testimonial repository."""

from __future__ import annotations

import uuid
from typing import Sequence

from constructpro.models.testimonial import Testimonial
from constructpro.repositories.base import TableRepository


class TestimonialRepository(TableRepository[Testimonial]):
    model = Testimonial

    async def list_all(self) -> Sequence[Testimonial]:
        return await self.select_rows()

    async def list_active(self, limit: int = 6) -> Sequence[Testimonial]:
        """Testimonials visible on the website, newest first."""
        return await self.select_rows({"active": True}, limit=limit)

    async def set_active(self, testimonial_id: uuid.UUID, active: bool) -> bool:
        return await self.update(testimonial_id, {"active": active})
