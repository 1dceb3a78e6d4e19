"""Contact inquiry repository."""

from __future__ import annotations

import uuid
from typing import Sequence

from constructpro.models.contact_inquiry import INQUIRY_STATUSES, ContactInquiry
from constructpro.repositories.base import TableRepository


class InquiryRepository(TableRepository[ContactInquiry]):
    model = ContactInquiry

    async def list_all(self) -> Sequence[ContactInquiry]:
        return await self.select_rows()

    async def update_status(self, inquiry_id: uuid.UUID, status: str) -> bool:
        if status not in INQUIRY_STATUSES:
            raise ValueError(f"Unknown inquiry status: {status}")
        return await self.update(inquiry_id, {"status": status})
