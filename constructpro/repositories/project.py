"""Project repository."""

from __future__ import annotations

from typing import Sequence

from constructpro.models.project import Project
from constructpro.repositories.base import TableRepository


class ProjectRepository(TableRepository[Project]):
    model = Project

    async def list_all(self) -> Sequence[Project]:
        return await self.select_rows()

    async def list_featured(self, limit: int = 6) -> Sequence[Project]:
        """Completed projects for the public portfolio, newest first."""
        return await self.select_rows({"status": "completed"}, limit=limit)
