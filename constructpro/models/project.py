"""Project model: portfolio entries shown on the site and managed in the dashboard."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from constructpro.models.base import Base, TimestampMixin, UUIDMixin

PROJECT_STATUSES = ("planning", "in_progress", "completed")


class Project(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="planning")  # planning|in_progress|completed

    budget: Mapped[Optional[Decimal]] = mapped_column(Numeric(14, 2), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    completion_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
