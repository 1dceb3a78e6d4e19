"""Testimonial model: client reviews, only active ones are public."""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from constructpro.models.base import Base, TimestampMixin, UUIDMixin


class Testimonial(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "testimonials"

    client_name: Mapped[str] = mapped_column(String(200), nullable=False)
    project_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    rating: Mapped[int] = mapped_column(Integer, default=5)  # 1..5
    testimonial: Mapped[str] = mapped_column(Text, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
