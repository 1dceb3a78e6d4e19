"""Contact inquiry model: stores landing page contact form submissions."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from constructpro.models.base import Base, TimestampMixin, UUIDMixin

INQUIRY_STATUSES = ("new", "contacted", "converted", "closed")


class ContactInquiry(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "contact_inquiries"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    service_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="new")  # new|contacted|converted|closed
