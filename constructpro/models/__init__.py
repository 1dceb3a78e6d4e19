"""SQLAlchemy ORM models."""

from constructpro.models.base import Base
from constructpro.models.contact_inquiry import ContactInquiry
from constructpro.models.profile import Profile
from constructpro.models.project import Project
from constructpro.models.testimonial import Testimonial

__all__ = [
    "Base",
    "ContactInquiry",
    "Profile",
    "Project",
    "Testimonial",
]
