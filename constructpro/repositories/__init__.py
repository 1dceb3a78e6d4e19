"""Table access: thin query passthroughs over the hosted database."""

from constructpro.repositories.base import TableRepository
from constructpro.repositories.inquiry import InquiryRepository
from constructpro.repositories.profile import ProfileRepository
from constructpro.repositories.project import ProjectRepository
from constructpro.repositories.testimonial import TestimonialRepository

__all__ = [
    "TableRepository",
    "InquiryRepository",
    "ProfileRepository",
    "ProjectRepository",
    "TestimonialRepository",
]
