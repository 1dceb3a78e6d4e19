"""Testimonial schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from constructpro.schemas.common import FormModel


class TestimonialForm(FormModel):
    """Create/update payload from the dashboard testimonial form."""

    client_name: str = Field(..., min_length=1, max_length=200)
    project_title: Optional[str] = Field(None, max_length=255)
    rating: int = Field(5, ge=1, le=5)
    testimonial: str = Field(..., min_length=1)
    active: bool = True

    @field_validator("project_title", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return cls.blank_to_none(value)


class TestimonialOut(BaseModel):
    id: str
    client_name: str
    project_title: Optional[str] = None
    rating: int
    testimonial: str
    created_at: Optional[datetime] = None
