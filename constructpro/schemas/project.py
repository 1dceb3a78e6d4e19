"""Project schemas for dashboard forms and the public API."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from constructpro.schemas.common import FormModel


class ProjectForm(FormModel):
    """Create/update payload from the dashboard project form."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    status: Literal["planning", "in_progress", "completed"] = "planning"
    budget: Optional[Decimal] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    completion_date: Optional[date] = None

    @field_validator(
        "description", "location", "budget", "image_url", "completion_date",
        mode="before",
    )
    @classmethod
    def _blank_optional(cls, value):
        return cls.blank_to_none(value)

    @field_validator("category")
    @classmethod
    def _lower_category(cls, value: str) -> str:
        return value.lower()


class ProjectOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    category: str
    location: Optional[str] = None
    status: str
    budget: Optional[float] = None
    image_url: Optional[str] = None
    completion_date: Optional[date] = None
    created_at: Optional[datetime] = None
