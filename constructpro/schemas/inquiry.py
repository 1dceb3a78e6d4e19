"""Contact inquiry schemas for the landing form and the API."""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from constructpro.schemas.common import FormModel


class ContactForm(FormModel):
    """Contact form as submitted by a site visitor."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    project_type: Optional[str] = Field(None, max_length=50)
    message: str = Field(..., min_length=1)

    @field_validator("phone", "project_type", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return cls.blank_to_none(value)

    def to_inquiry_values(self) -> dict:
        """Map form fields onto contact_inquiries columns."""
        return {
            "name": f"{self.first_name} {self.last_name}".strip(),
            "email": self.email,
            "phone": self.phone,
            "subject": f"{self.project_type or ''} Inquiry".strip(),
            "message": self.message,
            "service_type": self.project_type,
            "status": "new",
        }
