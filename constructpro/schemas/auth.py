"""Sign-in and sign-up payloads."""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from constructpro.schemas.common import FormModel


class SignUpForm(FormModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    full_name: Optional[str] = Field(None, max_length=200)

    @field_validator("full_name", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return cls.blank_to_none(value)
