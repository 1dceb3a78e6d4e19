"""Helpers shared by form schemas."""

from typing import Any, Dict

from pydantic import BaseModel, ValidationError


class FormModel(BaseModel):
    """Base for HTML form payloads: strips whitespace, blank optionals become None."""

    model_config = {"str_strip_whitespace": True}

    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def form_errors(exc: ValidationError) -> Dict[str, str]:
    """Flatten a ValidationError into {field: message} for templates."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(field, error["msg"])
    return errors
