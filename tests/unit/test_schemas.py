"""Tests for form schemas: validation and column mapping."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from constructpro.schemas.auth import SignUpForm
from constructpro.schemas.common import form_errors
from constructpro.schemas.inquiry import ContactForm
from constructpro.schemas.project import ProjectForm
from constructpro.schemas.testimonial import TestimonialForm


class TestContactForm:

    def _form(self, **kwargs):
        values = {
            "first_name": "John",
            "last_name": "Smith",
            "email": "john@example.com",
            "phone": "",
            "project_type": "villa",
            "message": "Planning a villa on a sloped lot.",
        }
        values.update(kwargs)
        return ContactForm(**values)

    def test_maps_to_inquiry_columns(self):
        values = self._form().to_inquiry_values()
        assert values["name"] == "John Smith"
        assert values["subject"] == "villa Inquiry"
        assert values["service_type"] == "villa"
        assert values["phone"] is None
        assert values["status"] == "new"

    def test_without_project_type(self):
        values = self._form(project_type="").to_inquiry_values()
        assert values["subject"] == "Inquiry"
        assert values["service_type"] is None

    def test_whitespace_is_stripped(self):
        values = self._form(first_name="  John ", last_name=" Smith  ").to_inquiry_values()
        assert values["name"] == "John Smith"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError) as exc:
            self._form(email="not-an-email")
        assert "email" in form_errors(exc.value)

    def test_required_fields(self):
        with pytest.raises(ValidationError) as exc:
            self._form(first_name="", message="   ")
        errors = form_errors(exc.value)
        assert "first_name" in errors
        assert "message" in errors


class TestProjectForm:

    def test_blank_optionals_become_none(self):
        form = ProjectForm(
            title="Harbor Offices",
            category="Commercial",
            description="",
            location=" ",
            budget="",
            image_url="",
            completion_date="",
        )
        assert form.category == "commercial"
        assert form.status == "planning"
        assert form.budget is None
        assert form.location is None
        assert form.completion_date is None

    def test_parses_budget_and_date(self):
        form = ProjectForm(
            title="Harbor Offices",
            category="commercial",
            status="in_progress",
            budget="3500000.50",
            completion_date="2025-09-01",
        )
        assert form.budget == Decimal("3500000.50")
        assert form.completion_date == date(2025, 9, 1)

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError) as exc:
            ProjectForm(title="X", category="villa", status="demolished")
        assert "status" in form_errors(exc.value)

    def test_rejects_negative_budget(self):
        with pytest.raises(ValidationError):
            ProjectForm(title="X", category="villa", budget="-1")

    def test_title_required(self):
        with pytest.raises(ValidationError) as exc:
            ProjectForm(title="", category="villa")
        assert "title" in form_errors(exc.value)


class TestTestimonialForm:

    def test_defaults(self):
        form = TestimonialForm(client_name="Dana", testimonial="Great work.")
        assert form.rating == 5
        assert form.active is True
        assert form.project_title is None

    def test_rating_bounds(self):
        with pytest.raises(ValidationError):
            TestimonialForm(client_name="Dana", testimonial="Great work.", rating=0)
        with pytest.raises(ValidationError):
            TestimonialForm(client_name="Dana", testimonial="Great work.", rating=6)

    def test_rating_from_form_string(self):
        form = TestimonialForm(client_name="Dana", testimonial="Great work.", rating="3")
        assert form.rating == 3


class TestSignUpForm:

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc:
            SignUpForm(email="new@example.com", password="123")
        assert "password" in form_errors(exc.value)

    def test_blank_name_becomes_none(self):
        form = SignUpForm(email="new@example.com", password="long-enough", full_name="")
        assert form.full_name is None
